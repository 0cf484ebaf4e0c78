"""
用户相关API接口模块

响应中从不包含密码字段
"""
import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_user_service
from app.core.config import settings
from app.infrastructure.response import result_to_response
from app.schemas.common import page_data
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.core.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


# 创建用户接口
@router.post("")
def create_user(
        user_data: UserCreate,
        service: UserService = Depends(get_user_service),
):
    """创建用户；用户名已被未删除的用户占用时返回400"""
    logger.info(f"创建用户请求: username={user_data.username}")
    return result_to_response(service.create(user_data), UserResponse.dump)


# 分页查询用户接口
@router.get("")
def get_users_by_page(
        page: int = Query(1, ge=1),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        service: UserService = Depends(get_user_service),
):
    logger.info(f"分页查询用户请求: page={page}, size={size}")
    return result_to_response(service.list_page(page, size), lambda p: page_data(p, UserResponse))


# 搜索用户接口
@router.get("/search")
def search_users(
        keyword: str = Query(...),
        service: UserService = Depends(get_user_service),
):
    logger.info(f"搜索用户请求: keyword={keyword}")
    return result_to_response(service.search(keyword), UserResponse.dump_list)


# 按用户名查询
@router.get("/username/{username}")
def get_user_by_username(
        username: str,
        service: UserService = Depends(get_user_service),
):
    logger.info(f"查询用户请求: username={username}")
    return result_to_response(service.get_by_username(username), UserResponse.dump)


# 按角色查询
@router.get("/role/{role}")
def get_users_by_role(
        role: str,
        service: UserService = Depends(get_user_service),
):
    return result_to_response(service.list_by_role(role), UserResponse.dump_list)


# 按状态查询
@router.get("/status/{status}")
def get_users_by_status(
        status: int,  # 0-禁用，1-正常
        service: UserService = Depends(get_user_service),
):
    return result_to_response(service.list_by_status(status), UserResponse.dump_list)


# 获取用户详情接口
@router.get("/{user_id}")
def get_user(
        user_id: int,
        service: UserService = Depends(get_user_service),
):
    logger.info(f"查询用户请求: id={user_id}")
    return result_to_response(service.get_by_id(user_id), UserResponse.dump)


# 更新用户接口
@router.put("/{user_id}")
def update_user(
        user_id: int,
        user_data: UserUpdate,
        service: UserService = Depends(get_user_service),
):
    """部分更新用户；修改用户名时会重新检查唯一性"""
    logger.info(f"更新用户请求: id={user_id}")
    return result_to_response(service.update(user_id, user_data), UserResponse.dump)


# 删除用户接口
@router.delete("/{user_id}")
def delete_user(
        user_id: int,
        service: UserService = Depends(get_user_service),
):
    logger.info(f"删除用户请求: id={user_id}")
    return result_to_response(service.delete(user_id))
