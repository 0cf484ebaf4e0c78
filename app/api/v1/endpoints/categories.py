"""
分类相关API接口模块
"""
import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_category_service
from app.core.config import settings
from app.infrastructure.response import result_to_response
from app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from app.schemas.common import page_data
from app.services.core.category_service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter()


# 创建分类接口
@router.post("")
def create_category(
        category_data: CategoryCreate,
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"创建分类请求: name={category_data.name}, sortOrder={category_data.sort_order}")
    return result_to_response(service.create(category_data), CategoryResponse.dump)


# 分页查询分类接口
@router.get("")
def get_categories_by_page(
        page: int = Query(1, ge=1),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"分页查询分类请求: page={page}, size={size}")
    return result_to_response(service.list_page(page, size), lambda p: page_data(p, CategoryResponse))


# 排序后的全部分类
@router.get("/sorted")
def get_categories_sorted(
        service: CategoryService = Depends(get_category_service),
):
    """按 sortOrder 升序返回全部分类"""
    return result_to_response(service.list_sorted(), CategoryResponse.dump_list)


# 搜索分类接口
@router.get("/search")
def search_categories(
        keyword: str = Query(...),
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"搜索分类请求: keyword={keyword}")
    return result_to_response(service.search(keyword), CategoryResponse.dump_list)


# 获取分类详情接口
@router.get("/{category_id}")
def get_category(
        category_id: int,
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"查询分类请求: id={category_id}")
    return result_to_response(service.get_by_id(category_id), CategoryResponse.dump)


# 更新分类接口
@router.put("/{category_id}")
def update_category(
        category_id: int,
        category_data: CategoryUpdate,
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"更新分类请求: id={category_id}")
    return result_to_response(service.update(category_id, category_data), CategoryResponse.dump)


# 删除分类接口
@router.delete("/{category_id}")
def delete_category(
        category_id: int,
        service: CategoryService = Depends(get_category_service),
):
    logger.info(f"删除分类请求: id={category_id}")
    return result_to_response(service.delete(category_id))
