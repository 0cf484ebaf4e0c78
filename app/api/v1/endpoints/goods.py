"""
商品相关API接口模块

提供商品的增删改查、分页、关键字搜索和价格区间查询。
所有接口都返回统一格式 {"code": int, "message": str, "data": Any}
"""
import logging
from decimal import Decimal

# FastAPI核心组件
from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_good_service
from app.core.config import settings
# 统一响应格式工具
from app.infrastructure.response import result_to_response
from app.schemas.common import page_data
from app.schemas.good import GoodCreate, GoodResponse, GoodUpdate
from app.services.core.good_service import GoodService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 创建商品接口
@router.post("")
def create_good(
        good_data: GoodCreate,  # 商品创建请求体数据
        service: GoodService = Depends(get_good_service),
):
    """
    创建新商品

    Returns:
        dict: data 为新创建的商品，包含自动分配的 id、createTime、updateTime
    """
    logger.info(f"创建商品请求: name={good_data.name}, price={good_data.price}")
    return result_to_response(service.create(good_data), GoodResponse.dump)


# 分页查询商品接口
@router.get("")
def get_goods_by_page(
        page: int = Query(1, ge=1),  # 页码，从1开始
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),  # 每页条数
        service: GoodService = Depends(get_good_service),
):
    """
    分页查询商品

    Returns:
        dict: data 为 {"records": [...], "total": int, "current": int, "size": int, "pages": int}
    """
    logger.info(f"分页查询商品请求: page={page}, size={size}")
    return result_to_response(service.list_page(page, size), lambda p: page_data(p, GoodResponse))


# 搜索商品接口（必须在 /{good_id} 之前注册）
@router.get("/search")
def search_goods(
        keyword: str = Query(...),  # 商品名称关键字
        service: GoodService = Depends(get_good_service),
):
    """按名称模糊搜索商品，按创建时间降序；没有匹配时返回空列表"""
    logger.info(f"搜索商品请求: keyword={keyword}")
    return result_to_response(service.search(keyword), GoodResponse.dump_list)


# 按价格区间查询商品接口
@router.get("/byPrice")
def get_goods_by_price_range(
        min_price: Decimal = Query(..., alias="minPrice", ge=0),
        max_price: Decimal = Query(..., alias="maxPrice", ge=0),
        service: GoodService = Depends(get_good_service),
):
    """查询价格在 [minPrice, maxPrice] 之间的商品，按价格升序"""
    logger.info(f"按价格区间查询商品请求: minPrice={min_price}, maxPrice={max_price}")
    return result_to_response(service.list_by_price_range(min_price, max_price), GoodResponse.dump_list)


# 获取商品详情接口
@router.get("/{good_id}")
def get_good(
        good_id: int,  # 商品ID参数，从URL路径中提取
        service: GoodService = Depends(get_good_service),
):
    """根据ID获取商品详情；不存在或已删除时返回404"""
    logger.info(f"查询商品请求: id={good_id}")
    return result_to_response(service.get_by_id(good_id), GoodResponse.dump)


# 更新商品接口
@router.put("/{good_id}")
def update_good(
        good_id: int,
        good_data: GoodUpdate,  # 只包含需要修改的字段
        service: GoodService = Depends(get_good_service),
):
    """
    部分更新商品

    请求体中未提供的字段保持原值，例如 {"price": 2.00} 只修改价格
    """
    logger.info(f"更新商品请求: id={good_id}")
    return result_to_response(service.update(good_id, good_data), GoodResponse.dump)


# 删除商品接口
@router.delete("/{good_id}")
def delete_good(
        good_id: int,
        service: GoodService = Depends(get_good_service),
):
    """逻辑删除商品，成功时 data 为 null"""
    logger.info(f"删除商品请求: id={good_id}")
    return result_to_response(service.delete(good_id))
