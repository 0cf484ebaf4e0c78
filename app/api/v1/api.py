from fastapi import APIRouter

from app.api.v1.endpoints import categories, goods, users


api_router = APIRouter()

# 包含各模块的路由

api_router.include_router(goods.router, prefix="/goods", tags=["商品"])
api_router.include_router(categories.router, prefix="/categories", tags=["分类"])
api_router.include_router(users.router, prefix="/users", tags=["用户"])
