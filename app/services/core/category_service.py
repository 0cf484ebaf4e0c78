import logging
from typing import List

from app.models.category import Category
from app.repositories.query import QuerySpec
from app.services.core.base_service import CrudService
from app.services.core.result import Result

logger = logging.getLogger(__name__)


class CategoryService(CrudService[Category]):
    """分类服务，搜索和排序列表都按 sort_order 升序"""
    model = Category
    label = "分类"
    search_field = "name"

    def search_spec(self, keyword: str) -> QuerySpec:
        return QuerySpec().like("name", keyword).order_by_asc("sort_order")

    def list_sorted(self) -> Result[List[Category]]:
        logger.info("查询排序后的分类列表")
        return self.list_by(QuerySpec().order_by_asc("sort_order"))
