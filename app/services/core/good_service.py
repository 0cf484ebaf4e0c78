import logging
from decimal import Decimal
from typing import List

from app.infrastructure.exceptions import BusinessFailure
from app.models.good import Good
from app.repositories.query import QuerySpec
from app.services.core.base_service import CrudService
from app.services.core.result import Result

logger = logging.getLogger(__name__)


class GoodService(CrudService[Good]):
    """商品服务"""
    model = Good
    label = "商品"
    search_field = "name"

    def search_spec(self, keyword: str) -> QuerySpec:
        # 按创建时间降序
        return QuerySpec().like("name", keyword).order_by_desc("create_time")

    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> Result[List[Good]]:
        """按价格区间查询商品，闭区间，按价格升序"""
        logger.info(f"按价格区间查询商品: minPrice={min_price}, maxPrice={max_price}")
        if min_price > max_price:
            return Result.fail(BusinessFailure(f"最低价格不能高于最高价格: {min_price} > {max_price}"))
        spec = QuerySpec().ge("price", min_price).le("price", max_price).order_by_asc("price")
        return self.list_by(spec)
