"""
查询条件构造器

以字段名描述过滤条件和排序，由仓储翻译成 SQLAlchemy 表达式；
逻辑删除条件不在这里出现，仓储总会自动追加
"""
from dataclasses import dataclass, field
from typing import Any, List

# 支持的比较操作
OPERATORS = ("eq", "ne", "like", "ge", "le")


@dataclass(frozen=True)
class Condition:
    field: str
    op: str
    value: Any


@dataclass(frozen=True)
class Order:
    field: str
    descending: bool = False


@dataclass
class QuerySpec:
    """
    链式条件构造

    使用示例：
        QuerySpec().like("name", "pen").order_by_desc("create_time")
        QuerySpec().ge("price", 10).le("price", 20).order_by_asc("price")
    """
    conditions: List[Condition] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)

    def _add(self, field_name: str, op: str, value: Any) -> "QuerySpec":
        self.conditions.append(Condition(field_name, op, value))
        return self

    def eq(self, field_name: str, value: Any) -> "QuerySpec":
        return self._add(field_name, "eq", value)

    def ne(self, field_name: str, value: Any) -> "QuerySpec":
        return self._add(field_name, "ne", value)

    def like(self, field_name: str, keyword: str) -> "QuerySpec":
        """模糊匹配：WHERE field LIKE '%keyword%'"""
        return self._add(field_name, "like", keyword)

    def ge(self, field_name: str, value: Any) -> "QuerySpec":
        return self._add(field_name, "ge", value)

    def le(self, field_name: str, value: Any) -> "QuerySpec":
        return self._add(field_name, "le", value)

    def order_by_asc(self, field_name: str) -> "QuerySpec":
        self.orders.append(Order(field_name, descending=False))
        return self

    def order_by_desc(self, field_name: str) -> "QuerySpec":
        self.orders.append(Order(field_name, descending=True))
        return self
