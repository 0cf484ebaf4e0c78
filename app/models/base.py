"""
实体公共字段

每张业务表都有：自增主键、逻辑删除标志 deleted、审计时间 create_time / update_time
"""
from typing import Tuple

from sqlalchemy import BigInteger, Column, DateTime, Integer, SmallInteger
from sqlalchemy.dialects import mysql

# 删除标志：0-正常，1-已删除
DEL_FLAG_LIVE = 0
DEL_FLAG_DELETED = 1

# SQLite 只有 INTEGER PRIMARY KEY 才会自增
IdType = BigInteger().with_variant(Integer(), "sqlite")
FlagType = SmallInteger().with_variant(mysql.TINYINT(), "mysql")
# MySQL 默认 DATETIME 只精确到秒，审计时间保留微秒
AuditDateTime = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


class EntityMixin:
    """主键 + 逻辑删除标志 + 审计时间"""

    # 可以被部分更新的业务字段，由各实体声明
    UPDATABLE_FIELDS: Tuple[str, ...] = ()

    # 任何更新请求都不允许触碰的字段
    PROTECTED_FIELDS: Tuple[str, ...] = ("id", "deleted", "create_time", "update_time")

    id = Column(IdType, primary_key=True, autoincrement=True, index=True)
    deleted = Column(FlagType, nullable=False, default=DEL_FLAG_LIVE, server_default=str(DEL_FLAG_LIVE))  # 删除标志：0-正常，1-已删除
    create_time = Column(AuditDateTime, nullable=False, index=True)  # 首次写入时设置，之后不再改变
    update_time = Column(AuditDateTime, nullable=False)  # 每次写入都会刷新

    def business_values(self) -> dict:
        """当前所有可更新业务字段的值"""
        return {field: getattr(self, field) for field in self.UPDATABLE_FIELDS}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
