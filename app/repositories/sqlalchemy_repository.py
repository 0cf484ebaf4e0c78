"""
基于 SQLAlchemy 的通用仓储实现

一个类服务所有实体，构造时传入模型类、数据库会话和审计时间填充器
"""
import logging
from typing import List, Optional, Tuple, Type

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session
from sqlalchemy.orm.attributes import set_committed_value

from app.infrastructure.exceptions import StorageFailure
from app.models.base import DEL_FLAG_LIVE
from app.repositories.audit import AuditStamper
from app.repositories.base import IRepository, ModelT
from app.repositories.query import QuerySpec
from app.repositories.soft_delete import live_filter, soft_delete_statement
from app.services.core.result import Result

logger = logging.getLogger(__name__)


class SQLAlchemyRepository(IRepository[ModelT]):

    def __init__(self, model: Type[ModelT], db: Session, stamper: Optional[AuditStamper] = None):
        self.model = model
        self.db = db
        self.stamper = stamper or AuditStamper()

    # ---------- 查询 ----------

    def _column(self, name: str):
        if name not in self.model.__table__.columns.keys():
            raise ValueError(f"{self.model.__name__} 没有字段: {name}")
        return getattr(self.model, name)

    def _live_query(self) -> Query:
        return self.db.query(self.model).filter(live_filter(self.model))

    def _filtered(self, spec: Optional[QuerySpec]) -> Query:
        query = self._live_query()
        if spec is None:
            return query
        for condition in spec.conditions:
            column = self._column(condition.field)
            if condition.op == "eq":
                query = query.filter(column == condition.value)
            elif condition.op == "ne":
                query = query.filter(column != condition.value)
            elif condition.op == "like":
                query = query.filter(column.contains(condition.value, autoescape=True))
            elif condition.op == "ge":
                query = query.filter(column >= condition.value)
            elif condition.op == "le":
                query = query.filter(column <= condition.value)
            else:
                raise ValueError(f"不支持的查询操作: {condition.op}")
        return query

    def _ordered(self, query: Query, spec: Optional[QuerySpec]) -> Query:
        if spec is None:
            return query
        for order in spec.orders:
            column = self._column(order.field)
            query = query.order_by(column.desc() if order.descending else column.asc())
        return query

    def find_by_id(self, entity_id) -> Optional[ModelT]:
        return self._live_query().filter(self.model.id == entity_id).first()

    def list(self, spec: Optional[QuerySpec] = None) -> List[ModelT]:
        return self._ordered(self._filtered(spec), spec).all()

    def count(self, spec: Optional[QuerySpec] = None) -> int:
        return self._filtered(spec).count()

    def page(self, spec: Optional[QuerySpec], page: int, size: int) -> Tuple[List[ModelT], int]:
        if page < 1 or size < 1:
            raise ValueError(f"分页参数不合法: page={page}, size={size}")
        total = self.count(spec)
        if total == 0 or (page - 1) * size >= total:
            return [], total
        records = self._ordered(self._filtered(spec), spec).offset((page - 1) * size).limit(size).all()
        return records, total

    def count_by_unique_field(self, field: str, value, exclude_id=None) -> int:
        query = self._live_query().filter(self._column(field) == value)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.count()

    # ---------- 写入 ----------

    def insert(self, entity: ModelT) -> Result[ModelT]:
        self.stamper.stamp_insert(entity)
        entity.deleted = DEL_FLAG_LIVE
        try:
            self.db.add(entity)
            # 刷新以获取自动生成的ID
            self.db.flush()
        except IntegrityError as e:
            logger.warning(f"插入{self.model.__tablename__}失败，违反数据库约束: {e.orig}")
            return Result.fail(StorageFailure())
        if entity.id is None:
            return Result.fail(StorageFailure())
        return Result.ok(entity)

    def update(self, entity: ModelT) -> int:
        values = entity.business_values()
        values["update_time"] = self.stamper.stamp_update()
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id, live_filter(self.model))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            with self.db.no_autoflush:
                rows = self.db.execute(stmt).rowcount
        except IntegrityError as e:
            logger.warning(f"更新{self.model.__tablename__}失败，违反数据库约束: {e.orig}")
            return 0
        if rows:
            # 写入的值就是实体当前的值，标记为已持久化，避免提交时重复 UPDATE
            for key, value in values.items():
                set_committed_value(entity, key, value)
        return rows

    def soft_delete(self, entity_id) -> int:
        stmt = soft_delete_statement(self.model, entity_id, self.stamper.stamp_update())
        with self.db.no_autoflush:
            return self.db.execute(stmt).rowcount
