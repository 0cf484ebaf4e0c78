"""
通用实体服务

编排一次业务操作：唯一性检查 → 合并部分更新 → 仓储读写，
并决定哪些情况属于"不存在"、哪些属于业务失败。
所有方法都返回 Result，不抛出业务异常；意料之外的异常照常向上抛出。
"""
import functools
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.config import Settings, settings as default_settings
from app.infrastructure.exceptions import AppFailure, BusinessFailure, NotFoundFailure, StorageFailure
from app.repositories.base import IRepository, ModelT
from app.repositories.query import QuerySpec
from app.services.core.merger import merge_partial_update, present_fields
from app.services.core.result import Result
from app.services.core.uniqueness import UniquenessGuard

logger = logging.getLogger(__name__)


def transactional(func):
    """
    单实体写操作的事务边界

    返回成功结果时提交；返回失败结果或抛出异常时回滚，保证要么全部写入要么什么都不变
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            result = func(self, *args, **kwargs)
        except Exception:
            self.db.rollback()
            raise
        if result.is_failure:
            self.db.rollback()
            return result
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result
    return wrapper


@dataclass
class Page(Generic[ModelT]):
    """分页结果，total 为满足条件的总记录数"""
    records: List[ModelT] = field(default_factory=list)
    total: int = 0
    current: int = 1
    size: int = 10

    @property
    def pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)


class CrudService(Generic[ModelT]):
    """
    商品、分类、用户三类资源共用的增删改查流程

    子类声明：
        model: 实体模型类
        label: 出现在日志和错误消息里的资源名称
        search_field: 关键字搜索的字段
    并可覆盖 search_spec() 指定搜索排序
    """
    model: Type[ModelT]
    label: str = "资源"
    search_field: str = "name"

    def __init__(
            self,
            db: Session,
            repository: IRepository[ModelT],
            settings: Optional[Settings] = None,
            guard: Optional[UniquenessGuard] = None,
    ):
        self.db = db
        self.repository = repository
        self.settings = settings or default_settings
        self.guard = guard

    # ---------- 可覆盖的钩子 ----------

    def search_spec(self, keyword: str) -> QuerySpec:
        return QuerySpec().like(self.search_field, keyword)

    def page_spec(self) -> QuerySpec:
        # 分页需要稳定的顺序
        return QuerySpec().order_by_asc("id")

    def build_entity(self, request: BaseModel) -> ModelT:
        """请求 → 实体，未提供的可选字段交给数据库列默认值"""
        values = request.model_dump(include=set(self.model.UPDATABLE_FIELDS), exclude_none=True)
        return self.model(**values)

    def describe(self, request: BaseModel) -> str:
        return ", ".join(f"{k}={v}" for k, v in request.model_dump(include={self.search_field}).items())

    # ---------- 唯一性 ----------

    def _check_unique_on_create(self, request: BaseModel) -> Optional[AppFailure]:
        if self.guard is None:
            return None
        return self.guard.check(getattr(request, self.guard.field))

    def _check_unique_on_update(self, entity: ModelT, provided: Dict[str, Any]) -> Optional[AppFailure]:
        if self.guard is None:
            return None
        new_value = provided.get(self.guard.field)
        if new_value is None or new_value == getattr(entity, self.guard.field):
            return None
        return self.guard.check(new_value, exclude_id=entity.id)

    # ---------- 业务操作 ----------

    @transactional
    def create(self, request: BaseModel) -> Result[ModelT]:
        logger.info(f"创建{self.label}: {self.describe(request)}")

        failure = self._check_unique_on_create(request)
        if failure is not None:
            return Result.fail(failure)

        inserted = self.repository.insert(self.build_entity(request))
        if inserted.is_failure:
            logger.warning(f"创建{self.label}失败: {inserted.failure.message}")
            return Result.fail(StorageFailure(f"创建{self.label}失败"))

        entity = inserted.value
        logger.info(f"{self.label}创建成功: id={entity.id}")
        return inserted

    def get_by_id(self, entity_id) -> Result[ModelT]:
        logger.info(f"查询{self.label}: id={entity_id}")
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            logger.warning(f"{self.label}不存在: id={entity_id}")
            return Result.fail(NotFoundFailure.of(self.label, entity_id))
        return Result.ok(entity)

    @transactional
    def update(self, entity_id, request: BaseModel) -> Result[ModelT]:
        logger.info(f"更新{self.label}: id={entity_id}")

        # 1. 先查询是否存在
        found = self.get_by_id(entity_id)
        if found.is_failure:
            return found
        entity = found.value

        # 2. 空更新请求的处理方式由配置决定
        provided = present_fields(request)
        if not provided:
            if self.settings.SKIP_EMPTY_UPDATE:
                logger.warning(f"更新{self.label}请求未包含任何字段，跳过写入: id={entity_id}")
                return Result.ok(entity)
            logger.warning(f"更新{self.label}请求未包含任何字段，仅刷新更新时间: id={entity_id}")

        # 3. 唯一字段发生变化时重新检查
        failure = self._check_unique_on_update(entity, provided)
        if failure is not None:
            return Result.fail(failure)

        # 4. 部分更新：只覆盖请求中提供的字段
        _, merged = merge_partial_update(entity, request, self.model.UPDATABLE_FIELDS, self.model.PROTECTED_FIELDS)

        # 5. 执行更新
        rows = self.repository.update(entity)
        if rows <= 0:
            logger.warning(f"更新{self.label}影响0行: id={entity_id}")
            return Result.fail(BusinessFailure(f"更新{self.label}失败"))

        logger.info(f"{self.label}更新成功: id={entity_id}, 更新字段={merged}")
        return Result.ok(entity)

    @transactional
    def delete(self, entity_id) -> Result[None]:
        logger.info(f"删除{self.label}: id={entity_id}")

        found = self.get_by_id(entity_id)
        if found.is_failure:
            return found

        # 逻辑删除：UPDATE ... SET deleted=1 WHERE id=? AND deleted=0
        rows = self.repository.soft_delete(entity_id)
        if rows <= 0:
            logger.warning(f"删除{self.label}影响0行: id={entity_id}")
            return Result.fail(BusinessFailure(f"删除{self.label}失败"))

        logger.info(f"{self.label}删除成功: id={entity_id}")
        return Result.ok(None)

    def list_page(self, page: int, size: int) -> Result[Page[ModelT]]:
        logger.info(f"分页查询{self.label}: page={page}, size={size}")
        records, total = self.repository.page(self.page_spec(), page, size)
        logger.info(f"查询成功: 总记录数={total}, 当前页数据={len(records)}")
        return Result.ok(Page(records=records, total=total, current=page, size=size))

    def search(self, keyword: str) -> Result[List[ModelT]]:
        logger.info(f"搜索{self.label}: keyword={keyword}")
        entities = self.repository.list(self.search_spec(keyword))
        logger.info(f"搜索到 {len(entities)} 个{self.label}")
        return Result.ok(entities)

    def list_by(self, spec: QuerySpec) -> Result[List[ModelT]]:
        entities = self.repository.list(spec)
        logger.info(f"查询到 {len(entities)} 个{self.label}")
        return Result.ok(entities)
