"""
仓储抽象接口

唯一直接访问存储的组件；所有读操作自动过滤已逻辑删除的记录，
所有写操作自动填充审计时间
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, TypeVar

from app.repositories.query import QuerySpec
from app.services.core.result import Result

ModelT = TypeVar("ModelT")


class IRepository(ABC, Generic[ModelT]):
    """按实体类型参数化的仓储接口"""

    @abstractmethod
    def insert(self, entity: ModelT) -> Result[ModelT]:
        """插入实体，分配ID并填充 create_time / update_time"""
        pass

    @abstractmethod
    def find_by_id(self, entity_id) -> Optional[ModelT]:
        """按ID查询未删除的实体，不存在或已删除都返回 None"""
        pass

    @abstractmethod
    def list(self, spec: Optional[QuerySpec] = None) -> List[ModelT]:
        """按条件查询未删除的实体，排序完全由 spec 决定"""
        pass

    @abstractmethod
    def count(self, spec: Optional[QuerySpec] = None) -> int:
        """按条件统计未删除的实体数量"""
        pass

    @abstractmethod
    def page(self, spec: Optional[QuerySpec], page: int, size: int) -> Tuple[List[ModelT], int]:
        """分页查询，返回 (当前页记录, 总数)"""
        pass

    @abstractmethod
    def update(self, entity: ModelT) -> int:
        """写入实体当前的全部业务字段并刷新 update_time，返回影响行数"""
        pass

    @abstractmethod
    def soft_delete(self, entity_id) -> int:
        """逻辑删除，返回影响行数；已删除的记录再次删除返回0"""
        pass

    @abstractmethod
    def count_by_unique_field(self, field: str, value, exclude_id=None) -> int:
        """统计某字段等于 value 的未删除记录数，可排除一个ID"""
        pass
