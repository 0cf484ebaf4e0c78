"""
唯一性检查

写入前先统计同值的未删除记录；检查与写入之间没有加锁，
并发创建同一个值时仍可能同时通过，数据库唯一约束作为兜底
"""
import logging
from typing import Optional

from app.infrastructure.exceptions import ConflictFailure
from app.repositories.base import IRepository

logger = logging.getLogger(__name__)


class UniquenessGuard:
    def __init__(self, repository: IRepository, field: str, label: str):
        """
        Args:
            repository: 目标实体的仓储
            field: 需要全局唯一的字段名
            label: 出现在错误消息里的字段名称，例如"用户名"
        """
        self.repository = repository
        self.field = field
        self.label = label

    def check(self, value, exclude_id=None) -> Optional[ConflictFailure]:
        """
        创建时 exclude_id 为空；更新时传入实体自身ID，避免和自己冲突

        Returns:
            ConflictFailure: 值已被占用
            None: 可以继续写入
        """
        count = self.repository.count_by_unique_field(self.field, value, exclude_id=exclude_id)
        if count == 0:
            return None
        logger.warning(f"{self.label}重复: {value}, exclude_id={exclude_id}")
        if exclude_id is None:
            message = f"{self.label}已存在: {value}"
        else:
            message = f"{self.label}已被使用: {value}"
        return ConflictFailure(message, field=self.field, value=value)
