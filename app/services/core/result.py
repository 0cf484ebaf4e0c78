"""
服务层返回值

每个服务操作要么返回一个值，要么返回一个已分类的失败，二者不会同时出现
"""
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from app.infrastructure.exceptions import AppFailure

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    failure: Optional[AppFailure] = None

    @classmethod
    def ok(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: AppFailure) -> "Result[T]":
        if failure is None:
            raise ValueError("failure不能为空")
        return cls(failure=failure)

    @property
    def is_ok(self) -> bool:
        return self.failure is None

    @property
    def is_failure(self) -> bool:
        return self.failure is not None

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """成功时转换值，失败时原样传递"""
        if self.is_failure:
            return Result.fail(self.failure)
        return Result.ok(func(self.value))

    def unwrap(self) -> T:
        """取出值；失败时抛出对应的失败异常"""
        if self.is_failure:
            raise self.failure
        return self.value
