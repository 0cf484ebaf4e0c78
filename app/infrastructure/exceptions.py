"""
Failure taxonomy shared by the service layer and the error mapper.

Services hand these back inside a ``Result`` instead of raising them; they
still subclass ``Exception`` so ``Result.unwrap()`` can raise one and the
global handler can map it the same way.
"""
from typing import Iterable, List, Optional


class AppFailure(Exception):
    """Base class for every classified failure."""

    code: int = 500
    default_message: str = "操作失败"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class NotFoundFailure(AppFailure):
    """The referenced id has no live entity."""

    code = 404
    default_message = "资源不存在"

    @classmethod
    def of(cls, resource_name: str, resource_id) -> "NotFoundFailure":
        return cls(f"{resource_name}不存在: {resource_id}")


class BusinessFailure(AppFailure):
    """A domain rule was violated; the message goes to the caller verbatim."""

    code = 400
    default_message = "业务处理失败"


class ConflictFailure(BusinessFailure):
    """A globally unique value is already taken by another live entity."""

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value


class StorageFailure(BusinessFailure):
    """A write reached the store but changed nothing."""

    default_message = "数据写入失败"


class ValidationFailure(AppFailure):
    """Field-level violations collected at the request boundary."""

    code = 400
    prefix = "参数验证失败: "

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = [e for e in errors if e]
        super().__init__(self.prefix + ", ".join(self.errors))


class InternalFailure(AppFailure):
    """Anything unclassified. The detail is logged, never shown to the caller."""

    code = 500
    default_message = "服务器内部错误，请稍后重试"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(self.default_message)
        self.detail = detail
