"""
测试部分更新合并 merge_partial_update
"""
from decimal import Decimal
from typing import Optional

import pytest
from pydantic import BaseModel

from app.models import Good, User
from app.schemas.good import GoodUpdate
from app.schemas.user import UserUpdate
from app.services.core.merger import merge_partial_update, present_fields


def _pen():
    return Good(id=1, name="Pen", price=Decimal("1.50"), description="蓝色", stock=10)


def only_provided_fields_overwrite_test():
    entity = _pen()

    _, merged = merge_partial_update(entity, GoodUpdate(price=Decimal("2.00")), Good.UPDATABLE_FIELDS)

    assert merged == ["price"]
    assert entity.price == Decimal("2.00")
    assert entity.name == "Pen"
    assert entity.description == "蓝色"
    assert entity.stock == 10


def null_means_absent_test():
    entity = _pen()
    request = GoodUpdate.model_validate({"name": None, "stock": 0})

    _, merged = merge_partial_update(entity, request, Good.UPDATABLE_FIELDS)

    assert merged == ["stock"]
    assert entity.name == "Pen"
    # 0 是有效值，不能当作未提供
    assert entity.stock == 0


def empty_string_overwrites_test():
    entity = _pen()

    merge_partial_update(entity, GoodUpdate(description=""), Good.UPDATABLE_FIELDS)

    assert entity.description == ""


def merged_fields_follow_declaration_order_test():
    entity = _pen()
    request = GoodUpdate.model_validate({"stock": 1, "name": "Pencil", "price": 3})

    _, merged = merge_partial_update(entity, request, Good.UPDATABLE_FIELDS)

    assert merged == ["name", "price", "stock"]


def empty_request_changes_nothing_test():
    entity = _pen()

    _, merged = merge_partial_update(entity, GoodUpdate(), Good.UPDATABLE_FIELDS)

    assert merged == []
    assert present_fields(GoodUpdate()) == {}
    assert entity.name == "Pen"


def camel_case_request_test():
    request = UserUpdate.model_validate({"nickname": "A", "phone": None})

    assert present_fields(request) == {"nickname": "A"}


class _AuditTampering(BaseModel):
    stock: Optional[int] = None
    create_time: Optional[str] = None


class _UnknownField(BaseModel):
    colour: Optional[str] = None


def protected_field_rejected_test():
    """请求模型里即使声明了审计字段，也不能写入实体"""
    entity = _pen()

    with pytest.raises(ValueError):
        merge_partial_update(
            entity,
            _AuditTampering(stock=1, create_time="2000-01-01"),
            Good.UPDATABLE_FIELDS,
            Good.PROTECTED_FIELDS,
        )
    # 拒绝时不做任何修改
    assert entity.stock == 10


def unknown_field_rejected_test():
    with pytest.raises(ValueError):
        merge_partial_update(_pen(), _UnknownField(colour="red"), Good.UPDATABLE_FIELDS)


def password_is_masked_in_logs_test(caplog):
    entity = User(id=1, username="alice", password="old-secret")

    with caplog.at_level("INFO"):
        merge_partial_update(entity, UserUpdate(password="new-secret"), User.UPDATABLE_FIELDS)

    assert entity.password == "new-secret"
    assert "new-secret" not in caplog.text
    assert "***" in caplog.text
