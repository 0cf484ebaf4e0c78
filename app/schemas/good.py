from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from app.schemas.common import CamelModel, ResponseModel


class GoodCreate(CamelModel):
    """
    商品创建请求模型

    price 最多8位整数、2位小数，不能为负数
    """
    name: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = Field(None, max_length=500)
    stock: int = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("商品名称不能为空")
        return v


class GoodUpdate(CamelModel):
    """
    商品更新请求模型

    所有字段都是可选的：未提供的字段保持原值，description 传空字符串会清空描述
    """
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = Field(None, max_length=500)
    stock: Optional[int] = Field(None, ge=0)


class GoodResponse(ResponseModel):
    """商品响应模型"""
    id: int
    name: str
    price: Decimal
    description: Optional[str] = None
    stock: int
    create_time: datetime
    update_time: datetime

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
