from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, ResponseModel


class CategoryCreate(CamelModel):
    """分类创建请求模型，sortOrder 越小越靠前"""
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=200)
    sort_order: int = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("分类名称不能为空")
        return v


class CategoryUpdate(CamelModel):
    """分类更新请求模型，所有字段可选"""
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=200)
    sort_order: Optional[int] = Field(None, ge=0)


class CategoryResponse(ResponseModel):
    id: int
    name: str
    description: Optional[str] = None
    sort_order: int
    create_time: datetime
    update_time: datetime
