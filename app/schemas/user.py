from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.models.user import DEFAULT_ROLE, USER_STATUS_NORMAL
from app.schemas.common import CamelModel, ResponseModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PHONE_PATTERN = r"^1[3-9]\d{9}$"


class UserCreate(CamelModel):
    """
    用户创建请求模型

    status 默认为1（正常），role 默认为 user
    """
    username: str = Field(..., min_length=3, max_length=30)
    password: Optional[str] = Field(None, min_length=6, max_length=100)
    email: Optional[str] = Field(None, max_length=100, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    nickname: Optional[str] = Field(None, max_length=50)
    avatar: Optional[str] = Field(None, max_length=500)
    status: Optional[int] = Field(USER_STATUS_NORMAL, ge=0, le=1)
    role: Optional[str] = Field(DEFAULT_ROLE, max_length=20)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("用户名不能为空")
        return v


class UserUpdate(CamelModel):
    """用户更新请求模型，所有字段可选"""
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    password: Optional[str] = Field(None, min_length=6, max_length=100)
    email: Optional[str] = Field(None, max_length=100, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    nickname: Optional[str] = Field(None, max_length=50)
    avatar: Optional[str] = Field(None, max_length=500)
    status: Optional[int] = Field(None, ge=0, le=1)
    role: Optional[str] = Field(None, max_length=20)


class UserResponse(ResponseModel):
    """用户响应模型，不包含密码"""
    id: int
    username: str
    email: Optional[str] = None
    phone: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None
    status: int
    role: str
    create_time: datetime
    update_time: datetime
