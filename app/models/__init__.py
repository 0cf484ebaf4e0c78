"""数据库模型导出，导入本包即可注册所有表"""

from .good import Good
from .category import Category
from .user import User

__all__ = ["Good", "Category", "User"]
