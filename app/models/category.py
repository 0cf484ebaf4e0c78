from sqlalchemy import Column, Integer, VARCHAR

from app.db.base import Base
from app.models.base import EntityMixin


class Category(EntityMixin, Base):
    """
    商品分类数据库模型

    sort_order 越小越靠前
    """
    __tablename__ = "category"

    UPDATABLE_FIELDS = ("name", "description", "sort_order")

    name = Column(VARCHAR(50), nullable=False)
    description = Column(VARCHAR(200), nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
