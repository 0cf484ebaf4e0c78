from sqlalchemy import Column, Integer, Numeric, VARCHAR

from app.db.base import Base
from app.models.base import EntityMixin


class Good(EntityMixin, Base):
    """
    商品数据库模型

    存储商品的名称、价格、描述和库存
    """
    __tablename__ = "good"

    UPDATABLE_FIELDS = ("name", "price", "description", "stock")

    name = Column(VARCHAR(100), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(VARCHAR(500), nullable=True)
    stock = Column(Integer, nullable=False, default=0)
