import logging
from decimal import Decimal

from sqlalchemy.orm import Session

import app.models  # noqa: F401  注册所有表
from app.db.base import Base, engine
from app.models import Category, Good
from app.repositories import AuditStamper, SQLAlchemyRepository

logger = logging.getLogger(__name__)

DEMO_GOODS = [
    {"name": "iPhone 15 Pro", "price": Decimal("8999.00"), "description": "Apple最新旗舰手机", "stock": 50},
    {"name": "MacBook Pro 14寸", "price": Decimal("14999.00"), "description": "M3 Pro芯片专业笔记本", "stock": 30},
    {"name": "AirPods Pro 2", "price": Decimal("1899.00"), "description": "主动降噪无线耳机", "stock": 100},
]

DEMO_CATEGORIES = [
    {"name": "手机", "description": "智能手机", "sort_order": 1},
    {"name": "电脑", "description": "笔记本与台式机", "sort_order": 2},
    {"name": "配件", "description": "耳机、充电器等", "sort_order": 3},
]

# 创建所有表
def create_tables(bind=engine) -> None:
    Base.metadata.create_all(bind=bind)

# 清空数据库
def reset_db(bind=engine) -> None:
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)

# 写入演示数据
def seed_demo_data(db: Session, stamper: AuditStamper = None) -> int:
    """
    表为空时写入演示用的商品和分类，返回写入的条数

    演示数据同样经过仓储写入，保证审计时间和删除标志齐全
    """
    inserted = 0
    for model, rows in ((Good, DEMO_GOODS), (Category, DEMO_CATEGORIES)):
        repository = SQLAlchemyRepository(model, db, stamper)
        if repository.count() > 0:
            logger.info(f"{model.__tablename__} 表已有数据，跳过演示数据")
            continue
        for row in rows:
            repository.insert(model(**row)).unwrap()
            inserted += 1
    db.commit()
    logger.info(f"已写入 {inserted} 条演示数据")
    return inserted

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    logging.info("数据库表已创建")
