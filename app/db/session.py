from typing import Generator

from sqlalchemy.orm import Session

from app.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    用于FastAPI依赖注入系统，每个请求一个会话；
    事务的提交与回滚由服务层负责，这里只保证会话被关闭
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
