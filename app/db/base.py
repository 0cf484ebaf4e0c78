import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)

# 审计时间使用的时区（默认东八区，中国标准时间 UTC+8）
CST_TIMEZONE = timezone(timedelta(hours=settings.TIMEZONE_OFFSET_HOURS))

# 创建获取中国标准时间的函数
def get_cn_datetime() -> datetime:
    """
    获取当前的中国标准时间（东八区，UTC+8）

    返回不带时区信息的时间，与 DATETIME 列读回的值保持一致，便于比较
    """
    return datetime.now(CST_TIMEZONE).replace(tzinfo=None)


def build_engine(database_uri: str, **overrides):
    """
    根据连接串创建数据库引擎

    SQLite 不支持连接池参数，只有服务端数据库才设置 pool_size 等选项
    """
    if database_uri.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
    else:
        kwargs = {
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
        }
    kwargs["echo"] = settings.DB_ECHO
    kwargs.update(overrides)
    return create_engine(database_uri, **kwargs)


# 创建数据库引擎
engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database() -> None:
    """检查数据库是否存在，如果不存在则创建（仅适用于MySQL）"""
    url = make_url(settings.SQLALCHEMY_DATABASE_URI)
    db_name = url.database
    # 创建一个不指定数据库的临时引擎来执行创建数据库的操作
    temp_engine = create_engine(url.set(database=None))
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


# 创建数据库和表
def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # init_db 模块依赖本模块中的 Base 和 engine，这里延迟导入
    from app.db.init_db import create_tables, seed_demo_data

    try:
        if engine.dialect.name == "mysql":
            _ensure_mysql_database()

        create_tables()
        logger.info("所有表已创建或已存在")

        if settings.SEED_DEMO_DATA:
            db = SessionLocal()
            try:
                seed_demo_data(db)
            finally:
                db.close()
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise  # 重新抛出异常，以便在应用启动时捕获
