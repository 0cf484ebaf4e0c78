"""
测试公共夹具

使用内存 SQLite 代替 MySQL：必须在导入 app 之前设置环境变量，
否则模块级的 engine 会按默认配置去连接 MySQL
"""
import os

os.environ["DATABASE_URI"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_audit_stamper
from app.db.init_db import create_tables
from app.db.session import get_db
from app.main import app
from app.repositories import AuditStamper


class TickingClock:
    """每次取时间都前进固定步长，保证先后两次写入的时间严格递增"""

    def __init__(self, start=datetime(2025, 1, 1, 8, 0, 0), step=timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def engine():
    # StaticPool 让所有会话共用同一个内存数据库连接
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def stamper(clock):
    return AuditStamper(clock)


@pytest.fixture
def client(session_factory, stamper):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_audit_stamper] = lambda: stamper
    # 不使用 with 语句，避免触发 startup 事件去初始化真实数据库
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_good(client):
    def _create(**overrides):
        payload = {"name": "Pen", "price": 1.50, "stock": 10}
        payload.update(overrides)
        body = client.post("/api/goods", json=payload).json()
        assert body["code"] == 200, body
        return body["data"]
    return _create


@pytest.fixture
def create_category(client):
    def _create(**overrides):
        payload = {"name": "文具", "description": "办公文具", "sortOrder": 1}
        payload.update(overrides)
        body = client.post("/api/categories", json=payload).json()
        assert body["code"] == 200, body
        return body["data"]
    return _create


@pytest.fixture
def create_user(client):
    def _create(**overrides):
        payload = {"username": "alice", "password": "secret123"}
        payload.update(overrides)
        body = client.post("/api/users", json=payload).json()
        assert body["code"] == 200, body
        return body["data"]
    return _create
