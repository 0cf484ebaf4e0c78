from sqlalchemy import Column, Computed, Integer, UniqueConstraint, VARCHAR

from app.db.base import Base
from app.models.base import EntityMixin

# 用户状态：0-禁用，1-正常
USER_STATUS_DISABLED = 0
USER_STATUS_NORMAL = 1
DEFAULT_ROLE = "user"


class User(EntityMixin, Base):
    """
    用户数据库模型

    username 在未删除的用户中全局唯一；password 暂未加密，且从不对外返回
    """
    __tablename__ = "user"
    # 数据库层面的唯一约束，只作为并发创建时的兜底；
    # 建在 username_live 上，已删除用户该列为 NULL，不占用用户名
    __table_args__ = (UniqueConstraint("username_live", name="uk_username"),)

    UPDATABLE_FIELDS = ("username", "password", "email", "phone", "nickname", "avatar", "status", "role")

    username = Column(VARCHAR(30), nullable=False)
    password = Column(VARCHAR(100), nullable=True)
    email = Column(VARCHAR(100), nullable=True)
    phone = Column(VARCHAR(20), nullable=True)
    nickname = Column(VARCHAR(50), nullable=True)
    avatar = Column(VARCHAR(500), nullable=True)
    status = Column(Integer, nullable=False, default=USER_STATUS_NORMAL)  # 用户状态：0-禁用，1-正常
    role = Column(VARCHAR(20), nullable=False, default=DEFAULT_ROLE)
    # 生成列：未删除时等于 username，删除后为 NULL（MySQL 与 SQLite 都支持）
    username_live = Column(VARCHAR(30), Computed("CASE WHEN deleted = 0 THEN username END", persisted=True))
