import logging
from typing import List

from app.infrastructure.exceptions import NotFoundFailure
from app.models.user import User
from app.repositories.query import QuerySpec
from app.services.core.base_service import CrudService
from app.services.core.result import Result

logger = logging.getLogger(__name__)


class UserService(CrudService[User]):
    """
    用户服务

    username 需要在未删除的用户中唯一，构造时传入 UniquenessGuard；
    密码暂不加密（后续接入 BCrypt），也从不出现在日志和响应里
    """
    model = User
    label = "用户"
    search_field = "username"

    def search_spec(self, keyword: str) -> QuerySpec:
        return QuerySpec().like("username", keyword).order_by_desc("create_time")

    def get_by_username(self, username: str) -> Result[User]:
        logger.info(f"查询用户: username={username}")
        users = self.repository.list(QuerySpec().eq("username", username))
        if not users:
            logger.warning(f"用户不存在: username={username}")
            return Result.fail(NotFoundFailure(f"用户不存在: {username}"))
        return Result.ok(users[0])

    def list_by_role(self, role: str) -> Result[List[User]]:
        logger.info(f"查询角色为 {role} 的用户")
        return self.list_by(QuerySpec().eq("role", role).order_by_desc("create_time"))

    def list_by_status(self, status: int) -> Result[List[User]]:
        logger.info(f"查询状态为 {status} 的用户")
        return self.list_by(QuerySpec().eq("status", status).order_by_desc("create_time"))
