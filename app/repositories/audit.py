"""
审计时间填充

insert：create_time 与 update_time 使用同一次取到的当前时间
update：只重新取 update_time，create_time 原样保留
"""
from datetime import datetime
from typing import Callable, Optional

from app.db.base import get_cn_datetime

Clock = Callable[[], datetime]


class AuditStamper:
    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or get_cn_datetime

    def now(self) -> datetime:
        return self.clock()

    def stamp_insert(self, entity) -> datetime:
        now = self.now()
        entity.create_time = now
        entity.update_time = now
        return now

    def stamp_update(self) -> datetime:
        return self.now()
