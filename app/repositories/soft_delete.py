"""
逻辑删除规则

所有读操作（按ID查询、列表、计数、唯一性检查）都必须带上 deleted = 0；
仓储对外没有绕过该条件的方法
"""
from sqlalchemy import update

from app.models.base import DEL_FLAG_DELETED, DEL_FLAG_LIVE


def live_filter(model):
    """未删除记录的过滤条件"""
    return model.deleted == DEL_FLAG_LIVE


def soft_delete_statement(model, entity_id, update_time):
    """
    逻辑删除语句：UPDATE t SET deleted=1, update_time=? WHERE id=? AND deleted=0

    对已删除的记录再次执行影响0行
    """
    return (
        update(model)
        .where(model.id == entity_id, live_filter(model))
        .values(deleted=DEL_FLAG_DELETED, update_time=update_time)
        .execution_options(synchronize_session=False)
    )
