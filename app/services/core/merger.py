"""
部分更新合并

请求中的每个字段独立地"提供"或"未提供"：
- 未提供（或显式传 null）：保持原值
- 提供了值（包括空字符串）：覆盖原值
ID、删除标志和审计时间不属于任何更新请求，这里也拒绝写入
"""
import logging
from typing import Any, Dict, Iterable, List, Tuple

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# 日志中需要打码的字段
MASKED_FIELDS = ("password",)


def present_fields(request: BaseModel) -> Dict[str, Any]:
    """
    取出请求中提供了值的字段

    只看客户端实际传入的字段（model_fields_set），值为 None 视为未提供
    """
    return {
        name: getattr(request, name)
        for name in request.model_fields_set
        if getattr(request, name) is not None
    }


def merge_partial_update(
        entity,
        request: BaseModel,
        updatable_fields: Iterable[str],
        protected_fields: Iterable[str] = (),
) -> Tuple[Any, List[str]]:
    """
    把更新请求合并到已加载的实体上，返回 (实体, 被写入的字段列表)

    不做任何校验，也不持久化；字段顺序按 updatable_fields 的声明顺序
    """
    updatable_fields = tuple(updatable_fields)
    protected = set(protected_fields)
    provided = present_fields(request)

    for name in provided:
        if name in protected:
            raise ValueError(f"字段 {name} 不允许通过更新请求修改")
        if name not in updatable_fields:
            raise ValueError(f"字段 {name} 不是可更新字段")

    merged = []
    for name in updatable_fields:
        if name not in provided:
            continue
        value = provided[name]
        setattr(entity, name, value)
        merged.append(name)
        shown = "***" if name in MASKED_FIELDS else value
        logger.info(f"  更新{name}: {shown}")
    return entity, merged
