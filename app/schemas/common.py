from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    请求/响应基类

    JSON 字段使用驼峰命名（sortOrder、createTime），同时接受下划线命名；
    未声明的字段（如 id、createTime）直接忽略，不会进入业务层
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(CamelModel):
    """
    响应DTO基类

    从实体转换而来，只包含客户端需要看到的字段（不含 deleted、password）
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @classmethod
    def dump(cls, entity) -> Dict[str, Any]:
        """实体 → 可直接放进响应 data 的字典"""
        return cls.model_validate(entity).model_dump(by_alias=True, mode="json")

    @classmethod
    def dump_list(cls, entities: Iterable) -> List[Dict[str, Any]]:
        return [cls.dump(entity) for entity in entities or []]


def page_data(page, response_cls) -> Dict[str, Any]:
    """
    分页结果 → 响应 data

    {
        "records": [...],
        "total": int,    # 总记录数
        "current": int,  # 当前页码
        "size": int,     # 每页条数
        "pages": int     # 总页数
    }
    """
    return {
        "records": response_cls.dump_list(page.records),
        "total": page.total,
        "current": page.current,
        "size": page.size,
        "pages": page.pages,
    }
