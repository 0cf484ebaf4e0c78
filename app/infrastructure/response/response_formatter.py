from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    message: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型；删除操作和所有失败都为 None
        code: 响应状态码，200成功，400参数/业务错误，404资源不存在，500服务器内部错误
        message: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "message": message,
        "data": data,
    }


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    message: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建成功响应

    参数:
        data: 响应数据
        message: 成功消息

    返回:
        Dict[str, Any]: 标准格式的成功响应
    """
    return standard_response(data=data, code=200, message=message)


def error_response(
    message: str = "操作失败",
    code: int = 400,
) -> Dict[str, Any]:
    """
    创建错误响应，失败时 data 始终为 None

    参数:
        message: 错误消息
        code: 错误状态码，默认400表示客户端错误

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(data=None, code=code, message=message)


def not_found_response(message: str = "资源不存在") -> Dict[str, Any]:
    """
    创建资源未找到响应

    参数:
        message: 错误消息，例如"商品不存在: 1"

    返回:
        Dict[str, Any]: 标准格式的404响应
    """
    return error_response(message=message, code=404)


def server_error_response(message: str = "服务器内部错误，请稍后重试") -> Dict[str, Any]:
    """
    创建服务器内部错误响应，不暴露异常细节

    返回:
        Dict[str, Any]: 标准格式的500响应
    """
    return error_response(message=message, code=500)
