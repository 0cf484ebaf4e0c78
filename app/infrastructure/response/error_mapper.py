"""
失败 → 统一响应的唯一转换点

服务层只返回 Result，这里负责把成功值或分类后的失败翻译成
{"code": int, "message": str, "data": Any} 格式；HTTP 状态码统一为200，错误信息在 code 字段中表示
"""
import logging
import traceback
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.infrastructure.exceptions import AppFailure, InternalFailure, NotFoundFailure, ValidationFailure
from app.infrastructure.response.response_formatter import (
    error_response,
    not_found_response,
    server_error_response,
    success_response,
)
from app.services.core.result import Result

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


def failure_response(failure: AppFailure) -> Dict[str, Any]:
    """已分类的失败 → 响应"""
    if isinstance(failure, NotFoundFailure):
        return not_found_response(failure.message)
    if isinstance(failure, InternalFailure):
        # 原始细节只进日志
        return server_error_response()
    return error_response(message=failure.message, code=failure.code)


def result_to_response(
        result: Result,
        serializer: Optional[Callable[[Any], Any]] = None,
        message: str = "操作成功",
) -> Dict[str, Any]:
    """
    服务结果 → 响应

    Args:
        result: 服务层返回的 Result
        serializer: 把成功值转换为 data 的函数；值为 None 时不调用（例如删除）
        message: 成功消息
    """
    if result.is_failure:
        return failure_response(result.failure)
    if serializer is not None and result.value is not None:
        result = result.map(serializer)
    return success_response(data=result.value, message=message)


def validation_messages(errors: Iterable[dict]) -> List[str]:
    """把 pydantic 的校验错误逐条转换为 "字段: 消息" """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        msg = str(error.get("msg", ""))
        if msg.startswith(VALUE_ERROR_PREFIX):
            msg = msg[len(VALUE_ERROR_PREFIX):]
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages


def _json(content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=content, status_code=200)


def register_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理，覆盖请求校验失败、未匹配路由和未分类异常"""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        failure = ValidationFailure(validation_messages(exc.errors()))
        logger.warning(f"参数验证失败: {request.method} {request.url.path} - {failure.message}")
        return _json(failure_response(failure))

    @app.exception_handler(AppFailure)
    async def handle_app_failure(request: Request, exc: AppFailure):
        logger.warning(f"业务异常: {exc.message}")
        return _json(failure_response(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        logger.warning(f"HTTP异常: {request.method} {request.url.path} - {exc.status_code} {exc.detail}")
        return _json(error_response(message=str(exc.detail), code=exc.status_code))

    @app.middleware("http")
    async def unhandled_exception_middleware(request: Request, call_next):
        """兜底：任何未分类的异常都返回500，异常细节只记录日志"""
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"未处理的异常: {request.method} {request.url.path} - {str(e)}")
            logger.error(traceback.format_exc())
            return _json(failure_response(InternalFailure(detail=str(e))))
