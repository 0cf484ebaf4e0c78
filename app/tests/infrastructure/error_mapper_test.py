"""
统一响应格式测试

所有出口（成功、业务失败、校验失败、未匹配路由、未知异常）都必须是
{"code", "message", "data"} 三个字段，且 HTTP 状态码为200
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.infrastructure.exceptions import (
    BusinessFailure,
    ConflictFailure,
    InternalFailure,
    NotFoundFailure,
    StorageFailure,
    ValidationFailure,
)
from app.infrastructure.response import failure_response, register_exception_handlers, result_to_response
from app.infrastructure.response.error_mapper import validation_messages
from app.services.core.result import Result

ENVELOPE_KEYS = {"code", "message", "data"}


def failure_codes_test():
    """每类失败对应的 code"""
    assert failure_response(NotFoundFailure.of("商品", 7)) == {"code": 404, "message": "商品不存在: 7", "data": None}
    assert failure_response(BusinessFailure("库存不足"))["code"] == 400
    assert failure_response(ConflictFailure("用户名已存在: a", field="username", value="a"))["code"] == 400
    assert failure_response(StorageFailure())["message"] == "数据写入失败"
    assert failure_response(ValidationFailure(["a: x", "b: y"]))["message"] == "参数验证失败: a: x, b: y"


def internal_failure_hides_detail_test():
    body = failure_response(InternalFailure(detail="connection refused at 10.0.0.1"))

    assert body["code"] == 500
    assert body["message"] == "服务器内部错误，请稍后重试"
    assert "10.0.0.1" not in body["message"]
    assert body["data"] is None


def result_to_response_test():
    assert result_to_response(Result.ok({"id": 1})) == {"code": 200, "message": "操作成功", "data": {"id": 1}}
    assert result_to_response(Result.ok(None), serializer=lambda v: 1 / 0)["data"] is None
    assert result_to_response(Result.ok(2), serializer=lambda v: v * 10)["data"] == 20
    assert result_to_response(Result.fail(NotFoundFailure("x")))["code"] == 404


def validation_messages_test():
    errors = [
        {"loc": ("body", "price"), "msg": "Input should be greater than or equal to 0"},
        {"loc": ("body", "name"), "msg": "Value error, 商品名称不能为空"},
        {"loc": (), "msg": "broken"},
    ]

    assert validation_messages(errors) == [
        "price: Input should be greater than or equal to 0",
        "name: 商品名称不能为空",
        "broken",
    ]


def unexpected_exception_becomes_500_test():
    """
    未分类的异常

    测试场景：
    1. 返回 code=500 和通用消息，HTTP 状态码仍为200
    2. 异常信息不出现在响应中
    3. 手动抛出的 AppFailure 按其分类映射
    """
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret stack detail")

    @app.get("/business")
    def business():
        raise BusinessFailure("余额不足")

    client = TestClient(app)

    response = client.get("/boom")
    assert response.status_code == 200
    assert response.json() == {"code": 500, "message": "服务器内部错误，请稍后重试", "data": None}
    assert "secret" not in response.text

    assert client.get("/business").json() == {"code": 400, "message": "余额不足", "data": None}


def unknown_route_envelope_test(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == ENVELOPE_KEYS
    assert body["code"] == 404
    assert body["data"] is None


def method_not_allowed_envelope_test(client):
    body = client.patch("/api/goods/1", json={}).json()

    assert set(body) == ENVELOPE_KEYS
    assert body["code"] == 405


def malformed_json_envelope_test(client):
    response = client.post("/api/goods", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json()["code"] == 400
    assert response.json()["message"].startswith("参数验证失败: ")


def health_check_test(client):
    body = client.get("/").json()

    assert body["code"] == 200
    assert body["data"]["status"] == "online"
