# -*- coding: utf-8 -*-
"""
Pedro exception system
----------------------------------
✅ APIException 统一异常基类 (msg / error_code / http_code)
✅ NotFound / ParameterError / Conflict 三大类业务异常
✅ 订单、用户相关的领域异常
✅ FastAPI 全局异常处理器注册
"""
import traceback
import uuid
from typing import Optional
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from app.pedro.logger import logger


class APIExceptionModel(BaseModel):
    msg: str = "sorry, we made a mistake (*￣︶￣)!"
    error_code: int = 999
    request: Optional[str] = None
    trace_id: Optional[str] = None


class APIException(Exception):
    def __init__(self, msg="sorry, we made a mistake (*￣︶￣)!", error_code=999, http_code=400):
        super().__init__(msg)
        self.msg = msg
        self.error_code = error_code
        self.http_code = http_code


class NotFound(APIException):
    def __init__(self, msg="资源未找到", error_code=1001):
        super().__init__(msg, error_code, http_code=404)


class ParameterError(APIException):
    def __init__(self, msg="参数错误", error_code=1002):
        super().__init__(msg, error_code, http_code=400)


class Conflict(APIException):
    def __init__(self, msg="资源状态冲突", error_code=1009):
        super().__init__(msg, error_code, http_code=409)


class InternalServerError(APIException):
    def __init__(self, msg="服务器内部异常，请稍后重试", error_code=9999):
        super().__init__(msg, error_code, http_code=500)


# ======================================================
# 🧾 订单 / 用户领域异常
# ======================================================
class AddressNotFound(NotFound):
    def __init__(self, msg="收货地址不存在", error_code=2001):
        super().__init__(msg, error_code)


class SpecNotFound(NotFound):
    def __init__(self, msg="商品规格不存在", error_code=2002):
        super().__init__(msg, error_code)


class ItemNotFound(NotFound):
    def __init__(self, msg="商品不存在", error_code=2003):
        super().__init__(msg, error_code)


class OrderNotFound(NotFound):
    def __init__(self, msg="订单不存在", error_code=2004):
        super().__init__(msg, error_code)


class UserNotFound(NotFound):
    def __init__(self, msg="用户不存在", error_code=2005):
        super().__init__(msg, error_code)


class InvalidSubmission(ParameterError):
    def __init__(self, msg="订单提交数据不正确", error_code=2101):
        super().__init__(msg, error_code)


class CartLineMissing(ParameterError):
    def __init__(self, msg="购物车中不存在该商品规格", error_code=2102):
        super().__init__(msg, error_code)


class InsufficientStock(Conflict):
    def __init__(self, msg="订单创建失败，原因：库存不足!", error_code=2201):
        super().__init__(msg, error_code)


class OrderStatusConflict(Conflict):
    def __init__(self, msg="订单状态已变更", error_code=2202):
        super().__init__(msg, error_code)


class PaymentCenterError(APIException):
    def __init__(self, msg="支付中心订单创建失败，请联系管理员！", error_code=2301):
        super().__init__(msg, error_code, http_code=502)


def build_error_response(request: Request, msg: str, error_code: int, http_code: int, trace_id=None):
    trace_id = trace_id or uuid.uuid4().hex[:8]
    model = APIExceptionModel(
        msg=msg,
        error_code=error_code,
        request=f"{request.method} {request.url.path}",
        trace_id=trace_id,
    )
    return JSONResponse(status_code=http_code, content=model.model_dump())


def register_exception_handlers(app):

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        logger.info(f"[APIException] {request.method} {request.url.path} code={exc.error_code} msg={exc.msg}")
        return build_error_response(request, exc.msg, exc.error_code, exc.http_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        first_err = exc.errors()[0] if exc.errors() else {}
        msg = first_err.get("msg", "参数错误")
        return build_error_response(request, msg, 1005, 422)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        trace_id = uuid.uuid4().hex[:8]
        tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(f"[Unhandled] TraceID={trace_id} {request.method} {request.url.path}\n{tb_str}")
        err = InternalServerError()
        return build_error_response(request, err.msg, err.error_code, err.http_code, trace_id)
