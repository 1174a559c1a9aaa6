# @Time    : 2025/11/11 01:30
# @Author  : Pedro
# @File    : response.py
# @Software: PyCharm
"""
Pedro-Core 通用响应模型（ORM兼容 + Decimal安全）
✅ 统一成功响应封装 success()
✅ 自动识别 ORM / Pydantic / dict / list
✅ Decimal, datetime, bytes 全兼容
✅ 支持 schema 参数自动过滤响应字段
"""

import json
import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, Optional, Type, TypeVar
from pydantic import BaseModel, Field, ConfigDict
from starlette.responses import JSONResponse

T = TypeVar("T")


# =========================================================
# ✅ 通用序列化函数
# =========================================================
def serialize(data: Any) -> Any:
    """递归序列化各种复杂对象到 JSON 安全格式"""
    if isinstance(data, (datetime.datetime, datetime.date)):
        return data.isoformat()

    if isinstance(data, Enum):
        return data.value

    if isinstance(data, Decimal):
        return float(data)

    if isinstance(data, (bytes, bytearray)):
        return data.decode("utf-8", errors="ignore")

    if isinstance(data, set):
        return list(data)

    if isinstance(data, BaseModel):
        return serialize(data.model_dump(by_alias=True))

    if hasattr(data, "__table__"):  # SQLAlchemy ORM
        return {c.key: serialize(getattr(data, c.key)) for c in data.__table__.columns}

    if isinstance(data, (list, tuple)):
        return [serialize(i) for i in data]

    if isinstance(data, dict):
        return {k: serialize(v) for k, v in data.items()}

    return data


# =========================================================
# ✅ Pedro JSON Response
# =========================================================
class PedroJSONResponse(JSONResponse):
    """统一 JSONResponse 编码（UTF-8 + 禁止 ASCII 转义）"""
    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


# =========================================================
# ✅ PedroResponse 泛型模型（主类）
# =========================================================
class PedroResponse(BaseModel, Generic[T]):
    code: int = Field(default=0, description="状态码")
    msg: str = Field(default="success", description="消息")
    data: Optional[T] = Field(default=None, description="数据体")

    model_config = ConfigDict(arbitrary_types_allowed=True, from_attributes=True)

    # -----------------------------------------------------
    # ✅ 成功响应（支持 schema 自动过滤）
    # -----------------------------------------------------
    @classmethod
    def success(
        cls,
        data: Optional[Any] = None,
        msg: str = "success",
        code: int = 0,
        schema: Optional[Type[BaseModel]] = None,
    ):
        """统一成功响应"""
        if schema is not None and data is not None:
            data = schema.model_validate(data, from_attributes=True).model_dump(by_alias=True)
        payload = {"code": code, "msg": msg, "data": serialize(data)}
        return PedroJSONResponse(content=payload)

