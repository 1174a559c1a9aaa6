# -*- coding: utf-8 -*-
"""
Pedro-Core 接口定义层（Interface Layer）
--------------------------------------------
✅ 提供字段定义和通用方法，不注册到数据库
✅ 由 model 层继承实现实际 ORM 映射
✅ 兼容 SQLAlchemy 2.x 异步 Session
"""

from __future__ import annotations
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String, func

from app.pedro.db import BaseModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """sqlite 等后端读回的时间不带时区，统一按 UTC 处理"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


# ======================================================
# 🧩 通用抽象基类
# ======================================================
class BaseCrud(BaseModel):
    """基础 CRUD 抽象类，主键为业务侧生成的字符串 ID（Sid）"""
    __abstract__ = True

    id = Column(String(64), primary_key=True)


# ======================================================
# 🕒 通用时间戳 + 软删除
# ======================================================
class InfoCrud(BaseCrud):
    __abstract__ = True

    create_time = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
    )
    update_time = Column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )
    delete_time = Column(DateTime(timezone=True))
    is_deleted = Column(Boolean, nullable=False, default=False)

