# -*- coding: utf-8 -*-
"""
Pedro-Core 异步 ORM 基类
---------------------------------------------
✅ 异步 engine / session_factory（懒加载）
✅ auto_commit() 自动事务上下文
✅ get() 主键查询 / filter_by() 条件查询
"""

from __future__ import annotations
from functools import lru_cache
from typing import Any, Optional, List, Type, TypeVar
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.orm import declarative_base, declared_attr
from contextlib import asynccontextmanager

# ======================================================
# ⚙️ ORM Base 定义
# ======================================================
Base = declarative_base()
T = TypeVar("T", bound="BaseModel")


# ======================================================
# ⚙️ Pedro-Core ORM BaseModel
# ======================================================
class BaseModel(Base):
    __abstract__ = True

    # -----------------------------------------
    # 🧩 自动表名
    # -----------------------------------------
    @declared_attr.directive
    def __tablename__(cls) -> str:
        """驼峰转下划线"""
        name = cls.__name__
        return "".join(["_" + i.lower() if i.isupper() else i for i in name]).lstrip("_")

    # -----------------------------------------
    # 🔍 主键查询
    # -----------------------------------------
    @classmethod
    async def get(cls: Type[T], session: AsyncSession, id: Any) -> Optional[T]:
        return await session.get(cls, id)

    @classmethod
    async def filter_by(cls: Type[T], session: AsyncSession, **filters) -> List[T]:
        stmt = select(cls).filter_by(**filters)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    # -----------------------------------------
    # 🔒 自动事务上下文
    # -----------------------------------------
    @classmethod
    @asynccontextmanager
    async def auto_commit(cls, session: AsyncSession):
        try:
            yield
            await session.commit()
        except Exception as e:
            await session.rollback()
            raise e


# ======================================================
# ⚙️ 异步引擎 & Session 工厂
# ======================================================

# ✅ 自动适配异步数据库URL (sqlite / postgres / mysql)
@lru_cache()
def get_engine():
    """
    延迟初始化数据库引擎
    避免 settings_manager ↔ pedro 循环导入
    """
    import importlib
    settings_manager = importlib.import_module("app.config.settings_manager")
    settings = settings_manager.get_current_settings()
    return create_async_engine(
        settings.database.url,
        echo=settings.database.echo,
        future=True,
    )


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    engine = get_engine()
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def create_all_tables():
    """按 Base.metadata 建表（开发环境 / sqlite 使用）"""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
