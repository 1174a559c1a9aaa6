# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/14 21:15
# @Author  : Pedro
# @File    : center_user_service.py
# @Software: PyCharm
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.v1.model.users import Users
from app.pedro.db import get_session_factory
from app.pedro.exception import UserNotFound


class CenterUserService:
    """用户中心"""

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]] = None):
        self.session_factory = session_factory or get_session_factory()

    async def query_user_info(self, user_id: str) -> Users:
        """根据用户 ID 查询用户信息，返回前清空密码"""
        async with self.session_factory() as session:
            user = await Users.get(session, user_id)
            if user is None:
                raise UserNotFound(f"用户不存在: {user_id}")
            # 先脱离 session，清空密码不会被 flush 回数据库
            session.expunge(user)
        user.password = None
        return user
