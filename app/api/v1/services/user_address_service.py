# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/15 03:22
# @Author  : Pedro
# @File    : user_address_service.py
# @Software: PyCharm
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.model.user_address import UserAddress


class UserAddressService:

    @staticmethod
    async def query_user_address(session: AsyncSession, user_id: str, address_id: str) -> Optional[UserAddress]:
        """按 用户 + 地址ID 查询收货地址，不存在返回 None"""
        result = await session.execute(
            select(UserAddress).where(
                UserAddress.id == address_id,
                UserAddress.user_id == user_id,
                UserAddress.is_deleted.is_(False),
            )
        )
        return result.scalar_one_or_none()
