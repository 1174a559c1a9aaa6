# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16
# @Author  : Pedro
# @File    : cart_service.py
# @Software: PyCharm
"""

from typing import List, Optional

from app.api.v1.schema.order import ShopcartBO
from app.extension.redis.redis_client import RedisClient, rds
from app.pedro.logger import logger

FOODIE_SHOPCART = "shopcart"


class CartService:
    """
    🛒 用户购物车（Redis 实时存储）
    key: shopcart:{uid}，value: ShopcartBO 列表（驼峰 JSON）
    """

    def __init__(self, redis: Optional[RedisClient] = None):
        self.redis = redis or rds

    @staticmethod
    def _key(uid: str) -> str:
        return f"{FOODIE_SHOPCART}:{uid}"

    async def get_shopcart(self, uid: str) -> List[ShopcartBO]:
        data = await self.redis.get(self._key(uid))
        if not data:
            return []
        return [ShopcartBO.model_validate(line) for line in data]

    async def save_shopcart(self, uid: str, lines: List[ShopcartBO]) -> None:
        await self.redis.set(
            self._key(uid),
            [line.model_dump(by_alias=True) for line in lines],
        )

    async def purge_ordered_lines(self, uid: str, ordered_lines: List[ShopcartBO]) -> List[ShopcartBO]:
        """下单成功后，从购物车中移除已下单的规格，返回剩余购物车"""
        ordered_spec_ids = {line.spec_id for line in ordered_lines}
        cart = await self.get_shopcart(uid)
        remaining = [line for line in cart if line.spec_id not in ordered_spec_ids]
        await self.save_shopcart(uid, remaining)
        logger.info(f"🛒 已清理购物车 uid={uid} removed={len(cart) - len(remaining)}")
        return remaining
