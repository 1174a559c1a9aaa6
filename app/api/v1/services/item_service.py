# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 01:40
# @Author  : Pedro
# @File    : item_service.py
# @Software: PyCharm
"""
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.model.items import Items, ItemsSpec, ItemsImg
from app.pedro.enums import YesOrNo
from app.pedro.exception import InsufficientStock
from app.pedro.logger import logger


class ItemService:
    """
    🛍️ 商品 / 规格查询与库存扣减
    所有方法都在调用方的 session 中执行，由调用方控制事务
    """

    @staticmethod
    async def query_item_by_id(session: AsyncSession, item_id: str) -> Optional[Items]:
        return await Items.get(session, item_id)

    @staticmethod
    async def query_item_spec_by_id(session: AsyncSession, spec_id: str) -> Optional[ItemsSpec]:
        return await ItemsSpec.get(session, spec_id)

    @staticmethod
    async def query_item_main_img_by_id(session: AsyncSession, item_id: str) -> str:
        """商品主图地址，没有主图时返回空串"""
        result = await session.execute(
            select(ItemsImg.url)
            .where(ItemsImg.item_id == item_id, ItemsImg.is_main == YesOrNo.YES.value)
            .order_by(ItemsImg.sort)
            .limit(1)
        )
        return result.scalar_one_or_none() or ""

    @staticmethod
    async def decrease_item_spec_stock(session: AsyncSession, spec_id: str, buy_counts: int) -> None:
        """
        扣减规格库存
        单条 UPDATE ... WHERE stock >= :counts，并发下单不会超卖
        """
        result = await session.execute(
            update(ItemsSpec)
            .where(ItemsSpec.id == spec_id, ItemsSpec.stock >= buy_counts)
            .values(stock=ItemsSpec.stock - buy_counts)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            logger.warning(f"库存不足 spec_id={spec_id} buy_counts={buy_counts}")
            raise InsufficientStock()
