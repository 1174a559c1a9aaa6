# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 02:40
# @Author  : Pedro
# @File    : order_service.py
# @Software: PyCharm

订单服务
--------------------------------------------
✅ create_order：创建订单（主订单 + 子订单 + 订单状态 + 扣库存），单事务
✅ update_order_status：更新订单状态（支付回调）
✅ query_order_status_info：查询订单状态
✅ close_order：关闭超时未支付订单（定时任务调用，逐单独立事务）
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.v1.model.orders import Orders, OrderItems, OrderStatus
from app.api.v1.schema.order import ShopcartBO, SubmitOrderBO, MerchantOrdersVO, OrderVO
from app.api.v1.services.item_service import ItemService
from app.api.v1.services.user_address_service import UserAddressService
from app.pedro.config import OrderConfig, get_current_settings
from app.pedro.db import BaseModel, get_session_factory
from app.pedro.enums import OrderStatusEnum, PayMethod, YesOrNo
from app.pedro.exception import (
    AddressNotFound,
    CartLineMissing,
    InvalidSubmission,
    ItemNotFound,
    OrderNotFound,
    OrderStatusConflict,
    SpecNotFound,
)
from app.pedro.interface import as_utc, utc_now
from app.pedro.logger import logger
from app.util.generate_id import SnowflakeGenerator, snowflake


def days_between(start: datetime, end: datetime) -> int:
    """两个时间之间相差的整天数"""
    return (as_utc(end) - as_utc(start)).days


class OrderService:

    def __init__(
            self,
            session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
            address_service=UserAddressService,
            item_service=ItemService,
            sid: SnowflakeGenerator = snowflake,
            config: Optional[OrderConfig] = None,
    ):
        self.session_factory = session_factory or get_session_factory()
        self.address_service = address_service
        self.item_service = item_service
        self.sid = sid
        self.config = config or get_current_settings().order

    # ======================================================
    # 🧾 创建订单
    # ======================================================
    async def create_order(self, shopcart_list: List[ShopcartBO], submit_order_bo: SubmitOrderBO) -> OrderVO:
        user_id = submit_order_bo.user_id
        pay_method = submit_order_bo.pay_method
        item_spec_ids = submit_order_bo.spec_id_list()

        if not item_spec_ids:
            raise InvalidSubmission("请选择需要购买的商品")
        if not PayMethod.is_supported(pay_method):
            raise InvalidSubmission("支付方式不支持！")

        # 邮费（默认包邮）
        post_amount = self.config.post_amount

        async with self.session_factory() as session:
            async with BaseModel.auto_commit(session):
                # 1. 收货地址
                address = await self.address_service.query_user_address(
                    session, user_id, submit_order_bo.address_id
                )
                if address is None:
                    raise AddressNotFound()

                order_id = self.sid.next_short()
                now = utc_now()
                new_order = Orders(
                    id=order_id,
                    user_id=user_id,
                    receiver_name=address.receiver,
                    receiver_mobile=address.mobile,
                    receiver_address=address.full_address,
                    post_amount=post_amount,
                    pay_method=pay_method,
                    left_msg=submit_order_bo.left_msg,
                    is_comment=YesOrNo.NO.value,
                    is_deleted=False,
                    create_time=now,
                    update_time=now,
                )
                session.add(new_order)

                # 2. 根据 item_spec_ids 保存子订单
                total_amount = 0
                real_pay_amount = 0
                to_be_removed: List[ShopcartBO] = []
                for item_spec_id in item_spec_ids:
                    cart_item = self._get_buy_counts_from_shopcart(shopcart_list, item_spec_id)
                    if cart_item is None:
                        raise CartLineMissing(f"购物车中不存在规格: {item_spec_id}")
                    buy_counts = cart_item.buy_counts
                    to_be_removed.append(cart_item)

                    # 2.1 商品规格
                    item_spec = await self.item_service.query_item_spec_by_id(session, item_spec_id)
                    if item_spec is None:
                        raise SpecNotFound(f"商品规格不存在: {item_spec_id}")

                    total_amount += item_spec.price_normal * buy_counts
                    real_pay_amount += item_spec.price_discount * buy_counts

                    # 2.2 商品信息 + 主图
                    item = await self.item_service.query_item_by_id(session, item_spec.item_id)
                    if item is None:
                        raise ItemNotFound(f"商品不存在: {item_spec.item_id}")
                    img_url = await self.item_service.query_item_main_img_by_id(session, item.id)

                    # 2.3 子订单
                    session.add(OrderItems(
                        id=self.sid.next_short(),
                        order_id=order_id,
                        item_id=item.id,
                        item_name=item.item_name,
                        item_img=img_url,
                        item_spec_id=item_spec_id,
                        item_spec_name=item_spec.name,
                        price=item_spec.price_discount,
                        buy_counts=buy_counts,
                    ))

                    # 2.4 扣减库存
                    await self.item_service.decrease_item_spec_stock(session, item_spec_id, buy_counts)

                new_order.total_amount = total_amount
                new_order.real_pay_amount = real_pay_amount

                # 3. 订单状态
                session.add(OrderStatus(
                    order_id=order_id,
                    order_status=OrderStatusEnum.WAIT_PAY.value,
                    created_time=now,
                ))

        logger.info(
            f"🧾 订单创建成功 order_id={order_id} user_id={user_id} "
            f"total={total_amount} real_pay={real_pay_amount} lines={len(item_spec_ids)}"
        )

        # 4. 商户订单，交给支付中心
        merchant_orders_vo = MerchantOrdersVO(
            merchant_order_id=order_id,
            merchant_user_id=user_id,
            amount=real_pay_amount + post_amount,
            pay_method=pay_method,
        )
        return OrderVO(
            order_id=order_id,
            merchant_orders_vo=merchant_orders_vo,
            shopcart_list=to_be_removed,
        )

    @staticmethod
    def _get_buy_counts_from_shopcart(shopcart_list: List[ShopcartBO], item_spec_id: str) -> Optional[ShopcartBO]:
        for sc in shopcart_list:
            if sc.spec_id == item_spec_id:
                return sc
        return None

    # ======================================================
    # 🔁 更新订单状态
    # ======================================================
    async def update_order_status(
            self,
            order_id: str,
            order_status: int,
            expected_status: Optional[int] = None,
    ) -> None:
        """
        更新订单状态；只有转为「已付款」时才记录支付时间。
        expected_status 不为空时按旧状态做条件更新，防止与关单任务互相覆盖。
        """
        values = {"order_status": order_status}
        if order_status == OrderStatusEnum.WAIT_DELIVER:
            values["pay_time"] = utc_now()

        stmt = update(OrderStatus).where(OrderStatus.order_id == order_id)
        if expected_status is not None:
            stmt = stmt.where(OrderStatus.order_status == expected_status)

        async with self.session_factory() as session:
            async with BaseModel.auto_commit(session):
                result = await session.execute(stmt.values(**values))
                if result.rowcount == 0:
                    current = await OrderStatus.get(session, order_id)
                    if current is None:
                        raise OrderNotFound(f"订单不存在: {order_id}")
                    raise OrderStatusConflict(
                        f"订单 {order_id} 当前状态为 {current.order_status}，无法更新为 {order_status}"
                    )

        logger.info(f"🔁 订单状态更新 order_id={order_id} -> {order_status}")

    # ======================================================
    # 🔍 查询订单状态
    # ======================================================
    async def query_order_status_info(self, order_id: str) -> Optional[OrderStatus]:
        async with self.session_factory() as session:
            return await OrderStatus.get(session, order_id)

    # ======================================================
    # ⏳ 关闭超时未支付订单
    # ======================================================
    async def close_order(self) -> None:
        """
        查询所有未支付订单，超过 close_after_days 天的关闭交易。
        每个订单单独提交，某一单失败只记录日志，不影响其他订单。
        """
        async with self.session_factory() as session:
            wait_pay_list = await OrderStatus.filter_by(
                session, order_status=OrderStatusEnum.WAIT_PAY.value
            )

        now = utc_now()
        closed = 0
        for status_row in wait_pay_list:
            if days_between(status_row.created_time, now) < self.config.close_after_days:
                continue
            try:
                if await self._do_close_order(status_row.order_id):
                    closed += 1
            except Exception:
                logger.exception(f"⚠️ 关闭订单失败 order_id={status_row.order_id}")

        logger.info(f"⏳ 关单任务完成 scanned={len(wait_pay_list)} closed={closed}")

    async def _do_close_order(self, order_id: str) -> bool:
        async with self.session_factory() as session:
            async with BaseModel.auto_commit(session):
                result = await session.execute(
                    update(OrderStatus)
                    .where(
                        OrderStatus.order_id == order_id,
                        OrderStatus.order_status == OrderStatusEnum.WAIT_PAY.value,
                    )
                    .values(order_status=OrderStatusEnum.CLOSE.value, close_time=utc_now())
                )
        if result.rowcount == 0:
            logger.warning(f"当前订单不存在或已不是待付款状态: {order_id}")
            return False
        return True
