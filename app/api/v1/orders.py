# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 04:40
# @Author  : Pedro
# @File    : orders.py
# @Software: PyCharm
"""
from fastapi import APIRouter, Depends, Query

from app.api.v1.schema.order import SubmitOrderBO, OrderStatusVO
from app.api.v1.services.cart_service import CartService
from app.api.v1.services.order_service import OrderService
from app.config.settings_manager import get_current_settings
from app.extension.payment.payment_center import PaymentCenterClient
from app.pedro.enums import OrderStatusEnum
from app.pedro.exception import InvalidSubmission, OrderNotFound, PaymentCenterError
from app.pedro.response import PedroResponse

rp = APIRouter(prefix="/orders", tags=["订单"])


def get_order_service() -> OrderService:
    return OrderService()


def get_cart_service() -> CartService:
    return CartService()


def get_payment_client() -> PaymentCenterClient:
    return PaymentCenterClient()


@rp.post("/create", name="用户下单")
async def create(
        submit_order_bo: SubmitOrderBO,
        order_service: OrderService = Depends(get_order_service),
        cart_service: CartService = Depends(get_cart_service),
        payment_client: PaymentCenterClient = Depends(get_payment_client),
):
    # 1. 购物车以 Redis 为准
    shopcart_list = await cart_service.get_shopcart(submit_order_bo.user_id)
    if not shopcart_list:
        raise InvalidSubmission("购物数据不正确")

    # 2. 创建订单
    order_vo = await order_service.create_order(shopcart_list, submit_order_bo)
    order_id = order_vo.order_id

    # 3. 移除购物车中已结算的商品
    await cart_service.purge_ordered_lines(submit_order_bo.user_id, order_vo.shopcart_list)

    # 4. 推送商户订单到支付中心
    merchant_orders_vo = order_vo.merchant_orders_vo
    merchant_orders_vo.return_url = get_current_settings().payment.return_url
    if not await payment_client.create_merchant_order(merchant_orders_vo):
        raise PaymentCenterError()

    return PedroResponse.success(data=order_id)


@rp.post("/notifyMerchantOrderPaid", name="支付中心回调：订单已支付")
async def notify_merchant_order_paid(
        merchant_order_id: str = Query(..., alias="merchantOrderId"),
        order_service: OrderService = Depends(get_order_service),
):
    await order_service.update_order_status(
        merchant_order_id,
        OrderStatusEnum.WAIT_DELIVER.value,
        expected_status=OrderStatusEnum.WAIT_PAY.value,
    )
    return PedroResponse.success(msg="ok")


@rp.get("/getPaidOrderInfo", name="查询订单支付状态")
async def get_paid_order_info(
        order_id: str = Query(..., alias="orderId"),
        order_service: OrderService = Depends(get_order_service),
):
    order_status = await order_service.query_order_status_info(order_id)
    if order_status is None:
        raise OrderNotFound(f"订单不存在: {order_id}")
    return PedroResponse.success(data=order_status, schema=OrderStatusVO)
