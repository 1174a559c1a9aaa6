# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 02:11
# @Author  : Pedro
# @File    : orders.py
# @Software: PyCharm
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, SmallInteger, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.pedro.db import BaseModel
from app.pedro.enums import OrderStatusEnum, YesOrNo
from app.pedro.interface import InfoCrud, BaseCrud, utc_now


class Orders(InfoCrud):
    """
    🧾 订单主表
    ----------------------
    金额单位：分
    receiver_* 为下单时的收货地址快照
    """

    __tablename__ = "orders"

    user_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)

    # 收货地址快照
    receiver_name: Mapped[str] = mapped_column(String(32), nullable=False)
    receiver_mobile: Mapped[str] = mapped_column(String(32), nullable=False)
    receiver_address: Mapped[str] = mapped_column(String(255), nullable=False)

    # 价格结构
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    real_pay_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    post_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    pay_method: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    left_msg: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    extand: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    is_comment: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=YesOrNo.NO.value)

    # 订单下商品（关联明细表）
    items: Mapped[list["OrderItems"]] = relationship(
        "OrderItems",
        back_populates="order",
        cascade="all, delete-orphan",
    )


class OrderItems(BaseCrud):
    """
    📦 订单商品明细（子订单），与主订单同一事务创建，创建后不再修改
    """

    __tablename__ = "order_items"

    order_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("orders.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    item_id: Mapped[str] = mapped_column(String(64), nullable=False)
    item_img: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    item_name: Mapped[str] = mapped_column(String(128), nullable=False)
    item_spec_id: Mapped[str] = mapped_column(String(64), nullable=False)
    item_spec_name: Mapped[str] = mapped_column(String(64), nullable=False)
    # 成交单价（优惠价）
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    buy_counts: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped["Orders"] = relationship(
        "Orders",
        back_populates="items",
    )


class OrderStatus(BaseModel):
    """
    🚦 订单状态表（与订单一一对应）
    ----------------------
    order_status:
        10 -> 待付款
        20 -> 已付款，待发货
        30 -> 已发货，待收货
        40 -> 交易成功
        50 -> 交易关闭
    """

    __tablename__ = "order_status"

    order_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    order_status: Mapped[int] = mapped_column(
        Integer, nullable=False, default=OrderStatusEnum.WAIT_PAY.value, index=True
    )

    created_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    pay_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    deliver_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    success_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    close_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    comment_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    def __repr__(self):
        return f"<OrderStatus(order_id='{self.order_id}', status={self.order_status})>"
