# -*- coding:utf-8 -*-
"""
Foodie 订单相关枚举定义
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
✅ 订单状态
✅ 是 / 否 标记
✅ 支付方式
"""

from enum import Enum


class OrderStatusEnum(int, Enum):
    """
    订单状态枚举
      - WAIT_PAY：待付款
      - WAIT_DELIVER：已付款，待发货
      - WAIT_RECEIVE：已发货，待收货
      - SUCCESS：交易成功
      - CLOSE：交易关闭
    """

    WAIT_PAY = 10
    WAIT_DELIVER = 20
    WAIT_RECEIVE = 30
    SUCCESS = 40
    CLOSE = 50

    def label(self) -> str:
        """返回中文描述"""
        labels = {
            OrderStatusEnum.WAIT_PAY: "待付款",
            OrderStatusEnum.WAIT_DELIVER: "已付款，待发货",
            OrderStatusEnum.WAIT_RECEIVE: "已发货，待收货",
            OrderStatusEnum.SUCCESS: "交易成功",
            OrderStatusEnum.CLOSE: "交易关闭",
        }
        return labels.get(self, "未知状态")


class YesOrNo(int, Enum):
    NO = 0
    YES = 1


class PayMethod(int, Enum):
    WEIXIN = 1
    ALIPAY = 2

    @classmethod
    def is_supported(cls, value) -> bool:
        return value in cls._value2member_map_
