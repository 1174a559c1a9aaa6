# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 04:20
# @Author  : Pedro
# @File    : payment_center.py
# @Software: PyCharm
"""
from typing import Optional

import httpx

from app.api.v1.schema.order import MerchantOrdersVO
from app.config.settings_manager import get_current_settings
from app.pedro.config import PaymentConfig
from app.pedro.logger import logger


class PaymentCenterClient:
    """
    💳 支付中心客户端
    只负责把商户订单推送给支付中心，不处理支付流程本身
    """

    def __init__(self, config: Optional[PaymentConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_current_settings().payment
        self.transport = transport

    async def create_merchant_order(self, merchant_order: MerchantOrdersVO) -> bool:
        headers = {
            "Content-Type": "application/json",
            "imoocUserId": self.config.merchant_user_id,
            "password": self.config.password,
        }
        payload = merchant_order.model_dump(by_alias=True)

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self.transport) as client:
                response = await client.post(self.config.center_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"❌ 支付中心请求失败 order_id={merchant_order.merchant_order_id}: {e}")
            return False

        if response.is_success:
            logger.info(f"✅ 支付中心订单创建成功 order_id={merchant_order.merchant_order_id}")
            return True

        logger.error(
            f"❌ 支付中心订单创建失败 order_id={merchant_order.merchant_order_id} "
            f"status={response.status_code} body={response.text}"
        )
        return False
