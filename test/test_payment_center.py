"""
# @Time    : 2025/11/17 11:30
# @Author  : Pedro
# @File    : test_payment_center.py
# @Software: PyCharm
"""
import json

import httpx
import pytest

from app.api.v1.schema.order import MerchantOrdersVO
from app.extension.payment.payment_center import PaymentCenterClient
from app.pedro.config import PaymentConfig

CENTER_URL = "http://payment.test/payment/createMerchantOrder"


@pytest.fixture
def payment_config():
    return PaymentConfig(
        center_url=CENTER_URL,
        return_url="http://api.foodie.dev/v1/orders/notifyMerchantOrderPaid",
        merchant_user_id="imooc-001",
        password="secret",
    )


@pytest.fixture
def merchant_order():
    return MerchantOrdersVO(
        merchant_order_id="251117ABC",
        merchant_user_id="U1001",
        amount=2000,
        pay_method=1,
        return_url="http://api.foodie.dev/v1/orders/notifyMerchantOrderPaid",
    )


class TestPaymentCenterClient:

    async def test_posts_merchant_order(self, payment_config, merchant_order):
        captured = {}

        def handler(request: httpx.Request):
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"status": 200})

        client = PaymentCenterClient(config=payment_config, transport=httpx.MockTransport(handler))

        assert await client.create_merchant_order(merchant_order) is True
        assert captured["url"] == CENTER_URL
        assert captured["headers"]["imoocUserId"] == "imooc-001"
        assert captured["headers"]["password"] == "secret"
        assert captured["body"] == {
            "merchantOrderId": "251117ABC",
            "merchantUserId": "U1001",
            "amount": 2000,
            "payMethod": 1,
            "returnUrl": "http://api.foodie.dev/v1/orders/notifyMerchantOrderPaid",
        }

    async def test_non_2xx_is_failure(self, payment_config, merchant_order):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="down"))
        client = PaymentCenterClient(config=payment_config, transport=transport)

        assert await client.create_merchant_order(merchant_order) is False

    async def test_transport_error_is_failure(self, payment_config, merchant_order):
        def handler(request: httpx.Request):
            raise httpx.ConnectError("refused", request=request)

        client = PaymentCenterClient(config=payment_config, transport=httpx.MockTransport(handler))

        assert await client.create_merchant_order(merchant_order) is False
