"""
# @Time    : 2025/11/17 14:10
# @Author  : Pedro
# @File    : test_api.py
# @Software: PyCharm
"""
import httpx
import pytest
from fastapi import FastAPI

from app.api import register_blueprint
from app.api.v1.center import get_center_user_service
from app.api.v1.orders import get_cart_service, get_order_service, get_payment_client
from app.config.settings_manager import get_current_settings
from app.pedro.enums import OrderStatusEnum
from app.pedro.exception import register_exception_handlers
from conftest import ADDRESS_ID, USER_ID


class FakePaymentClient:

    def __init__(self, ok=True):
        self.ok = ok
        self.orders = []

    async def create_merchant_order(self, merchant_order):
        self.orders.append(merchant_order)
        return self.ok


@pytest.fixture
def payment_client():
    return FakePaymentClient()


@pytest.fixture
def application(order_service, cart_service, center_user_service, payment_client):
    application = FastAPI()
    register_blueprint(application)
    register_exception_handlers(application)
    application.dependency_overrides[get_order_service] = lambda: order_service
    application.dependency_overrides[get_cart_service] = lambda: cart_service
    application.dependency_overrides[get_center_user_service] = lambda: center_user_service
    application.dependency_overrides[get_payment_client] = lambda: payment_client
    return application


@pytest.fixture
async def client(application):
    transport = httpx.ASGITransport(app=application)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def filled_cart(cart_service, shopcart):
    await cart_service.save_shopcart(USER_ID, shopcart)
    return shopcart


def order_body(item_spec_ids="S1,S2", **overrides):
    body = {
        "userId": USER_ID,
        "addressId": ADDRESS_ID,
        "itemSpecIds": item_spec_ids,
        "payMethod": 1,
        "leftMsg": "少放辣",
    }
    body.update(overrides)
    return body


async def create_order(client, **kwargs):
    resp = await client.post("/v1/orders/create", json=order_body(**kwargs))
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


# ======================================================
# 🧾 /v1/orders/create
# ======================================================
class TestCreateOrderApi:

    async def test_create_order(self, client, filled_cart, cart_service, payment_client):
        resp = await client.post("/v1/orders/create", json=order_body())

        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == 0
        order_id = body["data"]
        assert order_id

        # 已下单的规格从购物车移除
        remaining = await cart_service.get_shopcart(USER_ID)
        assert [line.spec_id for line in remaining] == ["S3", "S4"]

        assert len(payment_client.orders) == 1
        merchant = payment_client.orders[0]
        assert merchant.merchant_order_id == order_id
        assert merchant.amount == 2000
        assert merchant.return_url == get_current_settings().payment.return_url

    async def test_empty_cart(self, client, payment_client):
        resp = await client.post("/v1/orders/create", json=order_body())

        assert resp.status_code == 400
        assert resp.json()["msg"] == "购物数据不正确"
        assert payment_client.orders == []

    async def test_insufficient_stock(self, client, filled_cart, cart_service):
        resp = await client.post("/v1/orders/create", json=order_body("S1,S3"))

        assert resp.status_code == 409
        assert resp.json()["error_code"] == 2201
        # 下单失败，购物车保持原样
        assert len(await cart_service.get_shopcart(USER_ID)) == len(filled_cart)

    async def test_payment_center_failure(self, client, filled_cart, payment_client):
        payment_client.ok = False

        resp = await client.post("/v1/orders/create", json=order_body())

        assert resp.status_code == 502
        assert resp.json()["error_code"] == 2301

    async def test_missing_field(self, client):
        body = order_body()
        body.pop("userId")

        resp = await client.post("/v1/orders/create", json=body)

        assert resp.status_code == 422
        assert resp.json()["error_code"] == 1005


# ======================================================
# 💳 支付回调 / 查询
# ======================================================
class TestPaidOrderApi:

    async def test_notify_then_query(self, client, filled_cart):
        order_id = await create_order(client)

        resp = await client.post("/v1/orders/notifyMerchantOrderPaid", params={"merchantOrderId": order_id})
        assert resp.status_code == 200

        resp = await client.get("/v1/orders/getPaidOrderInfo", params={"orderId": order_id})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["orderId"] == order_id
        assert data["orderStatus"] == OrderStatusEnum.WAIT_DELIVER.value
        assert data["payTime"] is not None

    async def test_repeated_notify_conflicts(self, client, filled_cart):
        order_id = await create_order(client)
        await client.post("/v1/orders/notifyMerchantOrderPaid", params={"merchantOrderId": order_id})

        resp = await client.post("/v1/orders/notifyMerchantOrderPaid", params={"merchantOrderId": order_id})

        assert resp.status_code == 409
        assert resp.json()["error_code"] == 2202

    async def test_notify_unknown_order(self, client):
        resp = await client.post("/v1/orders/notifyMerchantOrderPaid", params={"merchantOrderId": "nope"})

        assert resp.status_code == 404
        assert resp.json()["error_code"] == 2004

    async def test_query_unknown_order(self, client):
        resp = await client.get("/v1/orders/getPaidOrderInfo", params={"orderId": "nope"})

        assert resp.status_code == 404
        assert resp.json()["error_code"] == 2004


# ======================================================
# 👤 /v1/center/userInfo
# ======================================================
class TestCenterApi:

    async def test_user_info_hides_password(self, client):
        resp = await client.get("/v1/center/userInfo", params={"userId": USER_ID})

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["id"] == USER_ID
        assert data["nickname"] == "老衲"
        assert data["birthday"] == "1995-05-12"
        assert "password" not in data

    async def test_unknown_user(self, client):
        resp = await client.get("/v1/center/userInfo", params={"userId": "U404"})

        assert resp.status_code == 404
        assert resp.json()["error_code"] == 2005
