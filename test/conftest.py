"""
# @Time    : 2025/11/17 10:02
# @Author  : Pedro
# @File    : conftest.py
# @Software: PyCharm
"""
import json
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import app.api.v1.model  # noqa: F401
from app.api.v1.model import Items, ItemsImg, ItemsSpec, UserAddress, Users
from app.api.v1.schema.order import ShopcartBO, SubmitOrderBO
from app.api.v1.services.cart_service import CartService
from app.api.v1.services.center_user_service import CenterUserService
from app.api.v1.services.order_service import OrderService
from app.pedro.config import OrderConfig
from app.pedro.db import Base
from app.pedro.enums import PayMethod, YesOrNo

USER_ID = "U1001"
ADDRESS_ID = "A1001"
PASSWORD_HASH = "4QrcOUm6Wau+VuBX8g+IPg=="


class FakeRedis:
    """与 RedisClient 相同的 get / set 接口，数据保存在内存中"""

    def __init__(self):
        self.store = {}

    async def get(self, key, as_json=True):
        val = self.store.get(key)
        if not val:
            return None
        return json.loads(val) if as_json else val

    async def set(self, key, value, ex=None):
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False)
        self.store[key] = value

    async def delete(self, key):
        self.store.pop(key, None)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'foodie.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        session.add_all([
            Users(
                id=USER_ID,
                username="laona",
                password=PASSWORD_HASH,
                nickname="老衲",
                realname="Lao Na",
                mobile="13800000000",
                email="laona@foodie.dev",
                sex=1,
                birthday=date(1995, 5, 12),
            ),
            UserAddress(
                id=ADDRESS_ID,
                user_id=USER_ID,
                receiver="张三",
                mobile="13900000000",
                province="浙江省",
                city="杭州市",
                district="西湖区",
                detail="文三路 100 号",
                is_default=YesOrNo.YES.value,
            ),
            Items(id="I1", item_name="红烧肉"),
            Items(id="I2", item_name="蛋黄酥"),
            ItemsImg(id="IMG1", item_id="I1", url="http://img.foodie.dev/i1-main.png", sort=0, is_main=YesOrNo.YES.value),
            ItemsImg(id="IMG2", item_id="I1", url="http://img.foodie.dev/i1-2.png", sort=1, is_main=YesOrNo.NO.value),
            ItemsSpec(id="S1", item_id="I1", name="大份", stock=10, price_normal=1000, price_discount=800),
            ItemsSpec(id="S2", item_id="I2", name="6 枚装", stock=5, price_normal=500, price_discount=400),
            ItemsSpec(id="S3", item_id="I2", name="12 枚装", stock=0, price_normal=900, price_discount=700),
            # 指向不存在的商品
            ItemsSpec(id="S4", item_id="I404", name="失效规格", stock=3, price_normal=100, price_discount=100),
        ])
        await session.commit()
    return session_factory


@pytest.fixture
def order_config():
    return OrderConfig(post_amount=0, close_after_days=1)


@pytest.fixture
def order_service(seeded, order_config):
    return OrderService(session_factory=seeded, config=order_config)


@pytest.fixture
def center_user_service(seeded):
    return CenterUserService(session_factory=seeded)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def cart_service(fake_redis):
    return CartService(redis=fake_redis)


def make_cart_line(spec_id, buy_counts, item_id="I1"):
    return ShopcartBO(item_id=item_id, spec_id=spec_id, buy_counts=buy_counts)


def make_submission(item_spec_ids, **overrides):
    data = {
        "user_id": USER_ID,
        "address_id": ADDRESS_ID,
        "item_spec_ids": item_spec_ids,
        "pay_method": PayMethod.WEIXIN.value,
        "left_msg": "少放辣",
    }
    data.update(overrides)
    return SubmitOrderBO(**data)


@pytest.fixture
def shopcart():
    return [
        make_cart_line("S1", 2, item_id="I1"),
        make_cart_line("S2", 1, item_id="I2"),
        make_cart_line("S3", 1, item_id="I2"),
        make_cart_line("S4", 1, item_id="I404"),
    ]
