"""
# @Time    : 2025/11/16 03:10
# @Author  : Pedro
# @File    : order.py
# @Software: PyCharm
"""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """前端 / Redis 中均为驼峰字段"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ShopcartBO(CamelModel):
    """购物车中的一行（Redis 缓存）"""
    item_id: str
    item_img_url: Optional[str] = None
    item_name: Optional[str] = None
    spec_id: str
    spec_name: Optional[str] = None
    buy_counts: int = Field(gt=0)
    price_discount: Optional[int] = None
    price_normal: Optional[int] = None


class SubmitOrderBO(CamelModel):
    user_id: str
    address_id: str
    # 逗号分隔的规格 ID
    item_spec_ids: str
    pay_method: int
    left_msg: Optional[str] = Field(default=None, max_length=128)

    def spec_id_list(self) -> List[str]:
        return [s.strip() for s in self.item_spec_ids.split(",") if s.strip()]


class MerchantOrdersVO(CamelModel):
    """交给支付中心的商户订单"""
    merchant_order_id: str
    merchant_user_id: str
    amount: int
    pay_method: int
    return_url: Optional[str] = None


class OrderVO(CamelModel):
    order_id: str
    merchant_orders_vo: MerchantOrdersVO
    # 下单成功后需要从购物车移除的商品
    shopcart_list: List[ShopcartBO] = []


class OrderStatusVO(CamelModel):
    order_id: str
    order_status: int
    created_time: Optional[datetime] = None
    pay_time: Optional[datetime] = None
    deliver_time: Optional[datetime] = None
    success_time: Optional[datetime] = None
    close_time: Optional[datetime] = None
    comment_time: Optional[datetime] = None
