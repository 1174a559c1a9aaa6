# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/10 14:40
# @Author  : Pedro
# @File    : items.py
# @Software: PyCharm
"""
from sqlalchemy import Column, Integer, SmallInteger, String, Text, ForeignKey

from app.pedro.enums import YesOrNo
from app.pedro.interface import InfoCrud


class Items(InfoCrud):
    """商品主表"""

    __tablename__ = "items"

    item_name = Column(String(32), nullable=False, comment="商品名称")
    cat_id = Column(Integer, comment="分类ID")
    root_cat_id = Column(Integer, comment="一级分类ID")
    sell_counts = Column(Integer, nullable=False, default=0, comment="累计销售")
    on_off_status = Column(SmallInteger, nullable=False, default=YesOrNo.YES.value, comment="上下架状态")
    content = Column(Text, comment="商品内容")


class ItemsSpec(InfoCrud):
    """商品规格（每个规格有独立的价格与库存），金额单位：分"""

    __tablename__ = "items_spec"

    item_id = Column(String(64), ForeignKey("items.id"), nullable=False, index=True)
    name = Column(String(32), nullable=False, comment="规格名称")
    stock = Column(Integer, nullable=False, default=0, comment="库存")
    discounts = Column(String(8), default="1.00", comment="折扣力度")
    price_discount = Column(Integer, nullable=False, comment="优惠价")
    price_normal = Column(Integer, nullable=False, comment="原价")


class ItemsImg(InfoCrud):
    """商品图片"""

    __tablename__ = "items_img"

    item_id = Column(String(64), ForeignKey("items.id"), nullable=False, index=True)
    url = Column(String(255), nullable=False, comment="图片地址")
    sort = Column(Integer, nullable=False, default=0, comment="顺序")
    is_main = Column(SmallInteger, nullable=False, default=YesOrNo.NO.value, comment="是否主图")
