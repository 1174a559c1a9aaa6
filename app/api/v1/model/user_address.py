# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/15 03:35
# @Author  : Pedro
# @File    : user_address.py
# @Software: PyCharm
"""
from typing import Optional

from sqlalchemy import String, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from app.pedro.enums import YesOrNo
from app.pedro.interface import InfoCrud


class UserAddress(InfoCrud):
    """
    📍 用户收货地址 Model
    --------------------
    支持:
    - 多地址
    - 默认地址
    """

    __tablename__ = "user_address"

    # 所属用户
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # 收件人
    receiver: Mapped[str] = mapped_column(String(32), nullable=False)
    mobile: Mapped[str] = mapped_column(String(32), nullable=False)

    # 省 / 市 / 区 / 详细地址
    province: Mapped[str] = mapped_column(String(32), nullable=False)
    city: Mapped[str] = mapped_column(String(32), nullable=False)
    district: Mapped[str] = mapped_column(String(32), nullable=False)
    detail: Mapped[str] = mapped_column(String(128), nullable=False)

    extand: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)

    # 默认地址
    is_default: Mapped[int] = mapped_column(SmallInteger, default=YesOrNo.NO.value)

    @property
    def full_address(self) -> str:
        return f"{self.province} {self.city} {self.district} {self.detail}"
