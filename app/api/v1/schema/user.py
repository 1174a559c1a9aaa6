"""
# @Time    : 2025/11/14 21:20
# @Author  : Pedro
# @File    : user.py
# @Software: PyCharm
"""
from datetime import date, datetime
from typing import Optional

from app.api.v1.schema.order import CamelModel


class CenterUserVO(CamelModel):
    """用户中心 - 用户信息（不含密码）"""
    id: str
    username: str
    nickname: Optional[str] = None
    realname: Optional[str] = None
    face: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    sex: Optional[int] = None
    birthday: Optional[date] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
