# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/14 21:08
# @Author  : Pedro
# @File    : users.py
# @Software: PyCharm
"""
from sqlalchemy import Column, String, SmallInteger, Date

from app.pedro.interface import InfoCrud


class Users(InfoCrud):
    """前台用户，password 只存哈希，任何对外返回前必须清空"""

    __tablename__ = "users"

    username = Column(String(32), nullable=False, unique=True, index=True, comment="用户名")
    password = Column(String(64), nullable=False, comment="密码哈希")
    nickname = Column(String(32), comment="昵称")
    realname = Column(String(128), comment="真实姓名")
    face = Column(String(255), comment="头像")
    mobile = Column(String(32), comment="手机号")
    email = Column(String(32), comment="邮箱")
    sex = Column(SmallInteger, default=2, comment="性别 1:男 0:女 2:保密")
    birthday = Column(Date, comment="生日")
