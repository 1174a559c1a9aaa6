"""
# @Time    : 2025/11/16 02:30
# @Author  : Pedro
# @File    : __init__.py
# @Software: PyCharm
"""
from .items import Items, ItemsSpec, ItemsImg
from .orders import Orders, OrderItems, OrderStatus
from .user_address import UserAddress
from .users import Users
