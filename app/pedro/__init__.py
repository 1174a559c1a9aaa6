"""
# @Time    : 2025/10/28 1:55
# @Author  : Pedro
# @File    : __init__.py
# @Software: PyCharm
"""
from .db import get_session_factory, BaseModel
from .exception import APIException, NotFound, ParameterError, Conflict
