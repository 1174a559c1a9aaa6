"""
# @Time    : 2025/11/17 11:05
# @Author  : Pedro
# @File    : test_center_user_service.py
# @Software: PyCharm
"""
import pytest

from app.api.v1.model import Users
from app.pedro.exception import UserNotFound
from conftest import PASSWORD_HASH, USER_ID


class TestQueryUserInfo:

    async def test_password_is_cleared(self, center_user_service):
        user = await center_user_service.query_user_info(USER_ID)

        assert user.id == USER_ID
        assert user.username == "laona"
        assert user.nickname == "老衲"
        assert user.password is None

    async def test_stored_hash_is_untouched(self, center_user_service, seeded):
        await center_user_service.query_user_info(USER_ID)

        async with seeded() as session:
            user = await Users.get(session, USER_ID)
        assert user.password == PASSWORD_HASH

    async def test_unknown_user(self, center_user_service):
        with pytest.raises(UserNotFound):
            await center_user_service.query_user_info("U404")
