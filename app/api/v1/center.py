# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/14 21:30
# @Author  : Pedro
# @File    : center.py
# @Software: PyCharm
"""
from fastapi import APIRouter, Depends, Query

from app.api.v1.schema.user import CenterUserVO
from app.api.v1.services.center_user_service import CenterUserService
from app.pedro.response import PedroResponse

rp = APIRouter(prefix="/center", tags=["用户中心"])


def get_center_user_service() -> CenterUserService:
    return CenterUserService()


@rp.get("/userInfo", name="获取用户信息")
async def user_info(
        user_id: str = Query(..., alias="userId"),
        center_user_service: CenterUserService = Depends(get_center_user_service),
):
    user = await center_user_service.query_user_info(user_id)
    return PedroResponse.success(data=user, schema=CenterUserVO)
