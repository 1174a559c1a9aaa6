# -*- coding: utf-8 -*-
"""
# @Time    : 2025/11/16 05:02
# @Author  : Pedro
# @File    : order_close_job.py
# @Software: PyCharm
"""
import asyncio
from typing import Optional

from app.config.settings_manager import get_current_settings
from app.pedro.logger import logger
from app.pedro.service_manager import BaseService


class OrderCloseJobService(BaseService):
    """
    ⏳ 定时关闭超时未支付订单
    由 ServiceManager 在 lifespan 中启动，按 order.close_interval_seconds 周期执行
    """
    name = "order_close_job"

    def __init__(self, order_service=None, interval: Optional[float] = None, enabled: Optional[bool] = None):
        settings = get_current_settings()
        self.order_service = order_service
        self.interval = interval if interval is not None else settings.order.close_interval_seconds
        self.enabled = enabled if enabled is not None else settings.order.close_job_enabled
        self._task: Optional[asyncio.Task] = None

    async def init(self):
        if not self.enabled:
            logger.info("⏸️ 关单任务未启用 (order.close_job_enabled=false)")
            return
        if self.order_service is None:
            from app.api.v1.services.order_service import OrderService
            self.order_service = OrderService()
        self._task = asyncio.create_task(self._loop())
        logger.info(f"⏳ 关单任务已启动 interval={self.interval}s")

    async def run_once(self):
        try:
            await self.order_service.close_order()
        except Exception:
            logger.exception("⚠️ 关单任务执行失败")

    async def _loop(self):
        while True:
            await self.run_once()
            await asyncio.sleep(self.interval)

    async def close(self):
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("🛑 关单任务已停止")
