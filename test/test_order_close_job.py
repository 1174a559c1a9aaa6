"""
# @Time    : 2025/11/17 11:52
# @Author  : Pedro
# @File    : test_order_close_job.py
# @Software: PyCharm
"""
import asyncio

from app.extension.scheduler.order_close_job import OrderCloseJobService


class RecordingOrderService:

    def __init__(self, fail=False):
        self.calls = 0
        self.fail = fail

    async def close_order(self):
        self.calls += 1
        if self.fail:
            raise RuntimeError("db down")


class TestOrderCloseJob:

    async def test_run_once_calls_close_order(self):
        order_service = RecordingOrderService()
        job = OrderCloseJobService(order_service=order_service, enabled=False)

        await job.run_once()

        assert order_service.calls == 1

    async def test_run_once_survives_failures(self):
        order_service = RecordingOrderService(fail=True)
        job = OrderCloseJobService(order_service=order_service, enabled=False)

        await job.run_once()
        await job.run_once()

        assert order_service.calls == 2

    async def test_disabled_job_does_not_start(self):
        order_service = RecordingOrderService()
        job = OrderCloseJobService(order_service=order_service, enabled=False)

        await job.init()

        assert job._task is None
        assert order_service.calls == 0

    async def test_enabled_job_runs_until_closed(self):
        order_service = RecordingOrderService()
        job = OrderCloseJobService(order_service=order_service, interval=0.01, enabled=True)

        await job.init()
        for _ in range(50):
            if order_service.calls >= 2:
                break
            await asyncio.sleep(0.01)
        await job.close()

        assert order_service.calls >= 2
        assert job._task is None
