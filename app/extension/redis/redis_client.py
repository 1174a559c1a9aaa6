"""
Pedro-Core | Redis 异步客户端（服务封装）
---------------------------------------------------
✅ 自动延迟初始化
✅ JSON 自动序列化/反序列化
✅ 与 ServiceManager 集成（RedisService）
"""

import json
import redis.asyncio as aioredis
from typing import Any, Optional
from app.config.settings_manager import get_current_settings
from app.pedro.logger import logger
from app.pedro.service_manager import BaseService


class RedisClient:
    def __init__(self):
        self.client: Optional[aioredis.Redis] = None
        self._initialized = False

    # ===========================================================
    # 🔧 自动初始化逻辑
    # ===========================================================
    async def _ensure_client(self):
        """确保 Redis 客户端已连接（延迟初始化）"""
        if self._initialized and self.client:
            return self.client
        settings = get_current_settings()
        redis_url = settings.redis.url
        self.client = aioredis.from_url(redis_url, decode_responses=True)
        self._initialized = True
        logger.info(f"🔴 Redis 客户端已创建: {redis_url}")
        return self.client

    async def instance(self):
        """外部调用统一接口"""
        return await self._ensure_client()

    # ===========================================================
    # 🧩 通用 CRUD 操作
    # ===========================================================
    async def set(self, key: str, value: Any, ex: Optional[int] = None):
        """设置键值，可选过期时间"""
        client = await self._ensure_client()
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False)
        await client.set(key, value, ex=ex)

    async def get(self, key: str, as_json: bool = True):
        """获取键值（支持自动 JSON 解码）"""
        client = await self._ensure_client()
        val = await client.get(key)
        if not val:
            return None
        if as_json:
            try:
                return json.loads(val)
            except json.JSONDecodeError:
                return val
        return val

    async def delete(self, key: str):
        client = await self._ensure_client()
        await client.delete(key)

    async def close(self):
        if self.client:
            await self.client.aclose()
            self.client = None
            self._initialized = False
            logger.info("🛑 Redis 已断开连接")


# ===========================================================
# ✅ RedisService 封装
# ===========================================================
class RedisService(BaseService):
    """
    Pedro-Core | RedisService
    --------------------------------------------------
    ✅ 可由 ServiceManager 扫描与生命周期管理
    ✅ 与全局 rds 共用同一个连接
    """
    name = "redis"

    async def init(self):
        """初始化并验证连接"""
        client = await rds.instance()
        try:
            await client.ping()
            logger.info("✅ RedisService 初始化完成")
        except aioredis.RedisError as e:
            logger.warning(f"⚠️ Redis 暂不可用，将在首次使用时重试: {e}")

    async def close(self):
        await rds.close()


# 单例实例（全局兼容）
rds = RedisClient()
