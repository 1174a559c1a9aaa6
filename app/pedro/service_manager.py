"""
Pedro-Core | 通用服务注册与动态加载模块
------------------------------------
✅ 自动扫描 app/extension 下的所有服务类
✅ 每个服务继承 BaseService 即可自动注册
✅ 支持 FastAPI 生命周期自动启动与关闭
"""

import inspect
import pkgutil
import importlib
from typing import Dict

from app.pedro.logger import logger


class BaseService:
    """所有服务模块的基类"""
    name: str = "base"

    async def init(self):
        """初始化逻辑"""
        raise NotImplementedError

    async def close(self):
        """关闭逻辑"""
        pass


class ServiceManager:
    """统一的服务管理器"""
    _services: Dict[str, BaseService] = {}

    # ======================================================
    # 初始化加载
    # ======================================================
    @classmethod
    async def init_all(cls, package_name: str = "app.extension"):
        """递归扫描 app/extension 下的服务模块"""
        logger.info(f"🔍 ServiceManager: 正在递归扫描 {package_name} 下的服务模块...")
        package = importlib.import_module(package_name)

        for module_info in pkgutil.walk_packages(package.__path__, prefix=f"{package_name}."):
            try:
                module = importlib.import_module(module_info.name)
                for attr_name in dir(module):
                    obj = getattr(module, attr_name)
                    if (
                            inspect.isclass(obj)
                            and issubclass(obj, BaseService)
                            and obj is not BaseService
                            and obj.__module__ == module.__name__
                            and obj.name not in cls._services
                    ):
                        instance = obj()
                        await instance.init()
                        cls._services[obj.name] = instance
                        logger.info(f"✅ 已加载服务: {obj.name}")
            except Exception:
                logger.exception(f"⚠️ 加载服务模块失败: {module_info.name}")

    # ======================================================
    # 关闭所有服务
    # ======================================================
    @classmethod
    async def close_all(cls):
        """关闭所有服务"""
        for name, service in list(cls._services.items()):
            try:
                await service.close()
                logger.info(f"🛑 已关闭服务: {name}")
            except Exception:
                logger.exception(f"⚠️ 关闭服务 {name} 失败")
        cls._services.clear()


# 单例实例
service = ServiceManager()
