# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/28
@Author  : Pedro
@File    : config.py
@Software: PyCharm

Pedro-Core Config System
---------------------------------------------------
✅ 自动加载根目录 .env
✅ YAML 支持 ${ENV_VAR} 占位符解析
✅ 自动根据 APP_ENV 加载 dev.yaml / production.yaml
✅ 深度递归合并配置（不会丢失默认值）
✅ 线程安全单例 + FastAPI 注册
"""

import os
import re
import yaml
import threading
from functools import lru_cache
from typing import Optional, Any, Dict
from fastapi import FastAPI
from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# ======================================================
# 🔧 加载 .env 文件
# ======================================================
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))
ENV_PATH = os.path.join(BASE_DIR, ".env")
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH, override=True)


# ======================================================
# 🧩 内置基础配置模型
# ======================================================
class AppConfig(BaseModel):
    name: str = "Foodie-Order"
    version: str = "0.1.0"
    env: str = "dev"
    debug: bool = True
    log_level: str = "DEBUG"
    timezone: str = "Asia/Shanghai"
    host: str = "127.0.0.1"
    port: int = 8088


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///./foodie.db"
    echo: bool = False


class RedisConfig(BaseModel):
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    redis_url: Optional[str] = None

    @property
    def url(self):
        if self.redis_url:
            return self.redis_url
        if self.password:
            return f"redis://:{self.password}@{self.host}:{self.port}/{self.db}"
        return f"redis://{self.host}:{self.port}/{self.db}"


class OrderConfig(BaseModel):
    # 邮费（默认包邮）
    post_amount: int = 0
    # 未支付订单超过 N 天自动关闭
    close_after_days: int = 1
    close_job_enabled: bool = False
    close_interval_seconds: int = 3600


class PaymentConfig(BaseModel):
    center_url: str = "http://payment.t.mukewang.com/foodie-payment/payment/createMerchantOrder"
    return_url: str = "http://localhost:8088/v1/orders/notifyMerchantOrderPaid"
    merchant_user_id: str = ""
    password: str = ""
    timeout: float = 10.0


# ======================================================
# 🧠 工具函数
# ======================================================
def deep_merge(base: dict, override: dict) -> dict:
    """递归合并字典"""
    result = base.copy()
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def substitute_env_vars(value: Any) -> Any:
    """解析 ${VAR} 变量"""
    if isinstance(value, str):
        matches = re.findall(r"\$\{([^}^{]+)\}", value)
        for var in matches:
            # 未设置的变量替换为空串
            value = value.replace(f"${{{var}}}", os.getenv(var, ""))
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]
    return value


def load_yaml_config(env: str) -> Dict[str, Any]:
    """加载 YAML 配置文件并解析环境变量"""
    config_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../config"))
    file_path = os.path.join(config_dir, f"{env}.yaml")
    if not os.path.exists(file_path):
        return {}

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return substitute_env_vars(data)


# ======================================================
# 🌍 Settings 主配置类
# ======================================================
class Settings(BaseSettings):
    app: AppConfig = AppConfig()
    database: DatabaseConfig = DatabaseConfig()
    redis: RedisConfig = RedisConfig()
    order: OrderConfig = OrderConfig()
    payment: PaymentConfig = PaymentConfig()

    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="allow")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        env = os.getenv("APP_ENV", self.app.env or "dev")
        yaml_data = load_yaml_config(env)

        # ✅ 自动递归更新现有模块
        for field_name in type(self).model_fields:
            section = yaml_data.get(field_name)
            current_val = getattr(self, field_name)
            if section and isinstance(current_val, BaseModel):
                merged = deep_merge(current_val.model_dump(), section)
                setattr(self, field_name, type(current_val)(**merged))

    def summary(self) -> str:
        """配置概要（用于启动日志）"""
        lines = [f"[{self.app.env}] {self.app.name} 配置概览："]
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, BaseModel):
                dumped = value.model_dump()
                if "password" in dumped:
                    dumped["password"] = "******"
                lines.append(f"  {name}: {dumped}")
        return "\n".join(lines)


# ======================================================
# 🧷 单例实例
# ======================================================
_settings_instance: Optional[Settings] = None
_settings_lock = threading.Lock()


@lru_cache()
def get_settings() -> Settings:
    """加载配置（带缓存）"""
    return Settings()


def get_current_settings() -> Settings:
    """线程安全全局访问"""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = get_settings()
    return _settings_instance


def init_settings(app: Optional[FastAPI] = None) -> Settings:
    """注册 FastAPI"""
    settings = get_current_settings()
    if app:
        app.state.settings = settings
    return settings
