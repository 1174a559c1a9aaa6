"""
Pedro-Core Settings Manager (Safe Lazy Import)
--------------------------------
✅ 支持全局单例访问
✅ 自动注册到 FastAPI
✅ 彻底避免 config ↔ pedro 循环导入
"""

from typing import Optional
from fastapi import FastAPI


def init_settings(app: Optional[FastAPI] = None) -> "Settings":
    """
    初始化并注册 settings。
    - 若已存在实例，则复用；
    - 若传入 app，则注册到 app.state；
    """
    # ✅ 延迟导入，防止循环
    from app.pedro.config import init_settings as _init
    return _init(app)


def get_current_settings() -> "Settings":
    """
    从任意模块安全地获取当前 settings 实例。
    如果尚未初始化，会自动调用 get_settings()。
    """
    from app.pedro.config import get_current_settings as _current
    return _current()
