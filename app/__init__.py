# -*- coding: utf-8 -*-
"""
FastAPI 应用初始化入口 (Pedro-Core 适配版)
--------------------------------------------
✅ lifespan 模式 (替代 on_event)
✅ 模块自动注册 (蓝图)
✅ Redis / 关单任务 初始化
✅ 日志 / CORS / 异常 / 配置加载
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.config.settings_manager import get_current_settings, init_settings
from app.pedro.logger import logger


# ======================================================
# 🧱 注册模块与服务
# ======================================================
def register_blueprints(app: FastAPI):
    """注册 API 模块（原 Flask 蓝图）"""
    from app.api import register_blueprint
    register_blueprint(app)
    logger.info("✅ 已注册 API 模块: v1")


def register_cors(app: FastAPI):
    """注册 CORS 中间件"""
    from fastapi.middleware.cors import CORSMiddleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("✅ CORS 中间件已启用")


def register_exception_handlers(app: FastAPI):
    """注册全局异常"""
    from app.pedro.exception import register_exception_handlers
    register_exception_handlers(app)
    logger.info("✅ 异常处理器已注册")


def register_logger(app: FastAPI):
    """统一日志系统"""
    from app.pedro.logger import setup_logger
    setup_logger(app, debug=get_current_settings().app.debug)
    logger.info("✅ 日志系统初始化完成")


async def init_database():
    """开发环境（sqlite）自动建表"""
    from app.pedro.db import create_all_tables
    import app.api.v1.model  # noqa: F401  注册所有表到 Base.metadata

    settings = get_current_settings()
    if settings.database.url.startswith("sqlite"):
        await create_all_tables()
        logger.info("🗄️ sqlite 数据表已就绪")


# ======================================================
# 🧬 lifespan 生命周期管理器
# ======================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """统一管理 startup / shutdown"""
    from app.pedro.service_manager import service

    # ---- startup 阶段 ----
    logger.info("🚀 FastAPI 启动中，正在初始化模块...")
    await init_database()

    # Redis / 关单任务 等 BaseService
    await service.init_all()
    logger.info("✅ 所有模块初始化完成，系统启动成功。")

    yield

    # ---- shutdown 阶段 ----
    logger.info("🧹 FastAPI 正在关闭中，清理资源...")
    await service.close_all()


# ======================================================
# 🏗️ 应用工厂
# ======================================================
def create_app() -> FastAPI:
    """构建 FastAPI 实例并注册所有依赖"""
    settings = get_current_settings()
    # ✅ 根据环境动态关闭 Swagger
    docs_url = "/docs" if settings.app.debug else None
    redoc_url = "/redoc" if settings.app.debug else None
    openapi_url = "/openapi.json" if settings.app.debug else None

    app = FastAPI(
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        title=settings.app.name,
        version=settings.app.version,
        description="Foodie order service built on Pedro-Core FastAPI",
        debug=settings.app.debug,
        lifespan=lifespan,
    )

    init_settings(app)
    register_cors(app)
    register_logger(app)
    register_blueprints(app)
    register_exception_handlers(app)

    logger.info(settings.summary())
    logger.info(f"✅ Pedro-Core FastAPI 初始化完成 | 环境: {settings.app.env}")
    return app
