"""
API 注册入口
"""
from app.api.v1 import create_v1


def register_blueprint(app):
    v1_router = create_v1()
    app.include_router(v1_router)
