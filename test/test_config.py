"""
# @Time    : 2025/11/17 15:02
# @Author  : Pedro
# @File    : test_config.py
# @Software: PyCharm
"""
from app.pedro.config import Settings, deep_merge, substitute_env_vars


def test_deep_merge_keeps_defaults():
    base = {"order": {"post_amount": 0, "close_after_days": 1}}
    merged = deep_merge(base, {"order": {"post_amount": 1000}})

    assert merged == {"order": {"post_amount": 1000, "close_after_days": 1}}
    assert base["order"]["post_amount"] == 0


def test_substitute_env_vars(monkeypatch):
    monkeypatch.setenv("PAYMENT_PASSWORD", "s3cret")
    monkeypatch.delenv("PAYMENT_MERCHANT_USER_ID", raising=False)

    data = substitute_env_vars({
        "payment": {
            "password": "${PAYMENT_PASSWORD}",
            "merchant_user_id": "${PAYMENT_MERCHANT_USER_ID}",
        },
        "hosts": ["redis://${PAYMENT_PASSWORD}@localhost"],
    })

    assert data["payment"]["password"] == "s3cret"
    assert data["payment"]["merchant_user_id"] == ""
    assert data["hosts"] == ["redis://s3cret@localhost"]


def test_dev_yaml_is_loaded(monkeypatch):
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("PAYMENT_PASSWORD", "s3cret")

    settings = Settings()

    assert settings.app.port == 8088
    assert settings.database.url.startswith("sqlite+aiosqlite")
    assert settings.order.close_after_days == 1
    assert settings.payment.password == "s3cret"
    assert "s3cret" not in settings.summary()
