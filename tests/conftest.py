import hashlib
import hmac
import json
import logging
import os

import pytest

# Set test environment variables
os.environ.update(
    {
        "TRANSVOUCHER_API_KEY": "test-api-key-123456789",
        "TRANSVOUCHER_API_SECRET": "test-secret-1234567890",
        "TRANSVOUCHER_ENVIRONMENT": "sandbox",
        "TRANSVOUCHER_WEBHOOK_SECRET": "s3cr3t",
    }
)
os.environ.pop("TRANSVOUCHER_BASE_URL", None)

from transvoucher import TransVoucher
from transvoucher.core.config import SANDBOX_BASE_URL, Settings, get_settings

logger = logging.getLogger(__name__)

BASE_URL = SANDBOX_BASE_URL
WEBHOOK_SECRET = "s3cr3t"


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def make_event(event_type: str = "payment_intent.succeeded", **overrides) -> dict:
    event = {
        "event": event_type,
        "timestamp": "2024-01-01T00:00:00Z",
        "data": {
            "transaction": {
                "id": "tx_1",
                "amount": 10,
                "currency": "USD",
                "status": "succeeded",
            }
        },
    }
    event.update(overrides)
    return event


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def secret() -> str:
    return WEBHOOK_SECRET


@pytest.fixture
def event_body() -> bytes:
    return json.dumps(make_event()).encode()


@pytest.fixture
async def client():
    tv = TransVoucher.sandbox("test-api-key-123456789", "test-secret-1234567890")
    yield tv
    await tv.aclose()
