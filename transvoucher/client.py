import logging
from collections.abc import Mapping
from typing import Optional

import httpx

from transvoucher import webhooks
from transvoucher.core.config import (
    Settings,
    get_settings,
    is_valid_api_key,
    merge_settings,
)
from transvoucher.core.errors import TransVoucherError
from transvoucher.http.client import HttpClient
from transvoucher.services.commodity import CommodityService
from transvoucher.services.currency import CurrencyService
from transvoucher.services.network import NetworkService
from transvoucher.services.payment import PaymentService
from transvoucher.webhooks.dispatch import EventHandler, WebhookHandler

logger = logging.getLogger(__name__)

# Changing any of these requires a new connection pool
TRANSPORT_FIELDS = {"api_key", "api_secret", "environment", "base_url", "timeout"}


def _check_fields(changes) -> None:
    unknown = set(changes) - set(Settings.model_fields)
    if unknown:
        raise TypeError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")


class TransVoucher:
    """
    Entry point of the SDK.

    Settings come from ``settings`` when given, otherwise from the
    environment (``TRANSVOUCHER_*``); keyword overrides win over both.
    """

    webhooks = webhooks

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides,
    ):
        _check_fields(overrides)
        base = settings if settings is not None else get_settings()
        self._settings = merge_settings(base, overrides)

        self._http = HttpClient(self._settings, transport=transport)
        self.payments = PaymentService(self._http)
        self.currencies = CurrencyService(self._http)
        self.networks = NetworkService(self._http)
        self.commodities = CommodityService(self._http)

    @classmethod
    def sandbox(cls, api_key: str, api_secret: str = "", **options) -> "TransVoucher":
        return cls(
            Settings(api_key=api_key, api_secret=api_secret, environment="sandbox"),
            **options,
        )

    @classmethod
    def production(cls, api_key: str, api_secret: str = "", **options) -> "TransVoucher":
        return cls(
            Settings(api_key=api_key, api_secret=api_secret, environment="production"),
            **options,
        )

    @staticmethod
    def validate_api_key(api_key) -> bool:
        return is_valid_api_key(api_key)

    def get_config(self) -> Settings:
        return self._settings.model_copy()

    def update_config(self, **changes) -> None:
        _check_fields(changes)
        updated = merge_settings(self._settings, changes)
        self._settings = updated
        if TRANSPORT_FIELDS & changes.keys():
            logger.info("Rebuilding HTTP client after configuration change")
            self._http.update_settings(updated)
        else:
            self._http.settings = updated

    @property
    def environment(self) -> str:
        return self._settings.environment

    def switch_environment(self, environment: str) -> None:
        self.update_config(environment=environment)

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def is_production(self) -> bool:
        return self.environment == "production"

    def is_sandbox(self) -> bool:
        return self.environment == "sandbox"

    def create_webhook_handler(
        self,
        handlers: Mapping[str, EventHandler],
        secret: Optional[str] = None,
    ) -> WebhookHandler:
        secret = secret or self._settings.webhook_secret
        if not secret:
            raise TransVoucherError("A webhook secret is required", "CONFIGURATION_ERROR")
        return webhooks.create_handler(secret, handlers)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TransVoucher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
