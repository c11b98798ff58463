from functools import lru_cache
from urllib.parse import urlparse

from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from transvoucher.core.errors import ValidationError

ENVIRONMENTS = ("sandbox", "production")

SANDBOX_BASE_URL = "https://api-sandbox.transvoucher.com/v1"
PRODUCTION_BASE_URL = "https://api.transvoucher.com/v1"


class Settings(BaseSettings):
    api_key: str = ""
    api_secret: str = ""
    environment: str = "sandbox"
    base_url: str | None = None
    timeout: float = 30.0  # seconds
    webhook_secret: str | None = None

    model_config = {"env_file": ".env", "env_prefix": "TRANSVOUCHER_", "extra": "ignore"}

    def default_base_url(self) -> str:
        if self.environment == "production":
            return PRODUCTION_BASE_URL
        return SANDBOX_BASE_URL

    def resolved_base_url(self) -> str:
        return self.base_url or self.default_base_url()


@lru_cache
def get_settings() -> Settings:
    return Settings()


def is_valid_api_key(api_key) -> bool:
    if not api_key or not isinstance(api_key, str):
        return False
    return len(api_key.strip()) >= 10


def validate_settings(settings: Settings) -> None:
    """
    Raise ValidationError naming every misconfigured field.
    """
    errors: dict[str, list[str]] = {}

    if not settings.api_key:
        errors["api_key"] = ["API key is required"]
    elif not is_valid_api_key(settings.api_key):
        errors["api_key"] = ["API key format is invalid"]

    if settings.environment not in ENVIRONMENTS:
        errors["environment"] = ['Environment must be either "sandbox" or "production"']

    if settings.base_url:
        parsed = urlparse(settings.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors["base_url"] = ["Base URL must be a valid URL"]

    if settings.timeout <= 0:
        errors["timeout"] = ["Timeout must be a positive number"]

    if errors:
        raise ValidationError("Invalid configuration", errors)


def merge_settings(base: Settings, changes) -> Settings:
    """
    Apply ``changes`` on top of ``base`` with full field validation, then
    run the semantic checks of ``validate_settings``.
    """
    try:
        merged = Settings.model_validate({**base.model_dump(), **changes})
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"]) or "settings"
            errors.setdefault(field, []).append(error["msg"])
        raise ValidationError("Invalid configuration", errors) from exc
    validate_settings(merged)
    return merged
