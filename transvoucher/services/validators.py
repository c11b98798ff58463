import re
from datetime import date, datetime
from typing import Any, Mapping
from urllib.parse import urlparse

from transvoucher.core.errors import ValidationError

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PAYMENT_STATUSES = (
    "pending",
    "attempting",
    "processing",
    "completed",
    "failed",
    "expired",
    "cancelled",
)
THEMES = ("dark", "light")
LANGUAGES = ("en", "es", "fr", "de", "it", "pt", "ru", "zh", "ja", "ko", "tr", "ka")
BOOLEAN_FIELDS = ("multiple_use", "cancel_on_first_fail", "is_price_dynamic")
URL_FIELDS = ("redirect_url", "success_url", "cancel_url")
OBJECT_FIELDS = ("metadata", "custom_fields", "customer_details")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_date(value: Any) -> bool:
    """YYYY-MM-DD calendar date."""
    if not isinstance(value, str) or not DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_datetime(value: Any) -> bool:
    if is_valid_date(value):
        return True
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value))


def is_valid_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _check_text(errors, data, field, label, max_length, required=False):
    value = data.get(field)
    if value is None or value == "":
        if required:
            errors[field] = [f"{label} is required"]
        return
    if not isinstance(value, str) or len(value) > max_length:
        errors[field] = [f"{label} must be a string with maximum {max_length} characters"]


def validate_create_payment(data: Mapping[str, Any]) -> None:
    errors: dict[str, list[str]] = {}

    amount = data.get("amount")
    if amount is None:
        if not data.get("is_price_dynamic"):
            errors["amount"] = ["Amount is required"]
    elif not is_number(amount) or amount <= 0:
        errors["amount"] = ["Amount must be a positive number"]

    currency = data.get("currency")
    if not currency:
        errors["currency"] = ["Currency is required"]
    elif not isinstance(currency, str) or len(currency) != 3:
        errors["currency"] = ["Currency must be a 3-character string (e.g., USD, EUR)"]

    _check_text(errors, data, "title", "Title", 255, required=True)
    _check_text(errors, data, "description", "Description", 1000)
    _check_text(errors, data, "reference_id", "Reference ID", 255)

    for field in BOOLEAN_FIELDS:
        if field in data and not isinstance(data[field], bool):
            errors[field] = [f"{field.replace('_', ' ').capitalize()} must be a boolean"]

    for field in URL_FIELDS:
        if data.get(field) and not is_valid_url(data[field]):
            errors[field] = [f"{field} must be a valid URL"]

    for field in OBJECT_FIELDS:
        if data.get(field) is not None and not isinstance(data[field], Mapping):
            errors[field] = [f"{field} must be an object"]

    customer = data.get("customer_details")
    if isinstance(customer, Mapping) and customer.get("email"):
        if not is_valid_email(customer["email"]):
            errors["customer_details.email"] = ["Customer email must be a valid email address"]

    if data.get("theme") and data["theme"] not in THEMES:
        errors["theme"] = [f"Theme must be one of: {', '.join(THEMES)}"]

    if data.get("lang") and data["lang"] not in LANGUAGES:
        errors["lang"] = [f"Language must be one of: {', '.join(LANGUAGES)}"]

    if data.get("expires_at") and not is_valid_datetime(data["expires_at"]):
        errors["expires_at"] = ["Expires at must be a valid date"]

    if errors:
        raise ValidationError("Validation failed", errors)


def _is_int_between(value: Any, low: int, high: int = None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value >= low and (high is None or value <= high)


def validate_list_request(params: Mapping[str, Any]) -> None:
    errors: dict[str, list[str]] = {}

    if params.get("page") is not None and not _is_int_between(params["page"], 1):
        errors["page"] = ["Page must be a positive integer"]

    for field in ("per_page", "limit"):
        if params.get(field) is not None and not _is_int_between(params[field], 1, 100):
            errors[field] = [f"{field} must be an integer between 1 and 100"]

    if params.get("status") and params["status"] not in PAYMENT_STATUSES:
        errors["status"] = [f"Status must be one of: {', '.join(PAYMENT_STATUSES)}"]

    currency = params.get("currency")
    if currency and (not isinstance(currency, str) or len(currency) != 3):
        errors["currency"] = ["Currency must be a 3-character string"]

    if params.get("from_date") and not is_valid_date(params["from_date"]):
        errors["from_date"] = ["From date must be a valid date in YYYY-MM-DD format"]

    if params.get("to_date") and not is_valid_date(params["to_date"]):
        errors["to_date"] = ["To date must be a valid date in YYYY-MM-DD format"]

    if params.get("customer_email") and not is_valid_email(params["customer_email"]):
        errors["customer_email"] = ["Customer email must be a valid email address"]

    if params.get("reference") is not None and not isinstance(params["reference"], str):
        errors["reference"] = ["Reference must be a string"]

    if errors:
        raise ValidationError("Validation failed", errors)


def require_identifier(value: Any, field: str, label: str) -> None:
    if not value or not isinstance(value, str):
        raise ValidationError(
            f"{label} is required and must be a string",
            {field: [f"{label} is required and must be a string"]},
        )
