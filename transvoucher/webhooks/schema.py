"""Structural validation of decoded webhook events.

Checks run in a fixed order and stop at the first violation, so the
reason always names a single field.
"""

import math
from typing import Any

from transvoucher.schemas.webhook import ValidationOutcome

PAYMENT_EVENT_TYPES = (
    "payment_intent.created",
    "payment_intent.attempting",
    "payment_intent.processing",
    "payment_intent.succeeded",
    "payment_intent.failed",
    "payment_intent.cancelled",
    "payment_intent.expired",
)
HEALTH_CHECK_EVENT = "system.health_check"

EVENT_TYPES = PAYMENT_EVENT_TYPES + (HEALTH_CHECK_EVENT,)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _validate_transaction(data: dict) -> ValidationOutcome:
    transaction = data.get("transaction")
    if not isinstance(transaction, dict):
        return ValidationOutcome.invalid("Event data must include a valid transaction")

    if not _is_text(transaction.get("id")):
        return ValidationOutcome.invalid("Transaction data must have a valid ID")

    amount = transaction.get("amount")
    if not _is_number(amount) or amount <= 0:
        return ValidationOutcome.invalid("Transaction data must have a valid amount")

    if not _is_text(transaction.get("currency")):
        return ValidationOutcome.invalid("Transaction data must have a valid currency")

    if not _is_text(transaction.get("status")):
        return ValidationOutcome.invalid("Transaction data must have a valid status")

    return ValidationOutcome.valid()


def _validate_health_check(data: dict) -> ValidationOutcome:
    if not isinstance(data.get("message"), str):
        return ValidationOutcome.invalid("Health check data must have a valid message")

    channel = data.get("sales_channel_id")
    if isinstance(channel, bool) or not isinstance(channel, int):
        return ValidationOutcome.invalid(
            "Health check data must have a valid sales_channel_id"
        )

    return ValidationOutcome.valid()


def validate_event_structure(decoded: Any) -> ValidationOutcome:
    if not isinstance(decoded, dict):
        return ValidationOutcome.invalid("Event data must be an object")

    if "id" in decoded and not _is_text(decoded["id"]):
        return ValidationOutcome.invalid("Event must have a valid ID")

    event_type = decoded.get("event")
    if not _is_text(event_type):
        return ValidationOutcome.invalid("Event must have a valid type")
    if event_type not in EVENT_TYPES:
        return ValidationOutcome.invalid(f"Invalid event type: {event_type}")

    data = decoded.get("data")
    if not isinstance(data, dict):
        return ValidationOutcome.invalid("Event must have valid data")

    if not _is_text(decoded.get("timestamp")):
        return ValidationOutcome.invalid("Event must have a valid timestamp")

    if event_type == HEALTH_CHECK_EVENT:
        return _validate_health_check(data)
    return _validate_transaction(data)
