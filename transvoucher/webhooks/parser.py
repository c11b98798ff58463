import json
import logging
import math
import time
from datetime import datetime, timezone
from typing import Optional, Union

from transvoucher.schemas.webhook import VerificationResult
from transvoucher.webhooks.schema import validate_event_structure
from transvoucher.webhooks.signature import Payload, Secret, verify_signature

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 300  # 5 minutes


def parse_event(payload: Payload, signature: str, secret: Secret) -> VerificationResult:
    """
    Verify, decode and structurally validate a webhook delivery.

    Every failure is reported through the returned result; nothing raises.
    The payload is only decoded once its signature has been verified.
    """
    if not verify_signature(payload, signature, secret):
        logger.warning("Rejected webhook delivery: invalid signature")
        return VerificationResult.rejected("Invalid webhook signature")

    try:
        if isinstance(payload, (bytes, bytearray)):
            payload = payload.decode("utf-8")
        decoded = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        logger.warning(f"Rejected webhook delivery: undecodable payload ({exc})")
        return VerificationResult.rejected(str(exc) or "Failed to parse webhook event")

    outcome = validate_event_structure(decoded)
    if not outcome.is_valid:
        logger.warning(f"Rejected webhook delivery: {outcome.reason}")
        return VerificationResult.rejected(outcome.reason)

    logger.info(f"Accepted webhook event {decoded['event']}")
    return VerificationResult.accepted(decoded)


def _to_epoch_seconds(timestamp: Union[str, int, float]) -> float:
    if isinstance(timestamp, bool):
        raise TypeError("timestamp must be a string or a number")
    if isinstance(timestamp, (int, float)):
        if not math.isfinite(timestamp):
            raise ValueError("timestamp must be finite")
        return float(timestamp)
    if isinstance(timestamp, str):
        parsed = datetime.fromisoformat(timestamp.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp()
    raise TypeError("timestamp must be a string or a number")


def is_event_recent(
    timestamp: Union[str, int, float],
    tolerance_seconds: float = DEFAULT_TOLERANCE_SECONDS,
    now: Optional[float] = None,
) -> bool:
    """
    Whether ``timestamp`` (ISO-8601 string or epoch seconds) lies within
    ``tolerance_seconds`` of ``now`` in either direction.

    Unparseable timestamps are never recent.
    """
    try:
        event_time = _to_epoch_seconds(timestamp)
    except (TypeError, ValueError, OverflowError):
        return False

    current = time.time() if now is None else now
    return abs(current - event_time) <= tolerance_seconds
