from transvoucher.webhooks.dispatch import create_handler
from transvoucher.webhooks.parser import (
    DEFAULT_TOLERANCE_SECONDS,
    is_event_recent,
    parse_event,
)
from transvoucher.webhooks.schema import EVENT_TYPES, validate_event_structure
from transvoucher.webhooks.signature import (
    SIGNATURE_HEADER,
    extract_signature,
    generate_signature,
    secure_compare,
    sign_headers,
    verify_signature,
)

__all__ = [
    "DEFAULT_TOLERANCE_SECONDS",
    "EVENT_TYPES",
    "SIGNATURE_HEADER",
    "create_handler",
    "extract_signature",
    "generate_signature",
    "is_event_recent",
    "parse_event",
    "secure_compare",
    "sign_headers",
    "validate_event_structure",
    "verify_signature",
]
