from typing import Any, Optional


class TransVoucherError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.response = response


class ValidationError(TransVoucherError):
    def __init__(
        self,
        message: str,
        errors: Optional[dict[str, list[str]]] = None,
        status_code: Optional[int] = None,
        response: Any = None,
    ):
        super().__init__(message, "VALIDATION_ERROR", status_code, response)
        self.errors = errors or {}


class AuthenticationError(TransVoucherError):
    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: Optional[int] = None,
        response: Any = None,
    ):
        super().__init__(message, "AUTHENTICATION_ERROR", status_code, response)


class ApiError(TransVoucherError):
    def __init__(
        self, message: str, status_code: Optional[int] = None, response: Any = None
    ):
        super().__init__(message, "API_ERROR", status_code, response)


class NetworkError(TransVoucherError):
    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message, "NETWORK_ERROR")
        self.original = original


class MalformedSignatureHeader(TransVoucherError):
    """The signature header is missing or in an unknown format."""

    def __init__(self, message: str):
        super().__init__(message, "MALFORMED_SIGNATURE_HEADER")


class WebhookVerificationError(TransVoucherError):
    """A delivery handed to a webhook handler failed verification."""

    def __init__(self, message: str):
        super().__init__(message, "WEBHOOK_VERIFICATION_ERROR")
