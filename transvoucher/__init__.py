__version__ = "1.0.0"

from transvoucher.client import TransVoucher
from transvoucher.core.config import Settings, get_settings
from transvoucher.core.errors import (
    ApiError,
    AuthenticationError,
    MalformedSignatureHeader,
    NetworkError,
    TransVoucherError,
    ValidationError,
    WebhookVerificationError,
)
from transvoucher.http.client import HttpClient
from transvoucher.schemas.api import ApiResponse, RequestOptions
from transvoucher.schemas.catalog import Commodity, Currency, Network
from transvoucher.schemas.payments import (
    ConversionRate,
    Payment,
    PaymentList,
    TransactionData,
)
from transvoucher.schemas.webhook import VerificationResult
from transvoucher.services.commodity import CommodityService
from transvoucher.services.currency import CurrencyService
from transvoucher.services.network import NetworkService
from transvoucher.services.payment import PaymentService

__all__ = [
    "ApiError",
    "ApiResponse",
    "AuthenticationError",
    "Commodity",
    "CommodityService",
    "ConversionRate",
    "Currency",
    "CurrencyService",
    "HttpClient",
    "MalformedSignatureHeader",
    "Network",
    "NetworkError",
    "NetworkService",
    "Payment",
    "PaymentList",
    "PaymentService",
    "RequestOptions",
    "Settings",
    "TransVoucher",
    "TransVoucherError",
    "TransactionData",
    "ValidationError",
    "VerificationResult",
    "WebhookVerificationError",
    "get_settings",
]
