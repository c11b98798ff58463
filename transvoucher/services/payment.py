import logging
from typing import Any, Mapping, Optional

from transvoucher.core.errors import ValidationError
from transvoucher.http.client import HttpClient
from transvoucher.schemas.api import RequestOptions
from transvoucher.schemas.payments import (
    ConversionRate,
    Payment,
    PaymentList,
    TransactionData,
)
from transvoucher.services import validators
from transvoucher.services.base import unwrap

logger = logging.getLogger(__name__)

LIST_FILTERS = (
    "page",
    "per_page",
    "limit",
    "page_token",
    "status",
    "currency",
    "from_date",
    "to_date",
    "reference",
    "customer_email",
)


class PaymentService:
    def __init__(self, http: HttpClient):
        self._http = http

    async def create(
        self, data: Mapping[str, Any], options: Optional[RequestOptions] = None
    ) -> Payment:
        validators.validate_create_payment(data)
        response = await self._http.post("/payments", dict(data), options)
        payment = Payment.model_validate(unwrap(response, "payment creation"))
        logger.info(f"Created payment {payment.id}")
        return payment

    async def get_transaction_status(
        self, transaction_id: str, options: Optional[RequestOptions] = None
    ) -> TransactionData:
        validators.require_identifier(transaction_id, "transaction_id", "Transaction ID")
        response = await self._http.get(
            f"/payment/status/{transaction_id}", options=options
        )
        return TransactionData.model_validate(
            unwrap(response, "transaction status check")
        )

    async def get_payment_link_status(
        self, payment_link_id: str, options: Optional[RequestOptions] = None
    ) -> Payment:
        validators.require_identifier(payment_link_id, "payment_link_id", "Payment link ID")
        response = await self._http.get(
            f"/payment-link/status/{payment_link_id}", options=options
        )
        return Payment.model_validate(unwrap(response, "payment link status check"))

    async def list(
        self,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> PaymentList:
        params = params or {}
        validators.validate_list_request(params)
        query = {k: params[k] for k in LIST_FILTERS if params.get(k) is not None}
        response = await self._http.get("/payments", query, options)
        return PaymentList.model_validate(unwrap(response, "payment list"))

    async def get_by_reference(
        self, reference: str, options: Optional[RequestOptions] = None
    ) -> Optional[Payment]:
        validators.require_identifier(reference, "reference", "Reference")
        result = await self.list({"reference": reference}, options)
        return result.payments[0] if result.payments else None

    async def get_conversion_rate(
        self,
        network: str,
        commodity: str,
        fiat_currency: str,
        payment_method: str = "card",
        options: Optional[RequestOptions] = None,
    ) -> ConversionRate:
        query = {
            "network": network,
            "commodity": commodity,
            "fiat_currency": fiat_currency,
            "payment_method": payment_method,
        }
        errors = {k: [f"{k} is required"] for k, v in query.items() if not v}
        if errors:
            raise ValidationError("Validation failed", errors)
        response = await self._http.get("/conversion-rate", query, options)
        return ConversionRate.model_validate(unwrap(response, "conversion rate endpoint"))

    @staticmethod
    def is_completed(payment) -> bool:
        return _status(payment) == "completed"

    @staticmethod
    def is_pending(payment) -> bool:
        return _status(payment) == "pending"

    @staticmethod
    def is_failed(payment) -> bool:
        return _status(payment) == "failed"

    @staticmethod
    def is_expired(payment) -> bool:
        return _status(payment) == "expired"


def _status(payment) -> Optional[str]:
    if isinstance(payment, Mapping):
        return payment.get("status")
    return getattr(payment, "status", None)
