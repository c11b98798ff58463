from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict

PaymentStatus = Literal[
    "pending",
    "attempting",
    "processing",
    "completed",
    "failed",
    "expired",
    "cancelled",
]


class CustomerDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    country_of_residence: Optional[str] = None
    state_of_residence: Optional[str] = None
    card_country_code: Optional[str] = None
    card_state_code: Optional[str] = None
    card_city: Optional[str] = None
    card_post_code: Optional[str] = None
    card_street: Optional[str] = None


class Payment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    reference_id: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_link_id: Optional[str] = None
    payment_url: Optional[str] = None
    embed_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    fiat_base_amount: Optional[float] = None
    fiat_total_amount: Optional[float] = None
    fiat_currency: Optional[str] = None
    commodity: Optional[str] = None
    commodity_amount: Optional[float] = None
    settled_amount: Optional[float] = None
    metadata: Optional[dict[str, Any]] = None
    customer_details: Optional[CustomerDetails] = None
    status: str
    fail_reason: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    paid_at: Optional[str] = None
    blockchain_tx_hash: Optional[str] = None


class PaymentList(BaseModel):
    model_config = ConfigDict(extra="allow")

    payments: list[Payment] = []
    has_more: bool = False
    next_page_token: Optional[str] = None
    count: int = 0


class TransactionData(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    reference_id: Optional[str] = None
    fiat_base_amount: Optional[float] = None
    fiat_total_amount: Optional[float] = None
    fiat_currency: Optional[str] = None
    commodity_amount: Optional[float] = None
    settled_amount: Optional[float] = None
    commodity: Optional[str] = None
    network: Optional[str] = None
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    paid_at: Optional[str] = None
    blockchain_tx_hash: Optional[str] = None


class ConversionRate(BaseModel):
    model_config = ConfigDict(extra="allow")

    rate: str
