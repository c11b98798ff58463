from typing import Optional

from pydantic import BaseModel, ConfigDict


class Currency(BaseModel):
    model_config = ConfigDict(extra="allow")

    short_code: str
    name: str
    symbol: str
    current_usd_value: str
    processed_via_currency_code: Optional[str] = None


class Network(BaseModel):
    model_config = ConfigDict(extra="allow")

    short_code: str
    identifier: str
    name: str
    token_standard: Optional[str] = None
    chain_id: Optional[int] = None
    explorer_url: Optional[str] = None
    icon_url: Optional[str] = None
    is_testnet: bool = False


class Commodity(BaseModel):
    model_config = ConfigDict(extra="allow")

    short_code: str
    name: str
    icon_url: Optional[str] = None
    current_usd_value: str
    contract_address: Optional[str] = None
    decimals: int
    network_short_code: str
