from typing import Optional

from transvoucher.http.client import HttpClient
from transvoucher.schemas.api import RequestOptions
from transvoucher.schemas.catalog import Commodity
from transvoucher.services.base import unwrap


class CommodityService:
    """Settlement commodities (crypto assets)."""

    def __init__(self, http: HttpClient):
        self._http = http

    async def all(self, options: Optional[RequestOptions] = None) -> list[Commodity]:
        response = await self._http.get("/commodities", options=options)
        return [
            Commodity.model_validate(c) for c in unwrap(response, "commodities endpoint")
        ]

    @staticmethod
    def is_native_token(commodity: Commodity) -> bool:
        # native tokens have no contract address
        return not (commodity.contract_address or "").strip()

    async def find_by_code(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> Optional[Commodity]:
        wanted = short_code.upper()
        for commodity in await self.all(options):
            if commodity.short_code.upper() == wanted:
                return commodity
        return None

    async def is_supported(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> bool:
        return await self.find_by_code(short_code, options) is not None

    async def get_by_network(
        self, network_short_code: str, options: Optional[RequestOptions] = None
    ) -> list[Commodity]:
        wanted = network_short_code.upper()
        return [
            c for c in await self.all(options) if c.network_short_code.upper() == wanted
        ]

    async def get_native_tokens(
        self, options: Optional[RequestOptions] = None
    ) -> list[Commodity]:
        return [c for c in await self.all(options) if self.is_native_token(c)]

    async def get_contract_tokens(
        self, options: Optional[RequestOptions] = None
    ) -> list[Commodity]:
        return [c for c in await self.all(options) if not self.is_native_token(c)]
