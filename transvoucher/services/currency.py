from typing import Optional

from transvoucher.http.client import HttpClient
from transvoucher.schemas.api import RequestOptions
from transvoucher.schemas.catalog import Currency
from transvoucher.services.base import unwrap


class CurrencyService:
    def __init__(self, http: HttpClient):
        self._http = http

    async def all(self, options: Optional[RequestOptions] = None) -> list[Currency]:
        """Active processing currencies."""
        response = await self._http.get("/currencies", options=options)
        return [Currency.model_validate(c) for c in unwrap(response, "currencies endpoint")]

    @staticmethod
    def is_processed_via_another_currency(currency: Currency) -> bool:
        return currency.processed_via_currency_code is not None

    async def find_by_code(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> Optional[Currency]:
        wanted = short_code.upper()
        for currency in await self.all(options):
            if currency.short_code.upper() == wanted:
                return currency
        return None

    async def is_supported(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> bool:
        return await self.find_by_code(short_code, options) is not None
