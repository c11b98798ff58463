from typing import Optional

from transvoucher.http.client import HttpClient
from transvoucher.schemas.api import RequestOptions
from transvoucher.schemas.catalog import Network
from transvoucher.services.base import unwrap


class NetworkService:
    """Blockchain networks payments can settle on."""

    def __init__(self, http: HttpClient):
        self._http = http

    async def all(self, options: Optional[RequestOptions] = None) -> list[Network]:
        response = await self._http.get("/networks", options=options)
        return [Network.model_validate(n) for n in unwrap(response, "networks endpoint")]

    @staticmethod
    def is_testnet(network: Network) -> bool:
        return network.is_testnet is True

    async def find_by_code(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> Optional[Network]:
        wanted = short_code.upper()
        for network in await self.all(options):
            if network.short_code.upper() == wanted:
                return network
        return None

    async def is_supported(
        self, short_code: str, options: Optional[RequestOptions] = None
    ) -> bool:
        return await self.find_by_code(short_code, options) is not None

    async def get_mainnets(self, options: Optional[RequestOptions] = None) -> list[Network]:
        return [n for n in await self.all(options) if not n.is_testnet]

    async def get_testnets(self, options: Optional[RequestOptions] = None) -> list[Network]:
        return [n for n in await self.all(options) if n.is_testnet]
