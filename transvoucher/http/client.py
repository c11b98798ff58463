import logging
from typing import Any, Optional

import httpx

from transvoucher import __version__
from transvoucher.core.config import Settings
from transvoucher.core.errors import (
    ApiError,
    AuthenticationError,
    NetworkError,
    TransVoucherError,
    ValidationError,
)
from transvoucher.schemas.api import ApiResponse, RequestOptions

logger = logging.getLogger(__name__)

USER_AGENT = f"TransVoucher-Python-SDK/{__version__}"

# Statuses surfaced as ApiError; everything else non-2xx is a plain TransVoucherError
API_ERROR_STATUSES = {400, 403, 404, 409, 429}


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def error_from_response(response: httpx.Response) -> TransVoucherError:
    status = response.status_code
    data = _body(response)
    message = None
    if isinstance(data, dict):
        message = data.get("message")
    if not message:
        message = f"Request failed with status code {status}"

    if status == 401:
        return AuthenticationError(message, status, data)
    if status == 422:
        errors = data.get("errors") if isinstance(data, dict) else None
        return ValidationError(message, errors or {}, status, data)
    if status in API_ERROR_STATUSES:
        return ApiError(message, status, data)
    return TransVoucherError(message, "API_ERROR", status, data)


class HttpClient:
    """Authenticated JSON transport for the TransVoucher API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._transport = transport
        self.settings = settings
        self._client = self._build_client()
        self._retired: list[httpx.AsyncClient] = []

    def _build_client(self) -> httpx.AsyncClient:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
            "User-Agent": USER_AGENT,
        }
        if self.settings.api_secret:
            headers["X-API-Secret"] = self.settings.api_secret
        return httpx.AsyncClient(
            base_url=self.settings.resolved_base_url(),
            headers=headers,
            timeout=self.settings.timeout,
            transport=self._transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    def update_settings(self, settings: Settings) -> None:
        # In-flight requests may still hold the old pool; it is closed in aclose()
        self._retired.append(self._client)
        self.settings = settings
        self._client = self._build_client()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> ApiResponse:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json
        if options is not None:
            if options.timeout is not None:
                kwargs["timeout"] = options.timeout
            if options.headers:
                kwargs["headers"] = options.headers

        logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path.lstrip("/"), **kwargs)
        except httpx.TransportError as exc:
            logger.warning(f"{method} {path} failed without a response: {exc!r}")
            raise NetworkError("Network error: No response received", exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            raise NetworkError(f"Request error: {exc}", exc) from exc

        if response.is_error:
            error = error_from_response(response)
            logger.warning(
                f"{method} {path} returned {response.status_code}: {error.message}"
            )
            raise error

        data = _body(response)
        if not isinstance(data, dict):
            return ApiResponse(success=False, data=None)
        return ApiResponse.model_validate(data)

    async def get(self, path, params=None, options=None) -> ApiResponse:
        return await self.request("GET", path, params=params, options=options)

    async def post(self, path, data=None, options=None) -> ApiResponse:
        return await self.request("POST", path, json=data, options=options)

    async def put(self, path, data=None, options=None) -> ApiResponse:
        return await self.request("PUT", path, json=data, options=options)

    async def patch(self, path, data=None, options=None) -> ApiResponse:
        return await self.request("PATCH", path, json=data, options=options)

    async def delete(self, path, options=None) -> ApiResponse:
        return await self.request("DELETE", path, options=options)

    async def aclose(self) -> None:
        while self._retired:
            await self._retired.pop().aclose()
        await self._client.aclose()
