"""Async transport shared by every Foursquare v2 endpoint wrapper."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from fsq_venues.core.config import DEFAULT_API_URL, DEFAULT_API_VERSION, ApiSettings
from fsq_venues.core.types import QueryParams, ResponseKeys
from fsq_venues.services.foursquare.errors import FoursquareApiError, FoursquareError

logger = logging.getLogger(__name__)


class ApiInvoker(Protocol):
    """Anything able to execute a Foursquare call and unwrap its envelope."""

    async def call_api(
        self,
        path: str,
        access_token: Optional[str],
        response_keys: ResponseKeys,
        params: Optional[Mapping[str, Any]],
    ) -> Any:
        ...


def _format_meta_error(meta: Mapping[str, Any]) -> str:
    """Return a human-friendly message for a failed response envelope."""

    code = meta.get("code")
    error_type = meta.get("errorType")
    detail = meta.get("errorDetail")
    section = ": ".join(filter(None, [error_type, detail]))
    prefix = f"HTTP {code}" if code else "Foursquare API error"
    if section:
        return f"{prefix}: {section}"
    return prefix


class FoursquareCore:
    """Thin async wrapper around the Foursquare v2 API envelope."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        base_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout_s: float = 15.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.api_version = api_version
        self.api_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            headers={"accept": "application/json"},
            timeout=httpx.Timeout(timeout_s, connect=10.0),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTPX client."""

        await self._client.aclose()

    async def __aenter__(self) -> "FoursquareCore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self._client.aclose()

    def _auth_params(self, access_token: Optional[str]) -> QueryParams:
        if access_token:
            return {"oauth_token": access_token, "v": self.api_version}
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "v": self.api_version,
        }

    async def _aget(self, path: str, params: QueryParams) -> Dict[str, Any]:
        """Execute a GET request and return the decoded JSON body.

        Foursquare reports most failures inside a JSON envelope, so the HTTP
        status is only consulted when the body cannot be decoded.
        """

        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise FoursquareError(f"Request to {path} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise FoursquareError(
                f"HTTP {response.status_code}: response from {path} was not valid JSON"
            ) from exc

    async def call_api(
        self,
        path: str,
        access_token: Optional[str],
        response_keys: ResponseKeys,
        params: Optional[Mapping[str, Any]],
    ) -> Any:
        """Call ``path`` and return the requested field(s) of the response."""

        query: QueryParams = {k: v for k, v in (params or {}).items() if v is not None}
        query.update(self._auth_params(access_token))
        logger.debug("Calling Foursquare %s", path)

        payload = await self._aget(path, query)
        return self._extract(path, response_keys, payload)

    def _extract(self, path: str, response_keys: ResponseKeys, payload: Any) -> Any:
        meta = payload.get("meta") if isinstance(payload, dict) else None
        if not isinstance(meta, dict):
            raise FoursquareApiError("Response had no metadata.")

        code = meta.get("code")
        if code != 200:
            raise FoursquareApiError(
                _format_meta_error(meta),
                code=code,
                error_type=meta.get("errorType"),
                error_detail=meta.get("errorDetail"),
            )
        if meta.get("errorType"):
            logger.warning("Foursquare %s: %s", path, _format_meta_error(meta))

        response = payload.get("response") or {}
        if isinstance(response_keys, str):
            if response_keys not in response:
                raise FoursquareApiError(
                    f"Response had no {response_keys} field.", code=code
                )
            return response[response_keys]
        return {key: response[key] for key in response_keys if key in response}


def create_foursquare_core(settings: ApiSettings) -> FoursquareCore:
    """Instantiate the shared transport using project settings."""

    return FoursquareCore(
        settings.ensure("foursquare_client_id"),
        settings.ensure("foursquare_client_secret"),
        base_url=settings.foursquare_base_url,
        api_version=settings.foursquare_api_version,
    )
