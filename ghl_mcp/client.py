"""
GoHighLevel API Client

The single outbound-communication point. Attaches auth and version headers,
applies the default location id, and classifies every failure as either
UpstreamApiError (remote answered non-success) or ConnectivityError
(remote unreachable). Raw httpx exceptions never escape this module.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .config import ApiClientConfig
from .errors import ConnectivityError, UpstreamApiError

logger = logging.getLogger(__name__)


def _drop_none(values: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if values is None:
        return None
    return {k: v for k, v in values.items() if v is not None}


def _error_message(response: httpx.Response) -> str:
    """Extract the most useful message from an error response."""
    detail = response.text or response.reason_phrase
    try:
        body = response.json()
    except ValueError:
        return detail

    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or detail
        if isinstance(message, list):
            message = "; ".join(str(m) for m in message)
        return str(message)
    return detail


class GHLApiClient:
    """
    Authenticated async HTTP client for the GoHighLevel API.

    Built once at startup and shared by every tool module. Configuration is
    validated before the underlying connection pool is created, so a
    misconfigured process never touches the network.
    """

    def __init__(
        self,
        config: ApiClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        config.validate()
        self._config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.access_token}",
                "Version": config.api_version,
                "Accept": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ApiClientConfig:
        return self._config

    def location_id(self, override: Optional[str] = None) -> str:
        """Per-call location id, falling back to the configured default."""
        return override or self._config.location_id

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Perform one API call and normalize the outcome.

        Returns {"data": <decoded body>} on success.
        Raises UpstreamApiError or ConnectivityError on failure.
        """
        if "://" in path:
            raise ValueError(f"Absolute URLs are not allowed: {path}")

        method = method.upper()
        logger.debug(f"{method} {path} params={params} body={json}")

        try:
            response = await self._http.request(
                method,
                path,
                params=_drop_none(params),
                json=_drop_none(json),
            )
        except httpx.TimeoutException as e:
            raise ConnectivityError(f"Request to {path} timed out: {e}") from e
        except httpx.TransportError as e:
            raise ConnectivityError(f"Could not reach GHL API ({path}): {e}") from e
        except httpx.RequestError as e:
            raise ConnectivityError(f"Request to {path} failed: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} failed with {response.status_code}: {message}")
            raise UpstreamApiError(response.status_code, message, details=response.text)

        if not response.content:
            return {"data": {}}
        try:
            return {"data": response.json()}
        except ValueError:
            return {"data": {"raw": response.text}}

    async def test_connection(self) -> Dict[str, Any]:
        """Confirm the token is valid and the default location is reachable."""
        response = await self.request("GET", f"/locations/{self._config.location_id}")
        return {"data": {"locationId": self._config.location_id, "location": response["data"]}}

    async def aclose(self) -> None:
        await self._http.aclose()
