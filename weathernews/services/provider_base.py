"""
Weather & News Backend — Abstract Provider Client Interface
=============================================================

What:  Abstract base class for the third-party data providers.
Why:   Route handlers depend on `fetch(params, api_key)` only, so a provider
       can be swapped (or faked in tests) without touching the routes.
How:   Concrete clients inherit from ProviderClient, implement fetch(), and
       use the shared _get_json() helper for the outbound call.
Who:   Called by the weather and news route handlers.

Failure contract:
    Every failure surfaces as ProviderError carrying a status and message:
        non-2xx upstream  → upstream status (3xx → 502), upstream message
        transport failure → 502 "<Provider> is unreachable"
        unreadable body   → 502 "<Provider> returned an invalid response"
    Nothing is retried; the caller lets the error propagate.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

import httpx

from weathernews.exceptions import ProviderError

logger = logging.getLogger(__name__)


class ProviderClient(ABC):
    """
    Stateless client for one third-party JSON API.

    The shared httpx.AsyncClient is owned by the application factory; this
    class never opens or closes it. No timeout is set here, so calls use the
    httpx transport default.
    """

    # Human-readable name used in error messages ("Weather provider is unreachable")
    display_name: str = "Provider"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    @abstractmethod
    async def fetch(self, params: Mapping[str, str], api_key: str) -> Any:
        """
        Perform one upstream call and return the parsed JSON body.

        Args:
            params:  Validated query parameters from the route handler.
            api_key: Provider key from the injected settings (may be empty).

        Raises:
            ProviderNotConfiguredError: api_key is empty (no call is made).
            ProviderError: the upstream call did not succeed.
        """
        ...

    async def _get_json(
        self,
        path: str,
        params: Mapping[str, str],
        headers: Optional[Dict[str, str]] = None,
        secret_params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        GET {base_url}{path} and decode the JSON body.

        `secret_params` are sent with the request but kept out of the logs.
        """
        url = f"{self.base_url}{path}"
        query = {**params, **(secret_params or {})}
        start_time = time.perf_counter()

        try:
            response = await self.http_client.get(url, params=query, headers=headers)
        except httpx.RequestError as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(
                "%s request to %s failed after %.0fms: %s",
                self.display_name,
                path,
                duration_ms,
                str(e),
            )
            raise ProviderError(
                message=f"{self.display_name} is unreachable",
                provider=self.display_name,
                context={"path": path, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(
                "%s returned HTTP %d for %s %s in %.0fms: %s",
                self.display_name,
                response.status_code,
                path,
                dict(params),
                duration_ms,
                message,
            )
            status = response.status_code if response.status_code >= 400 else 502
            raise ProviderError(
                message=message,
                status=status,
                provider=self.display_name,
                context={"path": path, "upstream_status": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body for %s", self.display_name, path)
            raise ProviderError(
                message=f"{self.display_name} returned an invalid response",
                provider=self.display_name,
                context={"path": path},
            ) from e

        logger.info(
            "%s %s %s completed in %.0fms",
            self.display_name,
            path,
            dict(params),
            duration_ms,
        )
        return body

    def _error_message(self, response: httpx.Response) -> str:
        """
        Prefer the provider's own `message` field; both OpenWeatherMap and
        NewsAPI put a readable explanation there.
        """
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"{self.display_name} request failed with HTTP {response.status_code}"
