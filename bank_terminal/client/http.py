"""Thin JSON client over the bank backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from bank_terminal.config import ApiConfig
from bank_terminal.exceptions import RequestFailedError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiClient:
    """Issue JSON requests against the backend base URL.

    Redirects are followed. Any final response outside 2xx becomes a
    ``RequestFailedError`` carrying the response body as its message. Requests are never retried; the caller
    decides whether the operator should try again.

    Parameters
    ----------
    config : ApiConfig | None
        Base URL, timeout and TLS settings.
    transport : httpx.BaseTransport | None
        Custom transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or ApiConfig()
        # The client keeps a cookie jar, so backend session cookies are
        # sent back on every request.
        self._client = httpx.Client(
            headers=DEFAULT_HEADERS,
            timeout=self.config.timeout,
            verify=self.config.verify_tls,
            transport=transport,
            follow_redirects=True,
        )

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and decode the JSON response.

        Parameters
        ----------
        method : str
            HTTP method (GET, POST, PUT, PATCH, DELETE).
        endpoint : str
            Path relative to the base URL, starting with ``/``.
        payload : Any
            JSON body, if any.
        params : dict | None
            Query string parameters.

        Returns
        -------
        Any
            Decoded JSON, or None for 204 / empty responses.

        Raises
        ------
        RequestFailedError
            On a non-2xx response or a transport failure.
        """
        url = self.config.base_url + endpoint
        logger.debug("%s %s", method, endpoint)

        try:
            response = self._client.request(method, url, json=payload, params=params)
        except httpx.HTTPError as e:
            logger.error("Request to %s %s failed: %s", method, endpoint, e)
            raise RequestFailedError(f"Request to {endpoint} failed: {e}") from e

        if not response.is_success:
            error_text = response.text
            logger.error(
                "Request to %s %s failed: %d - %s",
                method,
                endpoint,
                response.status_code,
                error_text,
            )
            raise RequestFailedError(
                error_text or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s %s: %s", method, endpoint, e)
            raise RequestFailedError(
                f"Invalid JSON response from {endpoint}", status_code=response.status_code
            ) from e

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, payload: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("POST", endpoint, payload=payload, params=params)

    def put(self, endpoint: str, payload: Any = None) -> Any:
        return self.request("PUT", endpoint, payload=payload)

    def patch(self, endpoint: str, payload: Any = None) -> Any:
        return self.request("PATCH", endpoint, payload=payload)

    def delete(self, endpoint: str) -> Any:
        return self.request("DELETE", endpoint)

    def close(self) -> None:
        """Release the connection pool."""
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
