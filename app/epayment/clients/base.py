"""
Shared plumbing for JSON REST clients.

Transport failures are translated to RecoverableError, non-success HTTP
answers to IntegrationError, so callers only deal with domain exceptions.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import requests
from django.conf import settings
from requests.exceptions import ConnectionError as ReqConnectionError
from requests.exceptions import RequestException, Timeout

from epayment.constants import JSON_HEADERS
from epayment.exceptions import IntegrationError, RecoverableError

if TYPE_CHECKING:
    from typing import Any


def send_request(
    session: requests.Session,
    method: str,
    url: str,
    *,
    api_name: str,
    timeout: float,
    **kwargs: Any,
) -> requests.Response:
    """
    Issue one request, turning transport failures into RecoverableError.

    Any HTTP answer is returned as is; only calls that got no answer raise.

    Raises:
        RecoverableError: TIMEOUT, CONNECTION_ERROR or REQUEST_ERROR
    """
    try:
        return session.request(method, url, timeout=timeout, **kwargs)
    except RequestException as exc:
        if isinstance(exc, Timeout):
            error_code = "TIMEOUT"
            message = f"Request to {api_name} timed out after {timeout}s"
        elif isinstance(exc, ReqConnectionError):
            error_code = "CONNECTION_ERROR"
            message = f"Could not connect to {api_name} at {url}"
        else:
            error_code = "REQUEST_ERROR"
            message = f"Request error for {method} {url}: {exc}"

        raise RecoverableError(
            message,
            error_code=error_code,
            api_name=api_name,
            details={"url": url},
        ) from exc


class BaseApiClient:
    """
    Base class for the Magento, Bifrost and Marol clients.

    Subclasses set ``api_name`` and pass their base URL and credentials.

    Args:
        base_url: API root, without trailing slash
        headers: Extra headers (auth) sent with every request
        timeout: Per-request timeout in seconds
        session: Optional requests.Session (tests, connection pooling)
    """

    api_name: str = "API"

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout or getattr(settings, "EXTERNAL_API_TIMEOUT_SECONDS", 10)
        self._session = session or requests.Session()
        self._session.headers.update(JSON_HEADERS)
        if headers:
            self._session.headers.update(headers)

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this client."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """
        Execute a request and return the decoded JSON body.

        Returns:
            Decoded body, ``{}`` for empty bodies, or None for a 404 when
            ``allow_not_found`` is set

        Raises:
            RecoverableError: Timeout or connection failure
            IntegrationError: Non-2xx answer or undecodable body
        """
        url = f"{self._base_url}{path}"
        log_context = {"api_name": self.api_name, "method": method, "url": url}
        start_time = time.time()

        response = send_request(
            self._session,
            method,
            url,
            api_name=self.api_name,
            timeout=self._timeout,
            json=json,
        )

        duration_ms = (time.time() - start_time) * 1000
        self.get_logger().debug(
            f"{self.api_name} answered HTTP {response.status_code}",
            extra={
                **log_context,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        if allow_not_found and response.status_code == 404:
            return None

        if not response.ok:
            raise IntegrationError(
                f"{self.api_name} returned HTTP {response.status_code} for {method} {path}",
                error_code=f"HTTP_{response.status_code}",
                details={"url": url, "body": response.text[:500]},
            )

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise IntegrationError(
                f"Invalid JSON from {self.api_name} for {method} {path}",
                error_code="INVALID_RESPONSE",
                details={"url": url},
            ) from exc
