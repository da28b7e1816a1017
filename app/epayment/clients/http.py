"""
Generic outbound HTTP call used for the course cancellation endpoint.

Unlike the REST clients, HttpService hands back every HTTP answer, whatever
its status code, and leaves the decision to the caller. Only calls that got
no answer at all raise.

Usage:
    from epayment.clients import HttpService

    result = HttpService().execute(
        settings.CANCEL_COURSE_URL,
        JSON_HEADERS,
        {"cod_code": "ABC123"},
        "POST",
        ErrorMessage.API_CANCEL_COURSE,
    )
    if result.status_code == 200:
        ...
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import requests
from django.conf import settings

from epayment.clients.base import send_request
from epayment.types import HttpResult

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


class HttpService:
    """
    Thin wrapper around a requests.Session.

    Args:
        timeout: Per-request timeout in seconds
            (default: settings.EXTERNAL_API_TIMEOUT_SECONDS)
        session: Optional requests.Session
    """

    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout or getattr(settings, "EXTERNAL_API_TIMEOUT_SECONDS", 10)
        self._session = session or requests.Session()

    def execute(
        self,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any] | None,
        method: str,
        api_name: str,
    ) -> HttpResult:
        """
        Send a JSON request.

        Args:
            url: Absolute URL
            headers: Request headers
            body: JSON body (None for no body)
            method: HTTP method
            api_name: Message code identifying the integration, for logs

        Returns:
            HttpResult with the status code and decoded body
            (raw text when the body is not JSON)

        Raises:
            RecoverableError: Timeout, connection failure or other transport error
        """
        log_context = {"api_name": str(api_name), "method": method, "url": url}
        start_time = time.time()

        response = send_request(
            self._session,
            method,
            url,
            api_name=str(api_name),
            timeout=self._timeout,
            headers=headers,
            json=body,
        )

        try:
            payload = response.json()
        except ValueError:
            payload = response.text

        logger.info(
            "HTTP call completed",
            extra={
                **log_context,
                "status_code": response.status_code,
                "duration_ms": (time.time() - start_time) * 1000,
            },
        )
        return HttpResult(status_code=response.status_code, body=payload)
