# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The two interchangeable ways of physically sending a built request.

Transports never raise for request failures. They report a `TransportOutcome`
and leave it to the response normalizer to decide what the caller sees.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import DirectTransportSettings
from .client import HttpClient
from .models import BuiltRequest, HttpRequest, TransportOutcome

logger = logging.getLogger(__name__)

EMPTY_BODY_DETAIL = "empty response body"


class Transport(Protocol):
    name: str

    def send(self, request: BuiltRequest) -> TransportOutcome: ...


class InjectedClientTransport:
    """Delegates to a caller-supplied HttpClient. Status codes are not inspected."""

    name = "injected"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    def send(self, request: BuiltRequest) -> TransportOutcome:
        http_request = HttpRequest(
            url=request.url,
            method=request.method.value,
            headers=dict(request.headers),
            body=request.body,
            timeout=request.timeout,
        )
        try:
            response = self.http_client.request(http_request)
        except Exception as exc:  # noqa: BLE001
            return TransportOutcome(
                body="",
                success=False,
                error_detail=str(exc),
                status_code=_status_from_exception(exc),
                error_type=type(exc).__name__,
            )

        body = response.text
        if not body and response.content:
            body = response.content.decode("utf-8", errors="replace")

        if not response.ok:
            return TransportOutcome(
                body=body,
                success=False,
                error_detail=response.error_message or "request failed",
                status_code=response.status_code,
                error_type=response.error_type,
                headers=dict(response.headers),
            )
        return TransportOutcome(
            body=body,
            success=True,
            status_code=response.status_code,
            headers=dict(response.headers),
        )


class DirectTransport:
    """
    Built-in transport: one short-lived httpx client per call.

    Basic auth comes from `request.auth`. GET and POST go out as themselves; PUT and
    DELETE are sent with the literal verb and keep their form body. An empty body is
    treated as a failure unless `settings.empty_body_is_error` is off.

    The timeout (`settings.timeout` unless the request carries its own) is applied by
    httpx to each phase separately: connect, write, pool wait and every read. A
    response that keeps trickling in can therefore take longer than the timeout in
    total. Only an empty string counts as an empty body; `"0"` is returned as is.

    Any exception raised while building or sending, including a malformed URL, is
    reported as a failed outcome.

    `transport` is forwarded to `httpx.Client`, which lets tests plug in
    `httpx.MockTransport`.
    """

    name = "direct"

    def __init__(
        self,
        settings: DirectTransportSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or DirectTransportSettings()
        self._transport = transport

    def send(self, request: BuiltRequest) -> TransportOutcome:
        headers = {"User-Agent": self.settings.user_agent, **request.headers}
        auth = httpx.BasicAuth(*request.auth) if request.auth is not None else None
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            with httpx.Client(
                auth=auth,
                timeout=timeout,
                verify=self.settings.verify_ssl,
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                outgoing = client.build_request(
                    request.method.value,
                    request.url,
                    headers=headers,
                    content=request.body,
                )
                resp = client.send(outgoing)
                response_headers = {key.lower(): value for key, value in resp.headers.items()}
                body = resp.text
        except Exception as exc:  # noqa: BLE001
            logger.debug("Direct transport error for %s %s: %s", request.method.value, request.url, exc)
            return TransportOutcome(
                body="",
                success=False,
                error_detail=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
            )

        if not body and self.settings.empty_body_is_error:
            return TransportOutcome(
                body="",
                success=False,
                error_detail=EMPTY_BODY_DETAIL,
                status_code=resp.status_code,
                headers=response_headers,
            )
        return TransportOutcome(
            body=body,
            success=True,
            status_code=resp.status_code,
            headers=response_headers,
        )


def _status_from_exception(exc: Exception) -> int | None:
    """Pull a status code off an exception raised by an injected client, if it carries one."""
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    if status is None:
        status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(exc, "code", None)
    return status if isinstance(status, int) else None


__all__ = ["DirectTransport", "EMPTY_BODY_DETAIL", "InjectedClientTransport", "Transport"]
