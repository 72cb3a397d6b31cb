# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pluggable HTTP client abstraction and factory."""

from typing import Protocol

from ..config import HttpxClientSettings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Minimal protocol a caller-supplied client must satisfy.

    Implementations may either raise on transport failure or return an
    `HttpResponse` with `ok=False`; both are reported as a failed call.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(settings: HttpxClientSettings | None = None) -> HttpClient:
    """Factory for an httpx-backed client suitable for injection into `KeyCDN`."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or HttpxClientSettings())
