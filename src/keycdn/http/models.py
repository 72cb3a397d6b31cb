# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request/response data models used by the builder and both transports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

Headers = dict[str, str]
Params = Mapping[str, str]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class CallRequest:
    """One logical API call: a path relative to the endpoint, a verb and its parameters."""

    path: str
    method: HttpMethod = HttpMethod.GET
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def create(cls, path: str, method: HttpMethod | str, params: Params | None = None) -> CallRequest:
        return cls(path=str(path), method=HttpMethod(method.upper()), params=dict(params or {}))


@dataclass
class BuiltRequest:
    """
    Fully-formed request ready to hand to a transport.

    `auth` is a (username, password) pair for transports that negotiate Basic auth
    themselves; the generic path puts credentials in `headers` instead.
    """

    url: str
    method: HttpMethod
    headers: Headers = field(default_factory=dict)
    body: str | None = None
    auth: tuple[str, str] | None = None
    timeout: float | None = None


@dataclass
class TransportOutcome:
    """What a transport observed. Only the response normalizer consumes this."""

    body: str
    success: bool
    error_detail: str | None = None
    status_code: int | None = None
    error_type: str | None = None
    headers: Headers = field(default_factory=dict)


@dataclass
class HttpRequest:
    """Request handed to a pluggable HttpClient."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """Response returned by a pluggable HttpClient."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None


__all__ = [
    "BuiltRequest",
    "CallRequest",
    "Headers",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "Params",
    "TransportOutcome",
]
