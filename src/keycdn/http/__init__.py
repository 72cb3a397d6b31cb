# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP layer exports."""

from .adapters import StubHttpClient
from .builder import build_form_request, build_json_request, encode_query, join_url
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import (
    BuiltRequest,
    CallRequest,
    Headers,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    TransportOutcome,
)
from .normalize import unwrap_outcome
from .transport import DirectTransport, InjectedClientTransport, Transport

__all__ = [
    "BuiltRequest",
    "CallRequest",
    "DirectTransport",
    "Headers",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InjectedClientTransport",
    "StubHttpClient",
    "Transport",
    "TransportOutcome",
    "build_form_request",
    "build_json_request",
    "create_default_http_client",
    "encode_query",
    "join_url",
    "unwrap_outcome",
]
