# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
KeyCDN API client.

Calls are addressed by a path relative to the API endpoint and return the raw
response body. HTTP behavior can be delegated to an injectable client
implementing the `HttpClient` protocol; otherwise a built-in httpx transport is
used.
"""

from .client import KeyCDN
from .config import DEFAULT_ENDPOINT, ClientConfig, DirectTransportSettings, HttpxClientSettings
from .errors import RequestFailure
from .http import (
    DirectTransport,
    HttpClient,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    InjectedClientTransport,
    create_default_http_client,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "DEFAULT_ENDPOINT",
    "ClientConfig",
    "DirectTransport",
    "DirectTransportSettings",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "HttpxClientSettings",
    "InjectedClientTransport",
    "KeyCDN",
    "RequestFailure",
    "create_default_http_client",
    "setup_logging",
    "__version__",
]
