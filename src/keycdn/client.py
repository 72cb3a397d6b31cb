# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""KeyCDN API facade: configuration, transport selection and the verb methods."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import DEFAULT_ENDPOINT, ClientConfig, DirectTransportSettings
from .http.builder import build_form_request, build_json_request
from .http.client import HttpClient
from .http.models import BuiltRequest, CallRequest, HttpMethod, Params
from .http.normalize import unwrap_outcome
from .http.transport import DirectTransport, InjectedClientTransport, Transport

logger = logging.getLogger(__name__)


class KeyCDN:
    """
    Thin client for the KeyCDN REST API.

    Every verb method returns the raw response body as a string and raises
    `RequestFailure` when the call fails. With `http_client` supplied, requests go
    through it with a JSON body; otherwise the built-in direct transport is used
    with query-string/form encoding. That choice is made once, here.

    `empty_body_is_error` (default on) configures the built-in transport. A caller
    passing its own `direct_transport` sets it on that transport's settings instead.

    Example:
        api = KeyCDN("your_api_key")
        zones = api.get("zones.json")
        api.post("zones.json", {"name": "testzone"})
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        http_client: HttpClient | None = None,
        empty_body_is_error: bool | None = None,
        direct_transport: DirectTransport | None = None,
    ):
        self.config = ClientConfig(api_key=api_key, endpoint=endpoint)
        self.transport: Transport
        self._build: Callable[[ClientConfig, CallRequest], BuiltRequest]
        if http_client is not None:
            self.transport = InjectedClientTransport(http_client)
            self._build = build_json_request
        else:
            if direct_transport is not None and empty_body_is_error is not None:
                raise ValueError("empty_body_is_error cannot be combined with direct_transport; set it on the transport settings")
            self.transport = direct_transport or DirectTransport(
                DirectTransportSettings(empty_body_is_error=True if empty_body_is_error is None else empty_body_is_error)
            )
            self._build = build_form_request

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self.config.api_key = value

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self.config.endpoint = str(value)

    def get_api_key(self) -> str:
        return self.api_key

    def set_api_key(self, api_key: str) -> KeyCDN:
        self.api_key = api_key
        return self

    def get_endpoint(self) -> str:
        return self.endpoint

    def set_endpoint(self, endpoint: str) -> KeyCDN:
        self.endpoint = endpoint
        return self

    def get(self, path: str, params: Params | None = None) -> str:
        return self.execute(path, HttpMethod.GET, params)

    def post(self, path: str, params: Params | None = None) -> str:
        return self.execute(path, HttpMethod.POST, params)

    def put(self, path: str, params: Params | None = None) -> str:
        return self.execute(path, HttpMethod.PUT, params)

    def delete(self, path: str, params: Params | None = None) -> str:
        return self.execute(path, HttpMethod.DELETE, params)

    def execute(self, path: str, method: HttpMethod | str, params: Params | None = None) -> str:
        """Build, dispatch and normalize a single call."""
        call = CallRequest.create(path, method, params)
        request = self._build(self.config, call)
        logger.debug("Dispatching %s %s via %s transport", request.method.value, request.url, self.transport.name)
        outcome = self.transport.send(request)
        logger.debug("%s %s finished: success=%s status=%s", request.method.value, request.url, outcome.success, outcome.status_code)
        return unwrap_outcome(outcome)

    def __repr__(self) -> str:
        return f"KeyCDN(endpoint={self.endpoint!r}, transport={self.transport.name!r})"
