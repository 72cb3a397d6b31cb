# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn a logical call into a concrete HTTP request.

The two transports encode parameters differently: the generic path always sends a
JSON body, while the direct path uses a query string for GET and a form body for
everything else. Both address `<endpoint>/<path>` with exactly one slash between.
"""

from __future__ import annotations

import base64
import json
from urllib.parse import urlencode

from ..config import ClientConfig
from .models import BuiltRequest, CallRequest, HttpMethod, Params

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

# Verbs whose parameters travel in the body on the direct path.
BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.DELETE})


def join_url(endpoint: str, path: str) -> str:
    """Join endpoint and path, ignoring trailing/leading slashes on either side."""
    return str(endpoint).rstrip("/") + "/" + str(path).lstrip("/")


def encode_query(params: Params | None) -> str:
    """Form-encode params in insertion order (`a=1&b=two+words`)."""
    if not params:
        return ""
    return urlencode([(str(key), str(value)) for key, value in params.items()])


def basic_auth_header(api_key: str) -> str:
    token = base64.b64encode(f"{api_key}:".encode()).decode("ascii")
    return f"Basic {token}"


def build_json_request(config: ClientConfig, call: CallRequest) -> BuiltRequest:
    """Request for the generic path: JSON body for every verb, credentials in headers."""
    return BuiltRequest(
        url=join_url(config.endpoint, call.path),
        method=call.method,
        headers={
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": basic_auth_header(config.api_key),
        },
        body=json.dumps(dict(call.params), separators=(",", ":")),
    )


def build_form_request(config: ClientConfig, call: CallRequest, *, timeout: float | None = None) -> BuiltRequest:
    """Request for the direct path: query string on GET, form body otherwise."""
    url = join_url(config.endpoint, call.path)
    query = encode_query(call.params)
    headers: dict[str, str] = {}
    body: str | None = None

    if call.method in BODY_METHODS:
        body = query
        headers["Content-Type"] = FORM_CONTENT_TYPE
    elif query:
        url = f"{url}?{query}"

    return BuiltRequest(
        url=url,
        method=call.method,
        headers=headers,
        body=body,
        auth=(config.api_key, ""),
        timeout=timeout,
    )


__all__ = [
    "BODY_METHODS",
    "basic_auth_header",
    "build_form_request",
    "build_json_request",
    "encode_query",
    "join_url",
]
