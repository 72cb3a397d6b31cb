# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration objects for the KeyCDN client."""

from __future__ import annotations

from dataclasses import dataclass

from .version import __version__

DEFAULT_ENDPOINT = "https://api.keycdn.com"
DEFAULT_USER_AGENT = f"keycdn-python/{__version__}"
DIRECT_TIMEOUT = 60.0


@dataclass
class ClientConfig:
    """
    Credentials and base URL shared by every call a client makes.

    The endpoint is stored as given; trailing slashes are trimmed when a request
    URL is built, not here.
    """

    api_key: str
    endpoint: str = DEFAULT_ENDPOINT

    def __post_init__(self) -> None:
        self.endpoint = str(self.endpoint)


@dataclass
class DirectTransportSettings:
    """Knobs for the built-in transport. The facade always uses the defaults."""

    timeout: float = DIRECT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    empty_body_is_error: bool = True


@dataclass
class HttpxClientSettings:
    """Defaults for the ready-made injectable httpx client."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    allow_redirects: bool = True
