# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error raised by every failed API call."""

from __future__ import annotations


class RequestFailure(Exception):
    """
    A call could not produce a response body.

    `code` carries the HTTP status code when the transport reported one.
    `error_type` names the underlying exception class, if any.
    """

    def __init__(self, message: str, code: int | None = None, error_type: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_type = error_type

    def __repr__(self) -> str:
        return f"RequestFailure(message={self.message!r}, code={self.code!r})"


__all__ = ["RequestFailure"]
