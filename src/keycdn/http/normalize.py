# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Collapse a transport outcome into a body string or a RequestFailure."""

from __future__ import annotations

from ..errors import RequestFailure
from .models import TransportOutcome


def failure_message(outcome: TransportOutcome) -> str:
    return f"KeyCDN-Error: {outcome.error_detail or ''}, Output: {outcome.body}"


def unwrap_outcome(outcome: TransportOutcome) -> str:
    """Return the body of a successful outcome; raise RequestFailure otherwise."""
    if outcome.success:
        return outcome.body
    raise RequestFailure(
        failure_message(outcome),
        code=outcome.status_code,
        error_type=outcome.error_type,
    )


__all__ = ["failure_message", "unwrap_outcome"]
