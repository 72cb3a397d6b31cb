# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from keycdn import log
from keycdn.config import DEFAULT_ENDPOINT, DIRECT_TIMEOUT, ClientConfig, DirectTransportSettings
from keycdn.errors import RequestFailure


def test_client_config_defaults_and_coercion():
    cfg = ClientConfig(api_key="secret")
    assert cfg.endpoint == DEFAULT_ENDPOINT == "https://api.keycdn.com"

    cfg = ClientConfig(api_key="secret", endpoint=12345)  # type: ignore[arg-type]
    assert cfg.endpoint == "12345"


def test_client_config_keeps_trailing_slash_verbatim():
    cfg = ClientConfig(api_key="k", endpoint="https://api.example.test///")
    assert cfg.endpoint == "https://api.example.test///"


def test_direct_transport_settings_defaults():
    settings = DirectTransportSettings()
    assert settings.timeout == DIRECT_TIMEOUT == 60.0
    assert settings.empty_body_is_error is True
    assert settings.verify_ssl is True


def test_request_failure_carries_message_and_code():
    exc = RequestFailure("KeyCDN-Error: boom, Output: ", code=502, error_type="ConnectError")
    assert str(exc) == "KeyCDN-Error: boom, Output: "
    assert exc.message == str(exc)
    assert exc.code == 502
    assert exc.error_type == "ConnectError"
    assert "502" in repr(exc)


def test_request_failure_code_optional():
    exc = RequestFailure("nope")
    assert exc.code is None
    assert exc.error_type is None


def test_setup_logging_uses_requested_level(monkeypatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    log.setup_logging("debug")
    assert captured["level"] == logging.DEBUG

    log.setup_logging("not-a-level")
    assert captured["level"] == logging.WARNING

    log.setup_logging()
    assert captured["level"] == logging.WARNING
