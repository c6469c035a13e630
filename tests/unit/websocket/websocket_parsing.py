"""Unit tests for inbound frame parsing."""

from __future__ import annotations

import json

import pytest

from wikisocket.config.websocket import WS_MAX_FRAME_CHARS
from wikisocket.handlers.websocket.parser import parse_client_message


def test_parse_returns_command_with_payload() -> None:
    command = parse_client_message('{"type": "login", "payload": {"username": "a", "password": "b"}}')

    assert command.name == "login"
    assert command.payload == {"username": "a", "password": "b"}


def test_parse_defaults_missing_payload_to_none() -> None:
    assert parse_client_message('{"type": "logout"}').payload is None


def test_parse_passes_non_mapping_payload_through() -> None:
    assert parse_client_message('{"type": "login", "payload": [1, 2]}').payload == [1, 2]


def test_parse_keeps_command_case() -> None:
    assert parse_client_message('{"type": "LoadHomePage"}').name == "LoadHomePage"


@pytest.mark.parametrize(
    ("raw", "match"),
    [
        (None, "Empty"),
        ("   ", "Empty"),
        ("not json", "valid JSON"),
        ("[1, 2]", "JSON object"),
        ('{"payload": {}}', "type"),
        ('{"type": 5}', "type"),
        ('{"type": "  "}', "type"),
    ],
)
def test_parse_rejects_malformed_frames(raw, match) -> None:
    with pytest.raises(ValueError, match=match):
        parse_client_message(raw)


def test_parse_rejects_oversized_frames() -> None:
    raw = json.dumps({"type": "login", "payload": {"username": "x" * WS_MAX_FRAME_CHARS}})

    with pytest.raises(ValueError, match="exceeds"):
        parse_client_message(raw)
