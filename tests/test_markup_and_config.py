from datetime import datetime

import pytest

from wanderguide.config import Settings, get_settings
from wanderguide.models import Message, Role
from wanderguide.server import build_manager
from wanderguide.utils.markup import render_html


def test_render_bold_and_lines():
    assert render_html("**Bus 12** leaves\nsoon") == "<strong>Bus 12</strong> leaves<br>\nsoon"


def test_render_escapes_html():
    assert render_html("<b>x</b> & **y**") == "&lt;b&gt;x&lt;/b&gt; &amp; <strong>y</strong>"


def test_message_serialization():
    msg = Message(role=Role.USER, text="hi", timestamp=datetime(2024, 5, 1, 9, 5))
    assert msg.display_time() == "09:05"
    data = msg.to_dict()
    assert data["role"] == "user"
    assert data["timestamp"] == "2024-05-01T09:05:00"
    assert len(data["id"]) == 32


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WANDERGUIDE_MIN_DELAY_MS", "100")
    monkeypatch.setenv("WANDERGUIDE_MAX_DELAY_MS", "200")
    monkeypatch.setenv("WANDERGUIDE_SEED", "9")
    monkeypatch.setenv("WANDERGUIDE_DEBUG", "true")
    s = get_settings()
    assert (s.min_delay_ms, s.max_delay_ms, s.seed, s.debug) == (100, 200, 9, True)


def test_settings_defaults(monkeypatch):
    for name in ("WANDERGUIDE_MIN_DELAY_MS", "WANDERGUIDE_MAX_DELAY_MS", "WANDERGUIDE_SEED"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert (s.min_delay_ms, s.max_delay_ms, s.seed) == (800, 1500, None)


def test_invalid_settings(monkeypatch):
    with pytest.raises(ValueError):
        build_manager(Settings(min_delay_ms=900, max_delay_ms=100))
    monkeypatch.setenv("WANDERGUIDE_PORT", "eighty")
    with pytest.raises(ValueError):
        get_settings()
