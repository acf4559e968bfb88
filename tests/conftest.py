"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from cubicclient.config import get_settings


@pytest.fixture
def user_message():
    """A valid message from a user, as a plain dict."""
    return {
        "sender": {"id": "user_123", "name": "John Doe"},
        "type": "text",
        "content": "Hello, agent!",
    }


@pytest.fixture
def conversation():
    """A short valid conversation."""
    return [
        {
            "sender": {"id": "user_123", "name": "John Doe"},
            "type": "text",
            "content": "Hello",
        },
        {
            "sender": {"id": "gpt_4o", "name": "GPT-4O Agent"},
            "type": "text",
            "content": "Hi there!",
            "timestamp": "2025-07-30T10:00:00Z",
        },
    ]


@pytest.fixture
def call_response_data():
    """Body returned by the dispatch endpoints."""
    return {
        "sender": {"id": "gpt_4o", "name": "GPT-4O Agent"},
        "timestamp": "2025-07-30T10:00:00Z",
        "type": "text",
        "content": "Response from agent",
        "metadata": {"usedToken": 150, "usedTools": 2},
    }


@pytest.fixture
def health_data():
    """Body returned by the health endpoint, with two services omitted."""
    return {
        "status": "healthy",
        "timestamp": "2025-07-30T10:00:00Z",
        "services": {
            "prompt": {"status": "healthy"},
            "agents": {"status": "healthy", "count": 2, "agents": ["gpt_4o", "claude"]},
        },
    }


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear memoized settings and client env vars around a test."""
    for name in ("CUBIC_BASE_URL", "CUBIC_TIMEOUT_MS", "CUBIC_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
