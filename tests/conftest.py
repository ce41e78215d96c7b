"""Shared fixtures for Pointer tests."""

from __future__ import annotations

import pytest


class FakeGenerator:
    """Stands in for ClaudeGenerator: returns canned replies or raises."""

    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def generate(self, prompt, max_tokens, system=None, temperature=0.2):
        self.calls.append({'prompt': prompt, 'max_tokens': max_tokens, 'system': system})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_generator():
    """Factory for FakeGenerator instances."""
    return FakeGenerator


@pytest.fixture
def make_feedback():
    """Factory for feedback dicts as returned by the store."""

    def _make(source: str, sentiment: str, theme: str, text: str = 'Something happened') -> dict:
        return {'source': source, 'text': text, 'sentiment': sentiment, 'theme': theme}

    return _make
