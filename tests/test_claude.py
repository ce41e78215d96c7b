"""Tests for pointer.claude."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

import pointer.claude as claude


class FakeMessages:
    def __init__(self, content) -> None:
        self.content = content
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        return SimpleNamespace(content=self.content)


class TestClaudeGenerator:
    """Tests for the Anthropic wrapper."""

    def test_returns_first_text_block(self) -> None:
        """The first text block of the reply is returned."""
        messages = FakeMessages([SimpleNamespace(type='text', text='{"sentiment": "positive"}')])
        generator = claude.ClaudeGenerator(SimpleNamespace(messages=messages), model='test-model')

        assert generator.generate('hello', max_tokens=50, system='SYSTEM') == '{"sentiment": "positive"}'
        assert messages.kwargs['model'] == 'test-model'
        assert messages.kwargs['max_tokens'] == 50
        assert messages.kwargs['system'] == 'SYSTEM'
        assert messages.kwargs['messages'] == [{'role': 'user', 'content': 'hello'}]

    def test_system_omitted_when_not_given(self) -> None:
        messages = FakeMessages([SimpleNamespace(type='text', text='ok')])
        claude.ClaudeGenerator(SimpleNamespace(messages=messages)).generate('hi', max_tokens=10)
        assert 'system' not in messages.kwargs

    def test_no_text_block_raises(self) -> None:
        """An empty reply is an error for the caller to fall back on."""
        generator = claude.ClaudeGenerator(SimpleNamespace(messages=FakeMessages([])))
        with pytest.raises(ValueError):
            generator.generate('hi', max_tokens=10)


class TestGetGenerator:
    """Tests for building the live generator from config."""

    def test_none_without_api_key(self, monkeypatch) -> None:
        monkeypatch.setattr(claude, 'ANTHROPIC_API_KEY', None)
        assert claude.get_generator() is None

    def test_none_when_disabled(self, monkeypatch) -> None:
        monkeypatch.setattr(claude, 'ANTHROPIC_API_KEY', 'sk-test')
        monkeypatch.setattr(claude, 'AI_ENABLED', False)
        assert claude.get_generator() is None

    def test_builds_generator(self, monkeypatch) -> None:
        monkeypatch.setattr(claude, 'ANTHROPIC_API_KEY', 'sk-test')
        monkeypatch.setattr(claude, 'AI_ENABLED', True)
        generator = claude.get_generator()
        assert isinstance(generator, claude.ClaudeGenerator)
        assert generator.model == claude.ANTHROPIC_MODEL
