"""Tests for pointer.helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pointer.helpers import (
    format_timestamp,
    get_day_window,
    parse_bullets,
    strip_markdown_json,
    truncate_text,
)


class TestStripMarkdownJson:
    def test_fenced(self) -> None:
        """Language-tagged fences are removed."""
        assert strip_markdown_json('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain(self) -> None:
        """Unfenced content is only trimmed."""
        assert strip_markdown_json('  {"a": 1}\n') == '{"a": 1}'


class TestTruncateText:
    def test_short_text_untouched(self) -> None:
        assert truncate_text('hello', 100) == 'hello'

    def test_exact_length_untouched(self) -> None:
        assert truncate_text('x' * 100, 100) == 'x' * 100

    def test_long_text_cut(self) -> None:
        assert truncate_text('x' * 101, 100) == 'x' * 100 + '...'

    def test_none(self) -> None:
        assert truncate_text(None) == ''


class TestParseBullets:
    def test_numbered_with_paren(self) -> None:
        """'1)' style numbering counts as a bullet."""
        assert parse_bullets('1) First\n2) Second') == ['First', 'Second']

    def test_hyphenated_words_are_not_bullets(self) -> None:
        """A dash needs a following space to be a marker."""
        assert parse_bullets('-not a bullet\n- real one') == ['real one']


class TestDayWindow:
    def test_utc_day(self) -> None:
        """Window runs from midnight to the next midnight UTC."""
        start, end = get_day_window(datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc))
        assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 20, tzinfo=timezone.utc)

    def test_converts_other_timezones(self) -> None:
        """Non-UTC input is moved to UTC first."""
        auckland = timezone(timedelta(hours=13))
        start, _ = get_day_window(datetime(2026, 10, 20, 9, 0, tzinfo=auckland))
        assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)

    def test_defaults_to_now(self) -> None:
        start, end = get_day_window()
        assert start <= datetime.now(timezone.utc) < end


class TestFormatTimestamp:
    def test_millisecond_z_format(self) -> None:
        value = datetime(2026, 10, 19, 8, 5, 3, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == '2026-10-19T08:05:03.123Z'
