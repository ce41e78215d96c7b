# Pointer Shared Helpers
# Utility functions used across all Pointer apps

import re
from datetime import datetime, time, timedelta, timezone

BULLET_PATTERN = re.compile(r'^\s*(?:[-*•]|\d+[.)])\s+')


def strip_markdown_json(content):
    """Strip markdown code blocks from Claude's JSON response"""
    content = content.strip()
    if content.startswith('```'):
        # Remove first line (```json or ```)
        content = content.split('\n', 1)[1] if '\n' in content else content[3:]
    if content.endswith('```'):
        # Remove trailing ```
        content = content.rsplit('```', 1)[0]
    return content.strip()


def truncate_text(text, length=100):
    """Cut text to `length` characters, adding '...' when anything was dropped"""
    text = text or ''
    if len(text) > length:
        return text[:length] + '...'
    return text


def parse_bullets(content):
    """Pull bullet items out of a block of text.

    Only lines that start with a bullet marker (-, *, • or 1. / 1)) count.
    The marker is stripped and empty items are dropped.
    """
    items = []
    for line in (content or '').splitlines():
        match = BULLET_PATTERN.match(line)
        if not match:
            continue
        item = line[match.end():].strip()
        if item:
            items.append(item)
    return items


def get_day_window(now=None):
    """Return (start, end) datetimes covering the UTC day containing `now`.

    Args:
        now: Aware datetime to anchor on (default: current UTC time)

    Returns:
        Tuple of aware datetimes, start inclusive and end exclusive
    """
    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    start = datetime.combine(now.date(), time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def format_timestamp(value):
    """Format an aware datetime as an ISO-8601 UTC string (e.g. '2026-10-19T08:30:00.000Z')"""
    value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'
