# Pointer Shared Module
# Common functions used across all Pointer apps

from .helpers import (
    strip_markdown_json,
    truncate_text,
    get_day_window,
    format_timestamp
)

from .airtable import (
    create_feedback,
    get_feedback_between
)

from .claude import (
    ClaudeGenerator,
    get_generator
)

from .classifier import (
    classify_feedback,
    classify_by_rules
)

from .escalations import (
    group_by_theme,
    build_escalations
)
