# Pointer Shared Escalations
# Groups classified feedback by theme and ranks the themes by priority

from concurrent.futures import ThreadPoolExecutor

from .actions import generate_action_items
from .config import (
    VOLUME_WEIGHT,
    SENTIMENT_WEIGHTS,
    SOURCE_WEIGHTS,
    MULTI_SOURCE_WEIGHT,
    NEGATIVITY_THRESHOLD,
    NEGATIVITY_BONUS,
    MAX_ESCALATIONS,
    MAX_SAMPLES,
    SAMPLE_LENGTH
)
from .helpers import truncate_text

DEFAULT_GROUP_THEME = 'general'


def group_by_theme(feedbacks):
    """Group feedback by theme, keeping first-seen theme order.

    Missing or blank themes are grouped under 'general'.
    """
    groups = {}
    for feedback in feedbacks:
        theme = (feedback.get('theme') or '').strip() or DEFAULT_GROUP_THEME
        groups.setdefault(theme, []).append(feedback)
    return groups


def calculate_escalation_score(feedbacks):
    """Opinionated priority score for one theme group.

    - 10 per item (volume)
    - sentiment: negative 25, neutral 5, positive 1
    - source: community 20, support 15, github 10, twitter 5, other 0
    - 8 per distinct source when more than one source reports it
    - flat 30 when over 70% of the group is negative
    """
    if not feedbacks:
        return 0

    score = len(feedbacks) * VOLUME_WEIGHT

    for feedback in feedbacks:
        score += SENTIMENT_WEIGHTS.get(feedback.get('sentiment'), 0)
        score += SOURCE_WEIGHTS.get(feedback.get('source'), 0)

    unique_sources = len({feedback.get('source') for feedback in feedbacks})
    if unique_sources > 1:
        score += unique_sources * MULTI_SOURCE_WEIGHT

    negative_count = sum(1 for feedback in feedbacks if feedback.get('sentiment') == 'negative')
    if negative_count / len(feedbacks) > NEGATIVITY_THRESHOLD:
        score += NEGATIVITY_BONUS

    return round(score)


def get_sentiment_breakdown(feedbacks):
    """Count positive/neutral/negative. Unknown sentiments aren't counted."""
    breakdown = {'positive': 0, 'neutral': 0, 'negative': 0}
    for feedback in feedbacks:
        sentiment = feedback.get('sentiment')
        if sentiment in breakdown:
            breakdown[sentiment] += 1
    return breakdown


def get_source_breakdown(feedbacks):
    breakdown = {}
    for feedback in feedbacks:
        source = feedback.get('source')
        breakdown[source] = breakdown.get(source, 0) + 1
    return breakdown


def get_sample_feedback(feedbacks):
    """First few items with text trimmed for display"""
    return [
        {
            'source': feedback.get('source'),
            'text': truncate_text(feedback.get('text'), SAMPLE_LENGTH),
            'sentiment': feedback.get('sentiment')
        }
        for feedback in feedbacks[:MAX_SAMPLES]
    ]


def build_escalations(feedbacks, generator=None, system=None, limit=MAX_ESCALATIONS):
    """Turn a window of classified feedback into the ranked escalation list.

    Args:
        feedbacks: List of feedback dicts (source, text, sentiment, theme)
        generator: Optional Claude generator for action items
        system: System prompt for the action item call
        limit: How many themes to keep (default 3)

    Returns:
        List of escalation dicts, highest score first. Empty list for no input.
    """
    groups = group_by_theme(feedbacks)
    if not groups:
        return []

    scored_themes = [
        (theme, calculate_escalation_score(group), group)
        for theme, group in groups.items()
    ]

    # sorted() is stable, so ties keep first-seen order
    top_themes = sorted(scored_themes, key=lambda item: item[1], reverse=True)[:limit]
    if not top_themes:
        return []

    # One action item call per theme, run side by side; map() keeps ranked order
    with ThreadPoolExecutor(max_workers=len(top_themes)) as executor:
        action_items = list(executor.map(
            lambda item: generate_action_items(item[0], item[2], generator=generator, system=system),
            top_themes
        ))

    return [
        {
            'theme': theme,
            'score': score,
            'feedbackCount': len(group),
            'sentimentBreakdown': get_sentiment_breakdown(group),
            'sourceBreakdown': get_source_breakdown(group),
            'sampleFeedback': get_sample_feedback(group),
            'actionItems': items
        }
        for (theme, score, group), items in zip(top_themes, action_items)
    ]
