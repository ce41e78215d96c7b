# Pointer Shared Classifier
# Sentiment + theme classification: Claude first, keyword rules as fallback

import json
import re

from .config import VALID_SENTIMENTS
from .helpers import strip_markdown_json

DEFAULT_SENTIMENT = 'neutral'
DEFAULT_THEME = 'general feedback'
MAX_THEME_WORDS = 3

# Checked in order - positive wins over negative
SENTIMENT_KEYWORDS = [
    ('positive', ['good', 'love', 'great']),
    ('negative', ['bad', 'broken', 'error'])
]

# Checked top to bottom, first match wins
THEME_RULES = [
    (['security', 'vulnerability', 'auth', 'password', 'login'], 'security'),
    (['slow', 'performance', 'lag', 'timeout'], 'performance'),
    (['data', 'corruption', 'loss', 'backup'], 'data integrity'),
    (['api', 'endpoint', 'request', 'response'], 'api'),
    (['ui', 'interface', 'design', 'button', 'menu'], 'user interface'),
    (['integration', 'connector', 'sync', 'connect'], 'integration'),
    (['build', 'deploy', 'compile', 'ci/cd'], 'build deployment'),
    (['memory', 'leak', 'ram', 'crash'], 'memory'),
    (['documentation', 'docs', 'guide', 'example'], 'documentation'),
    (['feature', 'add', 'want', 'need'], 'feature request'),
    (['billing', 'price', 'cost', 'charge'], 'billing'),
    (['error', 'broken', 'fail', 'bug'], 'system errors'),
    (['enterprise', 'sso', 'organization', 'company'], 'enterprise'),
    (['help', 'support', 'assist'], 'customer support'),
    (['update', 'upgrade', 'version', 'release'], 'updates')
]

# Keywords anchor at the start of a word so 'ui' doesn't fire on 'build'
# but 'crash' still catches 'crashes'
_THEME_PATTERNS = [
    (re.compile('|'.join(r'\b' + re.escape(keyword) for keyword in keywords)), theme)
    for keywords, theme in THEME_RULES
]


# ===================
# KEYWORD RULES
# ===================

def classify_sentiment_by_rules(text):
    """Case-insensitive substring match against the sentiment keyword buckets"""
    lowered = (text or '').lower()
    for sentiment, keywords in SENTIMENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return sentiment
    return DEFAULT_SENTIMENT


def classify_theme_by_rules(text):
    """Return the label of the first theme rule with a keyword in the text"""
    lowered = (text or '').lower()
    for pattern, theme in _THEME_PATTERNS:
        if pattern.search(lowered):
            return theme
    return DEFAULT_THEME


def classify_by_rules(text):
    return {
        'sentiment': classify_sentiment_by_rules(text),
        'theme': classify_theme_by_rules(text)
    }


# ===================
# CLAUDE
# ===================

def normalise_theme(theme):
    """Lower-case, collapse whitespace and keep at most three words"""
    words = theme.lower().split()
    return ' '.join(words[:MAX_THEME_WORDS])


def parse_classification(content):
    """Parse Claude's reply into {sentiment, theme}.

    Raises:
        ValueError: reply isn't JSON or doesn't have the expected shape
            (json.JSONDecodeError is a ValueError too)
    """
    result = json.loads(strip_markdown_json(content))

    if not isinstance(result, dict):
        raise ValueError(f'Expected a JSON object, got {type(result).__name__}')

    sentiment = result.get('sentiment')
    if not isinstance(sentiment, str) or sentiment.strip().lower() not in VALID_SENTIMENTS:
        raise ValueError(f'Invalid sentiment: {sentiment!r}')

    theme = result.get('theme')
    if not isinstance(theme, str) or not theme.strip():
        raise ValueError(f'Invalid theme: {theme!r}')

    return {
        'sentiment': sentiment.strip().lower(),
        'theme': normalise_theme(theme)
    }


def classify_feedback(text, generator=None, system=None):
    """Classify feedback text into a sentiment and a short theme.

    Tries Claude when a generator is available and falls back to the
    keyword rules on any failure. Never raises.

    Args:
        text: The raw feedback text
        generator: Object with generate(prompt, max_tokens, system=...) or None
        system: System prompt for the classification call

    Returns:
        Dict with 'sentiment' and 'theme'
    """
    if generator is not None:
        try:
            content = generator.generate(
                f'Feedback: "{text}"',
                max_tokens=50,
                system=system
            )
            return parse_classification(content)
        except Exception as e:
            print(f"Claude classification failed, using keyword rules: {e}")

    return classify_by_rules(text)
