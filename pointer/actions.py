# Pointer Shared Action Items
# Suggested next steps per escalated theme

from .config import MAX_ACTION_ITEMS
from .helpers import parse_bullets

ACTION_TEMPLATES = {
    'security': [
        'Triage reported vulnerabilities with the security team today',
        'Audit authentication and API key handling for the affected flows',
        'Rotate any credentials that may have been exposed',
        'Publish a security advisory once a fix is confirmed'
    ],
    'performance': [
        'Profile the slowest endpoints named in recent reports',
        'Check latency dashboards for regressions since the last release',
        'Add load tests covering the affected workloads',
        'Share a performance status update with affected customers'
    ],
    'data integrity': [
        'Stop affected import jobs until the root cause is known',
        'Verify backups and restore points for impacted accounts',
        'Add validation checks to bulk data operations',
        'Contact affected customers with a recovery plan'
    ],
    'system errors': [
        'Collect error logs and stack traces from reported failures',
        'Reproduce the top errors in a staging environment',
        'Prioritise fixes for the most frequent failures',
        'Add alerting for recurring error patterns'
    ],
    'api': [
        'Review API error rates and rate limit rejections',
        'Reproduce the reported API failures with sample requests',
        'Update API docs to match current behaviour',
        'Tell developers about upcoming API changes'
    ],
    'integration': [
        'Test the affected connectors against the latest release',
        'Check third-party API changes that may break sync',
        'Add integration tests for the failing connectors',
        'Reach out to partners about the broken integrations'
    ],
    'user interface': [
        'Review UI feedback with the design team',
        'Reproduce the reported interface issues across browsers',
        'Prioritise usability fixes for the next sprint',
        'Run a quick usability session with affected users'
    ],
    'documentation': [
        'Audit docs pages mentioned in the feedback',
        'Update code examples to match the current API',
        'Add missing guides for common workflows',
        'Add a feedback link to every docs page'
    ]
}

DEFAULT_ACTIONS = [
    'Review all feedback for this theme with the owning team',
    'Identify the root cause behind the most common complaints',
    'Assign an owner and a target date for a fix',
    'Follow up with the customers who raised it'
]


def get_template_actions(theme):
    """Return a fresh copy of the template for a theme (or the default)"""
    return list(ACTION_TEMPLATES.get(theme, DEFAULT_ACTIONS))


def parse_action_items(content):
    """Pull up to four bullet items out of Claude's reply"""
    return parse_bullets(content)[:MAX_ACTION_ITEMS]


def generate_action_items(theme, feedbacks, generator=None, system=None):
    """Suggest action items for a theme.

    Asks Claude for bullet points built from the theme's feedback text.
    Falls back to the theme's static template if Claude is unavailable,
    errors, or replies without any bullets. Never raises.
    """
    if generator is not None:
        try:
            feedback_text = '\n'.join(feedback.get('text', '') for feedback in feedbacks)
            content = generator.generate(
                f"Theme: {theme}\n\nFeedback:\n{feedback_text}",
                max_tokens=200,
                system=system
            )
            items = parse_action_items(content)
            if items:
                return items
            print(f"Claude returned no action items for '{theme}', using template")
        except Exception as e:
            print(f"Claude action items failed for '{theme}', using template: {e}")

    return get_template_actions(theme)
