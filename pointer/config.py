# Pointer Shared Config
# Central configuration for all Pointer apps

import os

# Airtable
AIRTABLE_API_KEY = os.environ.get('AIRTABLE_API_KEY')
AIRTABLE_BASE_ID = os.environ.get('AIRTABLE_BASE_ID', 'appPointerFeedbk')
AIRTABLE_TIMEOUT = float(os.environ.get('AIRTABLE_TIMEOUT', 10.0))

# Table names
AIRTABLE_FEEDBACK_TABLE = os.environ.get('AIRTABLE_FEEDBACK_TABLE', 'Feedback')

# Anthropic
ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
ANTHROPIC_MODEL = os.environ.get('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')
ANTHROPIC_TIMEOUT = float(os.environ.get('ANTHROPIC_TIMEOUT', 20.0))
AI_ENABLED = os.environ.get('POINTER_AI_ENABLED', 'true').lower() not in ('0', 'false', 'no')

# Sentiments
VALID_SENTIMENTS = ['positive', 'neutral', 'negative']

# Escalation scoring
VOLUME_WEIGHT = 10
SENTIMENT_WEIGHTS = {
    'negative': 25,
    'neutral': 5,
    'positive': 1
}
SOURCE_WEIGHTS = {
    'community': 20,  # forum, mostly enterprise
    'support': 15,
    'github': 10,
    'twitter': 5
}
MULTI_SOURCE_WEIGHT = 8
NEGATIVITY_THRESHOLD = 0.7
NEGATIVITY_BONUS = 30

# Escalation output
MAX_ESCALATIONS = 3
MAX_SAMPLES = 3
SAMPLE_LENGTH = 100
MAX_ACTION_ITEMS = 4
