# Pointer Shared Airtable Functions
# All Airtable read/write operations for the feedback table

import httpx
from .config import AIRTABLE_API_KEY, AIRTABLE_BASE_ID, AIRTABLE_FEEDBACK_TABLE, AIRTABLE_TIMEOUT
from .helpers import format_timestamp


def _get_headers():
    """Get standard Airtable headers"""
    return {
        'Authorization': f'Bearer {AIRTABLE_API_KEY}',
        'Content-Type': 'application/json'
    }


def _get_table_url():
    return f"https://api.airtable.com/v0/{AIRTABLE_BASE_ID}/{AIRTABLE_FEEDBACK_TABLE}"


def _record_to_feedback(record):
    """Flatten an Airtable record into a feedback dict"""
    fields = record.get('fields', {})
    return {
        'id': record.get('id'),
        'source': fields.get('Source', ''),
        'text': fields.get('Text', ''),
        'sentiment': fields.get('Sentiment', 'neutral'),
        'theme': fields.get('Theme', ''),
        'created_at': record.get('createdTime', '')
    }


# ===================
# READ OPERATIONS
# ===================

def get_feedback_between(start, end):
    """Get all feedback created in [start, end), newest first.

    Follows Airtable's offset cursor until every page is read.
    Returns a list of feedback dicts (possibly empty), or None on failure
    so callers can tell an empty day from a broken store.
    Used by Escalations to load today's window.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        filter_formula = (
            f"AND(NOT(IS_BEFORE(CREATED_TIME(), '{format_timestamp(start)}')), "
            f"IS_BEFORE(CREATED_TIME(), '{format_timestamp(end)}'))"
        )
        params = {'filterByFormula': filter_formula}

        feedback = []
        while True:
            response = httpx.get(_get_table_url(), headers=_get_headers(), params=params, timeout=AIRTABLE_TIMEOUT)
            response.raise_for_status()

            payload = response.json()
            feedback.extend(_record_to_feedback(record) for record in payload.get('records', []))

            offset = payload.get('offset')
            if not offset:
                break
            params['offset'] = offset

        # Newest first, on Airtable's own createdTime
        feedback.sort(key=lambda f: f['created_at'] or '', reverse=True)
        return feedback

    except Exception as e:
        print(f"Error getting feedback from Airtable: {e}")
        return None


# ===================
# WRITE OPERATIONS
# ===================

def create_feedback(source, text, sentiment, theme):
    """Create a new feedback record.

    Used by Feedback once the text has been classified.
    Returns the new record ID or None on failure.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        feedback_data = {
            'fields': {
                'Source': source,
                'Text': text,
                'Sentiment': sentiment,
                'Theme': theme
            }
        }

        response = httpx.post(_get_table_url(), headers=_get_headers(), json=feedback_data, timeout=AIRTABLE_TIMEOUT)
        response.raise_for_status()

        new_record = response.json()
        print(f"Created feedback from {source}: {sentiment} / {theme}")
        return new_record.get('id')

    except Exception as e:
        print(f"Error creating feedback in Airtable: {e}")
        return None
