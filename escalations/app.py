# Pointer Escalations
# Today's top feedback themes, ranked by priority

import sys
import os
from datetime import datetime, timezone

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, jsonify

from pointer import (
    get_generator,
    get_day_window,
    format_timestamp,
    get_feedback_between,
    group_by_theme,
    build_escalations
)

app = Flask(__name__)

# Claude generator (None when no API key is configured)
generator = get_generator()

# Load prompt
PROMPT_PATH = os.path.join(os.path.dirname(__file__), 'prompt.txt')
with open(PROMPT_PATH, 'r') as f:
    ACTIONS_PROMPT = f.read()


@app.route('/escalations', methods=['GET'])
def escalations():
    """Rank today's feedback themes.

    Returns:
        - escalations: Top 3 themes with score, breakdowns, samples, action items
        - totalThemes: Number of distinct themes today
        - totalFeedback: Number of feedback items today
        - generatedAt: When this was computed
    """
    try:
        now = datetime.now(timezone.utc)
        start, end = get_day_window(now)

        feedbacks = get_feedback_between(start, end)

        if feedbacks is None:
            return jsonify({'error': 'Internal server error'}), 500

        if not feedbacks:
            return jsonify({
                'escalations': [],
                'message': 'No feedback from today',
                'totalThemes': 0,
                'totalFeedback': 0,
                'generatedAt': format_timestamp(now)
            })

        ranked = build_escalations(feedbacks, generator=generator, system=ACTIONS_PROMPT)
        theme_count = len(group_by_theme(feedbacks))

        return jsonify({
            'escalations': ranked,
            'totalThemes': theme_count,
            'totalFeedback': len(feedbacks),
            'generatedAt': format_timestamp(datetime.now(timezone.utc))
        })

    except Exception as e:
        print(f"Error building escalations: {e}")
        return jsonify({'error': 'Internal server error'}), 500


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Pointer Escalations',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
