# Pointer Feedback
# Feedback ingestion for Pointer
#
# - Accepts { source, text }
# - Classifies sentiment and theme (Claude, keyword rules as fallback)
# - Stores the classified record in Airtable

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify

from pointer import (
    get_generator,
    classify_feedback,
    create_feedback
)

app = Flask(__name__)

# Claude generator (None when no API key is configured)
generator = get_generator()

# Load prompt
PROMPT_PATH = os.path.join(os.path.dirname(__file__), 'prompt.txt')
with open(PROMPT_PATH, 'r') as f:
    CLASSIFY_PROMPT = f.read()


@app.route('/feedback', methods=['POST'])
def feedback():
    """Classify and store a piece of feedback.

    Accepts:
        - source: Channel it came from (support, github, twitter, community)
        - text: The feedback itself

    Returns:
        - id: Airtable record ID
        - sentiment: positive, neutral or negative
        - theme: Short theme label
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        source = data.get('source')
        text = data.get('text')

        if not isinstance(source, str) or not source.strip() or not isinstance(text, str) or not text.strip():
            return jsonify({'error': 'Missing required fields: source, text'}), 400

        source = source.strip().lower()

        classification = classify_feedback(text, generator=generator, system=CLASSIFY_PROMPT)

        record_id = create_feedback(
            source=source,
            text=text,
            sentiment=classification['sentiment'],
            theme=classification['theme']
        )

        if not record_id:
            return jsonify({'error': 'Internal server error'}), 500

        return jsonify({
            'success': True,
            'id': record_id,
            'sentiment': classification['sentiment'],
            'theme': classification['theme'],
            'message': 'Feedback stored successfully'
        }), 201

    except Exception as e:
        print(f"Error handling feedback: {e}")
        return jsonify({'error': 'Internal server error'}), 500


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Pointer Feedback',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
