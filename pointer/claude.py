# Pointer Shared Claude Functions
# Thin wrapper around the Anthropic client used for classification and action items

from anthropic import Anthropic
import httpx

from .config import ANTHROPIC_API_KEY, ANTHROPIC_MODEL, ANTHROPIC_TIMEOUT, AI_ENABLED


class ClaudeGenerator:
    """Generates text with Claude.

    Anything that raises here (network, timeout, API errors) is the caller's
    cue to use its deterministic fallback.
    """

    def __init__(self, client, model=ANTHROPIC_MODEL):
        self.client = client
        self.model = model

    def generate(self, prompt, max_tokens, system=None, temperature=0.2):
        """Send a single user message and return the first text block"""
        kwargs = {
            'model': self.model,
            'max_tokens': max_tokens,
            'temperature': temperature,
            'messages': [
                {'role': 'user', 'content': prompt}
            ]
        }
        if system:
            kwargs['system'] = system

        response = self.client.messages.create(**kwargs)

        for block in response.content:
            if getattr(block, 'type', None) == 'text':
                return block.text
        raise ValueError('Claude returned no text content')


def get_generator():
    """Build the live generator, or None when Claude is not configured"""
    if not ANTHROPIC_API_KEY or not AI_ENABLED:
        print("Claude not configured - using keyword rules and templates")
        return None

    anthropic_client = Anthropic(
        api_key=ANTHROPIC_API_KEY,
        http_client=httpx.Client(timeout=ANTHROPIC_TIMEOUT, follow_redirects=True)
    )
    return ClaudeGenerator(anthropic_client)
