"""Response helpers.

Handlers return Flask-style ``(body, status, headers)`` tuples.
"""
import json

from rank_bot.discord_types import InteractionResponseType

JSON_CONTENT_TYPE = 'application/json;charset=UTF-8'
TEXT_CONTENT_TYPE = 'text/plain;charset=UTF-8'

INVALID_METHOD = 'Invalid Method'
INTERNAL_SERVER_ERROR = 'Internal Server Error'
INVALID_SIGNATURE = 'Invalid Request Signature'
INVALID_REQUEST = 'Invalid request'


def json_response(data, status_code: int = 200) -> tuple:
    """Serialize ``data`` as indented JSON."""
    return json.dumps(data, indent=2), status_code, {'Content-Type': JSON_CONTENT_TYPE}


def text_response(message: str, status_code: int) -> tuple:
    return message, status_code, {'Content-Type': TEXT_CONTENT_TYPE}


def pong() -> dict:
    return {'type': InteractionResponseType.PONG.value}


def channel_message(content: str) -> dict:
    """Build a ChannelMessageWithSource response carrying plain text."""
    return {
        'type': InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE.value,
        'data': {
            'content': content
        }
    }
