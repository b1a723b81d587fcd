"""Discord interactions endpoint for the Valorant rank bot.
Uses Functions Framework for Cloud Functions Gen2

POST   verified Discord interactions (ping, /rank)
PATCH  re-register the slash command schema with Discord
"""
import json

from functions_framework import http
from flask import Request

from rank_bot.config import Config
from rank_bot.discord_service import DiscordService
from rank_bot.interaction_handler import InteractionHandler
from rank_bot.response_utils import (
    INTERNAL_SERVER_ERROR,
    INVALID_METHOD,
    INVALID_REQUEST,
    INVALID_SIGNATURE,
    json_response,
    text_response,
)
from rank_bot.shared.correlation import with_correlation
from rank_bot.shared.observability import init_observability, traced_function

logger, _ = init_observability('rank-bot')

ALLOWED_METHODS = ('POST', 'PATCH')


@http
@with_correlation(logger)
@traced_function("rank_interactions")
def rank_interactions(request: Request):
    """Main HTTP handler."""
    correlation_id = getattr(request, 'correlation_id', None)

    if request.method not in ALLOWED_METHODS:
        logger.warning("Method not allowed", correlation_id=correlation_id, method=request.method)
        return text_response(INVALID_METHOD, 405)

    config = Config.from_env()
    if not config.is_valid:
        logger.error("Missing configuration", correlation_id=correlation_id, missing=config.missing())
        return text_response(INTERNAL_SERVER_ERROR, 500)

    if request.method == 'PATCH':
        return sync_commands(config, correlation_id)

    return discord_interactions(request, config, correlation_id)


def sync_commands(config: Config, correlation_id: str = None):
    """Register the command schema and report whether Discord accepted it."""
    return json_response(DiscordService.sync_commands(config, correlation_id=correlation_id))


def discord_interactions(request: Request, config: Config, correlation_id: str = None):
    """Verify and dispatch a Discord interaction."""
    signature = request.headers.get('X-Signature-Ed25519')
    timestamp = request.headers.get('X-Signature-Timestamp')
    body = request.get_data()

    if not signature or not timestamp:
        logger.warning("Missing Discord signature headers", correlation_id=correlation_id)
        return text_response(INVALID_SIGNATURE, 400)

    if not DiscordService.verify_signature(signature, timestamp, body, config.public_key):
        logger.warning("Invalid Discord signature", correlation_id=correlation_id)
        return text_response(INVALID_SIGNATURE, 400)

    try:
        interaction = json.loads(body)
    except ValueError:
        logger.warning("Invalid JSON in Discord interaction", correlation_id=correlation_id)
        return text_response(INVALID_REQUEST, 400)

    if not isinstance(interaction, dict):
        logger.warning("Discord interaction is not an object", correlation_id=correlation_id)
        return text_response(INVALID_REQUEST, 400)

    logger.info(
        "Processing Discord interaction",
        correlation_id=correlation_id,
        interaction_type=interaction.get('type'),
        interaction_id=interaction.get('id')
    )

    response, status_code = InteractionHandler.process(interaction, correlation_id=correlation_id)
    if response is None:
        return text_response(INVALID_REQUEST, status_code)
    return json_response(response, status_code)
