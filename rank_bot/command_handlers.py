"""Handlers for Discord slash commands."""
from typing import Optional

from rank_bot.command_registry import CommandHandler
from rank_bot.config import Config
from rank_bot.discord_types import ApplicationCommandOptionType
from rank_bot.ranks import rank_label
from rank_bot.response_utils import channel_message
from rank_bot.valorant_service import ValorantService
from rank_bot.shared.observability import init_observability

logger, _ = init_observability('rank-bot-commands')

INVALID_RIOT_ID = "Invalid Riot ID"
FETCH_FAILED = "Failed to fetch user data"


def get_option(interaction: dict, name: str,
               option_type: ApplicationCommandOptionType) -> Optional[dict]:
    """First option called ``name``, if it has the expected type."""
    options = (interaction.get('data') or {}).get('options') or []
    option = next((o for o in options if isinstance(o, dict) and o.get('name') == name), None)
    if option is None or option.get('type') != option_type:
        return None
    return option


@CommandHandler.register('rank')
def handle_rank(interaction: dict) -> Optional[dict]:
    """Handle /rank riotid:<name#tag>."""
    option = get_option(interaction, 'riotid', ApplicationCommandOptionType.STRING)
    if option is None or not isinstance(option.get('value'), str):
        return None

    correlation_id = interaction.get('correlation_id')
    riot_id = ValorantService.parse_riot_id(option['value'])
    if riot_id is None:
        logger.info("Invalid Riot ID", correlation_id=correlation_id)
        return channel_message(INVALID_RIOT_ID)

    account = ValorantService.fetch_account(
        riot_id,
        timeout=Config.from_env().http_timeout,
        correlation_id=correlation_id
    )
    if account is None:
        return channel_message(FETCH_FAILED)

    label = rank_label(account.valorant_profile.latest_tier)
    logger.info("Rank resolved", correlation_id=correlation_id, riot_id=str(riot_id), rank=label)
    return channel_message(f"{riot_id}'s rank: {label}")
