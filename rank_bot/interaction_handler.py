"""Handler for Discord interactions."""
from typing import Optional, Tuple

from rank_bot.command_registry import CommandHandler
from rank_bot.discord_types import ApplicationCommandType, InteractionType
from rank_bot.response_utils import pong
from rank_bot.shared.observability import init_observability, traced_function
import rank_bot.command_handlers  # noqa: F401  Import to register handlers

logger, _ = init_observability('rank-bot-interactions')


class InteractionHandler:
    """Handler for Discord interactions."""

    @staticmethod
    def handle_ping() -> dict:
        """Handle Discord ping (type 1)."""
        return pong()

    @staticmethod
    def handle_application_command(interaction: dict) -> Optional[dict]:
        """Handle a chat input application command (type 2)."""
        data = interaction.get('data')
        if not isinstance(data, dict) or data.get('type') != ApplicationCommandType.CHAT_INPUT:
            return None
        return CommandHandler.handle(data.get('name'), interaction)

    @staticmethod
    @traced_function("process_interaction")
    def process(interaction: dict, correlation_id: str = None) -> Tuple[Optional[dict], int]:
        """Process a verified interaction.

        Returns:
            Tuple of (response_dict, status_code); response is None for
            anything the bot does not handle.
        """
        interaction_type = interaction.get('type')

        if interaction_type == InteractionType.PING:
            return InteractionHandler.handle_ping(), 200

        if interaction_type == InteractionType.APPLICATION_COMMAND:
            data = interaction.get('data')
            command_name = data.get('name') if isinstance(data, dict) else None
            logger.info("Application command received", correlation_id=correlation_id, command_name=command_name)
            response = InteractionHandler.handle_application_command(
                dict(interaction, correlation_id=correlation_id)
            )
            if response is not None:
                return response, 200

        logger.warning(
            "Unhandled interaction",
            correlation_id=correlation_id,
            interaction_type=interaction_type
        )
        return None, 400
