"""Register the bot's slash commands from the command line.

Same effect as sending PATCH to the deployed endpoint::

    DISCORD_BOT_TOKEN=... DISCORD_APPLICATION_ID=... DISCORD_PUBLIC_KEY=... \\
        rank-bot-sync-commands
"""
import sys

from rank_bot.config import Config
from rank_bot.discord_service import DiscordService
from rank_bot.shared.observability import init_observability

logger, _ = init_observability('rank-bot-registrar')


def main() -> int:
    config = Config.from_env()
    if not config.is_valid:
        logger.error("Missing configuration", missing=config.missing())
        return 2

    if DiscordService.sync_commands(config):
        logger.info("Registration completed. Commands may take a few minutes to appear in Discord")
        return 0
    return 1


if __name__ == '__main__':
    sys.exit(main())
