"""Service for Discord API interactions."""
from typing import Optional

import requests
from nacl.signing import VerifyKey
from nacl.exceptions import BadSignatureError

from rank_bot.config import Config, COMMANDS, DISCORD_API_BASE_URL
from rank_bot.shared.observability import init_observability, traced_function

logger, _ = init_observability('rank-bot-discord')


class DiscordService:
    """Service for Discord API interactions."""

    @staticmethod
    @traced_function("verify_signature")
    def verify_signature(signature: Optional[str], timestamp: Optional[str],
                         body: bytes, public_key: str) -> bool:
        """Verify the Ed25519 signature Discord puts on every interaction.

        The signed message is the timestamp header followed by the raw body.
        Missing headers and malformed hex fail closed.
        """
        if not signature or not timestamp or not public_key:
            return False

        try:
            verify_key = VerifyKey(bytes.fromhex(public_key))
            verify_key.verify(timestamp.encode() + body, bytes.fromhex(signature))
            return True
        except (BadSignatureError, ValueError) as e:
            logger.warning("Signature verification failed", error_type=type(e).__name__)
            return False

    @staticmethod
    @traced_function("sync_commands")
    def sync_commands(config: Config, correlation_id: str = None) -> bool:
        """Replace the application's global commands with ``COMMANDS``.

        Returns True when Discord accepted the bulk overwrite.
        """
        url = f"{DISCORD_API_BASE_URL}/applications/{config.application_id}/commands"
        headers = {
            "Authorization": f"Bot {config.bot_token}",
            "Content-Type": "application/json"
        }

        logger.info(
            "Syncing commands",
            correlation_id=correlation_id,
            commands=[command['name'] for command in COMMANDS]
        )
        try:
            response = requests.put(url, headers=headers, json=COMMANDS, timeout=config.http_timeout)
        except requests.RequestException as e:
            logger.error("Command sync request failed", error=e, correlation_id=correlation_id)
            return False

        if not response.ok:
            logger.error(
                "Command sync rejected",
                correlation_id=correlation_id,
                status_code=response.status_code,
                response_text=response.text[:200]
            )
            return False

        logger.info("Commands synced", correlation_id=correlation_id, status_code=response.status_code)
        return True
