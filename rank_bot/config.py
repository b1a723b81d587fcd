"""Configuration and constants for the rank bot."""
import math
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

DISCORD_API_BASE_URL = "https://discord.com/api/v10"
VALORANT_GRAPHQL_URL = "https://valorant-server.iesdev.com/graphql"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

REQUIRED_SETTINGS = (
    'DISCORD_BOT_TOKEN',
    'DISCORD_APPLICATION_ID',
    'DISCORD_PUBLIC_KEY',
)

# Discord command definition, registered with a full replace on PATCH
RANK_COMMAND = {
    "type": 1,  # CHAT_INPUT
    "name": "rank",
    "description": "Get the user's rank from their Riot ID",
    "options": [
        {
            "name": "riotid",
            "description": "User's Riot ID - name#tagline",
            "type": 3,  # STRING
            "required": True
        }
    ]
}

COMMANDS = [RANK_COMMAND]


@dataclass(frozen=True)
class Config:
    """Application configuration, read from the environment per request."""

    bot_token: str = ''
    application_id: str = ''
    public_key: str = ''
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        if environ is None:
            environ = os.environ

        timeout = environ.get('HTTP_TIMEOUT_SECONDS', '').strip()
        try:
            http_timeout = float(timeout) if timeout else DEFAULT_HTTP_TIMEOUT_SECONDS
        except ValueError:
            http_timeout = DEFAULT_HTTP_TIMEOUT_SECONDS
        if not math.isfinite(http_timeout) or http_timeout <= 0:
            http_timeout = DEFAULT_HTTP_TIMEOUT_SECONDS

        return cls(
            bot_token=(environ.get('DISCORD_BOT_TOKEN') or '').strip(),
            application_id=(environ.get('DISCORD_APPLICATION_ID') or '').strip(),
            public_key=(environ.get('DISCORD_PUBLIC_KEY') or '').strip(),
            http_timeout=http_timeout,
        )

    def missing(self) -> List[str]:
        """Names of the required settings that are empty."""
        values = {
            'DISCORD_BOT_TOKEN': self.bot_token,
            'DISCORD_APPLICATION_ID': self.application_id,
            'DISCORD_PUBLIC_KEY': self.public_key,
        }
        return [name for name in REQUIRED_SETTINGS if not values[name]]

    @property
    def is_valid(self) -> bool:
        return not self.missing()
