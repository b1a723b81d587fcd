"""Client for the Valorant ranking GraphQL API."""
import json
import re
from typing import NamedTuple, Optional

import requests
from pydantic import ValidationError

from rank_bot.config import VALORANT_GRAPHQL_URL, DEFAULT_HTTP_TIMEOUT_SECONDS
from rank_bot.valorant_models import RiotAccount, RiotAccountResponse
from rank_bot.shared.observability import init_observability, traced_function

logger, _ = init_observability('rank-bot-valorant')

RIOT_ACCOUNT_QUERY = (
    "query RiotAccount($gameName:String,$tagLine:String){"
    "riotAccount(gameName:$gameName,tagLine:$tagLine){"
    "gameName tagLine puuid "
    "valorantProfile{internalUuid region level xp lastPlayedAt latestTier latestRankedRating}"
    "}}"
)

# Unicode whitespace plus the byte order mark
_WHITESPACE = re.compile(r"[\s\ufeff]")


class RiotId(NamedTuple):
    name: str
    tag: str

    def __str__(self) -> str:
        return f"{self.name}#{self.tag}"


class ValorantService:
    """Lookups against the Valorant ranking service."""

    @staticmethod
    def parse_riot_id(raw: str) -> Optional[RiotId]:
        """Parse ``name#tag``, ignoring all whitespace and empty segments.

        Returns None unless exactly two non-empty segments remain.
        """
        parts = [part for part in _WHITESPACE.sub('', raw or '').split('#') if part]
        if len(parts) != 2:
            return None
        return RiotId(*parts)

    @staticmethod
    def build_params(riot_id: RiotId) -> dict:
        variables = {'gameName': riot_id.name, 'tagLine': riot_id.tag}
        return {
            'query': RIOT_ACCOUNT_QUERY,
            'variables': json.dumps(variables, separators=(',', ':')),
        }

    @staticmethod
    @traced_function("fetch_riot_account")
    def fetch_account(riot_id: RiotId, timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
                      correlation_id: str = None) -> Optional[RiotAccount]:
        """Fetch a Riot account with its Valorant profile.

        Returns None when the account is unknown, the request fails, or the
        payload does not match the expected shape.
        """
        try:
            response = requests.get(
                VALORANT_GRAPHQL_URL,
                params=ValorantService.build_params(riot_id),
                timeout=timeout
            )
        except requests.RequestException as e:
            logger.error("Riot account request failed", error=e, correlation_id=correlation_id)
            return None

        try:
            payload = RiotAccountResponse.model_validate(response.json())
        except ValidationError as e:
            logger.warning(
                "Unexpected Riot account payload",
                correlation_id=correlation_id,
                errors=e.errors(include_url=False, include_input=False)
            )
            return None
        except ValueError as e:
            logger.warning(
                "Riot account response is not JSON",
                correlation_id=correlation_id,
                status_code=response.status_code,
                error_message=str(e)
            )
            return None

        if payload.data is None or payload.data.riot_account is None:
            logger.info(
                "Riot account not found",
                correlation_id=correlation_id,
                riot_id=str(riot_id),
                upstream_errors=payload.errors
            )
            return None

        account = payload.data.riot_account
        if account.valorant_profile is None:
            logger.info("Riot account has no Valorant profile", correlation_id=correlation_id, riot_id=str(riot_id))
            return None

        return account
