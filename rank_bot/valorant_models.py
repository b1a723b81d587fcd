"""Pydantic models for the Valorant GraphQL RiotAccount response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLModel(BaseModel):
    """Base model mapping camelCase GraphQL fields, ignoring extras."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ValorantProfile(GraphQLModel):
    internal_uuid: str | None = Field(default=None, alias="internalUuid")
    region: str | None = None
    level: int | None = None
    xp: int | None = None
    last_played_at: str | None = Field(default=None, alias="lastPlayedAt")
    latest_tier: int | None = Field(default=None, alias="latestTier")
    latest_ranked_rating: int | None = Field(default=None, alias="latestRankedRating")


class RiotAccount(GraphQLModel):
    game_name: str | None = Field(default=None, alias="gameName")
    tag_line: str | None = Field(default=None, alias="tagLine")
    puuid: str | None = None
    valorant_profile: ValorantProfile | None = Field(default=None, alias="valorantProfile")


class RiotAccountData(GraphQLModel):
    riot_account: RiotAccount | None = Field(default=None, alias="riotAccount")


class RiotAccountResponse(GraphQLModel):
    """Top-level GraphQL envelope; ``data`` is absent on query errors."""

    data: RiotAccountData | None = None
    errors: list[Any] | None = None
