"""Valorant competitive tier codes."""
from types import MappingProxyType
from typing import Optional

UNKNOWN_RANK = "Unknown"

# Tiers 1 and 2 are unused by the ranking service
RANK_LABELS = MappingProxyType({
    0: "Unranked",
    3: "Iron 1",
    4: "Iron 2",
    5: "Iron 3",
    6: "Bronze 1",
    7: "Bronze 2",
    8: "Bronze 3",
    9: "Silver 1",
    10: "Silver 2",
    11: "Silver 3",
    12: "Gold 1",
    13: "Gold 2",
    14: "Gold 3",
    15: "Platinum 1",
    16: "Platinum 2",
    17: "Platinum 3",
    18: "Diamond 1",
    19: "Diamond 2",
    20: "Diamond 3",
    21: "Ascendent 1",
    22: "Ascendent 2",
    23: "Ascendent 3",
    24: "Immortal 1",
    25: "Immortal 2",
    26: "Immortal 3",
    27: "Radiant",
})


def rank_label(tier: Optional[int]) -> str:
    """Display label for a tier code, ``Unknown`` outside the table."""
    return RANK_LABELS.get(tier, UNKNOWN_RANK)
