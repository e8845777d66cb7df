"""
Roster adapter: turns sign-up sheet rows into Players for the matchmaker.

The sheet itself lives outside this package; callers pass a lookup function
that returns a row dict (or None) for a username.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from config import (
    DEFAULT_PLAYER_RATING,
    DEFAULT_PRIMARY_ROLE,
    DEFAULT_RIOT_ID,
    DEFAULT_SECONDARY_ROLE,
    RANK_RATINGS,
)
from domain.models.player import Player
from domain.models.team import FILL
from services.error_codes import NOT_FOUND
from services.result import Result

logger = logging.getLogger("fightnight.roster")

RosterLookup = Callable[[str], "dict[str, Any] | None"]

# Sheet rows with an empty or unrecognized role fall back to these
SHEET_PRIMARY_FALLBACK = "Mid"
SHEET_SECONDARY_FALLBACK = "Support"

ROLE_ALIASES = {
    "top": "Top",
    "jungle": "Jungle",
    "jg": "Jungle",
    "jng": "Jungle",
    "mid": "Mid",
    "middle": "Mid",
    "ad": "AD",
    "adc": "AD",
    "bot": "AD",
    "carry": "AD",
    "support": "Support",
    "sup": "Support",
    "supp": "Support",
    "fill": FILL,
}


def normalize_role(raw: str | None, fallback: str) -> str:
    """
    Map free-form role text to a catalog role or Fill.

    Empty cells and unrecognized text get ``fallback``.
    """
    if raw is None or not str(raw).strip():
        return fallback
    key = str(raw).strip().lower()
    if key in ROLE_ALIASES:
        return ROLE_ALIASES[key]
    logger.debug(f"Unknown role {raw!r}, using {fallback}")
    return fallback


def rating_for_rank(rank: str | None, mmr: Any = None) -> int:
    """
    Convert the roster's rank (or mmr) columns to a rating.

    Known ranks use the rank table. Otherwise a positive numeric mmr wins,
    and anything else (an empty rank included) gets the Silver default.
    """
    if rank is not None and str(rank).strip():
        rating = RANK_RATINGS.get(str(rank).strip().lower())
        if rating is not None:
            return rating
    try:
        rating = int(mmr)
    except (TypeError, ValueError):
        return DEFAULT_PLAYER_RATING
    return rating if rating > 0 else DEFAULT_PLAYER_RATING


class RosterService:
    """Builds Players from roster lookups, substituting defaults for unknown users."""

    def __init__(self, lookup: RosterLookup):
        self.lookup = lookup

    def get_roster_entry(self, username: str) -> Result[dict]:
        entry = self.lookup(username)
        if entry is None:
            return Result.fail(f"{username} is not on the roster", code=NOT_FOUND)
        return Result.ok(entry)

    def build_player(
        self,
        username: str,
        display_name: str | None = None,
        player_id: str | None = None,
    ) -> Player:
        """
        Build the Player the matchmaker sees for a signed-up user.

        Args:
            username: Key into the roster
            display_name: Label to show; defaults to the username
            player_id: Identity token; defaults to the username

        Returns:
            Player with roster values, or default rating and Fill/Fill when missing
        """
        name = display_name or username
        pid = player_id or username
        result = self.get_roster_entry(username)
        if not result:
            logger.info(f"{username} not found on roster, using defaults")
            return Player(
                player_id=pid,
                name=name,
                rating=DEFAULT_PLAYER_RATING,
                primary_role=DEFAULT_PRIMARY_ROLE,
                secondary_role=DEFAULT_SECONDARY_ROLE,
                riot_id=DEFAULT_RIOT_ID,
            )

        entry = result.value
        if entry.get("rating") is not None:
            rating = int(entry["rating"])
        else:
            rating = rating_for_rank(entry.get("rank"), entry.get("mmr"))
        return Player(
            player_id=pid,
            name=name,
            rating=rating,
            primary_role=normalize_role(entry.get("primary_role"), SHEET_PRIMARY_FALLBACK),
            secondary_role=normalize_role(entry.get("secondary_role"), SHEET_SECONDARY_FALLBACK),
            riot_id=entry.get("riot_id") or DEFAULT_RIOT_ID,
        )
