"""
Centralized configuration for the Fight Night matchmaker.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


MATCH_SIZE = 10  # Two teams of five

MATCHMAKING_SETTINGS: dict[str, Any] = {
    "trials_per_batch": max(1, _parse_int("MATCHMAKING_TRIALS", 100)),
    # Autofilled players count for (100 - pct)% of their rating, rounded down
    "autofill_rating_penalty_percent": _parse_int("AUTOFILL_RATING_PENALTY_PERCENT", 20),
    "secondary_role_penalty": _parse_float("SECONDARY_ROLE_PENALTY", 10.0),
    "autofill_penalty": _parse_float("AUTOFILL_PENALTY", 100.0),
    # Soft wall-clock budget for a whole schedule() call; 0 disables it
    "time_budget_seconds": max(0.0, _parse_float("MATCHMAKING_TIME_BUDGET_SECONDS", 0.0)),
    "max_workers": max(1, _parse_int("MATCHMAKING_MAX_WORKERS", 1)),
}

# Roster defaults for players missing from the sign-up sheet
DEFAULT_PLAYER_RATING = _parse_int("DEFAULT_PLAYER_RATING", 300)  # Silver
DEFAULT_PRIMARY_ROLE = os.getenv("DEFAULT_PRIMARY_ROLE", "Fill")
DEFAULT_SECONDARY_ROLE = os.getenv("DEFAULT_SECONDARY_ROLE", "Fill")
DEFAULT_RIOT_ID = "Unknown Riot ID"

# Estimated-elo column of the roster mapped to ratings
RANK_RATINGS: dict[str, int] = {
    "iron": 150,
    "bronze": 250,
    "silver": 300,
    "gold": 350,
    "platinum": 450,
    "emerald": 600,
    "diamond": 750,
}
