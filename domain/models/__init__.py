"""
Domain models - pure data structures representing matchmaking entities.
"""

from domain.models.player import Player
from domain.models.team import (
    FILL,
    ROLES,
    Match,
    MatchmakingResult,
    PreferenceTier,
    RoleAssignment,
    Team,
)

__all__ = [
    "FILL",
    "ROLES",
    "Match",
    "MatchmakingResult",
    "Player",
    "PreferenceTier",
    "RoleAssignment",
    "Team",
]
