"""
Application services layer.

Services orchestrate matchmaking operations using domain services.
"""

from services.matchmaking_service import MatchmakingInputError, MatchmakingService
from services.result import Result
from services.roster_service import RosterService

__all__ = [
    "MatchmakingInputError",
    "MatchmakingService",
    "Result",
    "RosterService",
]
