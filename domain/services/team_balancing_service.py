"""
Team balancing domain service.

Scores assigned matches; lower scores are better balanced.
"""

from config import MATCHMAKING_SETTINGS
from domain.models.team import Match, PreferenceTier, Team


class TeamBalancingService:
    """
    Pure domain service for scoring matchups.

    Responsibilities:
    - Compute team totals and the rating difference between teams
    - Penalize secondary-role and autofilled assignments
    - Compare matchups
    """

    def __init__(
        self,
        secondary_role_penalty: float | None = None,
        autofill_penalty: float | None = None,
    ):
        """
        Initialize the service.

        Args:
            secondary_role_penalty: Flat penalty per player on their secondary role (default 10)
            autofill_penalty: Flat penalty per autofilled player (default 100)
        """
        settings = MATCHMAKING_SETTINGS
        self.secondary_role_penalty = (
            secondary_role_penalty
            if secondary_role_penalty is not None
            else settings["secondary_role_penalty"]
        )
        self.autofill_penalty = (
            autofill_penalty if autofill_penalty is not None else settings["autofill_penalty"]
        )

    def calculate_role_penalty(self, team: Team) -> float:
        """Sum of tier penalties for one team."""
        return (
            team.count_tier(PreferenceTier.SECONDARY) * self.secondary_role_penalty
            + team.count_tier(PreferenceTier.AUTOFILL) * self.autofill_penalty
        )

    def calculate_match_score(self, match: Match) -> float:
        """
        Calculate a score for a match (lower is better).

        Combines the team rating difference with secondary and autofill penalties.

        Args:
            match: Assigned match

        Returns:
            Non-negative badness score
        """
        return (
            match.rating_difference
            + self.calculate_role_penalty(match.team_a)
            + self.calculate_role_penalty(match.team_b)
        )

    def get_match_stats(self, match: Match) -> dict:
        """
        Get detailed stats for a match.

        Args:
            match: Match to analyze

        Returns:
            Dictionary with match statistics
        """
        return {
            "team_a_total": match.team_a_total,
            "team_b_total": match.team_b_total,
            "rating_difference": match.rating_difference,
            "secondary_count": match.count_tier(PreferenceTier.SECONDARY),
            "autofill_count": match.count_tier(PreferenceTier.AUTOFILL),
            "score": self.calculate_match_score(match),
        }
