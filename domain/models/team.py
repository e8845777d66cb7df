"""
Team domain model.
"""

from dataclasses import dataclass, field
from enum import Enum

from domain.models.player import Player

# Assignment order matters for reproducibility, not for correctness
ROLES = ("Top", "Jungle", "Mid", "AD", "Support")
FILL = "Fill"


class PreferenceTier(str, Enum):
    """How well an assigned role matches the player's stated preference."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    AUTOFILL = "autofill"


@dataclass(frozen=True)
class RoleAssignment:
    """A player placed on a role, with the rating they count for on that role."""

    player: Player
    assigned_role: str
    tier: PreferenceTier
    effective_rating: int


class Team:
    """
    Represents a team of 5 role assignments, one per role.

    This is a pure domain model with no infrastructure dependencies.
    """

    TEAM_SIZE = 5

    def __init__(self, assignments: list[RoleAssignment]):
        """
        Initialize a team.

        Args:
            assignments: List of 5 role assignments covering every role in ROLES
        """
        if len(assignments) != self.TEAM_SIZE:
            raise ValueError(f"Team must have exactly {self.TEAM_SIZE} players")
        if sorted(a.assigned_role for a in assignments) != sorted(ROLES):
            raise ValueError("Team must cover each role exactly once")
        self.assignments = assignments

    @property
    def players(self) -> list[Player]:
        return [a.player for a in self.assignments]

    @property
    def total(self) -> int:
        """Sum of effective ratings across the team."""
        return sum(a.effective_rating for a in self.assignments)

    def get_assignment_by_role(self, role: str) -> RoleAssignment:
        """Return the assignment holding ``role``."""
        for assignment in self.assignments:
            if assignment.assigned_role == role:
                return assignment
        raise KeyError(role)

    def count_tier(self, tier: PreferenceTier) -> int:
        return sum(1 for a in self.assignments if a.tier == tier)

    def __iter__(self):
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)


@dataclass
class Match:
    """Two teams of five and the score the optimizer ranked them by."""

    team_a: Team
    team_b: Team
    badness_score: float = 0.0

    @property
    def team_a_total(self) -> int:
        return self.team_a.total

    @property
    def team_b_total(self) -> int:
        return self.team_b.total

    @property
    def rating_difference(self) -> int:
        return abs(self.team_a_total - self.team_b_total)

    @property
    def players(self) -> list[Player]:
        return self.team_a.players + self.team_b.players

    def count_tier(self, tier: PreferenceTier) -> int:
        return self.team_a.count_tier(tier) + self.team_b.count_tier(tier)


@dataclass
class MatchmakingResult:
    """Matches formed from a pool, plus the players left over for the flex queue."""

    matches: list[Match] = field(default_factory=list)
    flex_queue: list[Player] = field(default_factory=list)

    @property
    def matched_player_count(self) -> int:
        return len(self.matches) * 2 * Team.TEAM_SIZE
