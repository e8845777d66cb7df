"""
Role assignment domain service.

Handles preference scoring and the greedy role-by-role assignment of ten
players into two teams.
"""

from config import MATCHMAKING_SETTINGS
from domain.models.player import Player
from domain.models.team import FILL, ROLES, Match, PreferenceTier, RoleAssignment, Team
from domain.services.team_balancing_service import TeamBalancingService

_TIERS_BY_SCORE = {
    1: PreferenceTier.PRIMARY,
    2: PreferenceTier.SECONDARY,
    3: PreferenceTier.AUTOFILL,
}


def preference_score(player: Player, role: str) -> int:
    """
    Rank a player's fitness for a role: 1 primary, 2 secondary, 3 autofill.

    "Fill" in either slot matches every role at that slot's tier.
    """
    if player.primary_role in (role, FILL):
        return 1
    if player.secondary_role in (role, FILL):
        return 2
    return 3


def tier_for_score(score: int) -> PreferenceTier:
    return _TIERS_BY_SCORE[score]


class RoleAssignmentService:
    """
    Pure domain service for role assignment logic.

    Responsibilities:
    - Assign ten players to the five roles of two teams
    - Apply the autofill rating penalty
    - Report which players can cover each role
    """

    ROLES = ROLES
    MATCH_SIZE = 2 * Team.TEAM_SIZE

    def __init__(
        self,
        balancing_service: TeamBalancingService | None = None,
        autofill_rating_penalty_percent: int | None = None,
    ):
        """
        Initialize the service.

        Args:
            balancing_service: Scorer used to rank finished matches
            autofill_rating_penalty_percent: Rating reduction for autofilled players (default 20)
        """
        self.balancing_service = balancing_service or TeamBalancingService()
        self.autofill_rating_penalty_percent = (
            autofill_rating_penalty_percent
            if autofill_rating_penalty_percent is not None
            else MATCHMAKING_SETTINGS["autofill_rating_penalty_percent"]
        )

    def effective_rating(self, player: Player, tier: PreferenceTier) -> int:
        """Rating a player counts for at a tier; autofill is penalized and rounded down."""
        if tier == PreferenceTier.AUTOFILL:
            return player.rating * (100 - self.autofill_rating_penalty_percent) // 100
        return player.rating

    def create_assignment(
        self, player: Player, role: str, tier: PreferenceTier | None = None
    ) -> RoleAssignment:
        """
        Place a player on a role.

        Args:
            player: Player to assign
            role: Role from ROLES
            tier: Forced tier; derived from the player's preferences when omitted

        Returns:
            RoleAssignment with the effective rating for that tier
        """
        if tier is None:
            tier = tier_for_score(preference_score(player, role))
        return RoleAssignment(
            player=player,
            assigned_role=role,
            tier=tier,
            effective_rating=self.effective_rating(player, tier),
        )

    def get_role_candidates(
        self, players: list[Player], role: str, used_ids: set[str] | None = None
    ) -> list[Player]:
        """
        Players not yet used who listed the role (or Fill), best preference first.

        The sort is stable, so ties keep their order in ``players``.
        """
        used_ids = used_ids or set()
        candidates = [
            p
            for p in players
            if p.player_id not in used_ids and preference_score(p, role) < 3
        ]
        return sorted(candidates, key=lambda p: preference_score(p, role))

    def get_role_coverage(self, players: list[Player]) -> dict[str, list[Player]]:
        """
        Get which players can play each role.

        Args:
            players: List of players

        Returns:
            Dictionary mapping roles to players who listed that role or Fill
        """
        return {role: self.get_role_candidates(players, role) for role in self.ROLES}

    def assign_match(self, players: list[Player], repair_mode: bool = False) -> Match | None:
        """
        Greedily assign ten players to both teams, one role at a time.

        For each role the two best candidates go to team A and team B. In repair
        mode a missing candidate is replaced by the first unused player, tagged
        autofill whatever their preference.

        Args:
            players: Exactly ten distinct players, in the order to consider them
            repair_mode: Whether to borrow players from outside the candidate set

        Returns:
            Scored Match, or None if a strict assignment could not cover every role
        """
        if len(players) != self.MATCH_SIZE:
            raise ValueError(f"Need exactly {self.MATCH_SIZE} players, got {len(players)}")

        team_a: list[RoleAssignment] = []
        team_b: list[RoleAssignment] = []
        used_ids: set[str] = set()

        for role in self.ROLES:
            candidates = self.get_role_candidates(players, role, used_ids)

            if len(candidates) >= 2:
                picks = [
                    self.create_assignment(candidates[0], role),
                    self.create_assignment(candidates[1], role),
                ]
            elif not repair_mode:
                return None
            else:
                picks = [self.create_assignment(c, role) for c in candidates]
                taken = {c.player_id for c in candidates}
                remaining = [
                    p for p in players if p.player_id not in used_ids and p.player_id not in taken
                ]
                needed = 2 - len(picks)
                if len(remaining) < needed:
                    return None
                picks.extend(
                    self.create_assignment(p, role, PreferenceTier.AUTOFILL)
                    for p in remaining[:needed]
                )

            team_a.append(picks[0])
            team_b.append(picks[1])
            used_ids.update(a.player.player_id for a in picks)

        match = Match(team_a=Team(team_a), team_b=Team(team_b))
        match.badness_score = self.balancing_service.calculate_match_score(match)
        return match
