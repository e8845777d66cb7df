"""
Shared plain-text formatting helpers for matchmaking output.
"""

from collections.abc import Iterable

from config import DEFAULT_RIOT_ID
from domain.models.player import Player
from domain.models.team import ROLES, Match, MatchmakingResult, PreferenceTier, RoleAssignment, Team

TIER_SUFFIXES = {
    PreferenceTier.PRIMARY: "",
    PreferenceTier.SECONDARY: " (Sec)",
    PreferenceTier.AUTOFILL: " (Autof)",
}


def format_role_display(assignment: RoleAssignment) -> str:
    """Return the assigned role with a tier marker (e.g. 'Mid (Sec)')."""
    return f"{assignment.assigned_role}{TIER_SUFFIXES[assignment.tier]}"


def format_player_line(player: Player) -> str:
    """Return a one-line player summary for player lists."""
    riot_id = player.riot_id or DEFAULT_RIOT_ID
    return f"• {player.name} ({riot_id}) - Rating: {player.rating}"


def format_team_table(team: Team) -> str:
    """
    Render a team as a boxed table in role order.

    Columns: Role (with tier marker), Player, Riot ID, effective rating.
    """
    rows = []
    for role in ROLES:
        assignment = team.get_assignment_by_role(role)
        rows.append(
            (
                format_role_display(assignment),
                assignment.player.name,
                assignment.player.riot_id or DEFAULT_RIOT_ID,
                str(assignment.effective_rating),
            )
        )

    headers = ("Role", "Player", "Riot ID", "Rating")
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(len(headers))]

    def border(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    def line(cells: Iterable[str]) -> str:
        padded = []
        for i, cell in enumerate(cells):
            # Ratings are right-aligned
            padded.append(cell.rjust(widths[i]) if i == 3 else cell.ljust(widths[i]))
        return "│ " + " │ ".join(padded) + " │"

    lines = [border("┌", "┬", "┐"), line(headers), border("├", "┼", "┤")]
    lines.extend(line(row) for row in rows)
    lines.append(border("└", "┴", "┘"))
    return "\n".join(lines)


def format_match(match: Match, number: int) -> str:
    """Render both teams of a match with their totals and rating difference."""
    return "\n".join(
        [
            f"Match {number}",
            "",
            "Team 1:",
            format_team_table(match.team_a),
            "Team 2:",
            format_team_table(match.team_b),
            f"Team 1 Total Rating: {match.team_a_total}",
            f"Team 2 Total Rating: {match.team_b_total}",
            f"Rating Difference: {match.rating_difference}",
        ]
    )


def format_flex_queue(players: list[Player]) -> str:
    if not players:
        return "Flex Queue: empty"
    lines = [f"Flex Queue ({len(players)} players):"]
    lines.extend(format_player_line(p) for p in players)
    return "\n".join(lines)


def format_matchmaking_summary(result: MatchmakingResult) -> str:
    """Return the summary line posted before the individual matches."""
    return (
        f"Created {len(result.matches)} matches ({result.matched_player_count} players)\n"
        f"Flex Queue: {len(result.flex_queue)} players"
    )
