"""
Player domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """
    Represents a signed-up player in a matchmaking run.

    This is a pure domain model with no infrastructure dependencies. Players are
    owned by the caller; the matchmaker only derives assignment records from them.
    """

    player_id: str  # Opaque identity token, unique within one run
    name: str
    rating: int = 0
    primary_role: str | None = None  # One of ROLES, or "Fill"
    secondary_role: str | None = None  # None when no secondary is stated
    riot_id: str | None = None

    def __str__(self) -> str:
        roles = f"{self.primary_role or '-'}/{self.secondary_role or '-'}"
        return f"{self.name} (Rating: {self.rating}, Roles: {roles})"
