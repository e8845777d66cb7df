"""
Domain services containing pure matchmaking logic.
"""

from domain.services.role_assignment_service import (
    RoleAssignmentService,
    preference_score,
    tier_for_score,
)
from domain.services.team_balancing_service import TeamBalancingService

__all__ = ["RoleAssignmentService", "TeamBalancingService", "preference_score", "tier_for_score"]
