"""
Randomized role-assignment search for a single ten-player batch.
"""

import logging
import random
import time

from config import MATCHMAKING_SETTINGS
from domain.models.player import Player
from domain.models.team import Match
from domain.services.role_assignment_service import RoleAssignmentService
from utils.debug_logging import trace_event

logger = logging.getLogger("fightnight.shuffler")


class AssignmentInvariantError(RuntimeError):
    """Repair-mode assignment failed on a full batch; the input or the assigner is broken."""


def uniform_permutation(players: list[Player], rng: random.Random) -> list[Player]:
    """Return a uniformly shuffled copy of ``players`` (Fisher-Yates via rng.shuffle)."""
    shuffled = list(players)
    rng.shuffle(shuffled)
    return shuffled


class MatchShuffler:
    """
    Finds a well-balanced match for a fixed batch of ten players.

    Each trial shuffles the batch and runs the strict greedy assignment; the
    lowest-scoring trial wins, with earlier trials winning ties. When no trial
    can cover every role from stated preferences, one repair-mode attempt
    autofills the gaps.
    """

    def __init__(
        self,
        role_assignment_service: RoleAssignmentService | None = None,
        trials: int | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            role_assignment_service: Assigner used for every trial
            trials: Number of strict trials per batch (default 100)
        """
        self.role_assignment_service = role_assignment_service or RoleAssignmentService()
        self.trials = trials if trials is not None else MATCHMAKING_SETTINGS["trials_per_batch"]
        if self.trials < 1:
            raise ValueError(f"Need at least one trial, got {self.trials}")

    def optimize(
        self,
        batch: list[Player],
        rng: random.Random | None = None,
        deadline: float | None = None,
        batch_index: int = 0,
    ) -> Match:
        """
        Build the best match found for a batch of ten players.

        Args:
            batch: Exactly ten distinct players
            rng: Request-scoped random source (a fresh unseeded one if omitted)
            deadline: time.monotonic() value after which remaining trials are skipped
            batch_index: Position of the batch in the pool, for logging

        Returns:
            The lowest-scoring strict match, or the repair-mode match if none succeeded

        Raises:
            ValueError: If the batch is not exactly ten players
            AssignmentInvariantError: If even repair mode cannot complete the match
        """
        size = RoleAssignmentService.MATCH_SIZE
        if len(batch) != size:
            raise ValueError(f"Need exactly {size} players, got {len(batch)}")

        rng = rng or random.Random()
        best_match: Match | None = None
        best_score = float("inf")
        best_trial = -1
        trials_run = 0

        for trial in range(self.trials):
            # Always run at least one trial, even on an expired budget
            if deadline is not None and trial > 0 and time.monotonic() >= deadline:
                logger.info(
                    f"Batch {batch_index + 1}: time budget reached after {trial} of {self.trials} trials"
                )
                break
            trials_run += 1

            permuted = uniform_permutation(batch, rng)
            match = self.role_assignment_service.assign_match(permuted, repair_mode=False)
            if match is None:
                continue

            if match.badness_score < best_score:
                best_score = match.badness_score
                best_match = match
                best_trial = trial
                logger.debug(f"Batch {batch_index + 1}: trial {trial} improved score to {best_score:.1f}")

        if best_match is not None:
            stats = self.role_assignment_service.balancing_service.get_match_stats(best_match)
            logger.info(
                f"Batch {batch_index + 1}: best score {best_score:.1f} from trial {best_trial} "
                f"of {trials_run} (Rating Diff: {stats['rating_difference']}, "
                f"Secondary: {stats['secondary_count']}, Autofill: {stats['autofill_count']})"
            )
            return best_match

        return self._repair(batch, rng, batch_index, trials_run)

    def _repair(
        self, batch: list[Player], rng: random.Random, batch_index: int, trials_run: int
    ) -> Match:
        """Single repair-mode attempt for a batch with no strict assignment."""
        coverage = self.role_assignment_service.get_role_coverage(batch)
        uncovered = [role for role, players in coverage.items() if len(players) < 2]
        logger.warning(
            f"Batch {batch_index + 1}: no valid match in {trials_run} trials, trying with autofill "
            f"(short roles: {', '.join(uncovered) or 'none'})"
        )
        trace_event(
            "repair_mode",
            "shuffler.py:MatchShuffler._repair",
            "Falling back to autofill",
            {
                "batch_index": batch_index,
                "trials_run": trials_run,
                "coverage": {role: [p.name for p in players] for role, players in coverage.items()},
            },
        )

        permuted = uniform_permutation(batch, rng)
        match = self.role_assignment_service.assign_match(permuted, repair_mode=True)
        if match is None:
            raise AssignmentInvariantError(
                f"Repair-mode assignment failed for batch {batch_index + 1}; "
                "check the batch for duplicate player ids"
            )

        logger.info(
            f"Batch {batch_index + 1}: repaired match score {match.badness_score:.1f}"
        )
        return match
