"""
Matchmaking orchestration: splits a sign-up pool into ten-player batches and
builds one match per batch.
"""

import logging
import random
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

from config import MATCH_SIZE, MATCHMAKING_SETTINGS
from domain.models.player import Player
from domain.models.team import Match, MatchmakingResult
from services.error_codes import DUPLICATE_PLAYER, INVALID_RATING
from services.result import Result
from shuffler import MatchShuffler

logger = logging.getLogger("fightnight.matchmaking")


class MatchmakingInputError(ValueError):
    """The pool handed to the matchmaker is malformed."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class MatchmakingService:
    """
    Pool scheduler for fight night matchmaking.

    The caller decides who is in the pool and in what priority order. Players
    are taken ten at a time in that order; no player moves between batches.
    Whatever is left over goes to the flex queue.
    """

    def __init__(
        self,
        shuffler: MatchShuffler | None = None,
        time_budget_seconds: float | None = None,
        max_workers: int | None = None,
    ):
        """
        Initialize the service.

        Args:
            shuffler: Batch optimizer (default MatchShuffler with configured trials)
            time_budget_seconds: Soft wall-clock budget for a whole schedule() call; 0 disables
            max_workers: Threads used to optimize batches concurrently (default 1)
        """
        settings = MATCHMAKING_SETTINGS
        self.shuffler = shuffler or MatchShuffler()
        self.time_budget_seconds = (
            time_budget_seconds
            if time_budget_seconds is not None
            else settings["time_budget_seconds"]
        )
        self.max_workers = max_workers if max_workers is not None else settings["max_workers"]

    def validate_pool(self, players: list[Player]) -> None:
        """
        Reject pools the optimizer cannot honor.

        Raises:
            MatchmakingInputError: On duplicate player ids or negative ratings
        """
        counts = Counter(p.player_id for p in players)
        duplicates = sorted(str(pid) for pid, count in counts.items() if count > 1)
        if duplicates:
            raise MatchmakingInputError(
                f"Players listed more than once: {', '.join(duplicates)}", DUPLICATE_PLAYER
            )

        negative = [p.name for p in players if p.rating < 0]
        if negative:
            raise MatchmakingInputError(
                f"Ratings must be non-negative: {', '.join(negative)}", INVALID_RATING
            )

    def split_batches(self, players: list[Player]) -> tuple[list[list[Player]], list[Player]]:
        """
        Slice the pool into consecutive ten-player batches.

        Returns:
            Tuple of (batches, flex_queue), both in original pool order
        """
        match_count = len(players) // MATCH_SIZE
        batches = [
            list(players[i * MATCH_SIZE : (i + 1) * MATCH_SIZE]) for i in range(match_count)
        ]
        flex_queue = list(players[match_count * MATCH_SIZE :])
        return batches, flex_queue

    def schedule(
        self,
        players: list[Player],
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> MatchmakingResult:
        """
        Build as many balanced matches as the pool allows.

        Args:
            players: Ordered sign-up pool
            rng: Request-scoped random source; takes precedence over ``seed``
            seed: Seed for a fresh random source, for reproducible runs

        Returns:
            MatchmakingResult with one match per full batch and the leftover flex queue

        Raises:
            MatchmakingInputError: If the pool is malformed
        """
        self.validate_pool(players)
        batches, flex_queue = self.split_batches(players)

        if not batches:
            logger.info(f"Only {len(players)} players signed up, sending everyone to flex queue")
            return MatchmakingResult(matches=[], flex_queue=flex_queue)

        rng = rng or random.Random(seed)
        # Seeds are drawn in batch order so a seeded run is reproducible
        # whether or not batches run concurrently
        batch_seeds = [rng.getrandbits(64) for _ in batches]
        deadline = (
            time.monotonic() + self.time_budget_seconds if self.time_budget_seconds > 0 else None
        )

        logger.info(
            f"Creating {len(batches)} matches from {len(players)} players "
            f"({len(flex_queue)} to flex queue)"
        )

        def optimize_batch(index: int) -> Match:
            return self.shuffler.optimize(
                batches[index],
                rng=random.Random(batch_seeds[index]),
                deadline=deadline,
                batch_index=index,
            )

        if self.max_workers > 1 and len(batches) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(batches))) as executor:
                matches = list(executor.map(optimize_batch, range(len(batches))))
        else:
            matches = [optimize_batch(i) for i in range(len(batches))]

        logger.info(
            f"Created {len(matches)} matches, flex queue: {len(flex_queue)} players"
        )
        return MatchmakingResult(matches=matches, flex_queue=flex_queue)

    def run(
        self,
        players: list[Player],
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> Result[MatchmakingResult]:
        """
        Same as schedule(), reporting malformed pools as a failed Result.

        A pool too small for a match is still a success with no matches.
        """
        try:
            return Result.ok(self.schedule(players, rng=rng, seed=seed))
        except MatchmakingInputError as exc:
            logger.warning(f"Matchmaking rejected pool: {exc}")
            return Result.fail(str(exc), code=exc.code)
