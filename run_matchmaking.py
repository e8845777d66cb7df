"""
Standalone script to run fight night matchmaking on a roster file or mock players.

Usage:
    python run_matchmaking.py roster.json --seed 42
    python run_matchmaking.py --mock 23

The roster file is a JSON list of objects with "name" and any of "id",
"rating", "rank", "mmr", "primary_role", "secondary_role", "riot_id".
Players are matched in file order.
"""

import argparse
import json
import logging
import random
import sys

from config import RANK_RATINGS
from domain.models.player import Player
from domain.models.team import FILL, ROLES
from services.matchmaking_service import MatchmakingService
from services.roster_service import RosterService
from shuffler import MatchShuffler
from utils.formatting import format_flex_queue, format_match, format_matchmaking_summary

logger = logging.getLogger("fightnight")


def load_roster(path: str) -> list[Player]:
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError("Roster file must contain a JSON list of players")

    by_name = {str(row["name"]).lower(): row for row in rows}
    roster = RosterService(lambda username: by_name.get(username.lower()))
    return [
        roster.build_player(str(row["name"]), player_id=str(row.get("id") or row["name"]))
        for row in rows
    ]


def generate_mock_players(count: int, rng: random.Random) -> list[Player]:
    """Random players for exercising the algorithm without a roster."""
    role_choices = list(ROLES) + [FILL]
    ratings = list(RANK_RATINGS.values())
    players = []
    for i in range(count):
        primary = rng.choice(role_choices)
        secondary = rng.choice([r for r in role_choices if r != primary])
        players.append(
            Player(
                player_id=f"mock_{i}",
                name=f"Player{i + 1}",
                rating=rng.choice(ratings),
                primary_role=primary,
                secondary_role=secondary,
                riot_id=f"Mock#{1000 + i}",
            )
        )
    return players


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build balanced fight night matches.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("roster", nargs="?", help="Path to a JSON roster file")
    source.add_argument("--mock", type=int, metavar="N", help="Generate N random players")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--trials", type=int, default=None, help="Trials per match")
    parser.add_argument(
        "--time-budget", type=float, default=None, help="Soft time budget in seconds (0 = none)"
    )
    parser.add_argument("--workers", type=int, default=None, help="Matches optimized in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every improving trial")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    rng = random.Random(args.seed)
    try:
        if args.mock is not None:
            players = generate_mock_players(args.mock, rng)
        else:
            players = load_roster(args.roster)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"Error while loading roster: {exc}", file=sys.stderr)
        return 1
    logger.info(f"Loaded {len(players)} players")

    try:
        service = MatchmakingService(
            shuffler=MatchShuffler(trials=args.trials),
            time_budget_seconds=args.time_budget,
            max_workers=args.workers,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = service.run(players, rng=rng)
    if not result:
        print(f"Error ({result.error_code}): {result.error}", file=sys.stderr)
        return 1

    outcome = result.unwrap()
    print(format_matchmaking_summary(outcome))
    for number, match in enumerate(outcome.matches, 1):
        print()
        print(format_match(match, number))
    print()
    print(format_flex_queue(outcome.flex_queue))
    return 0


if __name__ == "__main__":
    sys.exit(main())
