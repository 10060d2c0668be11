# Area: Shared
"""
trivia_engine.cli — Command-line interface
===========================================

Runs a trivia session in the terminal with simulated participants.

Usage:
    python -m trivia_engine                          # Two questions from Open Trivia DB
    python -m trivia_engine --offline --count 4      # Built-in questions, no network
    python -m trivia_engine --list-categories
    python -m trivia_engine --score bot-1            # Look up a stored total
    python -m trivia_engine --scores                 # All stored totals
"""

import argparse
import asyncio
import contextlib
import logging
import sys
from typing import Any, Dict

from ._shared.logging_config import log_engine_error, setup_logging
from .collaborators import QuestionSource, ScoreLedger
from .config import load_config
from .demo import ConsoleSink, DemoParticipants
from .errors import SourceUnavailable
from .ledgers import InMemoryScoreLedger, SqliteScoreLedger
from .models import SessionSummary
from .session import TriviaSession, summary_lines
from .sources import OpenTDBQuestionSource, StaticQuestionSource


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Trivia Engine - Play timed multiple-choice trivia rounds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m trivia_engine --offline --bots 4
  python -m trivia_engine --count 5 --category 22
  TRIVIA_ANSWER_WINDOW_SECONDS=5 python -m trivia_engine --offline
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the built-in questions instead of Open Trivia DB",
    )
    parser.add_argument("--count", type=int, help="Number of questions to play")
    parser.add_argument("--category", type=int, help="Category id to draw questions from")
    parser.add_argument(
        "--bots",
        type=int,
        default=3,
        help="Number of simulated participants (default: 3)",
    )
    parser.add_argument("--db", type=str, help="SQLite score database path")
    parser.add_argument(
        "--no-db",
        action="store_true",
        help="Keep scores in memory only",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="List available categories and exit",
    )
    parser.add_argument(
        "--score",
        metavar="PARTICIPANT_ID",
        help="Print a participant's stored score and exit",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Print every stored total in order of first award and exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def get_source(args: argparse.Namespace, config: Dict[str, Any]) -> QuestionSource:
    """Get the question source for the selected mode."""
    if args.offline:
        return StaticQuestionSource(shuffle=True)
    return OpenTDBQuestionSource(
        base_url=config["opentdb_url"],
        timeout_seconds=config["request_timeout_seconds"],
    )


def get_ledger(args: argparse.Namespace, config: Dict[str, Any]) -> ScoreLedger:
    """Get the score ledger for the selected mode."""
    if args.no_db:
        return InMemoryScoreLedger()
    return SqliteScoreLedger(args.db or config["db_path"])


async def play(session: TriviaSession, bots: int, count=None, category=None) -> SessionSummary:
    """Run a session with simulated participants answering alongside."""
    participants = DemoParticipants(session, count=bots)
    bot_task = asyncio.create_task(participants.play())
    try:
        return await session.run(count=count, category=category)
    finally:
        bot_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await bot_task


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config["log_file"], level=getattr(logging, args.log_level))
    source = get_source(args, config)

    if args.list_categories:
        try:
            categories = asyncio.run(source.list_categories())
        except SourceUnavailable as e:
            log_engine_error(e)
            return 1
        for category_id, name in sorted(categories.items()):
            print(f"{category_id:>4}  {name}")
        return 0

    ledger = get_ledger(args, config)

    if args.score:
        print(f"{args.score}: {asyncio.run(ledger.get_score(args.score))}")
        return 0

    if args.scores:
        for row in asyncio.run(ledger.get_all_scores()):
            print(f"{row['participant_id']}  {row['display_name']}: {row['score']}")
        return 0

    session = TriviaSession(source, ConsoleSink(), ledger, config)
    summary = asyncio.run(play(session, args.bots, args.count, args.category))

    print()
    for line in summary_lines(summary):
        print(line)
    return 1 if summary.aborted else 0
