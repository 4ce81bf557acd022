#!/usr/bin/env python3
"""Compare two five-card hands from the command line.

Cards are given by value: A, 2-10, J, Q, K (1-13 also accepted).

Usage:
    python -m blind_poker.scripts.compare_hands --hand-a "A 3 5 7 9" --hand-b "A 3 5 7 7"
    python -m blind_poker.scripts.compare_hands --random 10 --seed 42
    python -m blind_poker.scripts.compare_hands --hand-a "A A 9 9 9" --hand-b "10 10 A A A" --verbose

Exit status:
    0: hands compared (win or tie)
    2: invalid input
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from blind_poker.engine.solver import (
    RESULT_INVALID,
    RESULT_PLAYER_A,
    RESULT_PLAYER_B,
    Showdown,
    showdown,
)
from blind_poker.rules.cards import deal_hand, format_cards, make_cards_from_string
from blind_poker.rules.hands import EvaluatedHand, format_groups
from blind_poker.utils.seeding import make_rng, resolve_seed

EXIT_OK = 0
EXIT_INVALID = 2

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def parse_hand_arg(text: str) -> List[int]:
    """Parse a hand argument like "A 3 5 7 K" into card values.

    Raises:
        ValueError: If a symbol is not a card value
    """
    return [card.value for card in make_cards_from_string(text)]


def describe_winner(result: int) -> str:
    if result == RESULT_PLAYER_A:
        return "[bold green]Player A wins[/bold green]"
    if result == RESULT_PLAYER_B:
        return "[bold green]Player B wins[/bold green]"
    if result == RESULT_INVALID:
        return "[bold red]Invalid hand[/bold red]"
    return "[bold yellow]Tie[/bold yellow]"


def _hand_row(name: str, hand: EvaluatedHand, is_winner: bool) -> List[str]:
    style = "bold" if is_winner else "dim"
    return [
        f"[{style}]{name}[/{style}]",
        format_cards(hand.cards),
        hand.category.label,
        format_groups(hand.groups),
    ]


def render_showdown(result: Showdown, title: Optional[str] = None) -> Table:
    """Build a rich table for one showdown."""
    table = Table(title=title, box=box.SIMPLE, show_header=True)
    table.add_column("Player")
    table.add_column("Cards")
    table.add_column("Category")
    table.add_column("Groups")

    if result.hand_a is not None and result.hand_b is not None:
        table.add_row(*_hand_row("A", result.hand_a, result.result == RESULT_PLAYER_A))
        table.add_row(*_hand_row("B", result.hand_b, result.result == RESULT_PLAYER_B))
    return table


def render_verdict(result: Showdown) -> str:
    verdict = describe_winner(result.result)
    if result.error:
        return f"{verdict}: {result.error}"
    if result.decided_by_category:
        return f"{verdict} (higher category)"
    return f"{verdict} (tie-break)"


def print_showdown(result: Showdown, title: Optional[str] = None) -> None:
    if result.is_valid:
        console.print(render_showdown(result, title=title))
    elif title:
        console.print(f"[bold]{title}[/bold]")
    console.print(render_verdict(result))


def run_random(count: int, seed: Optional[int]) -> int:
    seed = resolve_seed(seed)
    logger.info("Dealing %d random showdown(s) with seed %d", count, seed)
    rng = make_rng(seed)

    wins = {RESULT_PLAYER_A: 0, RESULT_PLAYER_B: 0}
    ties = 0
    for index in range(count):
        result = showdown(deal_hand(rng), deal_hand(rng))
        print_showdown(result, title=f"Showdown {index + 1}/{count}")
        if result.result in wins:
            wins[result.result] += 1
        else:
            ties += 1

    summary = Table(title="Summary", box=box.SIMPLE)
    summary.add_column("Player A")
    summary.add_column("Player B")
    summary.add_column("Ties")
    summary.add_row(str(wins[RESULT_PLAYER_A]), str(wins[RESULT_PLAYER_B]), str(ties))
    console.print(summary)
    return EXIT_OK


def run_pair(hand_a: str, hand_b: str) -> int:
    try:
        values_a = parse_hand_arg(hand_a)
        values_b = parse_hand_arg(hand_b)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        return EXIT_INVALID

    result = showdown(values_a, values_b)
    print_showdown(result)
    return EXIT_INVALID if result.result == RESULT_INVALID else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Blind Poker: compare two five-card hands")
    parser.add_argument("--hand-a", type=str, help='Player A cards, e.g. "A 3 5 7 9"')
    parser.add_argument("--hand-b", type=str, help='Player B cards, e.g. "K K 2 2 9"')
    parser.add_argument("--random", type=int, default=0, metavar="N", help="Deal N random showdowns")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.random < 0:
        parser.error("--random must be non-negative")
    if args.random:
        return run_random(args.random, args.seed)
    if args.hand_a is None or args.hand_b is None:
        parser.error("provide --hand-a and --hand-b, or --random N")
    return run_pair(args.hand_a, args.hand_b)


if __name__ == "__main__":
    sys.exit(main())
