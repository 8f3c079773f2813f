"""
Command-line entry point for generating word-search puzzles.

Usage:
    python -m src.main generate --book moby-dick --difficulty easy --words whale ship sea
    python -m src.main generate --book moby-dick --difficulty hard --config config.yaml --seed 42
    python -m src.main score 2 30
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path
from typing import Optional

import yaml

from .games import AppConfig, InMemoryVocabulary, PuzzleGenerator, compute_score
from .puzzles import SIZE_TABLE, Puzzle, generate_puzzle, render_grid
from .utils.logging import setup_logging


def load_config(config_path: str) -> AppConfig:
    """Load application configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)


def format_puzzle(puzzle: Puzzle) -> str:
    """Text view of a puzzle: grid, then the placed words."""
    lines = [
        f"Book: {puzzle.book_id}  Difficulty: {puzzle.difficulty}  Size: {puzzle.size}x{puzzle.size}",
        "",
        render_grid(puzzle.grid),
        "",
        f"Words ({len(puzzle.words)}):",
    ]
    for p in puzzle.placements:
        lines.append(f"  {p.word:<15} row {p.row:>2}, col {p.col:>2}, {p.direction}")
    return "\n".join(lines)


def run_generate(args: argparse.Namespace, config: AppConfig) -> Puzzle:
    seed: Optional[int] = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed)
    word_count = args.word_count if args.word_count is not None else config.word_count

    if args.words:
        return generate_puzzle(
            args.book,
            args.difficulty,
            args.words,
            word_count,
            rng=rng,
            max_attempts=config.max_attempts,
        )

    generator = PuzzleGenerator(
        InMemoryVocabulary(config.vocabulary),
        rng=rng,
        max_attempts=config.max_attempts,
    )
    return asyncio.run(generator.generate(args.book, args.difficulty, word_count))


def main():
    parser = argparse.ArgumentParser(
        description="Generate word-search puzzles and score matching games",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  max_attempts: 100
  word_count: 8
  vocabulary:
    - {word: whale, translation: baleine, difficulty: easy, book_id: moby-dick}
    - {word: ship, translation: navire, difficulty: easy, book_id: moby-dick}
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate a puzzle")
    gen.add_argument("--book", required=True, help="Book identifier")
    gen.add_argument(
        "--difficulty", "-d",
        choices=sorted(SIZE_TABLE, key=SIZE_TABLE.get),
        default="easy",
        help="Grid size tier (default: easy)"
    )
    gen.add_argument("--config", "-c", help="Path to YAML configuration file")
    gen.add_argument("--words", nargs="+", help="Candidate words (overrides the configured vocabulary)")
    gen.add_argument("--word-count", "-n", type=int, help="Number of words to place")
    gen.add_argument("--seed", type=int, help="Random seed for a reproducible puzzle")
    gen.add_argument("--json", action="store_true", help="Print the puzzle as JSON")

    score = subparsers.add_parser("score", help="Score a finished matching game")
    score.add_argument("mistakes", type=int, help="Number of wrong pairings")
    score.add_argument("seconds", type=int, help="Seconds taken")

    args = parser.parse_args()
    setup_logging()

    if args.command == "score":
        print(compute_score(args.mistakes, args.seconds))
        return 0

    try:
        config = load_config(args.config) if args.config else AppConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        puzzle = run_generate(args, config)
    except ValueError as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(puzzle.model_dump_json(indent=2))
    else:
        print(format_puzzle(puzzle))

    return 0


if __name__ == "__main__":
    sys.exit(main())
