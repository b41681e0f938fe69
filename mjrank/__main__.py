"""A commandline tool for quick Majority Judgment ranking of a poll.

Reads a poll as a JSON object mapping each candidate to the list of
integer grades it received, and prints the resulting ranking.
"""

import argparse
import io
import json
import logging
import sys

from mjrank import rank
from mjrank.rank._types import Poll, RankedResult

argparser = argparse.ArgumentParser(
    prog="mjrank",
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    "-i", "--input-file",
    type=argparse.FileType("r", encoding="utf8"),
    help="JSON file to load the poll from",
)
argparser.add_argument(
    "-I", "--use-stdin",
    action="store_true",
    help="load the poll from standard input",
)
argparser.add_argument(
    "-l", "--levels",
    action="store_true",
    help="also show tie-aware merit levels",
)
argparser.add_argument(
    "-v", "--verbose",
    action="store_true",
    help="show all ranking log messages including tie-breaking rounds",
)
argparser.add_argument(
    "-q", "--quiet",
    action="store_true",
    help="do not show any ranking log messages",
)


def main(
    input_file: io.TextIOBase | None = None,
    use_stdin: bool = False,
    levels: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format="%(levelname)-10s %(message)s",
    )
    if use_stdin:
        input_file = sys.stdin
    try:
        poll = load_poll(input_file)
        if levels:
            # merit levels iterate in ranking order
            merit = rank.merit_levels(poll)
            ranking = [(cand, position) for position, cand in enumerate(merit)]
        else:
            merit = None
            ranking = rank.majority_judgment(poll)
    except ValueError as e:
        print(f"mjrank: error: {e}", file=sys.stderr)
        return 1
    show_poll(poll)
    print()
    show_ranking(ranking, merit)
    return 0


def load_poll(input_file: io.TextIOBase) -> Poll:
    """Load a poll from a JSON object of candidate -> grade list."""
    if input_file is None:
        raise ValueError("no input given, use --input-file or --use-stdin")
    try:
        data = json.load(input_file)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON poll: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(
            "poll must be a JSON object mapping candidates to grade lists, "
            f"got {type(data).__name__}"
        )
    return data


def show_poll(poll: Poll) -> None:
    print(f"Received grades for {len(poll)} candidates:")
    n_just_chars = max(len(str(cand)) for cand in poll)
    for cand, grades in poll.items():
        print(" " * 4 + str(cand).ljust(n_just_chars), " ", list(grades))


def show_ranking(ranking: RankedResult, merit: dict | None = None) -> None:
    """Show the ranking, best first, one candidate per line."""
    print("Ranking:")
    n_just_chars = len(str(len(ranking) - 1))
    for cand, position in ranking:
        line = str(position).rjust(n_just_chars) + "   " + str(cand)
        if merit is not None:
            line += f"   (level {merit[cand]})"
        print(" " * 4 + line)


def cli() -> None:
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        sys.exit(main(**vars(args)))


if __name__ == "__main__":
    cli()
