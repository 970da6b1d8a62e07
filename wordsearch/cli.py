"""
Command-line word search solver.

Usage:
    wordsearch <board> [--dictionary PATH] [--min-length N] [--max-results N]

Examples:
    wordsearch "abc def ghi"
    wordsearch "bant anti nabe tone" --dictionary words.txt --min-length 3
    wordsearch "ba tn" --paths
"""
import argparse
import logging
import sys

from wordsearch.board import Board, BoardError
from wordsearch.dictionary import load_trie
from wordsearch.metrics import StageTimer
from wordsearch.settings import settings
from wordsearch.solver import solve

logger = logging.getLogger("wordsearch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordsearch", description="Find dictionary words on a letter grid")
    parser.add_argument("board", help="Whitespace-separated rows of equal width, e.g. \"abc def ghi\"")
    parser.add_argument("--dictionary", type=str, default=settings.DICTIONARY_PATH,
                        help="Word list, one word per line (default: built-in list)")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Ignore dictionary words shorter than this (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--max-results", type=int, default=settings.MAX_RESULTS,
                        help="Print at most this many results, 0 for all")
    parser.add_argument("--unique", action=argparse.BooleanOptionalAction, default=settings.UNIQUE_WORDS,
                        help="Print each word once even when several paths spell it (--no-unique to print every path)")
    parser.add_argument("--paths", action="store_true",
                        help="Print the cell ids of each path after the word")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log stage timings to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose or settings.DEBUG else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    timer = StageTimer()
    try:
        with timer.stage("parse"):
            board = Board.parse(args.board)
        with timer.stage("dictionary"):
            trie = load_trie(args.dictionary, args.min_length)
    except BoardError as e:
        print(f"Argument error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Argument error: cannot read dictionary: {e}", file=sys.stderr)
        return 1

    logger.info("Board %dx%d:\n%s", board.width, board.height, board)

    with timer.stage("search"):
        matches = solve(board, trie, args.max_results, args.unique)
    timer.count("paths", len(matches))
    logger.info("Summary: %s", timer.summary())

    for m in matches:
        if args.paths:
            print(f"{m.word}\t{'-'.join(str(p) for p in m.path)}")
        else:
            print(m.word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
