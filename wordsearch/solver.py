from __future__ import annotations

from typing import NamedTuple

from wordsearch.board import Board, Path
from wordsearch.trie import Trie


class Match(NamedTuple):
    word: str
    path: Path


def solve(board: Board, trie: Trie, max_results: int = 0, unique: bool = False) -> list[Match]:
    """Search ``board`` and render every found path as a word.

    Sorted longest first, then alphabetically, then by path. The same word
    reached by different paths appears once per path unless ``unique`` is
    set, in which case the first path in that order is kept.
    """
    matches = sorted(
        (Match(board.path_to_word(path), path) for path in board.search(trie)),
        key=lambda m: (-len(m.word), m.word, m.path),
    )

    if unique:
        seen: set[str] = set()
        deduped = []
        for m in matches:
            if m.word not in seen:
                seen.add(m.word)
                deduped.append(m)
        matches = deduped

    return matches[:max_results] if max_results > 0 else matches


def solve_text(text: str, trie: Trie, max_results: int = 0, unique: bool = False) -> list[Match]:
    return solve(Board.parse(text), trie, max_results, unique)
