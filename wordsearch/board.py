from __future__ import annotations

from typing import Iterable, Iterator

from wordsearch.graph import AdjacencyGraph
from wordsearch.trie import Trie, TrieNode

Path = tuple[int, ...]

PLACEHOLDER = "?"


class BoardError(ValueError):
    """Board text could not be parsed into a rectangular grid."""


class TooFewRows(BoardError):
    def __init__(self, message: str = "must have at least two rows"):
        super().__init__(message)


class UnevenRows(BoardError):
    def __init__(self, message: str = "all rows must be the same width"):
        super().__init__(message)


class TooNarrow(BoardError):
    def __init__(self, message: str = "must have at least two columns"):
        super().__init__(message)


class Board:
    """A letter grid: an adjacency graph plus one character per cell id."""

    def __init__(self, grid: AdjacencyGraph, chars: dict[int, str]):
        self.grid = grid
        self.chars = chars

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse whitespace-separated rows, e.g. ``"abc def ghi"`` for a 3x3 board."""
        return cls.from_rows(text.split())

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        if len(rows) < 2:
            raise TooFewRows()
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise UnevenRows()
        if width < 2:
            raise TooNarrow()

        grid = AdjacencyGraph.grid(width, len(rows))
        chars = {i: ch for i, ch in enumerate(ch for row in rows for ch in row)}
        return cls(grid, chars)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def rows(self) -> list[str]:
        return [
            self.path_to_word(range(r * self.width, (r + 1) * self.width))
            for r in range(self.height)
        ]

    def search(self, trie: Trie) -> set[Path]:
        """Return every path whose characters spell a word in ``trie``.

        Backtracking DFS from each cell. The trie is walked one character per
        cell and a branch stops as soon as the prefix leaves the trie. A path
        never revisits a cell.

        The walk keeps its own stack of (trie node, remaining neighbours)
        frames, one per path cell, so path length is not limited by the
        interpreter's recursion limit.
        """
        found: set[Path] = set()
        path: list[int] = []
        visited: set[int] = set()
        stack: list[tuple[TrieNode, Iterator[int]]] = []

        def enter(pos: int, node: TrieNode) -> bool:
            here = node.child(self.chars.get(pos))
            if here is None:
                return False
            path.append(pos)
            visited.add(pos)
            if here.is_word_end:
                found.add(tuple(path))
            stack.append((here, iter(self.grid.neighbors(pos))))
            return True

        for start in self.grid.cells():
            enter(start, trie.root)
            while stack:
                node, moves = stack[-1]
                for nxt in moves:
                    if nxt not in visited and enter(nxt, node):
                        break
                else:
                    # Neighbours exhausted: backtrack
                    stack.pop()
                    visited.discard(path.pop())
        return found

    def path_to_word(self, path: Iterable[int]) -> str:
        return "".join(self.chars.get(pos, PLACEHOLDER) for pos in path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self.chars == other.chars

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows())

    def __repr__(self) -> str:
        return f"Board({' '.join(self.rows())!r})"
