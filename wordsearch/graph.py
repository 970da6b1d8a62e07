from __future__ import annotations


class AdjacencyGraph:
    """Undirected graph over integer cell ids, stored as neighbour sets."""

    def __init__(self, width: int = 0, height: int = 0):
        self.adjacency: dict[int, set[int]] = {}
        # Grid dimensions; 0 for graphs not built by grid()
        self.width = width
        self.height = height

    @classmethod
    def grid(cls, width: int, height: int) -> AdjacencyGraph:
        """Build the king-move graph of a ``width`` x ``height`` grid.

        Cells are numbered from 0 in row-major order. Each edge is discovered
        once, from its upper-left endpoint, by a single forward pass.
        Dimensions below 1 are not rejected here and produce an empty graph.
        """
        graph = cls(max(width, 0), max(height, 0))
        for n in range(width * height):
            graph.adjacency.setdefault(n, set())

            right = (n + 1) % width != 0
            down = n // width + 1 < height
            left = n % width != 0

            if right:
                graph.add_edge(n, n + 1)
            if down:
                graph.add_edge(n, n + width)
            if right and down:
                graph.add_edge(n, n + width + 1)
            if down and left:
                graph.add_edge(n, n + width - 1)
        return graph

    def add_edge(self, x: int, y: int):
        self.adjacency.setdefault(x, set()).add(y)
        self.adjacency.setdefault(y, set()).add(x)

    def neighbors(self, cell: int) -> set[int]:
        return self.adjacency.get(cell, set())

    def cells(self) -> list[int]:
        return sorted(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        return self.adjacency == other.adjacency

    def __repr__(self) -> str:
        return f"AdjacencyGraph({len(self.adjacency)} cells)"
