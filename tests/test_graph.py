import pytest
from wordsearch.graph import AdjacencyGraph


def test_grid_3x3():
    graph = AdjacencyGraph.grid(3, 3)
    assert graph.adjacency == {
        0: {1, 3, 4},
        1: {0, 2, 3, 4, 5},
        2: {1, 4, 5},
        3: {0, 1, 4, 6, 7},
        4: {0, 1, 2, 3, 5, 6, 7, 8},
        5: {1, 2, 4, 7, 8},
        6: {3, 4, 7},
        7: {3, 4, 5, 6, 8},
        8: {4, 5, 7},
    }


def test_grid_2x2_fully_connected():
    graph = AdjacencyGraph.grid(2, 2)
    for cell in range(4):
        assert graph.neighbors(cell) == {0, 1, 2, 3} - {cell}


@pytest.mark.parametrize("width,height", [(1, 1), (1, 4), (4, 1), (2, 3), (3, 3), (5, 4), (6, 6)])
def test_grid_is_symmetric(width, height):
    graph = AdjacencyGraph.grid(width, height)
    assert graph.cells() == list(range(width * height))
    for x in graph.cells():
        assert x not in graph.neighbors(x)
        for y in graph.neighbors(x):
            assert x in graph.neighbors(y)


def test_neighbor_counts_5x4():
    width, height = 5, 4
    graph = AdjacencyGraph.grid(width, height)
    for cell in graph.cells():
        r, c = divmod(cell, width)
        on_row_edge = r in (0, height - 1)
        on_col_edge = c in (0, width - 1)
        if on_row_edge and on_col_edge:
            expected = 3
        elif on_row_edge or on_col_edge:
            expected = 5
        else:
            expected = 8
        assert len(graph.neighbors(cell)) == expected, cell


def test_neighbors_are_king_moves():
    width, height = 4, 5
    graph = AdjacencyGraph.grid(width, height)
    for x in graph.cells():
        for y in graph.neighbors(x):
            (r1, c1), (r2, c2) = divmod(x, width), divmod(y, width)
            assert max(abs(r1 - r2), abs(c1 - c2)) == 1


def test_single_cell_has_no_neighbors():
    graph = AdjacencyGraph.grid(1, 1)
    assert graph.adjacency == {0: set()}


def test_degenerate_dimensions_give_empty_graph():
    assert len(AdjacencyGraph.grid(0, 3)) == 0
    assert len(AdjacencyGraph.grid(3, 0)) == 0


def test_add_edge_is_symmetric():
    graph = AdjacencyGraph()
    graph.add_edge(7, 9)
    assert graph.neighbors(7) == {9}
    assert graph.neighbors(9) == {7}
    assert graph.neighbors(8) == set()


def test_grid_records_dimensions():
    graph = AdjacencyGraph.grid(4, 3)
    assert (graph.width, graph.height) == (4, 3)
    assert (AdjacencyGraph().width, AdjacencyGraph().height) == (0, 0)
