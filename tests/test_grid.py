from grid import Grid


def test_default_size():
    assert Grid().size == 20


def test_in_bounds_edges():
    grid = Grid(20)
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((19, 19))
    assert not grid.in_bounds((-1, 5))
    assert not grid.in_bounds((5, -1))
    assert not grid.in_bounds((20, 0))
    assert not grid.in_bounds((0, 20))


def test_occupancy_matrix_is_row_major():
    grid = Grid(3)
    matrix = grid.occupancy([(2, 0), (0, 1)])
    assert matrix.shape == (3, 3)
    assert matrix[0, 2]
    assert matrix[1, 0]
    assert matrix.sum() == 2


def test_free_cells():
    grid = Grid(2)
    assert grid.free_cells([(0, 0), (1, 1)]) == [(1, 0), (0, 1)]
    assert grid.free_cells([(0, 0), (1, 0), (0, 1), (1, 1)]) == []
