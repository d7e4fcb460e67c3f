"""
Игровое поле: дискретная сетка GRID_SIZE x GRID_SIZE.

Клетка - кортеж (x, y), 0 <= x, y < size.
"""
import numpy as np
from config import GRID_SIZE


class Grid:
    def __init__(self, size=None):
        self.size = size or GRID_SIZE

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    @property
    def cell_count(self):
        return self.size * self.size

    def occupancy(self, cells):
        """Матрица занятости (строка = y, столбец = x)"""
        matrix = np.zeros((self.size, self.size), dtype=bool)
        for x, y in cells:
            if self.in_bounds((x, y)):
                matrix[y, x] = True
        return matrix

    def free_cells(self, occupied):
        """Все свободные клетки в порядке обхода по строкам"""
        ys, xs = np.nonzero(~self.occupancy(occupied))
        return [(int(x), int(y)) for x, y in zip(xs, ys)]
