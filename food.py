"""
Генератор еды.

Случайная клетка (равномерно по полю) + тип: обычная (80%, 10 очков)
или бонусная (20%, 25 очков). Клетка перевыбирается, пока попадает на змейку.
"""
from dataclasses import dataclass

import numpy as np

from config import BONUS_CHANCE, BONUS_POINTS, DEFAULT_FOOD, NORMAL_POINTS
from grid import Grid

NORMAL = "normal"
BONUS = "bonus"


class BoardFull(Exception):
    """Змейка заняла всё поле - еду положить некуда"""


@dataclass(frozen=True)
class Food:
    cell: tuple
    kind: str = NORMAL
    points: int = NORMAL_POINTS

    @classmethod
    def default(cls):
        return cls(DEFAULT_FOOD, NORMAL, NORMAL_POINTS)

    def to_record(self):
        x, y = self.cell
        return {"x": x, "y": y, "type": self.kind, "points": self.points}

    @classmethod
    def from_record(cls, record):
        return cls((record["x"], record["y"]),
                   record.get("type", NORMAL),
                   record.get("points", NORMAL_POINTS))


class FoodGenerator:
    def __init__(self, grid=None, rng=None, max_attempts=None):
        """
        max_attempts: сколько промахов выборки допускаем, прежде чем
                      перейти к перебору свободных клеток
        """
        self.grid = grid or Grid()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts or self.grid.cell_count * 4

    def _draw_kind(self):
        if self.rng.random() < BONUS_CHANCE:
            return BONUS, BONUS_POINTS
        return NORMAL, NORMAL_POINTS

    def generate(self, snake):
        occupied = set(snake)

        for _ in range(self.max_attempts):
            cell = (int(self.rng.integers(self.grid.size)),
                    int(self.rng.integers(self.grid.size)))
            kind, points = self._draw_kind()
            if cell not in occupied:
                return Food(cell, kind, points)

        # Поле почти заполнено - выбираем из свободных клеток
        free = self.grid.free_cells(occupied)
        if not free:
            raise BoardFull(f"no free cell for food on {self.grid.size}x{self.grid.size} grid")
        cell = free[int(self.rng.integers(len(free)))]
        kind, points = self._draw_kind()
        return Food(cell, kind, points)
