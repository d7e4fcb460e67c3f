"""
Проверка столкновений для новой головы.

Порядок: стена, тело, еда. Тело берётся до хода, хвост тоже считается
препятствием (даже если он освободится на этом тике).
"""
from enum import Enum


class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"
    FOOD = "food"

    @property
    def is_fatal(self):
        return self in (Collision.WALL, Collision.SELF)


def detect(grid, snake, food, head):
    if not grid.in_bounds(head):
        return Collision.WALL
    if head in snake:
        return Collision.SELF
    if food is not None and tuple(head) == tuple(food.cell):
        return Collision.FOOD
    return Collision.NONE
