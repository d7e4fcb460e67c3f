"""
Модель змейки.

Голова - segments[0], хвост - segments[-1].
Snake неизменяем: grow/move возвращают новую змейку, поэтому тик
либо целиком подменяет змейку, либо не трогает её вовсе.
"""
from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other):
        return self is other.opposite

    def translate(self, cell):
        dx, dy = self.value
        return cell[0] + dx, cell[1] + dy

    @classmethod
    def from_name(cls, name):
        """'up' -> Direction.UP"""
        return cls[name.upper()]

    @property
    def label(self):
        return self.name.lower()


class Snake:
    def __init__(self, segments):
        if not segments:
            raise ValueError("snake needs at least one segment")
        self.segments = tuple(tuple(cell) for cell in segments)

    @classmethod
    def single(cls, cell):
        return cls([cell])

    @property
    def head(self):
        return self.segments[0]

    @property
    def tail(self):
        return self.segments[-1]

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __contains__(self, cell):
        return tuple(cell) in self.segments

    def __eq__(self, other):
        if not isinstance(other, Snake):
            return NotImplemented
        return self.segments == other.segments

    def __hash__(self):
        return hash(self.segments)

    def __repr__(self):
        return f"Snake({list(self.segments)!r})"

    def advance(self, direction):
        """Клетка, в которую попадёт голова"""
        return direction.translate(self.head)

    def grow(self, new_head):
        """Новая голова, хвост остаётся (длина +1)"""
        return Snake((tuple(new_head),) + self.segments)

    def move(self, new_head):
        """Новая голова, хвост убираем (длина та же)"""
        return Snake((tuple(new_head),) + self.segments[:-1])

    def to_record(self):
        return [{"x": x, "y": y} for x, y in self.segments]

    @classmethod
    def from_record(cls, segments):
        return cls([(s["x"], s["y"]) for s in segments])
