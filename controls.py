"""
Управление: клавиши -> направление.

Нажатия между тиками пишутся в pending; на каждом тике pending
копируется в current до расчёта хода. Разворот на 180 градусов
относительно current молча игнорируется.
"""
from snake import Direction

PAUSE_KEY = "space"

# Имена клавиш как в pygame.key.name()
KEY_BINDINGS = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key):
    return KEY_BINDINGS.get(key.lower())


class InputController:
    def __init__(self, direction=Direction.RIGHT):
        self.reset(direction)

    def reset(self, direction=Direction.RIGHT):
        self.current = direction
        self.pending = direction

    def request(self, direction):
        """True если направление принято в буфер"""
        if direction.is_reverse_of(self.current):
            return False
        self.pending = direction
        return True

    def consume(self):
        """Вызывается в начале тика"""
        self.current = self.pending
        return self.current
