"""
Игра "Змейка": состояние сессии, тик и переходы

    idle -> playing <-> paused -> game_over -> idle | playing

Тик атомарный: либо змейка/счёт/еда обновляются вместе, либо
(при столкновении со стеной или телом) ничего не меняется и игра
заканчивается.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from collision import Collision, detect
from config import (INITIAL_SPEED, MIN_SPEED, POINTS_PER_LEVEL, SESSION_ID,
                    SPEED_STEP, START_CELL, START_DIRECTION)
from controls import PAUSE_KEY, InputController, direction_for_key
from food import BoardFull, Food, FoodGenerator
from grid import Grid
from notifications import Notifier
from snake import Direction, Snake

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def level_for(score):
    return score // POINTS_PER_LEVEL + 1


def speed_for(level):
    """Интервал тика (мс) для уровня; на первом уровне = INITIAL_SPEED"""
    return max(MIN_SPEED, INITIAL_SPEED - (level - 1) * SPEED_STEP)


@dataclass
class GameState:
    score: int = 0
    level: int = 1
    is_playing: bool = False
    is_paused: bool = False
    is_game_over: bool = False
    high_score: int = 0

    @property
    def phase(self):
        if self.is_playing:
            return Phase.PAUSED if self.is_paused else Phase.PLAYING
        if self.is_game_over:
            return Phase.GAME_OVER
        return Phase.IDLE

    def to_record(self):
        return {
            "score": self.score,
            "level": self.level,
            "isPlaying": self.is_playing,
            "isPaused": self.is_paused,
            "isGameOver": self.is_game_over,
            "highScore": self.high_score,
        }


class SnakeGame:
    def __init__(self, grid=None, food_generator=None, persistence=None,
                 notifier=None, rng=None):
        """
        persistence: PersistenceQueue или None (без сохранения)
        rng: генератор случайных чисел для еды (если food_generator не задан)
        """
        self.grid = grid or Grid()
        self.food_generator = food_generator or FoodGenerator(self.grid, rng)
        self.persistence = persistence
        self.notifier = notifier or Notifier()
        self.controls = InputController()
        self.scheduler = None
        self.state = GameState()
        self.games = 0
        self.reset()

    # --- свойства ---

    @property
    def phase(self):
        return self.state.phase

    @property
    def direction(self):
        return self.controls.current

    @property
    def running(self):
        """Должен ли сейчас тикать таймер"""
        return self.state.is_playing and not self.state.is_paused

    def bind_scheduler(self, scheduler):
        self.scheduler = scheduler
        self._sync_scheduler()

    def _sync_scheduler(self):
        if self.scheduler is not None:
            self.scheduler.reconfigure(self.speed, self.running)

    # --- переходы ---

    def reset(self):
        """Любое состояние -> idle. Рекорд сохраняется"""
        self.state = GameState(high_score=self.state.high_score)
        self.snake = Snake.single(START_CELL)
        self.controls.reset(Direction.from_name(START_DIRECTION))
        self.food = Food.default()
        self.speed = INITIAL_SPEED
        self._sync_scheduler()

    def start(self):
        """idle | game_over -> playing"""
        if self.state.is_playing:
            logger.debug("start ignored: already playing")
            return False

        snake = Snake.single(START_CELL)
        food = self.food_generator.generate(snake)

        self.state = GameState(is_playing=True, high_score=self.state.high_score)
        self.snake = snake
        self.food = food
        self.controls.reset(Direction.from_name(START_DIRECTION))
        self.speed = INITIAL_SPEED
        self.games += 1
        self._sync_scheduler()
        logger.info("Game %d started", self.games)

        if self.persistence is not None:
            self.persistence.create_session(self.state.to_record())
        return True

    def toggle_pause(self):
        """playing <-> paused"""
        if not self.state.is_playing:
            return False
        self.state.is_paused = not self.state.is_paused
        self._sync_scheduler()
        self.notifier.info("Game paused" if self.state.is_paused else "Game resumed")
        return True

    def _game_over(self, reason):
        previous_high = self.state.high_score
        score = self.state.score

        self.state.is_playing = False
        self.state.is_paused = False
        self.state.is_game_over = True
        self.state.high_score = max(previous_high, score)
        self._sync_scheduler()
        logger.info("Game over (%s): score=%d level=%d length=%d",
                    reason, score, self.state.level, len(self.snake))

        if score > previous_high:
            self.notifier.success(f"New high score: {score}!")
        else:
            self.notifier.error("Game Over!")

        if self.persistence is not None:
            self.persistence.update_session(SESSION_ID, self.state.to_record())

    # --- ввод ---

    def handle_key(self, key):
        """Имя клавиши (как в pygame.key.name). True если нажатие что-то изменило"""
        if not self.state.is_playing:
            return False
        if key == PAUSE_KEY:
            return self.toggle_pause()

        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.controls.request(direction)

    # --- тик ---

    def tick(self):
        """Один шаг. Возвращает Collision или None, если игра не идёт"""
        if not self.running:
            return None

        direction = self.controls.consume()
        head = self.snake.advance(direction)
        collision = detect(self.grid, self.snake, self.food, head)

        if collision.is_fatal:
            self._game_over(collision.value)
        elif collision is Collision.FOOD:
            self._eat(head)
        else:
            self.snake = self.snake.move(head)
        return collision

    def _eat(self, head):
        eaten = self.food
        snake = self.snake.grow(head)
        score = self.state.score + eaten.points
        level = level_for(score)
        speed = speed_for(level)

        try:
            food = self.food_generator.generate(snake)
        except BoardFull:
            # Поле заполнено целиком - дальше играть некуда
            food = None

        self.snake = snake
        self.food = food
        self.state.score = score
        self.state.level = level
        self.speed = speed
        self.notifier.success(f"+{eaten.points} points!")

        if food is None:
            self._game_over("board full")
        else:
            self._sync_scheduler()

    # --- сохранённая игра и отрисовка ---

    def restore(self, game_record=None, snake_record=None, food_record=None):
        """Восстановить рекорд, змейку и еду из записей хранилищ"""
        if self.state.is_playing:
            return False
        if game_record:
            self.state.high_score = max(self.state.high_score,
                                        int(game_record.get("highScore", 0)))
        if snake_record and snake_record.get("segments"):
            self.snake = Snake.from_record(snake_record["segments"])
            self.controls.reset(_saved_direction(snake_record.get("direction")))
        if food_record:
            self.food = Food.from_record(food_record)
        return True

    def snapshot(self):
        """Всё, что нужно для отрисовки кадра"""
        return {
            "snake": list(self.snake),
            "food": self.food.to_record() if self.food else None,
            "state": self.state.to_record(),
            "speed": self.speed,
            "phase": self.phase.value,
            "direction": self.direction.label,
        }


def _saved_direction(name):
    """Направление из записи; неизвестное значение -> START_DIRECTION"""
    try:
        return Direction.from_name(name)
    except (KeyError, AttributeError):
        if name is not None:
            logger.warning("Unknown saved direction %r, using %s", name, START_DIRECTION)
        return Direction.from_name(START_DIRECTION)
