"""
Сохранение игры в фоне.

Игра сначала меняет своё состояние, потом ставит задачу в очередь.
Воркер выполняет задачи по одной; ошибка задачи превращается в
уведомление и никак не влияет на состояние игры.
"""
import asyncio
import logging
from collections import deque
from dataclasses import dataclass

from database import StoreError

logger = logging.getLogger(__name__)


@dataclass
class Job:
    name: str
    call: object          # фабрика корутины: () -> awaitable
    success: str = None   # текст уведомления при успехе
    failure: str = None   # текст уведомления при ошибке


class PersistenceQueue:
    def __init__(self, database, notifier, history_size=20):
        self.database = database
        self.notifier = notifier
        self.queue = asyncio.Queue()
        self.completed = 0
        self.failed = 0
        # Последние задачи: (имя, успех)
        self.history = deque(maxlen=history_size)

    def submit(self, job):
        self.queue.put_nowait(job)
        logger.debug("Queued %s (%d pending)", job.name, self.queue.qsize())

    def create_session(self, record):
        """Новая сессия (при старте игры)"""
        self.submit(Job(
            "create_session",
            lambda: self.database.game_states.create(record),
            success="Game started!",
            failure="Failed to start game",
        ))

    def update_session(self, session_id, record):
        """Итог сессии (при проигрыше)"""
        self.submit(Job(
            "update_session",
            lambda: self.database.game_states.update(session_id, record),
            failure="Failed to save game state",
        ))

    async def execute(self, job):
        try:
            result = await job.call()
        except StoreError as e:
            logger.warning("%s failed: %s", job.name, e)
            self._failed(job)
            return None
        except Exception:
            # Любой другой сбой тоже не должен останавливать воркер
            logger.exception("%s failed unexpectedly", job.name)
            self._failed(job)
            return None

        self.completed += 1
        self.history.append((job.name, True))
        if job.success:
            self.notifier.success(job.success)
        return result

    def _failed(self, job):
        self.failed += 1
        self.history.append((job.name, False))
        if job.failure:
            self.notifier.error(job.failure)

    async def drain(self):
        """Выполнить всё, что уже в очереди"""
        while not self.queue.empty():
            job = self.queue.get_nowait()
            try:
                await self.execute(job)
            finally:
                self.queue.task_done()

    async def run(self):
        """Бесконечный воркер (запускается как отдельная задача)"""
        while True:
            job = await self.queue.get()
            try:
                await self.execute(job)
            finally:
                self.queue.task_done()

    async def flush(self, timeout):
        """Дождаться, пока воркер выполнит очередь. Возвращает число брошенных задач"""
        try:
            await asyncio.wait_for(self.queue.join(), timeout)
        except asyncio.TimeoutError:
            logger.warning("%d saves dropped: worker did not finish in %.1fs",
                           self.pending, timeout)
        return self.pending

    @property
    def pending(self):
        return self.queue.qsize()


async def load_saved_game(database, notifier):
    """
    Загрузить сохранённые состояние, змейку и еду (первые записи).
    Возвращает (game_state, snake, food) - любой элемент может быть None.
    При ошибке показывает уведомление и возвращает (None, None, None).
    """
    try:
        game_states, snakes, foods = await asyncio.gather(
            database.game_states.get_all(),
            database.snakes.get_all(),
            database.foods.get_all(),
        )
    except StoreError as e:
        logger.warning("Loading saved game failed: %s", e)
        notifier.error("Failed to load game data")
        return None, None, None

    return _first(game_states), _first(snakes), _first(foods)


def _first(records):
    return records[0] if records else None
