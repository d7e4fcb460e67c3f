"""
Хранилища записей игры (состояние, змейка, еда).

Каждое хранилище - отдельная SQLite база в памяти, заполняется из
fixtures при создании и живёт, пока жив процесс. Методы асинхронные
и имитируют задержку сети; с вероятностью failure_rate вызов падает.
"""
import asyncio
import json
import logging
import sqlite3
from datetime import datetime

import numpy as np

import fixtures
from config import STORE_LATENCY

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Базовая ошибка хранилища"""


class RecordNotFound(StoreError, KeyError):
    def __init__(self, store, record_id):
        self.store = store
        self.record_id = record_id
        super().__init__(f"{store}: record {record_id!r} not found")

    def __str__(self):
        return self.args[0]


class StoreUnavailable(StoreError):
    """Имитация временного сбоя ввода-вывода"""


class RecordStore:
    def __init__(self, name, seed=(), latency=None, failure_rate=0.0, rng=None):
        """
        name: имя хранилища (для сообщений об ошибках)
        seed: начальные записи
        latency: None = задержки из конфига, число = одна задержка на всё (мс),
                 dict = задержка по операциям
        failure_rate: вероятность сбоя каждого вызова
        """
        self.name = name
        self.latency = STORE_LATENCY if latency is None else latency
        self.failure_rate = failure_rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self.conn = None
        self._init_db()
        self._seed(seed)

    def _init_db(self):
        self.conn = sqlite3.connect(":memory:")
        cursor = self.conn.cursor()
        cursor.execute('''
            CREATE TABLE records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                data TEXT NOT NULL
            )
        ''')
        self.conn.commit()

    def _seed(self, records):
        cursor = self.conn.cursor()
        for record in records:
            fields = dict(record)
            record_id = fields.pop("id", None)
            cursor.execute('INSERT INTO records (id, data) VALUES (?, ?)',
                           (record_id, json.dumps(fields)))
        self.conn.commit()
        logger.debug("%s: seeded %d records", self.name, len(records))

    async def _io(self, operation):
        """Задержка + возможный сбой перед каждой операцией"""
        if isinstance(self.latency, dict):
            delay = self.latency.get(operation, 0)
        else:
            delay = self.latency
        if delay:
            await asyncio.sleep(delay / 1000.0)
        if self.failure_rate and self.rng.random() < self.failure_rate:
            raise StoreUnavailable(f"{self.name}: {operation} failed")

    def _fetch(self, record_id):
        cursor = self.conn.cursor()
        cursor.execute('SELECT id, data FROM records WHERE id = ?', (record_id,))
        row = cursor.fetchone()
        if row is None:
            raise RecordNotFound(self.name, record_id)
        return self._to_record(row)

    @staticmethod
    def _to_record(row):
        record_id, data = row
        return {"id": record_id, **json.loads(data)}

    @staticmethod
    def _now():
        return datetime.now().isoformat()

    async def get_all(self):
        await self._io("get_all")
        cursor = self.conn.cursor()
        cursor.execute('SELECT id, data FROM records ORDER BY id')
        return [self._to_record(row) for row in cursor.fetchall()]

    async def get_by_id(self, record_id):
        await self._io("get_by_id")
        return self._fetch(record_id)

    async def create(self, fields):
        """Новая запись: id выдаёт хранилище, плюс createdAt"""
        await self._io("create")
        data = {k: v for k, v in fields.items() if k != "id"}
        data["createdAt"] = self._now()
        cursor = self.conn.cursor()
        cursor.execute('INSERT INTO records (data) VALUES (?)', (json.dumps(data),))
        self.conn.commit()
        return {"id": cursor.lastrowid, **data}

    async def update(self, record_id, updates):
        await self._io("update")
        current = self._fetch(record_id)
        current.update({k: v for k, v in updates.items() if k != "id"})
        current["updatedAt"] = self._now()
        data = {k: v for k, v in current.items() if k != "id"}
        cursor = self.conn.cursor()
        cursor.execute('UPDATE records SET data = ? WHERE id = ?',
                       (json.dumps(data), record_id))
        self.conn.commit()
        return current

    async def delete(self, record_id):
        await self._io("delete")
        removed = self._fetch(record_id)
        cursor = self.conn.cursor()
        cursor.execute('DELETE FROM records WHERE id = ?', (record_id,))
        self.conn.commit()
        return removed

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None


class GameDatabase:
    """Три хранилища одной игры"""

    def __init__(self, latency=None, failure_rate=0.0, rng=None, seed=True):
        rng = rng if rng is not None else np.random.default_rng()
        options = dict(latency=latency, failure_rate=failure_rate, rng=rng)
        self.game_states = RecordStore(
            "game_states", fixtures.GAME_STATES if seed else (), **options)
        self.snakes = RecordStore(
            "snakes", fixtures.SNAKES if seed else (), **options)
        self.foods = RecordStore(
            "foods", fixtures.FOODS if seed else (), **options)

    @property
    def stores(self):
        return [self.game_states, self.snakes, self.foods]

    def close(self):
        for store in self.stores:
            store.close()
