"""
Таймер игрового цикла поверх asyncio.

Один активный таймер. reconfigure(speed, running) - единственная точка
входа: старый таймер отменяется, новый взводится, если игра идёт.
"""
import asyncio
import logging

logger = logging.getLogger(__name__)


class TickScheduler:
    def __init__(self, callback, loop=None):
        """
        callback: вызывается на каждом тике без аргументов
        loop: event loop (по умолчанию - текущий запущенный)
        """
        self.callback = callback
        self._loop = loop
        self._handle = None
        self.speed = None
        self.running = False
        self.ticks = 0

    @property
    def active(self):
        return self._handle is not None

    def reconfigure(self, speed, running):
        if running and self.active and speed == self.speed:
            return
        if not running and not self.active:
            self.speed = speed
            self.running = False
            return

        self.cancel()
        self.speed = speed
        self.running = running
        if running:
            self._arm()
            logger.debug("Timer armed: %d ms", speed)
        else:
            logger.debug("Timer stopped")

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self):
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.speed / 1000.0, self._fire)

    def _fire(self):
        # Перевзводим до колбэка: если колбэк вызовет reconfigure,
        # этот таймер будет отменён
        self._arm()
        self.ticks += 1
        self.callback()
