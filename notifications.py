"""
Канал уведомлений для игрока (всплывающие сообщения в окне).

Каждое уведомление дублируется в лог.
"""
import logging
import time
from collections import deque
from dataclasses import dataclass, field

from config import NOTIFICATION_TTL

logger = logging.getLogger(__name__)

SUCCESS = "success"
INFO = "info"
ERROR = "error"

_LOG_LEVELS = {
    SUCCESS: logging.INFO,
    INFO: logging.INFO,
    ERROR: logging.WARNING,
}


@dataclass
class Notification:
    level: str
    text: str
    created: float = field(default_factory=time.monotonic)


class Notifier:
    def __init__(self, maxlen=5, clock=time.monotonic):
        self.messages = deque(maxlen=maxlen)
        self.clock = clock

    def notify(self, level, text):
        note = Notification(level, text, self.clock())
        self.messages.append(note)
        logger.log(_LOG_LEVELS[level], "[%s] %s", level, text)
        return note

    def success(self, text):
        return self.notify(SUCCESS, text)

    def info(self, text):
        return self.notify(INFO, text)

    def error(self, text):
        return self.notify(ERROR, text)

    def recent(self, ttl=NOTIFICATION_TTL):
        """Уведомления, которые ещё пора показывать"""
        now = self.clock()
        return [n for n in self.messages if now - n.created <= ttl]

    def texts(self):
        return [n.text for n in self.messages]
