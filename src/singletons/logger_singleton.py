"""
Logger Singleton - One process-wide leveled logger shared by all threads.

Messages are numbered and printed in the order their callers acquire the
logger's lock, even when called from many threads at once. Messages below
the logger's threshold level are ignored.

Output format per accepted message:

    1\\t[INFO]
    \\tHere are some extra details.
"""

import atexit
import logging
import sys
import threading
from typing import TextIO

from log_utils import DEFAULT_LEVEL, Level, LogMessage, parse_level
from singletons.base_singleton import GuardedSingleton

logger = logging.getLogger(__name__)


class Logger(GuardedSingleton):
    """Thread-safe leveled logger. Access it through ``get_instance()``.

    A single lock serializes ``set_level`` and ``log``; the counter
    increment and the write happen together under it.
    """

    def __init__(self, stream: TextIO | None = None, level: Level | str = DEFAULT_LEVEL):
        self._lock = threading.Lock()
        self._stream = stream
        self._level = parse_level(level)
        self._count = 0
        logger.info("****\tLOGGER\tSTART UP\t****")

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @property
    def count(self) -> int:
        """Number of messages written so far."""
        with self._lock:
            return self._count

    def set_level(self, level: Level | str) -> None:
        """Set the threshold below which messages are ignored."""
        level = parse_level(level)
        with self._lock:
            self._level = level

    def log(self, text: str, level: Level | str = Level.DEBUG) -> None:
        """Write ``text`` if ``level`` is at or above the threshold.

        Messages below the threshold are dropped without any output.
        """
        message = LogMessage(text, level)
        with self._lock:
            if message.level < self._level:
                return
            self._count += 1
            stream = self._stream or sys.stdout
            stream.write(message.format(self._count))
            stream.flush()

    def _shutdown(self) -> None:
        logger.info(f"****\tLOGGER\tSHUT DOWN\t**** ({self._count} messages)")


def _shutdown_logger() -> None:
    """Report the shutdown of whichever Logger is current at exit."""
    instance = Logger._instance
    if instance is not None:
        instance._shutdown()


atexit.register(_shutdown_logger)


def get_instance() -> Logger:
    """Return the process-wide Logger."""
    return Logger.get_instance()


def set_level(level: Level | str) -> None:
    """Set the threshold level of the shared Logger."""
    Logger.get_instance().set_level(level)


def log(text: str, level: Level | str = Level.DEBUG) -> None:
    """Log ``text`` at ``level`` through the shared Logger."""
    Logger.get_instance().log(text, level)


def main() -> None:
    """Log one message per level from four threads with threshold INFO."""
    print("//// Logger Singleton ////")

    set_level(Level.INFO)

    threads = [
        threading.Thread(target=log, args=("This is just a simple development check.",)),
        threading.Thread(target=log, args=("Here are some extra details.", Level.INFO)),
        threading.Thread(target=log, args=("Be careful with this potential issue.", Level.WARNING)),
        threading.Thread(target=log, args=("A major problem has caused a fatal stoppage.", Level.ERROR)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

