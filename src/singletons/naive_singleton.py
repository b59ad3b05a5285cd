"""
Naive Singleton - The same accessor without any locking.

Kept for contrast with the guarded version: when construction is slow,
two threads can both see an empty slot and each build an instance.
"""

import logging
import threading
import time

from singletons.thread_safe_singleton import LEGEND

logger = logging.getLogger(__name__)


class NaiveSingleton:
    """Lazily created singleton whose accessor is not thread-safe."""

    _instance = None
    construction_count = 0
    # Pause between the check and the construction, widens the race window
    init_delay = 0.0

    def __init__(self, value: str = ""):
        self.value = value
        NaiveSingleton.construction_count += 1

    @classmethod
    def get_instance(cls, value: str = ""):
        if cls._instance is None:
            if cls.init_delay:
                time.sleep(cls.init_delay)
            cls._instance = cls(value)
        return cls._instance

    @classmethod
    def _reset_instance(cls) -> None:
        cls._instance = None
        cls.construction_count = 0


def _race(value: str, delay: float) -> None:
    time.sleep(delay)
    singleton = NaiveSingleton.get_instance(value)
    print(singleton.value)


def main(delay: float = 0.1) -> None:
    print(LEGEND)
    NaiveSingleton.init_delay = delay
    threads = [
        threading.Thread(target=_race, args=("FOO", delay)),
        threading.Thread(target=_race, args=("BAR", delay)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    if NaiveSingleton.construction_count > 1:
        logger.warning(
            f"NaiveSingleton constructed {NaiveSingleton.construction_count} times"
        )
