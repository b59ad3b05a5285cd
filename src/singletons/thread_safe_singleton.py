"""
Thread-Safe Singleton - Conceptual demo of the guarded accessor.

Two threads race to create the singleton with different values. Because
construction is guarded, both end up with the instance built by whichever
thread won the lock, and print the same value.
"""

import logging
import threading
import time

from singletons.base_singleton import GuardedSingleton

logger = logging.getLogger(__name__)

LEGEND = (
    "If you see the same value, then singleton was reused (yay!\n"
    "If you see different values, then 2 singletons were created (booo!!)\n\n"
    "RESULT:"
)


class ThreadSafeSingleton(GuardedSingleton):
    """Singleton carrying the value it was first created with."""

    def __init__(self, value: str = ""):
        self.value = value

    def some_business_logic(self) -> str:
        return f"{self.__class__.__name__}({self.value}) handled a request"


def client_code() -> bool:
    """Fetch the instance twice and report whether both are the same object."""
    s1 = ThreadSafeSingleton.get_instance()
    s2 = ThreadSafeSingleton.get_instance()
    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
        return True
    print("Singleton failed, variables contain different instances.")
    return False


def _race(value: str, delay: float) -> None:
    # Emulates slow initialization
    time.sleep(delay)
    singleton = ThreadSafeSingleton.get_instance(value)
    print(singleton.value)


def main(delay: float = 0.1) -> bool:
    print(LEGEND)
    threads = [
        threading.Thread(target=_race, args=("FOO", delay)),
        threading.Thread(target=_race, args=("BAR", delay)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    logger.debug(f"ThreadSafeSingleton constructed {ThreadSafeSingleton.construction_count} time(s)")
    return client_code()
