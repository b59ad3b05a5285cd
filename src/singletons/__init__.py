from .base_singleton import GuardedSingleton, SingletonInitError
from .conceptual_singleton import Singleton
from .logger_singleton import Logger
from .naive_singleton import NaiveSingleton
from .thread_safe_singleton import ThreadSafeSingleton

__all__ = [
    "GuardedSingleton",
    "SingletonInitError",
    "Singleton",
    "Logger",
    "NaiveSingleton",
    "ThreadSafeSingleton",
]
