"""
Guarded Singleton - Base class for process-wide, lazily created instances.

Every subclass gets its own instance slot and its own construction lock.
The first call to ``get_instance()`` builds the instance; every later call,
from any thread, returns that same object.
"""

import logging
import threading


logger = logging.getLogger(__name__)


class SingletonInitError(RuntimeError):
    """Raised when a singleton's constructor fails. Not retried."""


class GuardedSingleton:
    """Base class providing thread-safe, exactly-once lazy construction.

    Subclasses implement ``__init__`` as usual and are accessed through
    ``get_instance()``. Construction uses double-checked locking:
        - fast path: read the stored instance without locking
        - slow path: take the class lock, check again, then construct
    """

    _instance = None
    _instance_lock = threading.Lock()
    construction_count = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass owns a separate slot and lock
        cls._instance = None
        cls._instance_lock = threading.Lock()
        cls.construction_count = 0

    @classmethod
    def get_instance(cls, *args, **kwargs):
        """Return the shared instance, constructing it on the first call.

        Arguments are forwarded to the constructor on the first call only.

        Raises:
            SingletonInitError: if the constructor raises. The class stays
                uninitialized.
        """
        instance = cls._instance
        if instance is not None:
            return instance

        with cls._instance_lock:
            if cls._instance is None:
                try:
                    instance = cls(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Failed to construct singleton {cls.__name__}: {e}")
                    raise SingletonInitError(
                        f"{cls.__name__} could not be initialized"
                    ) from e
                cls.construction_count += 1
                # Publish only a fully constructed instance
                cls._instance = instance
                logger.debug(f"Singleton {cls.__name__} initialized")
            return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        """Return True once the shared instance exists."""
        return cls._instance is not None

    @classmethod
    def _reset_instance(cls) -> None:
        """Forget the shared instance. Test helper only."""
        with cls._instance_lock:
            cls._instance = None
            cls.construction_count = 0
