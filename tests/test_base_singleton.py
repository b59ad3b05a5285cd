"""Tests for the GuardedSingleton base class."""

import threading
import time

import pytest

from singletons.base_singleton import GuardedSingleton, SingletonInitError


class SlowSingleton(GuardedSingleton):
    """Singleton whose constructor is slow enough to expose races."""

    constructor_calls = 0

    def __init__(self, value=None):
        SlowSingleton.constructor_calls += 1
        time.sleep(0.05)
        self.value = value


class OtherSingleton(GuardedSingleton):
    pass


class FlakySingleton(GuardedSingleton):
    """Fails on the first construction attempt only."""

    attempts = 0

    def __init__(self):
        FlakySingleton.attempts += 1
        if FlakySingleton.attempts == 1:
            raise MemoryError("out of memory")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Start every test with uninitialized singletons."""
    for cls in (SlowSingleton, OtherSingleton, FlakySingleton):
        cls._reset_instance()
    SlowSingleton.constructor_calls = 0
    FlakySingleton.attempts = 0
    yield
    for cls in (SlowSingleton, OtherSingleton, FlakySingleton):
        cls._reset_instance()


class TestGetInstance:
    """Test lazy construction and identity."""

    def test_not_initialized_before_first_call(self):
        assert SlowSingleton.is_initialized() is False

    def test_first_call_initializes(self):
        SlowSingleton.get_instance()
        assert SlowSingleton.is_initialized() is True
        assert SlowSingleton.construction_count == 1

    def test_returns_same_instance(self):
        s1 = SlowSingleton.get_instance()
        s2 = SlowSingleton.get_instance()
        assert s1 is s2

    def test_arguments_used_on_first_call_only(self):
        first = SlowSingleton.get_instance("FOO")
        second = SlowSingleton.get_instance("BAR")
        assert second is first
        assert second.value == "FOO"
        assert SlowSingleton.constructor_calls == 1

    def test_subclasses_have_separate_instances(self):
        slow = SlowSingleton.get_instance()
        other = OtherSingleton.get_instance()
        assert slow is not other
        assert isinstance(other, OtherSingleton)
        assert OtherSingleton.get_instance() is other

    def test_base_lock_not_shared_with_subclass(self):
        assert SlowSingleton._instance_lock is not OtherSingleton._instance_lock
        assert SlowSingleton._instance_lock is not GuardedSingleton._instance_lock

    def test_reset_allows_fresh_construction(self):
        first = SlowSingleton.get_instance()
        SlowSingleton._reset_instance()
        assert SlowSingleton.is_initialized() is False
        second = SlowSingleton.get_instance()
        assert second is not first


class TestConcurrentAccess:
    """Test exactly-once construction under contention."""

    def test_two_simultaneous_first_calls(self):
        barrier = threading.Barrier(2)
        results = []

        def worker():
            barrier.wait()
            results.append(SlowSingleton.get_instance())

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert len(results) == 2
        assert results[0] is results[1]
        assert SlowSingleton.constructor_calls == 1

    def test_many_simultaneous_first_calls(self):
        n = 32
        barrier = threading.Barrier(n)
        results = []
        results_lock = threading.Lock()

        def worker(i):
            barrier.wait()
            instance = SlowSingleton.get_instance(i)
            with results_lock:
                results.append(instance)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert len(results) == n
        assert len({id(r) for r in results}) == 1
        assert SlowSingleton.constructor_calls == 1
        assert SlowSingleton.construction_count == 1


class TestConstructionFailure:
    """Test that constructor errors propagate and publish nothing."""

    def test_raises_singleton_init_error(self):
        with pytest.raises(SingletonInitError) as exc_info:
            FlakySingleton.get_instance()
        assert isinstance(exc_info.value.__cause__, MemoryError)

    def test_stays_uninitialized_after_failure(self):
        with pytest.raises(SingletonInitError):
            FlakySingleton.get_instance()
        assert FlakySingleton.is_initialized() is False
        assert FlakySingleton.construction_count == 0

    def test_later_call_constructs(self):
        with pytest.raises(SingletonInitError):
            FlakySingleton.get_instance()
        instance = FlakySingleton.get_instance()
        assert FlakySingleton.get_instance() is instance
        assert FlakySingleton.attempts == 2

    def test_failure_is_logged(self, caplog):
        with pytest.raises(SingletonInitError):
            FlakySingleton.get_instance()
        assert "FlakySingleton" in caplog.text
        assert "out of memory" in caplog.text
