"""
Memento - Save and restore an object's state without exposing it.

The Originator produces snapshots of itself, the Caretaker keeps them on an
undo stack and only ever sees their metadata (name, date). Restoring pops
the most recent snapshot back into the Originator.
"""

import logging
import random
import string
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

STATE_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


class Memento:
    """Snapshot of an Originator's state plus creation metadata."""

    def __init__(self, state: str):
        self._state = state
        self._date = datetime.now(timezone.utc).isoformat(timespec="seconds")

    @property
    def state(self) -> str:
        return self._state

    @property
    def date(self) -> str:
        return self._date

    def get_name(self) -> str:
        return f"{self._date} / ({self._state[:9]}...)"


class Originator:
    """Holds state that changes over time and can snapshot itself."""

    def __init__(self, state: str, rng: random.Random | None = None):
        self.state = state
        self._rng = rng or random.Random()
        print(f"Originator: My initial state is: {self.state}")

    def do_something(self) -> None:
        """Business logic that changes the state. Back up before calling."""
        print("Originator: I'm doing something important.")
        self.state = "".join(self._rng.choices(STATE_ALPHABET, k=30))
        print(f"Originator: and my state has changed to: {self.state}")

    def save(self) -> Memento:
        return Memento(self.state)

    def restore(self, memento: Memento) -> None:
        if not isinstance(memento, Memento):
            raise TypeError(f"Cannot restore from {type(memento).__name__}")
        self.state = memento.state
        print(f"Originator: My state has changed to: {self.state}")


class Caretaker:
    """Undo stack of mementos for one Originator."""

    def __init__(self, originator: Originator):
        self._originator = originator
        self._mementos: list[Memento] = []

    def __len__(self) -> int:
        return len(self._mementos)

    def backup(self) -> None:
        print("\nCaretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())

    def undo(self) -> bool:
        """Restore the latest snapshot. Returns False when the stack is empty.

        A snapshot the Originator rejects is discarded and the next one down
        is tried instead.
        """
        if not self._mementos:
            return False

        memento = self._mementos.pop()
        print(f"Caretaker: Restoring state to: {memento.get_name()}")
        try:
            self._originator.restore(memento)
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding unusable snapshot: {e}")
            return self.undo()
        return True

    def show_history(self) -> list[str]:
        print("Caretaker: Here's the list of mementos:")
        names = [m.get_name() for m in self._mementos]
        for name in names:
            print(name)
        return names


def client_code(rng: random.Random | None = None) -> Originator:
    originator = Originator("Super-duper-super-puper-super.", rng=rng)
    caretaker = Caretaker(originator)

    caretaker.backup()
    originator.do_something()
    caretaker.backup()
    originator.do_something()
    caretaker.backup()
    originator.do_something()

    print()
    caretaker.show_history()

    print("\nClient: Now, let's rollback!\n")
    caretaker.undo()

    print("\nClient: Once more!\n")
    caretaker.undo()
    return originator


def main() -> None:
    client_code()
