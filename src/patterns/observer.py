"""
Observer - Subscription mechanism notifying observers of a subject's events.

A Subject keeps a list of attached observers and pushes its latest message
to each of them on ``notify()``. Observers attach themselves on creation and
may detach at any time.
"""

import itertools
from abc import ABC, abstractmethod


class BaseObserver(ABC):
    """Anything that can receive a message from a Subject."""

    @abstractmethod
    def update(self, message: str) -> None:
        pass


class Subject:
    """Owns a message and notifies observers whenever it changes."""

    def __init__(self):
        self._observers: list[BaseObserver] = []
        self.message = ""

    @property
    def observers(self) -> list[BaseObserver]:
        return list(self._observers)

    def attach(self, observer: BaseObserver) -> None:
        self._observers.append(observer)

    def detach(self, observer: BaseObserver) -> None:
        """Remove an observer. Detaching one that is not attached does nothing."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        self.how_many_observers()
        # Copy so observers may detach while being notified
        for observer in list(self._observers):
            observer.update(self.message)

    def create_message(self, message: str = "Empty") -> None:
        self.message = message
        self.notify()

    def how_many_observers(self) -> int:
        count = len(self._observers)
        print(f"There are {count} observers in the list.")
        return count

    def some_business_logic(self) -> None:
        self.message = "change message message"
        self.notify()
        print("I'm about to do some thing important")


class Observer(BaseObserver):
    """Numbered observer that prints every message it receives."""

    _numbers = itertools.count(1)

    def __init__(self, subject: Subject):
        self._subject = subject
        self.number = next(Observer._numbers)
        self.last_message = None
        subject.attach(self)
        print(f'Hi, I\'m the Observer "{self.number}".')

    def update(self, message: str) -> None:
        self.last_message = message
        self.print_info()

    def remove_me_from_the_list(self) -> None:
        self._subject.detach(self)
        print(f'Observer "{self.number}" removed from the list.')

    def print_info(self) -> None:
        print(
            f'Observer "{self.number}": a new message is available --> {self.last_message}'
        )


def client_code() -> Subject:
    subject = Subject()
    observer1 = Observer(subject)
    observer2 = Observer(subject)
    observer3 = Observer(subject)

    subject.create_message("Hello World! :D")
    observer3.remove_me_from_the_list()

    subject.create_message("The weather is hot today! :p")
    observer4 = Observer(subject)

    observer2.remove_me_from_the_list()
    observer5 = Observer(subject)

    subject.create_message("My new car is great! ;)")
    observer5.remove_me_from_the_list()

    observer4.remove_me_from_the_list()
    observer1.remove_me_from_the_list()
    return subject


def main() -> None:
    client_code()
