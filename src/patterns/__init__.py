from .builder import Element, ElementBuilder, Tag
from .memento import Caretaker, Memento, Originator
from .observer import Observer, Subject
from .visitor import Drink, Food, serialize

__all__ = [
    "Element",
    "ElementBuilder",
    "Tag",
    "Caretaker",
    "Memento",
    "Originator",
    "Observer",
    "Subject",
    "Drink",
    "Food",
    "serialize",
]
