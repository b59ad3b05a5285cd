"""
Visitor - Serialize a heterogeneous restaurant menu to compact JSON.

``Food`` and ``Drink`` know nothing about serialization. The ``serialize_item``
visitor dispatches on the item's type, so new item types or new visitors
can be added without touching the item classes.
"""

import json
from enum import Enum
from functools import singledispatch


class FoodLabel(Enum):
    MEAT = "meat"
    FISH = "fish"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"


class DrinkLabel(Enum):
    ALCOHOLIC = "alcoholic"
    HOT = "hot"
    COLD = "cold"


class Food:
    def __init__(self, name: str, calories: int, label: FoodLabel):
        self.name = name
        self.calories = calories
        self.label = label


class Drink:
    def __init__(self, name: str, volume: int, label: DrinkLabel):
        self.name = name
        self.volume = volume
        self.label = label


@singledispatch
def serialize_item(item) -> dict:
    """Convert a menu item into a JSON-ready dict.

    Raises:
        TypeError: for item types no visitor is registered for.
    """
    raise TypeError(f"No serializer for {type(item).__name__}")


@serialize_item.register
def _(item: Food) -> dict:
    return {
        "item": "food",
        "name": item.name,
        "calories": f"{item.calories}kcal",
        "label": item.label.value,
    }


@serialize_item.register
def _(item: Drink) -> dict:
    return {
        "item": "drink",
        "name": item.name,
        "volume": f"{item.volume}ml",
        "label": item.label.value,
    }


def serialize(menu: list) -> str:
    """Serialize the whole menu as minified JSON."""
    payload = {"menu": [serialize_item(item) for item in menu]}
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def default_menu() -> list:
    return [
        Food("Borscht", 160, FoodLabel.MEAT),
        Food("Samosa", 250, FoodLabel.VEGETARIAN),
        Food("Sushi", 300, FoodLabel.FISH),
        Food("Quinoa", 350, FoodLabel.VEGAN),
        Drink("Vodka", 25, DrinkLabel.ALCOHOLIC),
        Drink("Chai", 120, DrinkLabel.HOT),
        Drink("Sake", 180, DrinkLabel.ALCOHOLIC),
        Drink("Kola", 355, DrinkLabel.COLD),
    ]


def main() -> None:
    print(serialize(default_menu()))
