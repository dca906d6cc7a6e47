"""Domain enums."""

from enum import Enum


class Pace(str, Enum):
    EASY = "easy"
    BALANCED = "balanced"
    PACKED = "packed"


class Category(str, Enum):
    CULTURE = "culture"
    FOOD = "food"
    NATURE = "nature"
    SHOPPING = "shopping"


class Interest(str, Enum):
    CULTURE = "culture"
    FOOD = "food"
    NATURE = "nature"
    SHOPPING = "shopping"
    KIDS = "kids"


class StopKind(str, Enum):
    POI = "poi"
