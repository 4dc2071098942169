from dataclasses import dataclass
from enum import Enum
from typing import Any


class Difficulty(Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class Category(Enum):
    breakfast = "Breakfast"
    lunch = "Lunch"
    dinner = "Dinner"
    dessert = "Dessert"
    snack = "Snack"


@dataclass(frozen=True)
class Recipe:
    """A catalog recipe. Ingredient casing is kept for display only."""

    id: str
    name: str
    description: str
    ingredients: tuple[str, ...]
    steps: tuple[str, ...]
    cook_time: str
    difficulty: Difficulty
    category: Category

    @property
    def normalized_ingredients(self) -> frozenset[str]:
        return frozenset(i.lower() for i in self.ingredients)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "cookTime": self.cook_time,
            "difficulty": self.difficulty.value,
            "category": self.category.value,
        }


class GeneratedRecipe:
    def __init__(
        self,
        *,
        name: str,
        ingredients: list[str],
        steps: list[str],
    ) -> None:
        self.name = name
        self.ingredients = ingredients
        self.steps = steps

    def __repr__(self) -> str:
        return f"<GeneratedRecipe(name={self.name})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratedRecipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ingredients": self.ingredients,
            "steps": self.steps,
        }
