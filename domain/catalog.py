from typing import Iterable

from domain.models import Recipe
from domain.recipe_data import RECIPES


class RecipeCatalog:
    """Read only store of the fixed recipes."""

    def __init__(self, recipes: Iterable[Recipe] | None = None) -> None:
        self.recipes = RECIPES if recipes is None else tuple(recipes)
        self.ingredients = tuple(
            sorted({i.lower() for r in self.recipes for i in r.ingredients})
        )

    def __len__(self) -> int:
        return len(self.recipes)

    def list_all(self) -> tuple[Recipe, ...]:
        return self.recipes

    def find_by_id(self, id: str) -> Recipe | None:
        for recipe in self.recipes:
            if recipe.id == id:
                return recipe
        return None

    def all_ingredients(self) -> tuple[str, ...]:
        return self.ingredients

    def search_ingredients(self, query: str = "") -> tuple[str, ...]:
        q = query.strip().lower()
        return tuple(i for i in self.ingredients if q in i)
