import asyncio
import logging
from typing import Any, Sequence

from domain.catalog import RecipeCatalog
from domain.errors import GenerationFailed, GenerationTimedOut, InvalidInput
from domain.matcher import partition
from domain.models import GeneratedRecipe, Recipe
from domain.synthesizer import Synthesizer, TemplateSynthesizer


logger = logging.getLogger(__name__)


MAX_INGREDIENTS = 10


def as_text(value: Any) -> str:
    """Render a decoded JSON value the way the web client would stringify it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if v is None else as_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def clean_ingredients(raw: Sequence[Any], *, limit: int = MAX_INGREDIENTS) -> list[str]:
    cleaned = [as_text(i).strip().lower() for i in raw]
    return [i for i in cleaned if i][:limit]


def is_string_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(v, str) for v in value)
    )


def validate_recipe(recipe: Any) -> bool:
    if not isinstance(recipe, GeneratedRecipe):
        return False
    return (
        isinstance(recipe.name, str)
        and len(recipe.name) > 0
        and is_string_list(recipe.ingredients)
        and is_string_list(recipe.steps)
    )


async def generate_recipe(
    raw: Any,
    *,
    synthesize: Synthesizer | None = None,
    timeout: float | None = None,
    max_ingredients: int = MAX_INGREDIENTS,
) -> GeneratedRecipe:
    """Validate the caller's ingredients, synthesize a recipe, check its shape.

    Raises `InvalidInput` for a missing, empty or all blank ingredient list,
    `GenerationFailed` if the synthesized recipe is malformed and
    `GenerationTimedOut` if a timeout is given and the synthesis exceeds it.
    """
    synthesize = TemplateSynthesizer() if synthesize is None else synthesize

    if not isinstance(raw, (list, tuple)) or not raw:
        raise InvalidInput()

    ingredients = clean_ingredients(raw, limit=max_ingredients)
    if not ingredients:
        raise InvalidInput("No valid ingredients provided")

    try:
        recipe = await asyncio.wait_for(synthesize(ingredients), timeout=timeout)
    except TimeoutError as e:
        logger.warning("Generation timed out after %ss", timeout)
        raise GenerationTimedOut() from e

    if not validate_recipe(recipe):
        logger.warning("Synthesized recipe failed validation: %r", recipe)
        raise GenerationFailed()

    return recipe


class Match:
    def __init__(
        self,
        *,
        cookable: Sequence[Recipe],
        partial: Sequence[Recipe],
        suggest_generation: bool,
    ) -> None:
        self.cookable = tuple(cookable)
        self.partial = tuple(partial)
        self.suggest_generation = suggest_generation

    def to_dict(self) -> dict[str, Any]:
        return {
            "cookable": [r.to_dict() for r in self.cookable],
            "partial": [r.to_dict() for r in self.partial],
            "suggestGeneration": self.suggest_generation,
        }


def match_recipes(selected: Sequence[Any], *, catalog: RecipeCatalog) -> Match:
    """Recipes to show for a selection.

    With nothing selected the whole catalog is offered for browsing.
    """
    wanted = {str(i).strip() for i in selected} - {""}
    if not wanted:
        return Match(cookable=(), partial=catalog.list_all(), suggest_generation=False)

    result = partition(wanted, catalog.list_all())
    return Match(
        cookable=result.cookable,
        partial=result.partial,
        suggest_generation=not result.cookable,
    )
