"""Stand in for a generative model.

Picks one of four fixed templates from the ingredients and fills it in.
A real backend only has to honour the same `Synthesizer` shape.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeAlias

from domain.models import GeneratedRecipe


logger = logging.getLogger(__name__)


DEFAULT_DELAY = 1.5
FALLBACK_INGREDIENT = "vegetables"


Synthesizer: TypeAlias = Callable[[list[str]], Awaitable[GeneratedRecipe]]


def select_template(ingredients: list[str]) -> str:
    lowered = [i.lower() for i in ingredients]
    if any("egg" in i for i in lowered):
        return "eggs"
    if any("chicken" in i for i in lowered):
        return "chicken"
    if any("pasta" in i or "spaghetti" in i for i in lowered):
        return "pasta"
    return "default"


def default_recipe(ingredients: list[str]) -> GeneratedRecipe:
    main = ingredients[0] if ingredients else FALLBACK_INGREDIENT
    return GeneratedRecipe(
        name=f"Savory {main[:1].upper()}{main[1:]} Medley",
        ingredients=[*ingredients[:4], "olive oil", "salt"],
        steps=[
            f"Prepare all {', '.join(ingredients[:3])} by washing and cutting "
            "into bite-sized pieces",
            "Heat olive oil in a large pan over medium-high heat",
            f"Add the {main} and cook for 3-4 minutes until slightly softened",
            "Add remaining ingredients and cook for another 5-7 minutes",
            "Season with salt to taste",
            "Serve hot and enjoy your homemade creation!",
        ],
    )


def eggs_recipe(ingredients: list[str]) -> GeneratedRecipe:
    return GeneratedRecipe(
        name="Fluffy Scrambled Eggs Delight",
        ingredients=[*ingredients, "butter", "salt"],
        steps=[
            "Crack eggs into a bowl and whisk until well combined",
            "Melt butter in a non-stick pan over medium-low heat",
            "Pour in the egg mixture and let it sit for 30 seconds",
            "Gently push eggs from edges to center, creating soft curds",
            "Remove from heat when eggs are slightly underdone",
            "Season with salt and serve immediately",
        ],
    )


def chicken_recipe(ingredients: list[str]) -> GeneratedRecipe:
    return GeneratedRecipe(
        name="Pan-Seared Chicken with Herbs",
        ingredients=[*ingredients, "olive oil", "salt"],
        steps=[
            "Pat chicken dry and season generously with salt",
            "Heat olive oil in a skillet over medium-high heat",
            "Place chicken in pan and cook without moving for 5-6 minutes",
            "Flip and cook for another 4-5 minutes until golden",
            "Let rest for 3 minutes before slicing",
            "Garnish with available herbs and serve",
        ],
    )


def pasta_recipe(ingredients: list[str]) -> GeneratedRecipe:
    return GeneratedRecipe(
        name="Quick Pantry Pasta",
        ingredients=[*ingredients, "olive oil", "garlic"],
        steps=[
            "Cook pasta according to package directions, reserve 1 cup pasta water",
            "Sauté minced garlic in olive oil until fragrant",
            "Add your vegetables and cook until tender",
            "Toss drained pasta with the sauce",
            "Add pasta water as needed to create a silky consistency",
            "Serve hot with your favorite toppings",
        ],
    )


TEMPLATES: dict[str, Callable[[list[str]], GeneratedRecipe]] = {
    "default": default_recipe,
    "eggs": eggs_recipe,
    "chicken": chicken_recipe,
    "pasta": pasta_recipe,
}


def build_recipe(ingredients: list[str]) -> GeneratedRecipe:
    template = select_template(ingredients)
    logger.debug("Using %s template for %s", template, ingredients)
    return TEMPLATES[template](list(ingredients))


class TemplateSynthesizer:
    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        self.delay = delay

    async def __call__(self, ingredients: list[str]) -> GeneratedRecipe:
        # Simulated model latency.
        await asyncio.sleep(self.delay)
        return build_recipe(ingredients)


async def synthesize(
    ingredients: list[str],
    *,
    delay: float = DEFAULT_DELAY,
) -> GeneratedRecipe:
    return await TemplateSynthesizer(delay=delay)(ingredients)
