import asyncio
from typing import Any

import pytest

from domain.catalog import RecipeCatalog
from domain.errors import GenerationFailed, GenerationTimedOut, InvalidInput
from domain.models import GeneratedRecipe
from domain.services import clean_ingredients, generate_recipe, match_recipes
from domain.synthesizer import TemplateSynthesizer


INSTANT = TemplateSynthesizer(delay=0)


class RecordingSynthesizer:
    def __init__(self, recipe: GeneratedRecipe | None = None) -> None:
        self.calls: list[list[str]] = []
        self.recipe = recipe

    async def __call__(self, ingredients: list[str]) -> GeneratedRecipe:
        self.calls.append(ingredients)
        if self.recipe is not None:
            return self.recipe
        return await INSTANT(ingredients)


@pytest.mark.asyncio
async def test_scrambled_eggs() -> None:
    got = await generate_recipe(["eggs", "cheese"], synthesize=INSTANT)
    assert got.name == "Fluffy Scrambled Eggs Delight"
    assert got.ingredients == ["eggs", "cheese", "butter", "salt"]


@pytest.mark.asyncio
async def test_default_medley() -> None:
    got = await generate_recipe(["tofu"], synthesize=INSTANT)
    assert got.name == "Savory Tofu Medley"
    assert got.ingredients == ["tofu", "olive oil", "salt"]


@pytest.mark.parametrize(
    "raw,message",
    (
        (None, "Please provide at least one ingredient"),
        ("eggs", "Please provide at least one ingredient"),
        ({"eggs": 1}, "Please provide at least one ingredient"),
        ([], "Please provide at least one ingredient"),
        (["", "   "], "No valid ingredients provided"),
    ),
)
@pytest.mark.asyncio
async def test_rejects_bad_input(raw: Any, message: str) -> None:
    synth = RecordingSynthesizer()
    with pytest.raises(InvalidInput) as exc:
        await generate_recipe(raw, synthesize=synth)
    assert exc.value.message == message
    assert exc.value.status_code == 400
    assert synth.calls == []


@pytest.mark.asyncio
async def test_cleans_ingredients_before_synthesis() -> None:
    synth = RecordingSynthesizer()
    await generate_recipe(["  Tofu ", "", "RICE", 3, "rice"], synthesize=synth)
    assert synth.calls == [["tofu", "rice", "3", "rice"]]


@pytest.mark.asyncio
async def test_truncates_to_ten() -> None:
    synth = RecordingSynthesizer()
    raw = [" "] + [f"item {n}" for n in range(15)]
    await generate_recipe(raw, synthesize=synth)
    assert synth.calls == [[f"item {n}" for n in range(10)]]


def test_clean_ingredients_limit() -> None:
    assert clean_ingredients(["A", "b", "C"], limit=2) == ["a", "b"]


@pytest.mark.parametrize(
    "recipe",
    (
        GeneratedRecipe(name="", ingredients=["eggs"], steps=["Cook"]),
        GeneratedRecipe(name="Eggs", ingredients=[], steps=["Cook"]),
        GeneratedRecipe(name="Eggs", ingredients=["eggs"], steps=[]),
        GeneratedRecipe(name="Eggs", ingredients=["eggs", 2], steps=["Cook"]),  # type: ignore[list-item]
        GeneratedRecipe(name="Eggs", ingredients=["eggs"], steps="Cook"),  # type: ignore[arg-type]
    ),
)
@pytest.mark.asyncio
async def test_rejects_malformed_recipe(recipe: GeneratedRecipe) -> None:
    with pytest.raises(GenerationFailed) as exc:
        await generate_recipe(["eggs"], synthesize=RecordingSynthesizer(recipe))
    assert exc.value.message == "Failed to generate valid recipe"
    assert exc.value.status_code == 500


@pytest.mark.asyncio
async def test_rejects_non_recipe_result() -> None:
    async def synth(ingredients: list[str]) -> Any:
        return {"name": "Eggs", "ingredients": ingredients, "steps": ["Cook"]}

    with pytest.raises(GenerationFailed):
        await generate_recipe(["eggs"], synthesize=synth)


@pytest.mark.asyncio
async def test_timeout() -> None:
    with pytest.raises(GenerationTimedOut) as exc:
        await generate_recipe(
            ["eggs"], synthesize=TemplateSynthesizer(delay=1), timeout=0.05
        )
    assert exc.value.status_code == 504


@pytest.mark.asyncio
async def test_no_timeout_waits_for_delay() -> None:
    got = await generate_recipe(["eggs"], synthesize=TemplateSynthesizer(delay=0.05))
    assert got.name == "Fluffy Scrambled Eggs Delight"


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent() -> None:
    synth = TemplateSynthesizer(delay=0.05)
    got = await asyncio.gather(
        generate_recipe(["eggs"], synthesize=synth),
        generate_recipe(["chicken"], synthesize=synth),
        generate_recipe(["pasta"], synthesize=synth),
    )
    assert [r.name for r in got] == [
        "Fluffy Scrambled Eggs Delight",
        "Pan-Seared Chicken with Herbs",
        "Quick Pantry Pasta",
    ]


def test_match_browse_all_when_nothing_selected() -> None:
    catalog = RecipeCatalog()
    got = match_recipes(["", "  "], catalog=catalog)
    assert got.cookable == ()
    assert got.partial == catalog.list_all()
    assert got.suggest_generation is False


def test_match_suggests_generation_when_nothing_cookable() -> None:
    got = match_recipes(["Chicken Breast", "garlic"], catalog=RecipeCatalog())
    assert got.cookable == ()
    assert "Chicken Stir Fry" in [r.name for r in got.partial]
    assert got.suggest_generation is True


def test_match_cookable() -> None:
    selected = ["bread", "butter", "cheddar cheese"]
    got = match_recipes(selected, catalog=RecipeCatalog())
    assert [r.name for r in got.cookable] == ["Grilled Cheese Sandwich"]
    assert got.suggest_generation is False
    assert got.to_dict()["suggestGeneration"] is False


@pytest.mark.parametrize(
    "raw,expected",
    (
        ([None], ["null"]),
        ([True, False], ["true", "false"]),
        ([1.0, 2.5, 3], ["1", "2.5", "3"]),
        ([["Eggs", "Ham"]], ["eggs,ham"]),
        ([["eggs", None]], ["eggs,"]),
        ([{"name": "eggs"}], ["[object object]"]),
    ),
)
def test_clean_ingredients_stringifies_json_values(raw: list[Any], expected: list[str]) -> None:
    assert clean_ingredients(raw) == expected
