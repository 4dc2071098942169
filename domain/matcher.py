from typing import Iterable, NamedTuple, Sequence

from domain.models import Recipe


class Partition(NamedTuple):
    cookable: tuple[Recipe, ...]
    partial: tuple[Recipe, ...]
    unrelated: tuple[Recipe, ...]


def normalize(ingredients: Iterable[str]) -> frozenset[str]:
    return frozenset(i.lower() for i in ingredients)


def partition(selected: Iterable[str], catalog: Sequence[Recipe]) -> Partition:
    """Split the catalog by how much of each recipe the selection covers.

    Catalog order is kept within each group. An empty selection matches
    nothing, so every recipe is unrelated; showing the whole catalog in that
    case is up to the caller.
    """
    wanted = normalize(selected)
    if not wanted:
        return Partition((), (), tuple(catalog))

    cookable: list[Recipe] = []
    partial: list[Recipe] = []
    unrelated: list[Recipe] = []

    for recipe in catalog:
        have = recipe.normalized_ingredients
        if have <= wanted:
            cookable.append(recipe)
        elif have & wanted:
            partial.append(recipe)
        else:
            unrelated.append(recipe)

    return Partition(tuple(cookable), tuple(partial), tuple(unrelated))
