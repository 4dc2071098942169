"""Describes the CookEngine domain. Centres around the `RecipeCatalog`.

Two questions get answered here:

- Given the ingredients somebody has, which catalog recipes can they cook
  outright and which do they have some of the ingredients for?
- When nothing in the catalog can be cooked, what recipe could be made
  from those ingredients instead?

The second one would be a language model call. For now it is a set of
templates behind the same async interface, so the validation around it
does not care which one it talks to.
"""
