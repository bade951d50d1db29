import pytest

from barstock.schemas.availability import IngredientRequirement, InventoryItem, Recipe
from barstock.services.sample_bar import sample_inventory, sample_recipes


def make_recipe(name: str, *ingredients: str | None) -> Recipe:
    return Recipe(name=name, ingredients=[IngredientRequirement(name=i, measure="1 oz") for i in ingredients])


def make_inventory(*names: str | None) -> list[InventoryItem]:
    return [InventoryItem(name=n, volume_remaining=100, volume_total=750, unit="ml") for n in names]


@pytest.fixture()
def inventory():
    return sample_inventory()


@pytest.fixture()
def recipes():
    return sample_recipes()
