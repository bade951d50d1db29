from __future__ import annotations

from barstock.schemas.availability import InventoryItem, Recipe


INVENTORY = [
    {"_id": "1", "name": "Vodka", "volumeRemaining": 750, "volumeTotal": 750, "unit": "ml"},
    {"_id": "2", "name": "Lime juice", "volumeRemaining": 200, "volumeTotal": 500, "unit": "ml"},
    {"_id": "3", "name": "Simple syrup", "volumeRemaining": 100, "volumeTotal": 250, "unit": "ml"},
    {"_id": "4", "name": "Gin", "volumeRemaining": 500, "volumeTotal": 750, "unit": "ml"},
    {"_id": "5", "name": "White rum", "volumeRemaining": 300, "volumeTotal": 750, "unit": "ml"},
    {"_id": "6", "name": "Sugar", "volumeRemaining": 50, "volumeTotal": 500, "unit": "g"},
    {"_id": "7", "name": "Mint leaves", "volumeRemaining": 20, "volumeTotal": 50, "unit": "leaves"},
    {"_id": "8", "name": "Soda water", "volumeRemaining": 1000, "volumeTotal": 1000, "unit": "ml"},
    {"_id": "9", "name": "Tequila", "volumeRemaining": 600, "volumeTotal": 750, "unit": "ml"},
    {"_id": "10", "name": "Triple sec", "volumeRemaining": 200, "volumeTotal": 350, "unit": "ml"},
]

RECIPES = [
    {
        "_id": "recipe1",
        "name": "Mojito",
        "category": "Cocktail",
        "thumbnailUrl": "https://example.com/mojito.jpg",
        "ingredients": [
            {"name": "White rum", "measure": "2 oz"},
            {"name": "Lime juice", "measure": "1 oz"},
            {"name": "Sugar", "measure": "2 tsp"},
            {"name": "Mint leaves", "measure": "6 leaves"},
            {"name": "Soda water", "measure": "Top up"},
        ],
    },
    {
        "_id": "recipe2",
        "name": "Margarita",
        "category": "Cocktail",
        "thumbnailUrl": "https://example.com/margarita.jpg",
        "ingredients": [
            {"name": "Tequila", "measure": "2 oz"},
            {"name": "Triple sec", "measure": "1 oz"},
            {"name": "Lime juice", "measure": "1 oz"},
            {"name": "Salt", "measure": "1 pinch"},
        ],
    },
    {
        "_id": "recipe3",
        "name": "Old Fashioned",
        "category": "Classic",
        "thumbnailUrl": "https://example.com/old-fashioned.jpg",
        "ingredients": [
            {"name": "Bourbon", "measure": "2 oz"},
            {"name": "Sugar cube", "measure": "1"},
            {"name": "Angostura bitters", "measure": "2-3 dashes"},
            {"name": "Orange twist", "measure": "1"},
        ],
    },
    {
        "_id": "recipe4",
        "name": "Gin and Tonic",
        "category": "Highball",
        "thumbnailUrl": "https://example.com/gin-tonic.jpg",
        "ingredients": [
            {"name": "Gin", "measure": "2 oz"},
            {"name": "Tonic water", "measure": "4 oz"},
            {"name": "Lime wedge", "measure": "1"},
        ],
    },
    {
        "_id": "recipe5",
        "name": "Moscow Mule",
        "category": "Cocktail",
        "thumbnailUrl": "https://example.com/moscow-mule.jpg",
        "ingredients": [
            {"name": "Vodka", "measure": "2 oz"},
            {"name": "Lime juice", "measure": "0.5 oz"},
            {"name": "Ginger beer", "measure": "4 oz"},
        ],
    },
]


def sample_inventory() -> list[InventoryItem]:
    return [InventoryItem.model_validate(row) for row in INVENTORY]


def sample_recipes() -> list[Recipe]:
    return [Recipe.model_validate(row) for row in RECIPES]
