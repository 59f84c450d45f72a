from cssbuilder.recipe.errors import RecipeError
from cssbuilder.recipe.model import CombinedRecipe, Recipe, SelectorRecipe
from cssbuilder.recipe.transformer import build_recipe, parse_recipe

__all__ = [
    "CombinedRecipe",
    "Recipe",
    "RecipeError",
    "SelectorRecipe",
    "build_recipe",
    "parse_recipe",
]
