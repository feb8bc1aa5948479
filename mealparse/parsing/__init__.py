from .parser import (
    RecipeParser, ParsedRecipe, ParsedIngredient, NutritionInfo, RecipeContent, RecipeRecord,
)
from .rule_based_parser import RuleBasedParser, parse_recipe, looks_like_recipe
from .ingredient_parser import parse_ingredient
from .categories import categorize
from .nutrition import extract_nutrition, has_valid_nutrition
from .sections import extract_section, parse_lines
from .tags import generate_tags

__all__ = [
    "RecipeParser", "ParsedRecipe", "ParsedIngredient", "NutritionInfo", "RecipeContent",
    "RecipeRecord", "RuleBasedParser", "parse_recipe", "looks_like_recipe", "parse_ingredient",
    "categorize", "extract_nutrition", "has_valid_nutrition", "extract_section", "parse_lines",
    "generate_tags",
]
