"""Pydantic schemas for the HTTP adapter.

Request/response models for:
- Recipe parsing and ingestion
- Grocery list aggregation and categorization
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .parsing import ParsedRecipe, RecipeContent, NutritionInfo
from .agents.grocery_agent import CategoryBucket


# --- Recipes ---

class RecipeTextIn(BaseModel):
    text: str = Field(..., min_length=1)


class RecipeParseOut(BaseModel):
    is_recipe: bool
    looks_like_recipe: bool
    nutrition_valid: bool
    recipe: Optional[ParsedRecipe] = None


class RecipeOut(BaseModel):
    id: str
    title: str
    content_json: RecipeContent
    nutrition: Optional[NutritionInfo] = None
    tags: list[str] = []
    nutrition_valid: bool = False


# --- Grocery ---

class GroceryAggregateIn(BaseModel):
    # Validated per meal by the aggregator, malformed meals are skipped
    meals: list[Any] = []


class GroceryFromRecipesIn(BaseModel):
    recipe_ids: list[str] = Field(..., min_length=1)


class GroceryListOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    aggregated_ingredients: list[CategoryBucket] = Field(default_factory=list, alias="aggregatedIngredients")


class CategorizeIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class CategorizeOut(BaseModel):
    category: str
    emoji: str
