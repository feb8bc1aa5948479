"""Grocery List Agent.

Turns the ingredient lines of several recipes into a categorized shopping list.
Everything here is recomputed on each read; nothing is persisted.
"""
import re
import math
import logging
import unicodedata
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..parsing.ingredient_parser import parse_ingredient, sanitize_ingredient_text, is_garbage_line
from ..parsing.categories import CATEGORY_ORDER, categorize, category_emoji

logger = logging.getLogger("mealparse.grocery")

# Numeric prefix the way JavaScript's parseFloat reads it: "2 cups" -> 2, "1/2" -> 1
LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class MealIngredients(BaseModel):
    # Callers may send numeric recipe ids
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    recipe_id: Optional[str] = Field(None, alias="recipeId")
    recipe_title: Optional[str] = Field(None, alias="recipeTitle")
    ingredient_lines: Optional[List[Any]] = Field(None, alias="ingredientLines")


class AggregatedIngredient(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    quantity: str
    recipe_ids: List[str] = Field(default_factory=list, alias="recipeIds")
    recipes: List[str] = Field(default_factory=list)


class CategoryBucket(BaseModel):
    category: str
    emoji: str
    items: List[AggregatedIngredient] = []


def _leading_float(value: str) -> Optional[float]:
    match = LEADING_NUMBER.match(value or "")
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def merge_quantities(existing: str, incoming: str) -> str:
    """
    Sum two quantities when both start with a positive number, else join them.

    Units are not compared: "2 cups" + "3 tbsp" gives "5".
    """
    a = _leading_float(existing)
    b = _leading_float(incoming)
    if a is not None and b is not None and a > 0 and b > 0:
        return _format_number(a + b)
    return f"{existing}, {incoming}"


def _sort_key(name: str):
    # Accent- and case-insensitive first, exact spelling breaks ties
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), name)


def _coerce_meal(meal: Union[MealIngredients, dict, Any]) -> MealIngredients:
    if isinstance(meal, MealIngredients):
        return meal
    return MealIngredients.model_validate(meal)


def _add_source(entry: AggregatedIngredient, meal: MealIngredients) -> None:
    if meal.recipe_id and meal.recipe_id not in entry.recipe_ids:
        entry.recipe_ids.append(meal.recipe_id)
    if meal.recipe_title and meal.recipe_title not in entry.recipes:
        entry.recipes.append(meal.recipe_title)


def group_by_category(entries: Iterable[AggregatedIngredient]) -> List[CategoryBucket]:
    """Bucket entries by category in shopping order, items alphabetical within a bucket."""
    grouped: dict[str, List[AggregatedIngredient]] = {}
    for entry in entries:
        category, _ = categorize(entry.name)
        grouped.setdefault(category, []).append(entry)

    ordered = [c for c in CATEGORY_ORDER if c in grouped]
    ordered += [c for c in grouped if c not in CATEGORY_ORDER]

    return [
        CategoryBucket(
            category=category,
            emoji=category_emoji(category),
            items=sorted(grouped[category], key=lambda i: _sort_key(i.name)),
        )
        for category in ordered
    ]


def aggregate_ingredients(meals: Iterable[Union[MealIngredients, dict]]) -> List[CategoryBucket]:
    """
    Merge the ingredient lines of many meals into categorized buckets.

    Duplicates are found by the lowercased parsed name, literally: "Egg" and
    "Eggs" stay separate entries. A bad meal or a bad line is logged and
    skipped; the rest of the list is still built.
    """
    aggregated: dict[str, AggregatedIngredient] = {}

    for index, raw_meal in enumerate(meals or []):
        try:
            meal = _coerce_meal(raw_meal)
        except ValidationError as e:
            logger.warning(f"Skipping meal #{index}: invalid payload ({e.error_count()} errors)")
            continue

        if not isinstance(meal.ingredient_lines, list):
            logger.warning(f"Skipping meal #{index} ({meal.recipe_id}): no ingredient list")
            continue

        for line in meal.ingredient_lines:
            # Connector lines like "or" and "to taste" are not shopping items
            if not isinstance(line, str) or is_garbage_line(sanitize_ingredient_text(line)):
                logger.debug(f"Skipping ingredient {line!r} in recipe {meal.recipe_id}")
                continue

            try:
                parsed = parse_ingredient(line)
                key = parsed.name.lower()

                if key in aggregated:
                    existing = aggregated[key]
                    existing.quantity = merge_quantities(existing.quantity, parsed.quantity)
                else:
                    existing = AggregatedIngredient(name=parsed.name, quantity=parsed.quantity)
                    aggregated[key] = existing
                _add_source(existing, meal)
            except Exception as e:
                logger.error(f"Error parsing ingredient {line!r}: {e}")

    return group_by_category(aggregated.values())


def generate_grocery_list(store, recipe_ids: List[str]) -> List[CategoryBucket]:
    """Build the shopping list for stored recipes; unknown ids are skipped by the store."""
    meals = store.meals_for(recipe_ids)
    logger.info(f"Aggregating {len(meals)} of {len(recipe_ids)} requested recipes")
    return aggregate_ingredients(meals)
