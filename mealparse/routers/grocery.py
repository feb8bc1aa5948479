from fastapi import APIRouter, Depends

from .. import schemas
from ..deps import get_store
from ..agents.grocery_agent import aggregate_ingredients, generate_grocery_list
from ..parsing import categorize
from ..services.storage import RecipeStore

router = APIRouter()


@router.post("/aggregate", response_model=schemas.GroceryListOut)
def aggregate(request: schemas.GroceryAggregateIn):
    """Aggregate ingredient lines supplied by the caller."""
    return schemas.GroceryListOut(aggregated_ingredients=aggregate_ingredients(request.meals))


@router.post("/from-recipes", response_model=schemas.GroceryListOut)
def aggregate_stored_recipes(
    request: schemas.GroceryFromRecipesIn,
    recipe_store: RecipeStore = Depends(get_store),
):
    """Aggregate the ingredients of stored recipes; unknown ids are skipped."""
    return schemas.GroceryListOut(
        aggregated_ingredients=generate_grocery_list(recipe_store, request.recipe_ids)
    )


@router.post("/categorize", response_model=schemas.CategorizeOut)
def categorize_item(request: schemas.CategorizeIn):
    """Category for a custom shopping-list item."""
    category, emoji = categorize(request.name)
    return schemas.CategorizeOut(category=category, emoji=emoji)
