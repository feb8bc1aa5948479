import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from .. import schemas
from ..deps import get_ingestion, get_store
from ..parsing import RuleBasedParser, looks_like_recipe, has_valid_nutrition
from ..services.ingestion import IngestionService
from ..services.storage import RecipeStore
from ..settings import settings

logger = logging.getLogger("mealparse.recipes")

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)
parser = RuleBasedParser()


@router.post("/recipes/parse", response_model=schemas.RecipeParseOut, response_model_exclude_none=True)
@limiter.limit(settings.parse_rate_limit)
def parse_recipe_text(
    request: Request,  # Required for rate limiter
    payload: schemas.RecipeTextIn,
):
    """Parse model output without storing it."""
    recipe = parser.parse(payload.text)
    return schemas.RecipeParseOut(
        is_recipe=recipe is not None,
        looks_like_recipe=looks_like_recipe(payload.text),
        nutrition_valid=has_valid_nutrition(recipe.nutrition) if recipe else False,
        recipe=recipe,
    )


@router.post("/recipes", response_model=schemas.RecipeOut, response_model_exclude_none=True, status_code=201)
@limiter.limit(settings.parse_rate_limit)
def create_recipe_from_text(
    request: Request,  # Required for rate limiter
    payload: schemas.RecipeTextIn,
    ingestion: IngestionService = Depends(get_ingestion),
):
    """Parse model output and store it; non-recipe text is stored as a fallback record."""
    recipe_id, record = ingestion.ingest_text(payload.text)
    valid = has_valid_nutrition(record.nutrition)
    if not valid:
        # Retrying the model call is the caller's decision
        logger.warning(f"Recipe {recipe_id} stored without valid nutrition")

    return schemas.RecipeOut(id=recipe_id, nutrition_valid=valid, **record.model_dump())


@router.get("/recipes/{recipe_id}", response_model=schemas.RecipeOut, response_model_exclude_none=True)
def get_recipe(recipe_id: str, recipe_store: RecipeStore = Depends(get_store)):
    record = recipe_store.get(recipe_id)
    if not record:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return schemas.RecipeOut(
        id=recipe_id,
        nutrition_valid=has_valid_nutrition(record.nutrition),
        **record.model_dump(),
    )
