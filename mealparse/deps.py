"""FastAPI dependencies.

Provides:
- Recipe store (external persistence boundary)
- Ingestion service bound to that store
"""

from fastapi import Depends

from .services.storage import RecipeStore, store
from .services.ingestion import IngestionService


def get_store() -> RecipeStore:
    return store


def get_ingestion(recipe_store: RecipeStore = Depends(get_store)) -> IngestionService:
    return IngestionService(recipe_store)
