import uuid
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..parsing.parser import RecipeRecord
from ..agents.grocery_agent import MealIngredients

logger = logging.getLogger("mealparse.storage")


class RecipeStore(ABC):
    """Persistence boundary: the parsing core never talks to storage directly."""

    @abstractmethod
    def save(self, record: RecipeRecord) -> str:
        """Persist a record and return its id."""

    @abstractmethod
    def get(self, recipe_id: str) -> Optional[RecipeRecord]:
        pass

    def meals_for(self, recipe_ids: List[str]) -> List[MealIngredients]:
        """Read back stored ingredient lists in the aggregator's input shape."""
        meals = []
        for recipe_id in recipe_ids:
            record = self.get(recipe_id)
            if record is None:
                logger.warning(f"Recipe {recipe_id} not found, skipping")
                continue
            meals.append(MealIngredients(
                recipe_id=recipe_id,
                recipe_title=record.title or "Unknown Recipe",
                ingredient_lines=list(record.content_json.ingredients),
            ))
        return meals


class InMemoryRecipeStore(RecipeStore):
    def __init__(self):
        self._records: Dict[str, RecipeRecord] = {}
        self._lock = threading.Lock()

    def save(self, record: RecipeRecord) -> str:
        recipe_id = str(uuid.uuid4())
        with self._lock:
            self._records[recipe_id] = record.model_copy(deep=True)
        logger.info(f"Saved recipe {recipe_id} '{record.title}'")
        return recipe_id

    def get(self, recipe_id: str) -> Optional[RecipeRecord]:
        with self._lock:
            record = self._records.get(recipe_id)
        return record.model_copy(deep=True) if record else None

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


# Singleton
store = InMemoryRecipeStore()
