import logging
from typing import Optional, Tuple

from ..core.text import first_line, strip_md_edges
from ..parsing import RuleBasedParser, RecipeParser, RecipeRecord, RecipeContent
from ..settings import settings
from .storage import RecipeStore

logger = logging.getLogger("mealparse.ingestion")

PARSE_FAILED_INGREDIENT = "Recipe parsing failed - please regenerate"
PARSE_FAILED_INSTRUCTION = "Please try generating again"


def fallback_record(text: str) -> RecipeRecord:
    """Minimal storable record for model output that did not look like a recipe."""
    candidate = strip_md_edges(first_line(text))
    title = candidate if 3 < len(candidate) < 100 else settings.fallback_title
    logger.warning(f"Recipe parsing failed, using fallback title '{title}'")

    return RecipeRecord(
        title=title,
        content_json=RecipeContent(
            title=title,
            ingredients=[PARSE_FAILED_INGREDIENT],
            instructions=[PARSE_FAILED_INSTRUCTION],
        ),
        tags=[settings.fallback_tag],
    )


class IngestionService:
    def __init__(self, store: RecipeStore, parser: Optional[RecipeParser] = None):
        self.store = store
        # We can inject different parsers here (LLM vs RuleBased)
        self.parser = parser or RuleBasedParser()

    def build_record(self, text: str) -> RecipeRecord:
        parsed = self.parser.parse(text)
        if parsed is None:
            return fallback_record(text)

        logger.info(f"Parsed recipe '{parsed.title}'")
        return RecipeRecord(
            title=parsed.title,
            content_json=parsed.content_json(),
            nutrition=parsed.nutrition,
            tags=parsed.tags,
        )

    def ingest_text(self, text: str) -> Tuple[str, RecipeRecord]:
        record = self.build_record(text)
        recipe_id = self.store.save(record)
        return recipe_id, record
