import re
import logging
from typing import Callable, List, Optional, Pattern, Tuple, TypeVar

from ..core.text import clean_md
from .parser import RecipeParser, ParsedRecipe
from .sections import extract_section, parse_lines, is_header_line
from .nutrition import extract_nutrition
from .tags import generate_tags

logger = logging.getLogger("mealparse.parsing")

T = TypeVar("T")

DEFAULT_TITLE = "Recipe"
MAX_SERVINGS = 1

RECIPE_INDICATORS = re.compile(
    r"\b(ingredients?|instructions?|steps?|recipe|cook|preparation|ingredients list|make|"
    r"directions|method|serves?|serving|cal|calories|protein|carb|fat)\b",
    re.IGNORECASE,
)

# Ordered most to least structured; first candidate that fits the length window wins
TITLE_PATTERNS: List[Tuple[str, Pattern]] = [
    ("h1", re.compile(r"^#\s+(.+)$", re.MULTILINE)),
    ("bold_line", re.compile(r"^\*\*(.+)\*\*$", re.MULTILINE)),
    ("h2", re.compile(r"^##?\s*(.+)$", re.MULTILINE)),
    ("bold_inline", re.compile(r"(?:^|\n)\s*\*\*([^*]+)\*\*(?:\s*\n|$)")),
    ("recipe_prefix", re.compile(r"Recipe:\s*(.+?)(?:\n|$)", re.IGNORECASE)),
    ("recipe_suffix", re.compile(r"^(.+)\s+Recipe", re.IGNORECASE | re.MULTILINE)),
    ("first_line", re.compile(r"(.+?)\s*(?:\n|$)")),
]

SECONDARY_TITLE_PATTERNS: List[Tuple[str, Pattern]] = [
    ("how_to_make", re.compile(r"(?:recipe for|making|how to make)\s+(.+?)(?:\n|$)", re.IGNORECASE)),
    ("name_recipe", re.compile(r"^(.+?)\s*recipe", re.IGNORECASE | re.MULTILINE)),
    ("any_bold", re.compile(r"\*\*(.+?)\*\*")),
]

TITLE_PREFIX = re.compile(r"^(?:Recipe:?\s*|Cook:?\s*|Make:?\s*)", re.IGNORECASE)
TITLE_SUFFIX = re.compile(r"\s+Recipe\s*$", re.IGNORECASE)

SERVINGS_PATTERNS: List[Pattern] = [
    re.compile(r"^[ \t*]*(?:servings?|serves?|yield)[ \t*]*:[ \t*]*(\d+)", re.IGNORECASE | re.MULTILINE),
    re.compile(r"(?:serves?|for)\s+(\d+)\s+(?:people|persons?|servings?)", re.IGNORECASE),
    re.compile(r"\bserves?\s+(\d+)\b", re.IGNORECASE),
]

_DURATION = r"(\d+\s*(?:minutes?|mins?|hours?|hrs?))\b"

TIME_PATTERNS = {
    "prep_time": [
        re.compile(rf"prep(?:aration)?\s*time[\s*:]*{_DURATION}", re.IGNORECASE),
        re.compile(rf"prep[\s*:]*{_DURATION}", re.IGNORECASE),
    ],
    "cook_time": [
        re.compile(rf"cook(?:ing)?\s*time[\s*:]*{_DURATION}", re.IGNORECASE),
        re.compile(rf"cook[\s*:]*{_DURATION}", re.IGNORECASE),
        re.compile(rf"bake[\s*:]*{_DURATION}", re.IGNORECASE),
    ],
    "total_time": [
        re.compile(rf"total\s*time[\s*:]*{_DURATION}", re.IGNORECASE),
        re.compile(rf"(?:ready\s+in|takes)[\s*:]*{_DURATION}", re.IGNORECASE),
    ],
}

# Frontend "offer to save" check: keyword plus some list/measure/cooking signal
LOOKS_LIKE_KEYWORDS = re.compile(
    r"\b(ingredients?|instructions?|steps?|recipe|cook|cooking|preparation|directions|method|"
    r"how to make|what you.?ll need)\b",
    re.IGNORECASE,
)
LIST_LINE = re.compile(r"^\s*(?:[-*•]|\d+\.)\s+.+", re.MULTILINE)
MEASUREMENT = re.compile(
    r"\b\d+\s*(cups?|tablespoons?|teaspoons?|tbsp|tsp|oz|ounces?|pounds?|lbs?|grams?|g|ml|"
    r"liters?|minutes?|mins?|hours?|hrs?)\b",
    re.IGNORECASE,
)
COOKING_TERMS = re.compile(
    r"\b(bake|fry|sauté|simmer|boil|mix|stir|chop|dice|slice|season|garnish|serve|heat|oven|pan|pot)\b",
    re.IGNORECASE,
)


def is_recipe_text(text: str) -> bool:
    return bool(text) and bool(RECIPE_INDICATORS.search(text))


def looks_like_recipe(text: str) -> bool:
    """Stricter check than the parse gate: keyword plus a list, a measurement or a cooking term."""
    if not text or not LOOKS_LIKE_KEYWORDS.search(text):
        return False
    return bool(LIST_LINE.search(text) or MEASUREMENT.search(text) or COOKING_TERMS.search(text))


class RuleBasedParser(RecipeParser):
    def parse(self, text: str) -> Optional[ParsedRecipe]:
        if not isinstance(text, str) or not is_recipe_text(text):
            logger.warning("Text has no recipe indicators, not a recipe")
            return None

        title = self._attempt("title", self._extract_title, text, DEFAULT_TITLE)
        ingredients = self._attempt("ingredients", self._extract_ingredients, text, [])
        instructions = self._attempt("instructions", self._extract_instructions, text, [])

        if not ingredients and not instructions:
            # Sparse but titled output is still a recipe
            logger.warning(f"No ingredients or instructions found, keeping title '{title}'")

        times = self._attempt("times", self._extract_times, text, {})

        return ParsedRecipe(
            title=title,
            ingredients=ingredients,
            instructions=instructions,
            tips=self._attempt("tips", self._extract_tips, text, []),
            servings=self._attempt("servings", self._extract_servings, text, MAX_SERVINGS),
            nutrition=self._attempt("nutrition", extract_nutrition, text, None),
            tags=self._attempt("tags", generate_tags, text, []),
            **times,
        )

    def _attempt(self, label: str, extractor: Callable[[str], T], text: str, default: T) -> T:
        try:
            return extractor(text)
        except Exception as e:
            logger.error(f"Recipe {label} extraction failed: {e}", exc_info=True)
            return default

    def _clean_title(self, candidate: str) -> str:
        title = clean_md(candidate.strip())
        title = TITLE_PREFIX.sub("", title)
        return TITLE_SUFFIX.sub("", title).strip()

    def _fits(self, title: str) -> bool:
        return 3 < len(title) < 100 and not is_header_line(title)

    def _first_fitting(self, text: str, patterns: List[Tuple[str, Pattern]]) -> Optional[str]:
        for name, pattern in patterns:
            match = pattern.search(text)
            if not match or not match.group(1).strip():
                continue
            title = self._clean_title(match.group(1))
            if self._fits(title):
                logger.debug(f"Title '{title}' resolved via {name}")
                return title
        return None

    def _extract_title(self, text: str) -> str:
        return (
            self._first_fitting(text, TITLE_PATTERNS)
            or self._first_fitting(text, SECONDARY_TITLE_PATTERNS)
            or DEFAULT_TITLE
        )

    def _extract_ingredients(self, text: str) -> List[str]:
        items = parse_lines(extract_section(text, "ingredients"), min_length=2, prose_min_length=3)
        logger.debug(f"Extracted {len(items)} ingredients")
        return items

    def _extract_instructions(self, text: str) -> List[str]:
        items = parse_lines(extract_section(text, "instructions"), min_length=3, prose_min_length=5)
        logger.debug(f"Extracted {len(items)} instructions")
        return items

    def _extract_tips(self, text: str) -> List[str]:
        return parse_lines(extract_section(text, "tips"), min_length=0, allow_prose=False)

    def _extract_servings(self, text: str) -> int:
        for pattern in SERVINGS_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue
            servings = int(match.group(1))
            if servings > MAX_SERVINGS:
                # Meal planning is always single-serving
                logger.warning(f"Found {servings} servings, forcing to {MAX_SERVINGS}")
                return MAX_SERVINGS
            if servings >= 1:
                return servings
        return MAX_SERVINGS

    def _extract_times(self, text: str) -> dict:
        times = {}
        for field, patterns in TIME_PATTERNS.items():
            for pattern in patterns:
                match = pattern.search(text)
                if match:
                    times[field] = match.group(1)
                    break
        return times


def parse_recipe(text: str) -> Optional[ParsedRecipe]:
    """Parse model output into a ParsedRecipe; None means the text is not a recipe."""
    return RuleBasedParser().parse(text)
