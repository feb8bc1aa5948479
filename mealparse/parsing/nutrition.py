import re
import math
import logging
from typing import Dict, List, Optional, Pattern, Tuple

from .parser import NutritionInfo
from .sections import extract_section

logger = logging.getLogger("mealparse.parsing")

_NUM = r"(\d+(?:\.\d+)?)"
_CAL = r"(?:kcal|cal(?:ories)?)\b"
# Same-line whitespace and label punctuation, so "420\nProtein" is not read as 420g protein
_S = r"[ \t]*"
_LABEL_GAP = r"[^\w\n]{0,4}"

# 650 cal, 35g protein, 48g carbs, 22g fat
_TOTAL_VALUES = (
    rf"{_NUM}{_S}{_CAL},?{_S}"
    rf"{_NUM}{_S}g?{_S}protein,?{_S}"
    rf"{_NUM}{_S}g?{_S}carb(?:ohydrate)?s?,?{_S}"
    rf"{_NUM}{_S}g?{_S}fat"
)

TOTAL_LINE_PATTERNS: List[Pattern] = [
    re.compile(r"\*\*total per serving:?\*\*:?\s*" + _TOTAL_VALUES, re.IGNORECASE),
    re.compile(r"\*\*total[^*\n]*?:?\*\*:?\s*" + _TOTAL_VALUES, re.IGNORECASE),
    re.compile(r"total[^:\n]*:\s*\**\s*" + _TOTAL_VALUES, re.IGNORECASE),
]

NUTRIENT_PATTERNS: Dict[str, List[Pattern]] = {
    "calories": [
        re.compile(rf"{_NUM}{_S}{_CAL}", re.IGNORECASE),
        re.compile(rf"calories{_LABEL_GAP}{_NUM}", re.IGNORECASE),
    ],
    "protein": [
        re.compile(rf"{_NUM}{_S}g?{_S}protein", re.IGNORECASE),
        re.compile(rf"protein{_LABEL_GAP}{_NUM}{_S}g\b", re.IGNORECASE),
    ],
    "carbs": [
        re.compile(rf"{_NUM}{_S}g?{_S}carb(?:ohydrate)?s?\b", re.IGNORECASE),
        re.compile(rf"carb(?:ohydrate)?s?{_LABEL_GAP}{_NUM}{_S}g\b", re.IGNORECASE),
    ],
    "fat": [
        re.compile(rf"{_NUM}{_S}g?{_S}fats?\b", re.IGNORECASE),
        re.compile(rf"fats?{_LABEL_GAP}{_NUM}{_S}g\b", re.IGNORECASE),
    ],
    "fiber": [
        re.compile(rf"{_NUM}{_S}g?{_S}fib(?:er|re)\b", re.IGNORECASE),
    ],
    "sugar": [
        re.compile(rf"{_NUM}{_S}g?{_S}sugars?\b", re.IGNORECASE),
    ],
}

RATING_PATTERNS: List[Pattern] = [
    re.compile(r"\*\*nutrition\s*rating:?\*\*:?\s*([A-D])\b", re.IGNORECASE),
    re.compile(r"nutrition\s*rating:?\s*\**\s*([A-D])\b", re.IGNORECASE),
    # Bare "rating" only takes an uppercase grade, so "Rating: a crowd favourite" is not a grade
    re.compile(r"\brating:?\s*\**\s*((?-i:[A-D]))\b", re.IGNORECASE),
]


def _to_int(value: str) -> int:
    # Half-up, so 22.5g reads as 23g rather than banker's 22
    return int(math.floor(float(value) + 0.5))


def _match_total_line(text: str) -> Dict[str, int]:
    for pattern in TOTAL_LINE_PATTERNS:
        match = pattern.search(text)
        if match:
            calories, protein, carbs, fat = (_to_int(v) for v in match.groups())
            logger.debug(
                f"Nutrition from total line: {calories} cal, {protein}g protein, "
                f"{carbs}g carbs, {fat}g fat"
            )
            return {"calories": calories, "protein": protein, "carbs": carbs, "fat": fat}
    return {}


def _match_single_nutrients(text: str) -> Dict[str, int]:
    values: Dict[str, int] = {}
    for nutrient, patterns in NUTRIENT_PATTERNS.items():
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                values[nutrient] = _to_int(match.group(1))
                break
    if values:
        logger.debug(f"Nutrition from individual mentions: {values}")
    return values


def extract_rating(text: str) -> Optional[str]:
    for pattern in RATING_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(1).upper()
    return None


def extract_nutrition(text: str) -> Optional[NutritionInfo]:
    """
    Pull per-serving nutrition out of recipe text.

    The nutrition section is searched first (canonical "Total per serving" line,
    then individual nutrient mentions); the whole text is the fallback scope.
    Returns None when no nutrient value is found at all.
    """
    if not text:
        return None

    section = extract_section(text, "nutrition")
    scopes: List[Tuple[str, str]] = [("section", section)] if section else []
    scopes.append(("text", text))

    values: Dict[str, int] = {}
    for scope_name, scope in scopes:
        values = _match_total_line(scope) or _match_single_nutrients(scope)
        if values:
            logger.debug(f"Nutrition values taken from {scope_name}")
            break

    if not values:
        logger.debug("No nutrition values found")
        return None

    return NutritionInfo(**values, rating=extract_rating(text))


def has_valid_nutrition(nutrition: Optional[NutritionInfo]) -> bool:
    """Calories must be positive and the three macros present for a recipe to be saved as-is."""
    if nutrition is None:
        return False
    if nutrition.calories is None or nutrition.calories <= 0:
        return False
    return all(v is not None for v in (nutrition.protein, nutrition.carbs, nutrition.fat))
