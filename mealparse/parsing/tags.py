import re
from typing import List

CUISINES = ["italian", "chinese", "mexican", "indian", "french", "thai", "japanese", "mediterranean", "american"]
MEAL_TYPES = ["breakfast", "lunch", "dinner", "snack", "dessert", "appetizer"]
DIETARY = ["vegetarian", "vegan", "gluten-free", "keto", "paleo", "dairy-free"]
COOKING_METHODS = ["baked", "grilled", "fried", "steamed", "roasted", "sautéed"]


def _keyword_pattern(keyword: str) -> re.Pattern:
    # "gluten-free" also matches "gluten free"/"glutenfree"; "sautéed" also "sauteed"
    pattern = re.escape(keyword).replace(r"\-", r"[-\s]?").replace("é", "[ée]")
    return re.compile(pattern, re.IGNORECASE)


TAG_PATTERNS = [
    (keyword, _keyword_pattern(keyword))
    for keyword in CUISINES + MEAL_TYPES + DIETARY + COOKING_METHODS
]


def generate_tags(text: str) -> List[str]:
    """Keyword tags found anywhere in the text, first-seen order, no repeats."""
    tags: List[str] = []
    if not text:
        return tags

    for tag, pattern in TAG_PATTERNS:
        if tag not in tags and pattern.search(text):
            tags.append(tag)
    return tags
