"""Shopping-list categories for ingredient names.

Categories are checked in order and the first keyword contained in the
lowercased name wins, so "Eggplant" is produce before "egg" can claim it.
"""
from typing import Tuple

CATEGORY_KEYWORDS = {
    "produce": [
        "tomato", "lettuce", "onion", "garlic", "carrot", "celery", "potato", "pepper",
        "cucumber", "spinach", "broccoli", "cauliflower", "cabbage", "mushroom", "zucchini",
        "eggplant", "asparagus", "avocado", "lemon", "lime", "apple", "banana", "orange",
        "berry", "strawberry", "blueberry", "cilantro", "parsley", "basil", "thyme", "rosemary",
    ],
    "protein": [
        "chicken", "beef", "pork", "fish", "salmon", "tuna", "shrimp", "egg", "tofu", "tempeh",
        "lentil", "bean", "chickpea", "turkey", "lamb", "bacon", "sausage",
    ],
    "dairy": [
        "milk", "cheese", "yogurt", "butter", "cream", "sour cream", "mozzarella", "parmesan",
        "cheddar", "feta", "ricotta",
    ],
    "grains": [
        "rice", "pasta", "bread", "flour", "oat", "quinoa", "couscous", "barley", "tortilla",
        "noodle",
    ],
    "spices": [
        "salt", "pepper", "paprika", "cumin", "oregano", "cinnamon", "chili", "curry",
        "turmeric", "ginger", "coriander", "nutmeg",
    ],
}

CATEGORY_EMOJI = {
    "produce": "🥬",
    "protein": "🥩",
    "dairy": "🥛",
    "grains": "🌾",
    "spices": "🧂",
    "other": "📦",
}

CATEGORY_ORDER = ["produce", "protein", "dairy", "grains", "spices", "other"]


def category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, CATEGORY_EMOJI["other"])


def categorize(name: str) -> Tuple[str, str]:
    """Return (category, emoji) for an ingredient name."""
    lower_name = (name or "").lower()

    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lower_name for keyword in keywords):
            return category, category_emoji(category)

    return "other", category_emoji("other")
