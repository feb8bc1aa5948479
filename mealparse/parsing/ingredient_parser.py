import re

from ..core.text import capitalize_first
from .parser import ParsedIngredient

FRACTION_CHARS = "¼½¾⅓⅔⅛⅜⅝⅞"

COMMON_UNITS = [
    "cup", "cups", "tablespoon", "tablespoons", "tbsp", "teaspoon", "teaspoons", "tsp",
    "pound", "pounds", "lb", "lbs", "ounce", "ounces", "oz",
    "gram", "grams", "g", "kilogram", "kilograms", "kg",
    "ml", "milliliter", "milliliters", "liter", "liters", "l",
    "piece", "pieces", "slice", "slices", "clove", "cloves",
    "can", "cans", "package", "packages", "pkg",
]

# Longest first so "cups" wins over "cup" and "kg" over "g"
_UNIT_ALTERNATION = "|".join(sorted(COMMON_UNITS, key=len, reverse=True))

INGREDIENT_REGEX = re.compile(
    rf"^(?P<qty>(?=\.?[\d{FRACTION_CHARS}])[\d./\s{FRACTION_CHARS}]+"
    rf"(?:\s*(?:{_UNIT_ALTERNATION})\b)?)?(?P<name>.+)$",
    re.IGNORECASE,
)

NUMERIC_TOKEN = re.compile(rf"^[\d./{FRACTION_CHARS}]+$")

GARBAGE_TOKENS = {
    "or", "and", "optional", "to taste", "if needed", "for serving", "plus more", "divided"
}


def sanitize_ingredient_text(text: str) -> str:
    """Strip markdown and normalize whitespace."""
    if not text:
        return ""

    s = text
    # Remove markdown bold/italic markers
    s = s.replace("**", "").replace("__", "")

    # Remove leading bullets
    s = re.sub(r'^[\s\-\*•#]+', '', s)

    # Collapse whitespace
    s = re.sub(r'\s+', ' ', s).strip()

    return s


def is_garbage_line(text: str) -> bool:
    """Check if the text is just a connector word or garbage."""
    if not text:
        return True

    t = text.lower().strip()
    # Remove punctuation
    t = re.sub(r'[^\w\s]', '', t)

    if not t:
        return True

    return t in GARBAGE_TOKENS


def strip_preparation_notes(line: str) -> str:
    """Drop everything from the first comma or '(' on: "onion, diced" -> "onion"."""
    cleaned = line.split(",")[0].strip()
    return cleaned.split("(")[0].strip()


def parse_ingredient(line: str) -> ParsedIngredient:
    """
    Best effort split of one ingredient line into a display name and a quantity.

    "2 cups flour, sifted" -> name "Flour", quantity "2 cups".
    Never raises; when nothing looks like a quantity the whole line becomes the
    name and the quantity defaults to "1".
    """
    original = line if isinstance(line, str) else str(line)
    cleaned = strip_preparation_notes(sanitize_ingredient_text(original))

    match = INGREDIENT_REGEX.match(cleaned)
    if match:
        quantity = (match.group("qty") or "").strip()
        name = match.group("name").strip().lstrip(". ").strip() or cleaned
        return ParsedIngredient(
            original=original,
            name=capitalize_first(name),
            quantity=quantity or "1",
        )

    parts = cleaned.split()
    if len(parts) > 1 and NUMERIC_TOKEN.match(parts[0]):
        return ParsedIngredient(
            original=original,
            name=capitalize_first(" ".join(parts[1:])),
            quantity=parts[0],
        )

    return ParsedIngredient(original=original, name=capitalize_first(cleaned), quantity="1")
