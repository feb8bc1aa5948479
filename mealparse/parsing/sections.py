"""Section location and list-item splitting for model-written recipe text.

A section is found by trying, in order, a markdown heading (``### Ingredients``),
a bold heading (``**Ingredients**:``) and a bare ``Ingredients:`` line. The first
pattern yielding a non-empty body wins.
"""
import re
import logging
from typing import List, Optional, Pattern, Tuple

from ..core.text import strip_md_edges

logger = logging.getLogger("mealparse.parsing")

SECTION_HEADINGS = {
    "ingredients": r"ingredients?",
    "instructions": r"instructions?|directions?|method|steps",
    "tips": r"tips?|variations?|notes?",
    "nutrition": r"nutrition(?!\s*rating)",
}

ALL_HEADINGS = "|".join(SECTION_HEADINGS.values())

# "(per serving)" and similar suffixes after a heading word
_HEADING_SUFFIX = r"(?:[ \t]*\([^)\n]*\))?"

# A bold line starts a new block, except the canonical "**Total ...:**" nutrition line
_BOLD_LINE = r"^[ \t]*\*\*(?!total\b)\w"
_HASH_MARK = r"^[ \t]*#{1,6}"
_HASH_LINE = _HASH_MARK + r"\s"

_FLAGS = re.IGNORECASE | re.DOTALL | re.MULTILINE


def _build_patterns(section: str) -> List[Tuple[str, Pattern]]:
    heading = rf"(?:{SECTION_HEADINGS[section]})\b{_HEADING_SUFFIX}"
    others = "|".join(v for k, v in SECTION_HEADINGS.items() if k != section)
    return [
        ("markdown", re.compile(
            rf"{_HASH_MARK}[ \t]*{heading}[^\n]*\n(?P<body>.*?)(?={_HASH_LINE}|\Z)",
            _FLAGS,
        )),
        ("bold", re.compile(
            rf"\*\*[ \t]*{heading}[ \t]*:?[ \t]*\*\*[ \t]*:?\s*(?P<body>.*?)"
            rf"(?={_BOLD_LINE}|\n[ \t]*\n|\Z)",
            _FLAGS,
        )),
        ("bare", re.compile(
            rf"^[ \t]*{heading}[ \t]*:?\s*(?P<body>.*?)"
            rf"(?=\n[ \t]*\n|{_BOLD_LINE}|{_HASH_LINE}|^[ \t]*(?:{others})\b|\Z)",
            _FLAGS,
        )),
    ]


SECTION_PATTERNS = {name: _build_patterns(name) for name in SECTION_HEADINGS}

LIST_MARKER = re.compile(r"^(?:[-*•]|\d+[.)])\s+(?P<item>.+)$")
STEP_PREFIX = re.compile(r"^step\s*\d+\s*[:.)\-]?\s*", re.IGNORECASE)
HEADER_LINE = re.compile(rf"^(?:{ALL_HEADINGS})\b{_HEADING_SUFFIX}\s*:?$", re.IGNORECASE)


def extract_section(text: str, section: str) -> Optional[str]:
    """
    Return the body of the named section, or None when no heading style matches.
    Unknown section names are treated as missing.
    """
    if not text:
        return None

    for style, pattern in SECTION_PATTERNS.get(section, []):
        match = pattern.search(text)
        if not match:
            continue
        body = match.group("body")
        if body.strip(" \t\r\n*:"):
            logger.debug(f"Section '{section}' found via {style} heading")
            return body.strip()

    logger.debug(f"Section '{section}' not found")
    return None


def is_header_line(text: str) -> bool:
    return bool(HEADER_LINE.match(strip_md_edges(text)))


def parse_lines(body: Optional[str], min_length: int = 2, allow_prose: bool = True,
                prose_min_length: int = 3) -> List[str]:
    """
    Split a section body into list items, keeping source order.

    Bulleted (-, *, •) and numbered (1. / 1)) lines are always items. With
    allow_prose, an unmarked line also counts when it is longer than
    prose_min_length, is not a bold label and contains a space.
    """
    items: List[str] = []
    if not body:
        return items

    for line in body.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue

        marked = LIST_MARKER.match(trimmed)
        if marked:
            item = marked.group("item")
        elif STEP_PREFIX.match(trimmed):
            item = trimmed
        elif (allow_prose and len(trimmed) > prose_min_length
              and not trimmed.startswith("**") and " " in trimmed):
            item = trimmed
        else:
            continue

        item = STEP_PREFIX.sub("", item).strip()
        if len(item) <= min_length or is_header_line(item):
            continue
        items.append(item)

    return items
