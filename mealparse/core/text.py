import re


def clean_md(text: str) -> str:
    """
    Sanitize markdown artifacts from text.
    Removes:
    - Leading headers (#, ##)
    - Bold markers (**, __)
    - Leading bullets (-, *, •)
    """
    if not text:
        return ""

    # Remove bolding (**text** -> text)
    text = re.sub(r"(\*\*|__)(.*?)\1", r"\2", text)

    # Remove leading headers (# Title -> Title)
    text = re.sub(r"^\s*#+\s+", "", text)

    # Remove leading bullets (- Item -> Item)
    text = re.sub(r"^\s*[-*•]\s+", "", text)

    return text.strip()


def strip_md_edges(text: str) -> str:
    """Trim heading hashes, emphasis stars and whitespace from both ends."""
    if not text:
        return ""
    text = re.sub(r"^[#*\s]+", "", text)
    return re.sub(r"[#*\s]+$", "", text)


def capitalize_first(text: str) -> str:
    # str.capitalize() would lowercase the rest ("Chicken Breast" -> "Chicken breast")
    return text[:1].upper() + text[1:]


def first_line(text: str) -> str:
    """First non-blank line of text, stripped."""
    for line in (text or "").split("\n"):
        if line.strip():
            return line.strip()
    return ""
