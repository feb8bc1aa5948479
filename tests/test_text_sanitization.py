from mealparse.core.text import clean_md, strip_md_edges, capitalize_first, first_line

def test_clean_md_headers():
    assert clean_md("# Title") == "Title"
    assert clean_md("## Subtitle") == "Subtitle"
    assert clean_md("### Section") == "Section"
    assert clean_md("#   Spaced Title  ") == "Spaced Title"

def test_clean_md_bold():
    assert clean_md("**Bold** text") == "Bold text"
    assert clean_md("Text with **bold** word") == "Text with bold word"
    assert clean_md("__Mixed__ bold") == "Mixed bold"
    # Unclosed markers are left alone
    assert clean_md("**Open") == "**Open"

def test_clean_md_bullets():
    assert clean_md("- Item") == "Item"
    assert clean_md("* Item") == "Item"
    assert clean_md("• Item") == "Item"
    assert clean_md("  -  Indented") == "Indented"

def test_clean_md_mixed():
    assert clean_md("# **Title**") == "Title"
    assert clean_md("- **Bold Item**") == "Bold Item"

def test_clean_md_preservation():
    assert clean_md("use 1/2-inch cubes") == "use 1/2-inch cubes"
    assert clean_md("Title: - subtitle") == "Title: - subtitle"
    assert clean_md("") == ""

def test_strip_md_edges():
    assert strip_md_edges("## **Shakshuka** ##") == "Shakshuka"
    assert strip_md_edges("**Quick Oats**") == "Quick Oats"
    assert strip_md_edges("Plain") == "Plain"
    assert strip_md_edges("") == ""

def test_capitalize_first_keeps_rest():
    assert capitalize_first("greek yogurt") == "Greek yogurt"
    assert capitalize_first("chicken Breast") == "Chicken Breast"
    assert capitalize_first("") == ""

def test_first_line_skips_blank_lines():
    assert first_line("\n\n   \n  Soup of the day \nmore") == "Soup of the day"
    assert first_line("") == ""
