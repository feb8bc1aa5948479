from mealparse.parsing.sections import extract_section, parse_lines, is_header_line


def test_markdown_heading_stops_at_next_heading(full_recipe_text):
    body = extract_section(full_recipe_text, "ingredients")
    assert body.startswith("- 200g chicken breast, cubed")
    assert body.endswith("- Salt")
    assert "Instructions" not in body


def test_bold_heading():
    text = "**Ingredients:**\n- 1 egg\n- 2 cups milk\n\n**Instructions:**\n1. Whisk."
    assert extract_section(text, "ingredients") == "- 1 egg\n- 2 cups milk"


def test_bare_heading_stops_at_other_heading():
    text = "Ingredients:\n- flour\n- sugar\nInstructions:\n1. Mix well"
    assert extract_section(text, "ingredients") == "- flour\n- sugar"
    assert extract_section(text, "instructions") == "1. Mix well"


def test_instruction_synonyms():
    assert extract_section("## Directions\n1. Boil water", "instructions") == "1. Boil water"
    assert extract_section("Method:\nStep 1: Stir", "instructions") == "Step 1: Stir"


def test_heading_with_parenthetical_suffix():
    text = "**Nutrition (per serving):**\n**Total per serving:** 600 cal, 30g protein, 50g carbs, 20g fat"
    body = extract_section(text, "nutrition")
    assert body.startswith("**Total per serving:**")


def test_missing_section_is_none():
    assert extract_section("Just a title\n\nSome words", "tips") is None
    assert extract_section("", "ingredients") is None
    assert extract_section("Ingredients:\n- egg", "unknown") is None


def test_empty_section_is_none():
    text = "### Ingredients\n### Instructions\n1. Boil water"
    assert extract_section(text, "ingredients") is None


def test_parse_lines_markers():
    body = "- 2 eggs\n* 1 cup milk\n• Salt\n10. Bake well"
    assert parse_lines(body) == ["2 eggs", "1 cup milk", "Salt", "Bake well"]


def test_parse_lines_prose_rules():
    body = "Whisk the eggs until fluffy\nNote\n**Bold label**"
    assert parse_lines(body) == ["Whisk the eggs until fluffy"]
    assert parse_lines(body, allow_prose=False) == []


def test_parse_lines_step_prefix():
    body = "Step 1: Preheat the oven\nStep 2: Bake"
    assert parse_lines(body) == ["Preheat the oven", "Bake"]


def test_parse_lines_skips_headers_and_short_items():
    body = "- Instructions:\n- 1 onion\n- ab"
    assert parse_lines(body) == ["1 onion"]


def test_parse_lines_keeps_duplicates_in_order():
    assert parse_lines("- salt\n- pepper\n- salt") == ["salt", "pepper", "salt"]
    assert parse_lines(None) == []


def test_is_header_line():
    assert is_header_line("Ingredients:")
    assert is_header_line("**Instructions**")
    assert is_header_line("Nutrition (per serving)")
    assert not is_header_line("Ingredients for the sauce are simple")
