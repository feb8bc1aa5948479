from mealparse.parsing.tags import generate_tags


def test_tags_in_category_order():
    text = "A vegan, gluten free Thai curry, steamed and sauteed. Great for dinner. Vegan!"
    assert generate_tags(text) == ["thai", "dinner", "vegan", "gluten-free", "steamed", "sautéed"]


def test_tags_from_recipe(full_recipe_text):
    assert generate_tags(full_recipe_text) == ["mediterranean", "dinner"]


def test_no_tags():
    assert generate_tags("Plain toast.") == []
    assert generate_tags("") == []
