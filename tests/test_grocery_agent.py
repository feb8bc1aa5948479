import pytest
from mealparse.agents import grocery_agent
from mealparse.agents.grocery_agent import (
    aggregate_ingredients, generate_grocery_list, merge_quantities, MealIngredients,
)
from mealparse.parsing.categories import categorize
from mealparse.parsing.parser import RecipeContent, RecipeRecord


def _meal(recipe_id, title, lines):
    return {"recipeId": recipe_id, "recipeTitle": title, "ingredientLines": lines}


def _flatten(buckets):
    return {item.name: item for bucket in buckets for item in bucket.items}


@pytest.mark.parametrize("a,b,expected", [
    ("2", "3", "5"),
    ("1.5", "2", "3.5"),
    ("2 cups", "3 tbsp", "5"),
    ("2", "a pinch", "2, a pinch"),
    ("0", "2", "0, 2"),
    ("½ cup", "1 cup", "½ cup, 1 cup"),
])
def test_merge_quantities(a, b, expected):
    assert merge_quantities(a, b) == expected


def test_same_ingredient_merges_across_recipes():
    buckets = aggregate_ingredients([
        _meal("r1", "Omelette", ["2 eggs"]),
        _meal("r2", "Pancakes", ["2 eggs"]),
    ])
    assert len(buckets) == 1
    assert buckets[0].category == "protein"
    eggs = buckets[0].items[0]
    assert eggs.name == "Eggs"
    assert eggs.quantity == "4"
    assert eggs.recipe_ids == ["r1", "r2"]
    assert eggs.recipes == ["Omelette", "Pancakes"]


def test_singular_and_plural_stay_separate():
    buckets = aggregate_ingredients([_meal("r1", "A", ["1 egg"]), _meal("r2", "B", ["2 eggs"])])
    items = buckets[0].items
    assert [(i.name, i.quantity) for i in items] == [("Egg", "1"), ("Eggs", "2")]


def test_same_recipe_counted_once_in_sources():
    buckets = aggregate_ingredients([_meal("r1", "Soup", ["1 onion", "1 onion"])])
    onion = buckets[0].items[0]
    assert onion.quantity == "2"
    assert onion.recipe_ids == ["r1"]
    assert onion.recipes == ["Soup"]


def test_non_numeric_quantities_are_joined():
    items = _flatten(aggregate_ingredients([
        _meal("r1", "A", ["½ cup sugar"]),
        _meal("r2", "B", ["1 cup sugar"]),
    ]))
    assert items["Sugar"].quantity == "½ cup, 1 cup"


def test_meal_without_lines_is_skipped():
    buckets = aggregate_ingredients([
        _meal("r1", "A", None),
        _meal("r2", "B", ["1 cup rice", "2 tomatoes"]),
    ])
    assert [b.category for b in buckets] == ["produce", "grains"]
    items = _flatten(buckets)
    assert items["Tomatoes"].quantity == "2"
    assert items["Rice"].quantity == "1 cup"
    assert items["Rice"].recipe_ids == ["r2"]


def test_bad_meals_and_lines_are_skipped():
    buckets = aggregate_ingredients([
        "not a meal",
        _meal("r1", "A", "oops"),
        _meal("r2", "B", [None, 42, "or", "", "1 onion"]),
    ])
    assert list(_flatten(buckets)) == ["Onion"]


def test_category_order():
    buckets = aggregate_ingredients([
        _meal("r1", "A", ["Salt", "1 cup rice", "2 tomatoes", "1 cup milk", "200g chicken", "olive oil"]),
    ])
    assert [b.category for b in buckets] == ["produce", "protein", "dairy", "grains", "spices", "other"]
    assert [b.emoji for b in buckets] == ["🥬", "🥩", "🥛", "🌾", "🧂", "📦"]
    assert buckets[-1].items[0].name == "Olive oil"


def test_items_sorted_within_category():
    buckets = aggregate_ingredients([_meal("r1", "A", ["2 tomatoes", "1 onion", "garlic", "1 zucchini"])])
    assert [i.name for i in buckets[0].items] == ["Garlic", "Onion", "Tomatoes", "Zucchini"]


def test_unknown_category_goes_last(monkeypatch):
    def fake_categorize(name):
        if "ice cream" in name.lower():
            return "frozen", "🧊"
        return categorize(name)

    monkeypatch.setattr(grocery_agent, "categorize", fake_categorize)
    buckets = aggregate_ingredients([_meal("r1", "A", ["Ice cream", "2 tomatoes", "olive oil"])])
    assert [b.category for b in buckets] == ["produce", "other", "frozen"]
    assert buckets[-1].emoji == "📦"


def test_empty_input():
    assert aggregate_ingredients([]) == []
    assert aggregate_ingredients(None) == []


def test_accepts_models_and_serializes_aliases():
    meal = MealIngredients(recipe_id="r1", recipe_title="Toast", ingredient_lines=["2 slices bread"])
    buckets = aggregate_ingredients([meal])
    dumped = buckets[0].model_dump(by_alias=True)
    assert dumped == {
        "category": "grains",
        "emoji": "🌾",
        "items": [{"name": "Bread", "quantity": "2 slices", "recipeIds": ["r1"], "recipes": ["Toast"]}],
    }


def test_generate_grocery_list_skips_unknown_ids(recipe_store):
    recipe_id = recipe_store.save(RecipeRecord(
        title="Guacamole",
        content_json=RecipeContent(title="Guacamole", ingredients=["2 avocados", "1 lime, juiced"]),
    ))
    buckets = generate_grocery_list(recipe_store, [recipe_id, "missing"])
    items = _flatten(buckets)
    assert set(items) == {"Avocados", "Lime"}
    assert items["Lime"].recipes == ["Guacamole"]


def test_numeric_recipe_id_keeps_meal():
    buckets = aggregate_ingredients([{"recipeId": 7, "recipeTitle": "Omelette", "ingredientLines": ["2 eggs"]}])
    eggs = buckets[0].items[0]
    assert eggs.name == "Eggs"
    assert eggs.recipe_ids == ["7"]
    assert eggs.recipes == ["Omelette"]
