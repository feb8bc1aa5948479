import pytest
from fastapi.testclient import TestClient

from mealparse.main import app
from mealparse.deps import get_store
from mealparse.services.storage import InMemoryRecipeStore

FULL_RECIPE = """# Lemon Garlic Chicken Bowl

A hearty Mediterranean dinner for one.

**Servings:** 2
**Prep Time:** 15 minutes
**Cook Time:** 25 minutes

### Ingredients
- 200g chicken breast, cubed
- 1 cup rice
- 2 cloves garlic, minced
- 1 tbsp olive oil
- Salt

### Instructions
1. Season the chicken with salt and garlic.
2. Grill the chicken for 10 minutes.
3. Serve over rice.

### Tips
- Use brown rice for more fiber.

### Nutrition (per serving)
**Total per serving:** 650 cal, 35g protein, 48g carbs, 22.5g fat

**Nutrition Rating:** B
"""

GARLIC_RICE = """# Garlic Rice

### Ingredients
- 1 cup rice
- 3 cloves garlic

### Instructions
1. Cook the rice with the garlic.
"""


@pytest.fixture
def full_recipe_text():
    return FULL_RECIPE


@pytest.fixture
def garlic_rice_text():
    return GARLIC_RICE


@pytest.fixture
def recipe_store():
    """Fresh in-memory store per test."""
    return InMemoryRecipeStore()


@pytest.fixture
def client(recipe_store):
    """Test client with store override."""
    app.dependency_overrides[get_store] = lambda: recipe_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
