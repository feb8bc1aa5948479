from abc import ABC, abstractmethod
from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat", "fiber", "sugar")


class NutritionInfo(BaseModel):
    calories: Optional[int] = None
    protein: Optional[int] = None
    carbs: Optional[int] = None
    fat: Optional[int] = None
    fiber: Optional[int] = None
    sugar: Optional[int] = None
    rating: Optional[Literal["A", "B", "C", "D"]] = None

    def has_nutrients(self) -> bool:
        return any(getattr(self, f) is not None for f in NUTRIENT_FIELDS)


class RecipeContent(BaseModel):
    """Shape stored in the `content_json` column."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    ingredients: List[str] = []
    instructions: List[str] = []
    tips: Optional[List[str]] = None
    servings: Optional[int] = None
    prep_time: Optional[str] = Field(None, alias="prepTime")
    cook_time: Optional[str] = Field(None, alias="cookTime")
    total_time: Optional[str] = Field(None, alias="totalTime")


class ParsedRecipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    ingredients: List[str] = []
    instructions: List[str] = []
    tips: List[str] = []
    servings: int = 1
    prep_time: Optional[str] = Field(None, alias="prepTime")
    cook_time: Optional[str] = Field(None, alias="cookTime")
    total_time: Optional[str] = Field(None, alias="totalTime")
    nutrition: Optional[NutritionInfo] = None
    tags: List[str] = []

    def content_json(self) -> RecipeContent:
        return RecipeContent(
            title=self.title,
            ingredients=list(self.ingredients),
            instructions=list(self.instructions),
            tips=list(self.tips),
            servings=self.servings,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            total_time=self.total_time,
        )


class RecipeRecord(BaseModel):
    """What the storage collaborator persists for one model response."""
    title: str
    content_json: RecipeContent
    nutrition: Optional[NutritionInfo] = None
    tags: List[str] = []


class ParsedIngredient(BaseModel):
    original: str
    name: str
    quantity: str = "1"


class RecipeParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> Optional[ParsedRecipe]:
        """Parse raw text into a structured recipe, or None if it is not a recipe."""
        pass
