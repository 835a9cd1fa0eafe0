"""Pydantic value types for dishes: the all-optional draft and the built record."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from domain.enums import Allergen, Category

MAX_DISH_ID = 2**32 - 1


class NutritionalInfo(BaseModel):
    """Nutrition facts for one serving."""

    model_config = ConfigDict(frozen=True)

    calories: int = Field(..., ge=0, description="Energy in kcal")
    protein: float = Field(..., description="Protein in grams")
    carbohydrates: float = Field(..., description="Carbohydrates in grams")
    fat: float = Field(..., description="Fat in grams")


class DishDraft(BaseModel):
    """
    In-progress dish. Every field is optional until build time.
    Instances are frozen; updates go through DishBuilder and yield new drafts.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = Field(default=None, ge=0, le=MAX_DISH_ID)
    name: Optional[str] = None
    description: Optional[str] = None
    ingredients: Tuple[str, ...] = ()
    price: Optional[float] = None
    category: Optional[Category] = None
    nutritional: Optional[NutritionalInfo] = None
    is_vegetarian: bool = False
    is_vegan: bool = False
    allergens: Tuple[Allergen, ...] = ()


class Dish(BaseModel):
    """Complete, validated dish produced by DishBuilder.build()."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, le=MAX_DISH_ID)
    name: str
    description: str
    ingredients: Tuple[str, ...] = ()
    price: float
    category: Category
    nutritional: NutritionalInfo
    is_vegetarian: bool = False
    is_vegan: bool = False
    allergens: Tuple[Allergen, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-ready representation for storage or transport."""
        return self.model_dump(mode="json")
