"""Dish builder service - immutable draft updates and the final validated build."""

from typing import Any, Iterable, Optional
import logging

from pydantic import BaseModel, ConfigDict

from app.exceptions import (
    DishError,
    InvalidNameError,
    InvalidNutritionError,
    InvalidPriceError,
    NotFoundError,
)
from domain.enums import Allergen, Category
from domain.models.dish import Dish, DishDraft, NutritionalInfo
from domain.validation import validate_name, validate_nutrition, validate_price

logger = logging.getLogger("dishcraft.builder")

DEFAULT_DESCRIPTION = "No description provided"

REQUIRED_FIELDS = ("id", "name", "price", "category", "nutritional")


class BuildResult(BaseModel):
    """Outcome of DishBuilder.try_build(): exactly one of dish or error is set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    dish: Optional[Dish] = None
    error: Optional[DishError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _with(draft: DishDraft, **changes: Any) -> DishDraft:
    """Copy of draft with the given fields replaced, re-validated for type."""
    data = dict(draft)
    data.update(changes)
    return DishDraft.model_validate(data)


class DishBuilder:
    """Builds dishes from immutable drafts. Setters never fail; build() does."""

    @staticmethod
    def create() -> DishDraft:
        return DishDraft()

    @staticmethod
    def set_id(draft: DishDraft, dish_id: int) -> DishDraft:
        return _with(draft, id=dish_id)

    @staticmethod
    def set_name(draft: DishDraft, name: str) -> DishDraft:
        return _with(draft, name=name)

    @staticmethod
    def set_description(draft: DishDraft, description: str) -> DishDraft:
        return _with(draft, description=description)

    @staticmethod
    def set_ingredients(draft: DishDraft, ingredients: Iterable[str]) -> DishDraft:
        """Replace the ingredient list. Order and duplicates are preserved."""
        return _with(draft, ingredients=tuple(ingredients))

    @staticmethod
    def set_price(draft: DishDraft, price: float) -> DishDraft:
        return _with(draft, price=price)

    @staticmethod
    def set_category(draft: DishDraft, category: Category) -> DishDraft:
        return _with(draft, category=category)

    @staticmethod
    def set_nutritional(draft: DishDraft, nutritional: NutritionalInfo) -> DishDraft:
        return _with(draft, nutritional=nutritional)

    @staticmethod
    def set_is_vegetarian(draft: DishDraft, is_vegetarian: bool) -> DishDraft:
        return _with(draft, is_vegetarian=is_vegetarian)

    @staticmethod
    def set_is_vegan(draft: DishDraft, is_vegan: bool) -> DishDraft:
        return _with(draft, is_vegan=is_vegan)

    @staticmethod
    def set_allergens(draft: DishDraft, allergens: Iterable[Allergen]) -> DishDraft:
        """Replace the allergen list. Duplicates are kept as given."""
        return _with(draft, allergens=tuple(allergens))

    @staticmethod
    def build(draft: DishDraft) -> Dish:
        """
        Validate the draft and produce a complete Dish.

        Checks run in a fixed order and the first failure is raised:
        missing required fields, then name, then price, then nutrition.

        Raises:
            NotFoundError: a required field is unset
            InvalidNameError: trimmed name length outside 2..50
            InvalidPriceError: price not strictly between 0 and 1000
            InvalidNutritionError: calories above 2000 or a negative macro
        """
        missing = [field for field in REQUIRED_FIELDS if getattr(draft, field) is None]
        if missing:
            logger.warning("Dish build rejected kind=NotFound missing=%s", ",".join(missing))
            raise NotFoundError(
                f"Missing required field(s): {', '.join(missing)}",
                details={"missing": missing},
            )

        description = draft.description if draft.description is not None else DEFAULT_DESCRIPTION

        if not validate_name(draft.name):
            logger.warning("Dish build rejected kind=InvalidName id=%s", draft.id)
            raise InvalidNameError(
                "Dish name must be between 2 and 50 characters",
                details={"name": draft.name},
            )

        if not validate_price(draft.price):
            logger.warning("Dish build rejected kind=InvalidPrice id=%s", draft.id)
            raise InvalidPriceError(
                "Dish price must be greater than 0 and less than 1000",
                details={"price": draft.price},
            )

        if not validate_nutrition(draft.nutritional):
            logger.warning("Dish build rejected kind=InvalidNutrition id=%s", draft.id)
            raise InvalidNutritionError(
                "Calories must not exceed 2000 and macros must not be negative",
                details={"nutritional": draft.nutritional.model_dump()},
            )

        dish = Dish(
            id=draft.id,
            name=draft.name,
            description=description,
            ingredients=draft.ingredients,
            price=draft.price,
            category=draft.category,
            nutritional=draft.nutritional,
            is_vegetarian=draft.is_vegetarian,
            is_vegan=draft.is_vegan,
            allergens=draft.allergens,
        )
        logger.debug("Built dish id=%s name=%s", dish.id, dish.name)
        return dish

    @staticmethod
    def try_build(draft: DishDraft) -> BuildResult:
        """Like build(), but returns the error in a BuildResult instead of raising."""
        try:
            return BuildResult(dish=DishBuilder.build(draft))
        except DishError as exc:
            return BuildResult(error=exc)
