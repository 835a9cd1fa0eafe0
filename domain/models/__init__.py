"""
Domain models package - immutable Pydantic value types.
"""

from domain.models.dish import Dish, DishDraft, NutritionalInfo

__all__ = [
    "Dish",
    "DishDraft",
    "NutritionalInfo",
]
