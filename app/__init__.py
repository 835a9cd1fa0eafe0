"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    DishError,
    NotFoundError,
    InvalidNameError,
    InvalidPriceError,
    InvalidNutritionError,
)

__all__ = [
    "settings",
    "DishError",
    "NotFoundError",
    "InvalidNameError",
    "InvalidPriceError",
    "InvalidNutritionError",
]
