"""Services package - Business logic layer"""

from services.dish_builder import BuildResult, DishBuilder

__all__ = [
    "BuildResult",
    "DishBuilder",
]
