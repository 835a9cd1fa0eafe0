"""
Field rules applied when a dish draft is built.
All functions are pure predicates and never raise for well-typed input.
"""

from domain.models.dish import NutritionalInfo

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

# Exclusive bounds
PRICE_MIN = 0.0
PRICE_MAX = 1000.0

MAX_CALORIES = 2000


def validate_name(name: str) -> bool:
    """True when the name, ignoring surrounding whitespace, has 2 to 50 characters."""
    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def validate_price(price: float) -> bool:
    return PRICE_MIN < price < PRICE_MAX


def validate_nutrition(nutritional: NutritionalInfo) -> bool:
    """True when calories are within the ceiling and no macro is negative."""
    if nutritional.calories > MAX_CALORIES:
        return False
    macros = (nutritional.protein, nutritional.carbohydrates, nutritional.fat)
    return all(value >= 0 for value in macros)
