"""
Tests for the pure field rules in domain.validation.
"""

import math

import pytest

from domain.models import NutritionalInfo
from domain.validation import validate_name, validate_nutrition, validate_price
from test_constants import (
    NAME_AT_BOUNDS,
    NAME_TOO_LONG,
    NAME_TOO_SHORT,
    PRICE_IN_RANGE,
    PRICE_OUT_OF_RANGE,
)


# =============================================================================
# NAME
# =============================================================================


@pytest.mark.parametrize("name", NAME_AT_BOUNDS + ["Spaghetti Carbonara"])
def test_validate_name_accepts_trimmed_length_in_range(name: str):
    assert validate_name(name) is True


@pytest.mark.parametrize("name", NAME_TOO_SHORT + NAME_TOO_LONG)
def test_validate_name_rejects_trimmed_length_out_of_range(name: str):
    assert validate_name(name) is False


def test_validate_name_trims_before_measuring():
    """
    Verifies:
    - Whitespace padding does not count toward the length
    - A 1-character name padded to 10 characters is still rejected
    """
    assert validate_name("    A     ") is False
    assert validate_name("\tTea\n") is True


# =============================================================================
# PRICE
# =============================================================================


@pytest.mark.parametrize("price", PRICE_IN_RANGE)
def test_validate_price_accepts_open_interval(price: float):
    assert validate_price(price) is True


@pytest.mark.parametrize("price", PRICE_OUT_OF_RANGE)
def test_validate_price_rejects_bounds_and_outside(price: float):
    assert validate_price(price) is False


def test_validate_price_rejects_nan():
    assert validate_price(math.nan) is False


# =============================================================================
# NUTRITION
# =============================================================================


def test_validate_nutrition_accepts_typical_serving():
    info = NutritionalInfo(calories=650, protein=25, carbohydrates=60, fat=20)
    assert validate_nutrition(info) is True


def test_validate_nutrition_accepts_limits():
    """
    Verifies:
    - Exactly 2000 calories is allowed
    - Zero macros are allowed
    """
    info = NutritionalInfo(calories=2000, protein=0, carbohydrates=0, fat=0)
    assert validate_nutrition(info) is True


@pytest.mark.parametrize(
    "calories,protein,carbohydrates,fat",
    (
        (2001, 10, 10, 10),
        (3000, 25, 60, 20),
        (500, -0.1, 10, 10),
        (500, 10, -1, 10),
        (500, 10, 10, -20),
    ),
)
def test_validate_nutrition_rejects(calories, protein, carbohydrates, fat):
    info = NutritionalInfo(
        calories=calories, protein=protein, carbohydrates=carbohydrates, fat=fat
    )
    assert validate_nutrition(info) is False
