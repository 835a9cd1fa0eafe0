"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domain.enums import Category
from domain.models import DishDraft, NutritionalInfo
from services.dish_builder import DishBuilder


@pytest.fixture
def carbonara_nutrition() -> NutritionalInfo:
    return NutritionalInfo(calories=650, protein=25, carbohydrates=60, fat=20)


@pytest.fixture
def valid_draft(carbonara_nutrition: NutritionalInfo) -> DishDraft:
    """Draft with every required field set to a valid value."""
    draft = DishBuilder.create()
    draft = DishBuilder.set_id(draft, 1)
    draft = DishBuilder.set_name(draft, "Spaghetti Carbonara")
    draft = DishBuilder.set_price(draft, 15.5)
    draft = DishBuilder.set_category(draft, Category.MAIN_COURSE)
    return DishBuilder.set_nutritional(draft, carbonara_nutrition)
