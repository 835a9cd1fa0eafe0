"""
Domain enums for DishCraft.
Contains all enumeration types used across the dish models.
"""

import enum


class Category(str, enum.Enum):
    """Menu section a dish belongs to"""

    APPETIZER = "Appetizer"
    MAIN_COURSE = "MainCourse"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"
    SPECIALS = "Specials"


class Allergen(str, enum.Enum):
    """Declarable allergens"""

    GLUTEN = "Gluten"
    DAIRY = "Dairy"
    NUTS = "Nuts"
    SHELLFISH = "Shellfish"
    SOY = "Soy"
    EGGS = "Eggs"


class DishErrorKind(str, enum.Enum):
    """Reasons a build can be rejected, in the order they are checked"""

    NOT_FOUND = "NotFound"
    INVALID_NAME = "InvalidName"
    INVALID_PRICE = "InvalidPrice"
    INVALID_NUTRITION = "InvalidNutrition"
