"""
Domain layer - Dish value types, enums, and field validation rules.
"""

from domain import enums, models, validation

__all__ = ["enums", "models", "validation"]
