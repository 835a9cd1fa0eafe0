from typing import Any, Mapping, Optional

from domain.enums import DishErrorKind


class DishError(Exception):
    """Raised when a dish draft cannot be turned into a complete Dish.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (missing fields, offending value)
        code: machine-readable error code, defaults to the error kind value
        kind: the DishErrorKind this error reports
    """

    kind: DishErrorKind
    default_message = "Invalid dish"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.kind.value

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "kind": self.kind.value}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(DishError):
    """Raised when one or more required fields are absent at build time.

    The name is kept for compatibility with existing callers even though
    nothing is looked up.
    """

    kind = DishErrorKind.NOT_FOUND
    default_message = "Required field not found"


class InvalidNameError(DishError):
    """Raised when the trimmed name length falls outside the allowed range."""

    kind = DishErrorKind.INVALID_NAME
    default_message = "Invalid dish name"


class InvalidPriceError(DishError):
    """Raised when the price is not strictly between the price bounds."""

    kind = DishErrorKind.INVALID_PRICE
    default_message = "Invalid dish price"


class InvalidNutritionError(DishError):
    """Raised when the calorie ceiling or macro non-negativity is violated."""

    kind = DishErrorKind.INVALID_NUTRITION
    default_message = "Invalid nutritional information"

