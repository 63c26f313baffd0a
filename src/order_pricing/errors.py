"""Structured error taxonomy for order pricing failures."""

from __future__ import annotations

from typing import Any


class OrderPricingError(Exception):
    """Base class for all order_pricing domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class MalformedItemError(OrderPricingError, TypeError):
    """Raised when a pricing operand is not a usable finite number.

    Subclasses ``TypeError`` so callers that only expect the builtin failure
    for a bad arithmetic operand keep working.
    """

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(
            "MALFORMED_ITEM",
            "COLLABORATOR",
            f"{field} must be a finite number, got {type(value).__name__} {value!r}",
        )


class ConfigError(OrderPricingError, ValueError):
    def __init__(self, explanation: str):
        super().__init__("CONFIG_INVALID", "CONFIG", explanation)
