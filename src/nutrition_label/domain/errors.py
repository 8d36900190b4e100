"""Errors raised by the label builder."""


class LabelError(Exception):
    """Base class for label builder errors."""


class InvalidServingSize(LabelError, ValueError):
    """Serving quantity is not a positive finite number."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Serving size must be a positive number, got {value!r}")
        self.value = value


class UnknownHouseholdUnit(LabelError, ValueError):
    """Household unit is missing from the conversion table."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unknown household unit: {unit!r}")
        self.unit = unit


class ProviderError(LabelError):
    """The food search provider could not return a page."""
