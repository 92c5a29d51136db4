"""Domain exceptions."""


class MealLogError(Exception):
    """Base error for meal log operations."""


class InvalidMealTimeError(MealLogError):
    """Raised when a meal time is not in HH:MM form."""


class MealNotFoundError(MealLogError):
    """Raised when a meal id does not exist."""


class InvalidWeightError(MealLogError):
    """Raised when a body weight is not a positive number."""


class UnknownActivityError(MealLogError):
    """Raised when an activity id is not in the dictionary."""


class BarcodeLookupError(MealLogError):
    """Raised when a barcode lookup fails."""


class ProductNotFoundError(BarcodeLookupError):
    """Raised when a barcode lookup yields no product."""
