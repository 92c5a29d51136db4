"""Settings services backed by the key-value table."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_log.domain.activities import DEFAULT_WEIGHT_KG
from meal_log.domain.errors import InvalidWeightError
from meal_log.domain.numeric import round_half_up, to_optional_float

WEIGHT_KEY = "weightKg"

_logger = logging.getLogger(__name__)


class SettingsRepository(Protocol):
    """Persistence interface for key-value settings."""

    def get_setting(self, key: str) -> str | None:
        """Return the stored value for a key, if any."""

    def set_setting(self, key: str, value: str) -> None:
        """Insert or update the value for a key."""


@dataclass
class BodyWeightService:
    """Service for the user's body weight."""

    repository: SettingsRepository
    default_weight_kg: float = DEFAULT_WEIGHT_KG

    def get_weight_kg(self) -> float:
        """Return the stored weight or the default when unset or unusable."""
        weight = to_optional_float(self.repository.get_setting(WEIGHT_KEY))
        if weight is None or weight <= 0:
            return self.default_weight_kg
        return weight

    def set_weight_kg(self, weight_kg: object) -> float:
        """Persist a positive weight rounded to whole kilograms."""
        weight = to_optional_float(weight_kg)
        if weight is None or weight <= 0:
            raise InvalidWeightError(f"Weight must be a positive number: {weight_kg!r}")
        stored = round_half_up(weight)
        self.repository.set_setting(WEIGHT_KEY, str(stored))
        _logger.info("Body weight updated: %s kg", stored)
        return float(stored)
