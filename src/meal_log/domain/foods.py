"""Domain models for the local food dictionary."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FoodItem:
    """A dictionary food with per-serving nutrients."""

    name: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    kcal: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrate: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0
