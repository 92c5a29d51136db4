"""Nutrient profiles and per-100g scaling."""

from dataclasses import dataclass

from meal_log.domain.numeric import round1, to_float, to_optional_float

KJ_PER_KCAL = 4.184
SODIUM_TO_SALT = 2.54


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient values for a fixed amount of food (often 100 g)."""

    kcal: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrate: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0

    def rounded(self) -> "NutrientProfile":
        """Return a copy with every value rounded to one decimal."""
        return NutrientProfile(
            kcal=round1(self.kcal),
            protein=round1(self.protein),
            fat=round1(self.fat),
            carbohydrate=round1(self.carbohydrate),
            fiber=round1(self.fiber),
            sodium=round1(self.sodium),
        )


@dataclass(frozen=True)
class BarcodeProduct:
    """A product resolved from a barcode with per-100g nutrients."""

    barcode: str
    name: str
    per_100g: NutrientProfile
    serving_g: float | None = None


def kj_to_kcal(kj: object) -> float | None:
    """Convert kilojoules to kilocalories, or None for non-numeric input."""
    value = to_optional_float(kj)
    if value is None:
        return None
    return value / KJ_PER_KCAL


def scale_per_100g(profile: NutrientProfile, grams: object) -> NutrientProfile:
    """Scale a per-100g profile to the NET grams actually eaten."""
    net = to_float(grams)
    ratio = net / 100 if net > 0 else 0.0
    return NutrientProfile(
        kcal=profile.kcal * ratio,
        protein=profile.protein * ratio,
        fat=profile.fat * ratio,
        carbohydrate=profile.carbohydrate * ratio,
        fiber=profile.fiber * ratio,
        sodium=profile.sodium * ratio,
    )


@dataclass(frozen=True)
class Portion:
    """Nutrients for the NET grams of a per-100g product."""

    net_g: float
    nutrients: NutrientProfile
