"""JSON-file food dictionary loader."""

import json
from pathlib import Path

from meal_log.domain.foods import FoodItem
from meal_log.domain.numeric import to_float

_BUNDLED_DICTIONARY = Path(__file__).resolve().parents[1] / "data" / "foods.json"


def load_food_dictionary(path: Path | None = None) -> list[FoodItem]:
    """Load food items from a JSON list, defaulting to the bundled dictionary."""
    source = Path(path) if path is not None else _BUNDLED_DICTIONARY
    raw = source.read_text(encoding="utf-8")
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("Food dictionary must be a JSON list")
    return [_parse_item(entry) for entry in payload if isinstance(entry, dict)]


def _parse_item(entry: dict[str, object]) -> FoodItem:
    aliases = entry.get("aliases") or []
    return FoodItem(
        name=str(entry.get("name") or ""),
        aliases=tuple(str(alias) for alias in aliases if alias),
        kcal=to_float(entry.get("kcal")),
        protein=to_float(entry.get("protein")),
        fat=to_float(entry.get("fat")),
        carbohydrate=to_float(entry.get("carbohydrate")),
        fiber=to_float(entry.get("fiber")),
        sodium=to_float(entry.get("sodium")),
    )
