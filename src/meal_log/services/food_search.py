"""Fuzzy search over the local food dictionary."""

import re
from dataclasses import dataclass
from difflib import SequenceMatcher

from meal_log.domain.foods import FoodItem

DEFAULT_LIMIT = 10
EXACT_MATCH = 1.0
PREFIX_MATCH = 0.95
SUBSTRING_MATCH = 0.9

_WORD_SPLIT = re.compile(r"[\s()\[\],/-]+")


@dataclass
class FoodSearchService:
    """Search dictionary foods by name and aliases.

    ``threshold`` follows the usual fuzzy-search convention: 0 accepts only
    exact matches and 1 accepts anything. A candidate is kept when its
    similarity reaches ``1 - threshold``.
    """

    foods: list[FoodItem]
    threshold: float = 0.35

    def search(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[FoodItem]:
        """Return the best matching foods, best first."""
        needle = _normalize(query or "")
        if not needle or limit <= 0:
            return []
        min_score = 1 - self.threshold
        scored: list[tuple[float, int, FoodItem]] = []
        for index, food in enumerate(self.foods):
            score = max(
                (_match_score(needle, text) for text in (food.name, *food.aliases)),
                default=0.0,
            )
            if score >= min_score:
                scored.append((score, index, food))
        scored.sort(key=lambda entry: (-entry[0], entry[1]))
        return [food for _, _, food in scored[:limit]]


def _normalize(text: str) -> str:
    return " ".join(text.casefold().split())


def _match_score(needle: str, text: str) -> float:
    candidate = _normalize(text)
    if not candidate:
        return 0.0
    if candidate == needle:
        return EXACT_MATCH
    if candidate.startswith(needle):
        return PREFIX_MATCH
    if needle in candidate:
        return SUBSTRING_MATCH
    ratio = SequenceMatcher(None, needle, candidate).ratio()
    for word in _WORD_SPLIT.split(candidate):
        if word:
            ratio = max(ratio, SequenceMatcher(None, needle, word).ratio())
    return ratio
