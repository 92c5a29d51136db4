"""Barcode lookup service integrating OpenFoodFacts."""

import logging
import re
from dataclasses import dataclass

import httpx

from meal_log.adapters.openfoodfacts_client import OpenFoodFactsClient
from meal_log.domain.errors import BarcodeLookupError, ProductNotFoundError
from meal_log.domain.nutrition import (
    SODIUM_TO_SALT,
    BarcodeProduct,
    NutrientProfile,
    Portion,
    kj_to_kcal,
    scale_per_100g,
)
from meal_log.domain.numeric import round1, to_optional_float

DEFAULT_PRODUCT_NAME = "Barcode product"
DEFAULT_NET_G = 100.0

_SERVING_PATTERN = re.compile(r"([\d.,]+)\s*(g|ml)\b", re.IGNORECASE)

_logger = logging.getLogger(__name__)


@dataclass
class BarcodeService:
    """Resolve barcodes to per-100g nutrients."""

    client: OpenFoodFactsClient

    async def lookup(self, barcode: str) -> BarcodeProduct:
        """Fetch a product and extract its per-100g nutrients."""
        code = barcode.strip()
        try:
            payload = await self.client.get_product(code)
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "OpenFoodFacts lookup failed: barcode=%s status=%s",
                code,
                exc.response.status_code,
            )
            raise ProductNotFoundError(
                f"OpenFoodFacts HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            _logger.warning("OpenFoodFacts unreachable: barcode=%s: %s", code, exc)
            raise BarcodeLookupError(str(exc)) from exc
        except ValueError as exc:
            _logger.warning("OpenFoodFacts bad JSON: barcode=%s: %s", code, exc)
            raise ProductNotFoundError(f"Unreadable response for {code}") from exc

        product = payload.get("product") if isinstance(payload, dict) else None
        if not isinstance(product, dict):
            _logger.info("OpenFoodFacts has no product: barcode=%s", code)
            raise ProductNotFoundError(f"Product not found: {code}")
        return extract_product(code, product)

    def portion(self, product: BarcodeProduct, net_g: object = None) -> Portion:
        """Scale a product to NET grams, defaulting to its serving size."""
        net = to_optional_float(net_g)
        if net is None:
            net = product.serving_g or DEFAULT_NET_G
        return Portion(
            net_g=net,
            nutrients=scale_per_100g(product.per_100g, net).rounded(),
        )


def extract_product(barcode: str, product: dict[str, object]) -> BarcodeProduct:
    """Build a product from an OpenFoodFacts ``product`` object."""
    nutriments = product.get("nutriments")
    if not isinstance(nutriments, dict):
        nutriments = {}

    kcal = _first_number(
        to_optional_float(nutriments.get("energy-kcal_100g")),
        kj_to_kcal(nutriments.get("energy_100g")),
    )
    sodium = to_optional_float(nutriments.get("sodium_100g"))
    salt = _first_number(
        to_optional_float(nutriments.get("salt_100g")),
        sodium * SODIUM_TO_SALT if sodium is not None else None,
    )
    per_100g = NutrientProfile(
        kcal=round1(kcal),
        protein=round1(_nutriment(nutriments, "proteins")),
        fat=round1(_nutriment(nutriments, "fat")),
        carbohydrate=round1(_nutriment(nutriments, "carbohydrates")),
        fiber=round1(_nutriment(nutriments, "fiber")),
        sodium=round1(salt),
    )
    return BarcodeProduct(
        barcode=barcode,
        name=str(product.get("product_name") or DEFAULT_PRODUCT_NAME),
        per_100g=per_100g,
        serving_g=serving_grams(product),
    )


def serving_grams(product: dict[str, object]) -> float | None:
    """Return the serving size in grams (or ml) when the product states one."""
    quantity = to_optional_float(product.get("serving_quantity"))
    if quantity is not None and quantity > 0:
        return quantity
    match = _SERVING_PATTERN.search(str(product.get("serving_size") or ""))
    if match:
        value = to_optional_float(match.group(1))
        if value is not None and value > 0:
            return value
    return None


def _nutriment(nutriments: dict[str, object], key: str) -> float:
    return _first_number(
        to_optional_float(nutriments.get(f"{key}_100g")),
        to_optional_float(nutriments.get(key)),
    )


def _first_number(*values: float | None) -> float:
    for value in values:
        if value is not None:
            return value
    return 0.0
