"""Query-string to product filter parsing.

Filter parameters are keyed ``<prefix><type>[.<subkey>[.<subkey2>]]``, e.g.::

    filter.available=true
    filter.price.min=10
    filter.v.Color=Red
    filter.p_m.custom.material=cotton
    filter.tag=Sale

Each recognized type token maps to exactly one ``FilterCriterion`` kind.
Unknown tokens are ignored. Malformed entries (non-numeric price bounds,
unexpected sub-keys) are skipped with a warning, so parsing never fails.
"""

import logging
import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from urllib.parse import unquote

from ..models import (
    FilterCriterion,
    AvailableFilter,
    PriceFilter,
    PriceRange,
    VariantOptionFilter,
    VariantOption,
    ProductMetafieldFilter,
    VariantMetafieldFilter,
    MetafieldValue,
    TagFilter,
    ProductVendorFilter,
    ProductTypeFilter,
)

logger = logging.getLogger(__name__)

FILTER_URL_PREFIX = "filter."

PRICE_BOUNDS = ("min", "max")


def _available(sub_keys: List[str], value: str) -> FilterCriterion:
    return AvailableFilter(available=value in ("true", "1"))


def _variant_option(sub_keys: List[str], value: str) -> FilterCriterion:
    return VariantOptionFilter(
        variantOption=VariantOption(name=unquote(sub_keys[0]), value=unquote(value))
    )


def _product_metafield(sub_keys: List[str], value: str) -> FilterCriterion:
    namespace, key = sub_keys
    return ProductMetafieldFilter(
        productMetafield=MetafieldValue(namespace=namespace, key=key, value=value)
    )


def _variant_metafield(sub_keys: List[str], value: str) -> FilterCriterion:
    namespace, key = sub_keys
    return VariantMetafieldFilter(
        variantMetafield=MetafieldValue(namespace=namespace, key=key, value=value)
    )


def _tag(sub_keys: List[str], value: str) -> FilterCriterion:
    return TagFilter(tag=value)


def _vendor(sub_keys: List[str], value: str) -> FilterCriterion:
    return ProductVendorFilter(productVendor=value)


def _product_type(sub_keys: List[str], value: str) -> FilterCriterion:
    return ProductTypeFilter(productType=value)


# type token -> (number of sub-keys, builder)
_BUILDERS: Dict[str, Tuple[int, Callable[[List[str], str], FilterCriterion]]] = {
    "available": (0, _available),
    "v": (1, _variant_option),
    "p_m": (2, _product_metafield),
    "v_m": (2, _variant_metafield),
    "tag": (0, _tag),
    "vendor": (0, _vendor),
    "type": (0, _product_type),
}


def _parse_price_bound(sub_keys: List[str], value: str) -> Optional[Tuple[str, float]]:
    """Return ``(bound, amount)`` for a price entry, or None if malformed."""
    if len(sub_keys) != 1 or sub_keys[0] not in PRICE_BOUNDS:
        logger.warning(f"Skipping price filter with unexpected key: price.{'.'.join(sub_keys)}")
        return None
    try:
        amount = float(value)
    except ValueError:
        logger.warning(f"Skipping non-numeric price.{sub_keys[0]} value: {value!r}")
        return None
    if not math.isfinite(amount):
        logger.warning(f"Skipping non-finite price.{sub_keys[0]} value: {value!r}")
        return None
    return sub_keys[0], amount


def parse_product_filters(
    entries: Iterable[Tuple[str, str]],
    prefix: str = FILTER_URL_PREFIX,
) -> List[FilterCriterion]:
    """
    Convert query-string entries into a list of filter criteria.

    Entries are ``(key, value)`` pairs in query-string order; keys that do not
    start with ``prefix`` are ignored. Repeated price bounds merge into a single
    price criterion held at the position of the first one.
    """
    filters: List[FilterCriterion] = []
    price_filter: Optional[PriceFilter] = None

    for key, value in entries:
        if not key.startswith(prefix):
            continue

        filter_type, *sub_keys = key[len(prefix):].split(".")

        if filter_type == "price":
            bound = _parse_price_bound(sub_keys, value)
            if bound is None:
                continue
            name, amount = bound
            if price_filter is None:
                price_filter = PriceFilter(price=PriceRange(**{name: amount}))
                filters.append(price_filter)
            else:
                setattr(price_filter.price, name, amount)
            continue

        if filter_type not in _BUILDERS:
            logger.debug(f"Ignoring unknown filter type: {filter_type}")
            continue

        expected, builder = _BUILDERS[filter_type]
        if len(sub_keys) != expected:
            logger.warning(f"Skipping filter {key}: expected {expected} sub-key(s), got {len(sub_keys)}")
            continue

        filters.append(builder(sub_keys, value))

    return filters
