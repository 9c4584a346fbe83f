"""Reconcile parsed filters against the catalog's filter values."""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from ..models import (
    AppliedFilter,
    CatalogFilter,
    FilterCriterion,
    FilterValueCandidate,
    Locale,
    PriceFilter,
    PriceRange,
)
from ..utils.currency import format_currency

logger = logging.getLogger(__name__)

PRICE_FILTER_ID = "filter.v.price"
PRICE_FALLBACK_LABEL = "Price"

_criterion_adapter = TypeAdapter(FilterCriterion)


def flatten_filter_values(filters: Iterable[CatalogFilter]) -> List[FilterValueCandidate]:
    """Flatten catalog filter groups into a single list of candidate values."""
    return [value for group in filters for value in group.values]


def deserialize_filter_input(raw: Any) -> Optional[FilterCriterion]:
    """Parse a candidate's ``input`` into a criterion, or None if it is malformed."""
    try:
        if isinstance(raw, (str, bytes)):
            return _criterion_adapter.validate_json(raw, strict=True)
        return _criterion_adapter.validate_python(raw, strict=True)
    except ValidationError as e:
        logger.debug(f"Ignoring filter value with unparseable input {raw!r}: {e.error_count()} error(s)")
        return None


def filters_match(candidate: FilterCriterion, criterion: FilterCriterion) -> bool:
    """
    Decide whether a candidate value corresponds to an applied criterion.

    Price is freeform user input, so any price candidate matches any price
    criterion. Every other kind requires structural equality.
    """
    if isinstance(candidate, PriceFilter) and isinstance(criterion, PriceFilter):
        return True
    return candidate == criterion


def price_label(price: PriceRange, locale: Locale) -> str:
    """Label a price filter as ``"{min} - {max}"``, or ``"Price"`` without an upper bound."""
    min_label = format_currency(price.min or 0, locale)
    max_label = format_currency(price.max, locale) if price.max else ""
    if min_label and max_label:
        return f"{min_label} - {max_label}"
    return PRICE_FALLBACK_LABEL


def _find_candidate(
    criterion: FilterCriterion,
    candidates: List[Tuple[FilterValueCandidate, FilterCriterion]],
) -> Optional[FilterValueCandidate]:
    for candidate, candidate_input in candidates:
        if filters_match(candidate_input, criterion):
            return candidate
    return None


def reconcile_applied_filters(
    filters: List[FilterCriterion],
    filter_values: Iterable[FilterValueCandidate],
    locale: Locale,
) -> List[AppliedFilter]:
    """
    Pair each parsed filter with the label of its matching catalog value.

    Filters without a matching value are dropped and logged; candidates whose
    input cannot be parsed never match. The result keeps the order of
    ``filters``.
    """
    candidates = []
    for value in filter_values:
        candidate_input = deserialize_filter_input(value.input)
        if candidate_input is not None:
            candidates.append((value, candidate_input))

    applied_filters: List[AppliedFilter] = []
    for criterion in filters:
        found_value = _find_candidate(criterion, candidates)
        if found_value is None:
            logger.warning(f"Could not find filter value for filter {criterion.model_dump(exclude_none=True)}")
            continue

        if found_value.id == PRICE_FILTER_ID and isinstance(criterion, PriceFilter):
            label = price_label(criterion.price, locale)
        else:
            label = found_value.label

        applied_filters.append(AppliedFilter(filter=criterion, label=label))

    return applied_filters
