import logging

import pytest

from collection_filters.filters import (
    deserialize_filter_input,
    filters_match,
    flatten_filter_values,
    parse_product_filters,
    price_label,
    reconcile_applied_filters,
)
from collection_filters.models import (
    AvailableFilter,
    CatalogFilter,
    FilterValueCandidate,
    MetafieldValue,
    PriceFilter,
    PriceRange,
    ProductMetafieldFilter,
    TagFilter,
    VariantOption,
    VariantOptionFilter,
)
from tests.helpers import candidate


PRICE_CANDIDATE = candidate("filter.v.price", "Price", {"price": {"min": 0, "max": 250}})


# ----------- Matching ------------

def test_variant_option_round_trip_uses_candidate_label(locale):
    filters = parse_product_filters([("filter.v.Color", "Red")])
    values = [
        candidate("filter.v.option.color.blue", "Blue", {"variantOption": {"name": "Color", "value": "Blue"}}),
        candidate("filter.v.option.color.red", "Red (12)", {"variantOption": {"name": "Color", "value": "Red"}}),
    ]

    applied = reconcile_applied_filters(filters, values, locale)

    assert len(applied) == 1
    assert applied[0].filter == VariantOptionFilter(variantOption=VariantOption(name="Color", value="Red"))
    assert applied[0].label == "Red (12)"


def test_equality_ignores_field_order(locale):
    filters = [
        ProductMetafieldFilter(
            productMetafield=MetafieldValue(namespace="custom", key="material", value="cotton")
        )
    ]
    values = [
        FilterValueCandidate(
            id="filter.p.m.custom.material.cotton",
            label="Cotton",
            input='{"productMetafield":{"value":"cotton","key":"material","namespace":"custom"}}',
        )
    ]

    assert [a.label for a in reconcile_applied_filters(filters, values, locale)] == ["Cotton"]


def test_values_must_match_exactly(locale):
    filters = [TagFilter(tag="sale")]
    values = [candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"})]

    assert reconcile_applied_filters(filters, values, locale) == []


def test_different_kinds_with_same_value_do_not_match():
    assert not filters_match(TagFilter(tag="Acme"), deserialize_filter_input('{"productVendor": "Acme"}'))


def test_boolean_filters_match():
    assert filters_match(deserialize_filter_input('{"available": true}'), AvailableFilter(available=True))
    assert not filters_match(deserialize_filter_input('{"available": false}'), AvailableFilter(available=True))


def test_first_matching_candidate_wins(locale):
    values = [
        candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"}),
        candidate("filter.p.tag.Sale.dup", "Sale (duplicate)", {"tag": "Sale"}),
    ]

    applied = reconcile_applied_filters([TagFilter(tag="Sale")], values, locale)

    assert [a.label for a in applied] == ["On Sale"]


# ----------- Price ------------

def test_price_matches_any_price_candidate_regardless_of_bounds(locale):
    filters = [PriceFilter(price=PriceRange(min=9999, max=100000))]

    applied = reconcile_applied_filters(filters, [PRICE_CANDIDATE], locale)

    assert len(applied) == 1
    assert applied[0].filter == filters[0]


def test_price_label_with_both_bounds(locale):
    filters = parse_product_filters([("filter.price.min", "10"), ("filter.price.max", "50")])

    applied = reconcile_applied_filters(filters, [PRICE_CANDIDATE], locale)

    assert applied[0].label == "$10.00 - $50.00"


def test_price_label_without_max_falls_back(locale):
    filters = parse_product_filters([("filter.price.min", "20")])

    applied = reconcile_applied_filters(filters, [PRICE_CANDIDATE], locale)

    assert applied[0].label == "Price"


def test_price_label_defaults_min_to_zero(locale):
    assert price_label(PriceRange(max=50), locale) == "$0.00 - $50.00"


def test_price_label_treats_zero_max_as_absent(locale):
    assert price_label(PriceRange(min=10, max=0), locale) == "Price"


def test_price_label_uses_locale_currency(fr_ca_locale):
    label = price_label(PriceRange(min=10, max=50), fr_ca_locale)

    assert "10,00" in label
    assert "50,00" in label
    assert "$" in label


def test_price_candidate_without_price_id_keeps_its_label(locale):
    values = [candidate("filter.v.price.custom", "Under $50", {"price": {"max": 50}})]
    filters = [PriceFilter(price=PriceRange(min=1, max=20))]

    assert reconcile_applied_filters(filters, values, locale)[0].label == "Under $50"


def test_price_does_not_match_without_price_candidate(locale):
    values = [candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"})]

    assert reconcile_applied_filters([PriceFilter(price=PriceRange(min=1))], values, locale) == []


# ----------- Dropping unmatched filters ------------

def test_unmatched_filters_are_dropped(locale, caplog):
    filters = [
        TagFilter(tag="Sale"),
        TagFilter(tag="Clearance"),
        VariantOptionFilter(variantOption=VariantOption(name="Size", value="XL")),
        AvailableFilter(available=True),
    ]
    values = [
        candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"}),
        candidate("filter.v.availability.1", "In stock", {"available": True}),
    ]

    with caplog.at_level(logging.WARNING):
        applied = reconcile_applied_filters(filters, values, locale)

    assert [a.label for a in applied] == ["On Sale", "In stock"]
    assert len(filters) - len(applied) == 2
    assert "Clearance" in caplog.text


def test_output_keeps_criteria_order(locale):
    filters = [AvailableFilter(available=True), TagFilter(tag="Sale")]
    values = [
        candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"}),
        candidate("filter.v.availability.1", "In stock", {"available": True}),
    ]

    applied = reconcile_applied_filters(filters, values, locale)

    assert [a.label for a in applied] == ["In stock", "On Sale"]


def test_no_filters_no_applied_filters(locale):
    assert reconcile_applied_filters([], [PRICE_CANDIDATE], locale) == []


# ----------- Malformed candidates ------------

def test_malformed_candidate_input_never_matches(locale):
    values = [
        FilterValueCandidate(id="broken", label="Broken", input="{not json"),
        FilterValueCandidate(id="extra", label="Extra", input='{"tag": "Sale", "vendor": "Acme"}'),
        FilterValueCandidate(id="empty", label="Empty", input="{}"),
        FilterValueCandidate(id="null", label="Null", input=None),
        candidate("filter.p.tag.Sale", "On Sale", {"tag": "Sale"}),
    ]

    applied = reconcile_applied_filters([TagFilter(tag="Sale")], values, locale)

    assert [a.label for a in applied] == ["On Sale"]


def test_deserialize_filter_input_accepts_objects():
    assert deserialize_filter_input({"tag": "Sale"}) == TagFilter(tag="Sale")


def test_deserialize_filter_input_rejects_unknown_kinds():
    assert deserialize_filter_input('{"collection": "shirts"}') is None


def test_flatten_filter_values():
    groups = [
        CatalogFilter(id="filter.p.tag", label="Tag", values=[
            candidate("filter.p.tag.a", "A", {"tag": "A"}),
            candidate("filter.p.tag.b", "B", {"tag": "B"}),
        ]),
        CatalogFilter(id="filter.v.price", label="Price", type="PRICE_RANGE", values=[PRICE_CANDIDATE]),
        CatalogFilter(id="filter.p.vendor", label="Vendor"),
    ]

    assert [v.id for v in flatten_filter_values(groups)] == ["filter.p.tag.a", "filter.p.tag.b", "filter.v.price"]


# ----------- Candidate values are not coerced ------------

@pytest.mark.parametrize("raw", ['{"available": "yes"}', '{"available": "true"}', '{"available": 1}'])
def test_loosely_typed_candidate_values_do_not_match(locale, raw):
    values = [FilterValueCandidate(id="filter.v.availability.1", label="In stock", input=raw)]

    assert reconcile_applied_filters([AvailableFilter(available=True)], values, locale) == []


def test_loosely_typed_object_input_does_not_match():
    assert deserialize_filter_input({"tag": 5}) is None
    assert deserialize_filter_input({"available": "true"}) is None


def test_integer_price_bounds_are_accepted():
    assert deserialize_filter_input('{"price": {"min": 0, "max": 250}}') == PriceFilter(
        price=PriceRange(min=0.0, max=250.0)
    )


# ----------- Serialization ------------

def test_price_filter_omits_unset_bounds():
    assert PriceFilter(price=PriceRange(min=20)).model_dump() == {"price": {"min": 20.0}}
    assert PriceFilter(price=PriceRange(min=10, max=50)).model_dump() == {"price": {"min": 10.0, "max": 50.0}}
