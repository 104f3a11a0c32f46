from __future__ import annotations

"""
Unit tests for the Product Validation Service.

Verifies:
1. Name, attribute and value rules with their error messages.
2. Cleaning of labels and silent skipping of empty editor rows.
3. Bulk validation aggregation.
4. Standalone variant cleaning.
"""

from variantstock.core.services.validation import (
    clean_variants,
    validate_product,
    validate_products,
)


def test_valid_product_is_cleaned():
    result = validate_product(
        {
            "name": "  Hoodie  ",
            "quantity": 3,
            "variants": [
                {"attribute": " Size ", "values": [" S ", {"value": "M ", "quantity": 2}]},
            ],
        }
    )

    assert result.valid is True
    assert result.errors == []
    assert result.cleaned["name"] == "Hoodie"
    assert result.cleaned["quantity"] == 3
    assert result.cleaned["variants"] == [
        {
            "attribute": "Size",
            "values": [
                {"value": "S", "quantity": 0, "subVariants": []},
                {"value": "M", "quantity": 2, "subVariants": []},
            ],
            "sku": None,
        }
    ]


def test_missing_name():
    result = validate_product({"name": "   "})

    assert result.valid is False
    assert "Product name is required and cannot be empty" in result.errors


def test_name_too_long():
    result = validate_product({"name": "x" * 201})
    assert result.valid is False


def test_attribute_required_when_values_present():
    result = validate_product({"name": "Cap", "variants": [{"attribute": "", "values": ["S"]}]})

    assert result.errors == ["Variant 1: Attribute name is required"]


def test_empty_rows_are_skipped_silently():
    result = validate_product({"name": "Cap", "variants": [{"attribute": "", "values": []}, None]})

    assert result.valid is True
    assert result.cleaned["variants"] == []


def test_empty_value_and_no_values():
    result = validate_product(
        {"name": "Cap", "variants": [{"attribute": "Color", "values": [{"value": "  "}]}]}
    )

    assert result.errors == [
        'Variant "Color": Value 1 cannot be empty',
        'Variant "Color": At least one value is required',
    ]


def test_negative_quantities_are_reported():
    result = validate_product(
        {
            "name": "Cap",
            "quantity": -1,
            "variants": [{"attribute": "Color", "values": [{"value": "Red", "quantity": -2}]}],
        }
    )

    assert result.valid is False
    assert "Quantity must be 0 or greater" in result.errors
    assert 'Variant "Color": Quantity for "Red" must be 0 or greater' in result.errors


def test_non_mapping_product():
    result = validate_product("Cap")
    assert result.valid is False
    assert result.cleaned == {}


def test_bulk_validation_counts_errors():
    bulk = validate_products([{"name": "Ok"}, {"name": ""}, None])

    assert bulk.valid is False
    assert len(bulk.results) == 3
    assert bulk.total_errors == 2
    assert bulk.results[0].valid is True


def test_clean_variants_drops_malformed_entries():
    cleaned = clean_variants(
        [
            {},
            None,
            {"attribute": "Size", "values": []},
            {"attribute": "Color", "values": ["", " Red ", {"value": "Blue", "subVariants": [{"attribute": "Tone"}]}]},
        ]
    )

    assert cleaned == [
        {
            "attribute": "Color",
            "values": [
                {"value": "Red", "quantity": 0, "subVariants": []},
                {"value": "Blue", "quantity": 0, "subVariants": [{"attribute": "Tone"}]},
            ],
            "sku": None,
        }
    ]
    assert clean_variants("nope") == []
