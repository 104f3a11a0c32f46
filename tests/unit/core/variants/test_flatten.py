from __future__ import annotations

"""
Unit tests for the Variant Leaf Flattener and shape accessors.

Verifies:
1. Every leaf is listed (zero stock included) with the export path format.
2. Missing labels fall back to placeholders.
3. Quantity coercion rules shared by all services.
"""

import pytest

from variantstock.core.variants.accessors import coerce_quantity, is_numeric_quantity
from variantstock.core.variants.flatten import flatten_variant_leaves, leaf_path
from variantstock.domain.product_models import VariantLeaf


def test_flatten_lists_all_leaves(three_level_variants):
    leaves = flatten_variant_leaves(three_level_variants)

    assert [leaf.path for leaf in leaves] == [
        "Size: M → Color: Red → Pattern: Striped",
        "Size: M → Color: Red → Pattern: Plain",
        "Size: M → Color: Green → Pattern: Dotted",
        "Size: XL",
    ]
    assert [leaf.quantity for leaf in leaves] == [2, 0, 7, 1]


def test_flatten_carries_sku_and_minimum():
    raw = [
        {
            "attribute": "Size",
            "sku": "SZ",
            "values": [
                {"value": "S", "quantity": 1, "minimumQuantity": 4},
                {"value": "M", "quantity": 2, "sku": "SZ-M"},
            ],
        }
    ]
    assert flatten_variant_leaves(raw) == [
        VariantLeaf(path="Size: S", quantity=1, sku="SZ", minimum_quantity=4),
        VariantLeaf(path="Size: M", quantity=2, sku="SZ-M", minimum_quantity=None),
    ]


def test_flatten_placeholders_for_missing_labels():
    raw = [{"values": [{"quantity": 3}]}]
    leaves = flatten_variant_leaves(raw)

    assert leaves[0].path == "Variant: N/A"
    assert leaves[0].quantity == 3


@pytest.mark.parametrize("raw", [None, {}, "x"])
def test_flatten_degenerate_input(raw):
    assert flatten_variant_leaves(raw) == []


def test_leaf_path_composition():
    assert leaf_path("", "Size", "S") == "Size: S"
    assert leaf_path("Size: S", "Color", "Red") == "Size: S → Color: Red"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, 5),
        (-3, -3),
        (2.7, 2),
        ("12", 12),
        (" 4 ", 4),
        ("1.5", 1),
        ("abc", 0),
        (None, 0),
        (True, 0),
        (float("inf"), 0),
        ([1], 0),
    ],
)
def test_coerce_quantity(raw, expected):
    assert coerce_quantity(raw) == expected


def test_is_numeric_quantity():
    assert is_numeric_quantity(3)
    assert is_numeric_quantity(0.5)
    assert not is_numeric_quantity(True)
    assert not is_numeric_quantity("3")
    assert not is_numeric_quantity(float("nan"))
