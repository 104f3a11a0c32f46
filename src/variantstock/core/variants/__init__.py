from __future__ import annotations

from .engine import (
    calculate_nested_variant_quantity,
    get_variant_breakdown,
    has_nested_variants,
    is_legacy_variant_structure,
)
from .flatten import flatten_variant_leaves
from .parser import (
    VariantDataError,
    clone_variants_with_zero_quantity,
    parse_product,
    parse_variants,
    variants_to_dicts,
)

__all__ = [
    "VariantDataError",
    "calculate_nested_variant_quantity",
    "clone_variants_with_zero_quantity",
    "flatten_variant_leaves",
    "get_variant_breakdown",
    "has_nested_variants",
    "is_legacy_variant_structure",
    "parse_product",
    "parse_variants",
    "variants_to_dicts",
]
