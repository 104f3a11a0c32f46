"""
variantstock

Hierarchical product variant quantities: totals, breakdowns and legacy
structure detection for warehouse stock records.
"""

__version__ = "1.0.0"

from .core.variants import (
    VariantDataError,
    calculate_nested_variant_quantity,
    clone_variants_with_zero_quantity,
    flatten_variant_leaves,
    get_variant_breakdown,
    has_nested_variants,
    is_legacy_variant_structure,
    parse_product,
    parse_variants,
    variants_to_dicts,
)
from .domain.variant_models import BranchValue, LeafValue, Variant

__all__ = [
    "BranchValue",
    "LeafValue",
    "Variant",
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
    "__version__",
]
