from __future__ import annotations

"""
Product Domain Data Models.

Defines the product-level records and the derived result objects exchanged
between the variant services and the interface layer (CLI/exports).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from variantstock.domain.variant_models import Variant

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ProductEntry:
    """
    Product record as handled by check-in and reporting flows.

    Attributes:
        name: Display name of the product.
        quantity: Product-level quantity (used when no variant carries stock).
        variants: Parsed variant tree.
        product_id: Identifier in the external store, if known.
        sku: Product-level SKU.
        minimum_quantity: Product-level low-stock threshold.
        value: Monetary value assigned to the product.
    """
    name: str
    quantity: int = 0
    variants: Tuple[Variant, ...] = ()
    product_id: Optional[str] = None
    sku: Optional[str] = None
    minimum_quantity: int = 0
    value: Optional[float] = None


@dataclass(frozen=True)
class VariantLeaf:
    """One flattened leaf of a variant tree, as listed in exports."""
    path: str
    quantity: int
    sku: Optional[str] = None
    minimum_quantity: Optional[int] = None


@dataclass(frozen=True)
class LowStockItem:
    """
    Low-stock alert for a product or one of its leaf variants.

    Attributes:
        alert_id: Stable identifier ("<product>" or "<product>-<path>").
        product_id: Owning product identifier.
        product_name: Owning product name.
        sku: Product SKU.
        variant_path: Leaf path, or None for product-level alerts.
        current_stock: Stock figure the alert was computed from.
        minimum_quantity: Threshold that was crossed.
        is_critical: Stock is empty or well below the threshold.
    """
    alert_id: str
    product_id: str
    product_name: str
    sku: Optional[str]
    variant_path: Optional[str]
    current_stock: int
    minimum_quantity: int
    is_critical: bool


# -----------------------------------------------------------------------------
# VALIDATION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single raw product record."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    cleaned: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BulkValidationResult:
    """Outcome of validating a batch of raw product records (bulk import)."""
    valid: bool
    results: List[ValidationResult] = field(default_factory=list)
    total_errors: int = 0


# -----------------------------------------------------------------------------
# REPORTING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class VariantReport:
    """
    Derived quantity figures of one product, as consumed by interfaces.

    Attributes:
        product_name: Product the figures belong to.
        total: Sum of all leaf quantities.
        breakdown: Ordered path -> quantity view (stocked leaves only).
        nested: Some top-level value branches into sub-variants.
        legacy: Non-empty tree with no branching at all.
        low_stock: Alerts raised for the product, if requested.
    """
    product_name: str
    total: int
    breakdown: Dict[str, int] = field(default_factory=dict)
    nested: bool = False
    legacy: bool = False
    low_stock: List[LowStockItem] = field(default_factory=list)
