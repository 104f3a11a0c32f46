from __future__ import annotations

"""
Variant Report Service.

Single entry point used by the interface layer: runs every engine
operation over a product and packs the figures into a VariantReport.
"""

import logging
from typing import Mapping, Optional

from variantstock.core.services.stock import find_low_stock
from variantstock.core.variants.engine import (
    calculate_nested_variant_quantity,
    get_variant_breakdown,
    has_nested_variants,
    is_legacy_variant_structure,
)
from variantstock.domain.constants import DEFAULT_CRITICAL_RATIO
from variantstock.domain.product_models import ProductEntry, VariantReport

logger = logging.getLogger(__name__)


def build_variant_report(
        product: ProductEntry,
        *,
        include_low_stock: bool = False,
        inventory: Optional[Mapping[str, int]] = None,
        critical_ratio: float = DEFAULT_CRITICAL_RATIO,
) -> VariantReport:
    """
    Compute the quantity report of a product.

    Args:
        product: Parsed product record.
        include_low_stock: Also evaluate minimum-quantity thresholds.
        inventory: Live counts used by the low-stock evaluation.
        critical_ratio: Fraction of the minimum under which an alert is critical.

    Returns:
        VariantReport: Immutable report.
    """
    variants = list(product.variants)
    low_stock = find_low_stock(product, inventory, critical_ratio) if include_low_stock else []

    report = VariantReport(
        product_name=product.name,
        total=calculate_nested_variant_quantity(variants),
        breakdown=get_variant_breakdown(variants),
        nested=has_nested_variants(variants),
        legacy=is_legacy_variant_structure(variants),
        low_stock=low_stock,
    )
    logger.debug(
        f"Report for '{product.name}': total={report.total}, "
        f"entries={len(report.breakdown)}, nested={report.nested}"
    )
    return report
