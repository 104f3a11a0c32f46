from __future__ import annotations

"""
Stock Level Service.

Derives product stock figures from variant trees and raises low-stock
alerts at product level and for every leaf variant carrying its own
minimum quantity. Live inventory counts, when supplied, take precedence
over the quantities recorded in the tree.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from variantstock.core.variants.accessors import (
    attribute_of,
    children_of,
    coerce_quantity,
    label_of,
    minimum_quantity_of,
    quantity_of,
    values_of,
)
from variantstock.core.variants.engine import calculate_nested_variant_quantity
from variantstock.core.variants.flatten import leaf_path
from variantstock.domain.constants import DEFAULT_CRITICAL_RATIO
from variantstock.domain.product_models import LowStockItem, ProductEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def product_total_quantity(product: ProductEntry) -> int:
    """
    Resolve the stock of a product.

    The variant total wins when it is positive; otherwise the product-level
    quantity is used (products without variants, or variants with no stock
    recorded yet).
    """
    if product.variants:
        variant_total = calculate_nested_variant_quantity(list(product.variants))
        if variant_total > 0:
            return variant_total
    return product.quantity


def inventory_key(product_id: str, attribute: str, value: str) -> str:
    """Key under which live inventory is tracked for one leaf variant."""
    return f"{product_id}:{attribute}:{value}"


def find_low_stock(
        product: ProductEntry,
        inventory: Optional[Mapping[str, int]] = None,
        critical_ratio: float = DEFAULT_CRITICAL_RATIO,
) -> List[LowStockItem]:
    """
    Collect the low-stock alerts of a single product.

    Args:
        product: Product whose variants are inspected.
        inventory: Live counts keyed by product id and by `inventory_key`.
        critical_ratio: Fraction of the minimum under which an alert is critical.

    Returns:
        List[LowStockItem]: Product-level alert first (if any), then leaf alerts.
    """
    inventory = inventory or {}
    product_id = product.product_id or product.name
    alerts: List[LowStockItem] = []

    if product.minimum_quantity > 0:
        stock = coerce_quantity(inventory.get(product_id))
        if stock == 0 and product.variants:
            stock = calculate_nested_variant_quantity(list(product.variants))

        if stock <= product.minimum_quantity:
            alerts.append(
                LowStockItem(
                    alert_id=product_id,
                    product_id=product_id,
                    product_name=product.name,
                    sku=product.sku,
                    variant_path=None,
                    current_stock=stock,
                    minimum_quantity=product.minimum_quantity,
                    is_critical=_is_critical(stock, product.minimum_quantity, critical_ratio),
                )
            )

    for variant in product.variants:
        _check_values(product, product_id, values_of(variant), "", attribute_of(variant),
                      inventory, critical_ratio, alerts)

    if alerts:
        logger.debug(f"Product '{product.name}': {len(alerts)} low-stock alert(s).")
    return alerts


def scan_low_stock(
        products: Iterable[ProductEntry],
        inventory: Optional[Mapping[str, int]] = None,
        critical_ratio: float = DEFAULT_CRITICAL_RATIO,
) -> List[LowStockItem]:
    """Collect alerts for many products, critical alerts first, then by ascending stock."""
    alerts: List[LowStockItem] = []
    for product in products:
        alerts.extend(find_low_stock(product, inventory, critical_ratio))

    # Critical first, then lowest stock; ties keep traversal order
    alerts.sort(key=lambda a: (not a.is_critical, a.current_stock))
    logger.info(f"Low-stock scan complete: {len(alerts)} alert(s).")
    return alerts

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_values(
        product: ProductEntry,
        product_id: str,
        values: Any,
        parent_path: str,
        attribute: str,
        inventory: Mapping[str, int],
        critical_ratio: float,
        alerts: List[LowStockItem],
) -> None:
    for value in values:
        label = label_of(value)
        current_path = leaf_path(parent_path, attribute, label)
        children = children_of(value)

        if children:
            for child in children:
                _check_values(product, product_id, values_of(child), current_path,
                              attribute_of(child), inventory, critical_ratio, alerts)
            continue

        minimum = minimum_quantity_of(value) or 0
        if minimum <= 0:
            continue

        stock = coerce_quantity(inventory.get(inventory_key(product_id, attribute, label)))
        if stock == 0:
            stock = quantity_of(value)

        if stock <= minimum:
            alerts.append(
                LowStockItem(
                    alert_id=f"{product_id}-{current_path}",
                    product_id=product_id,
                    product_name=product.name,
                    sku=product.sku,
                    variant_path=current_path,
                    current_stock=stock,
                    minimum_quantity=minimum,
                    is_critical=_is_critical(stock, minimum, critical_ratio),
                )
            )


def _is_critical(stock: int, minimum: int, critical_ratio: float) -> bool:
    return stock == 0 or stock < minimum * critical_ratio
