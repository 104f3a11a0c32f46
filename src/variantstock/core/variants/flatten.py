from __future__ import annotations

"""
Variant Leaf Flattener.

Lists every leaf of a variant tree (zero-stock leaves included) with its
full "Attribute: Value → Attribute: Value" path. Feeds product list
exports, where each combination must appear even when out of stock.
"""

from typing import Any, List, Mapping, Optional

from variantstock.core.variants.accessors import (
    attribute_of,
    children_of,
    is_sequence,
    label_of,
    minimum_quantity_of,
    quantity_of,
    sku_of,
    values_of,
)
from variantstock.domain.constants import (
    DEFAULT_ATTRIBUTE_LABEL,
    DEFAULT_VALUE_LABEL,
    FIRST_LEVEL_SEPARATOR,
    KEY_SKU,
    LABEL_SEPARATOR,
)
from variantstock.domain.product_models import VariantLeaf

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten_variant_leaves(nodes: Any) -> List[VariantLeaf]:
    """
    Flatten a variant tree into its leaves, in traversal order.

    Args:
        nodes: Sequence of variants (typed or raw).

    Returns:
        List[VariantLeaf]: One entry per leaf; empty for malformed input.
    """
    if not is_sequence(nodes):
        return []

    leaves: List[VariantLeaf] = []
    for node in nodes:
        _walk(node, "", leaves)
    return leaves


def leaf_path(parent_path: str, attribute: str, label: str) -> str:
    """Compose the export path of a value below `parent_path`."""
    segment = f"{attribute or DEFAULT_ATTRIBUTE_LABEL}{LABEL_SEPARATOR}{label or DEFAULT_VALUE_LABEL}"
    return f"{parent_path}{FIRST_LEVEL_SEPARATOR}{segment}" if parent_path else segment

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _walk(node: Any, parent_path: str, leaves: List[VariantLeaf]) -> None:
    attribute = attribute_of(node)
    for value in values_of(node):
        current_path = leaf_path(parent_path, attribute, label_of(value))
        children = children_of(value)

        if children:
            for child in children:
                _walk(child, current_path, leaves)
            continue

        leaves.append(
            VariantLeaf(
                path=current_path,
                quantity=quantity_of(value),
                sku=_value_sku(value) or sku_of(node),
                minimum_quantity=minimum_quantity_of(value),
            )
        )


def _value_sku(value: Any) -> Optional[str]:
    if isinstance(value, Mapping) and value.get(KEY_SKU):
        return str(value.get(KEY_SKU))
    return None
