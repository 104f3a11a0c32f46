from __future__ import annotations

"""
Variant Tree Engine.

Read-only algorithms over hierarchical product variants: structure
classification (legacy vs nested), total quantity aggregation and the
flattened breakdown used for display. Every function accepts typed
`Variant` sequences or raw stored records and never raises on malformed
input; degenerate input yields 0, False or an empty mapping.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from variantstock.core.variants.accessors import (
    attribute_of,
    children_of,
    is_sequence,
    label_of,
    quantity_of,
    values_of,
)
from variantstock.domain.constants import (
    DEEP_LEVEL_SEPARATOR,
    FIRST_LEVEL_SEPARATOR,
    LABEL_SEPARATOR,
    VALUE_SEPARATOR,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# STRUCTURE CLASSIFICATION
# -----------------------------------------------------------------------------

def has_nested_variants(nodes: Any) -> bool:
    """
    Check whether any top-level variant value branches into sub-variants.

    Only the immediate values of each top-level node are inspected: legacy
    records never carry children, so one level is enough to tell them apart.

    Args:
        nodes: Sequence of variants (typed or raw). Anything else reads as empty.

    Returns:
        bool: True if at least one value has a non-empty children sequence.
    """
    if not is_sequence(nodes):
        return False

    return any(
        len(children_of(value)) > 0
        for node in nodes
        for value in values_of(node)
    )


def is_legacy_variant_structure(nodes: Any) -> bool:
    """
    Check whether the variants use the flat pre-nesting structure.

    Empty or absent data is neither legacy nor nested.
    """
    if not is_sequence(nodes) or len(nodes) == 0:
        return False
    return not has_nested_variants(nodes)

# -----------------------------------------------------------------------------
# AGGREGATION
# -----------------------------------------------------------------------------

def calculate_nested_variant_quantity(nodes: Any) -> int:
    """
    Sum the quantities of every leaf value in the tree.

    Branch values contribute only through their descendants; a quantity
    written on a branch is ignored.

    Args:
        nodes: Sequence of variants (typed or raw).

    Returns:
        int: Total leaf quantity, 0 for empty or malformed input.
    """
    if not is_sequence(nodes) or len(nodes) == 0:
        return 0

    total = _sum_leaves(nodes)
    logger.debug(f"Variant total computed over {len(nodes)} top-level node(s): {total}")
    return total


def _sum_leaves(nodes: Sequence[Any]) -> int:
    """Depth-first walk with an explicit stack; depth is not bounded."""
    subtotal = 0
    stack: List[Any] = [value for node in nodes for value in values_of(node)]
    while stack:
        value = stack.pop()
        children = children_of(value)
        if children:
            for child in children:
                stack.extend(values_of(child))
        else:
            subtotal += quantity_of(value)
    return subtotal

# -----------------------------------------------------------------------------
# BREAKDOWN
# -----------------------------------------------------------------------------

def get_variant_breakdown(nodes: Any) -> Dict[str, int]:
    """
    Flatten the tree into an ordered path -> quantity mapping.

    Path format:
        - top level: "Size: L"
        - first descent: "Size: L → Color / Red"
        - deeper levels: "Size: L → Color / Red - Pattern / Striped"

    Leaves with a quantity of 0 or less are left out. When two paths render
    to the same string the later one overwrites the earlier entry.

    Args:
        nodes: Sequence of variants (typed or raw).

    Returns:
        Dict[str, int]: Breakdown in traversal order.
    """
    breakdown: Dict[str, int] = {}
    if not is_sequence(nodes):
        return breakdown

    # Frames: (value, path up to and including its label, is top level)
    top_level: List[Tuple[Any, str, bool]] = [
        (value, f"{attribute_of(node)}{LABEL_SEPARATOR}{label_of(value)}", True)
        for node in nodes
        for value in values_of(node)
    ]
    stack = top_level[::-1]

    while stack:
        value, current_path, is_top = stack.pop()
        children = children_of(value)

        if not children:
            _record_leaf(breakdown, current_path, value)
            continue

        separator = FIRST_LEVEL_SEPARATOR if is_top else DEEP_LEVEL_SEPARATOR
        pending: List[Tuple[Any, str, bool]] = []
        for child in children:
            child_path = f"{current_path}{separator}{attribute_of(child)}"
            for child_value in values_of(child):
                pending.append((child_value, f"{child_path}{VALUE_SEPARATOR}{label_of(child_value)}", False))

        # Reversed so the first child is visited next, preserving pre-order
        stack.extend(reversed(pending))

    return breakdown


def _record_leaf(breakdown: Dict[str, int], path: str, value: Any) -> None:
    quantity = quantity_of(value)
    if quantity > 0:
        if path in breakdown:
            logger.debug(f"Breakdown path collision, overwriting: {path}")
        breakdown[path] = quantity
