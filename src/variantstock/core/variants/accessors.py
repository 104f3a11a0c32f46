from __future__ import annotations

"""
Variant Shape Accessors.

Uniform read access over the two shapes a variant tree can arrive in: the
typed models of `variantstock.domain.variant_models` and the raw camelCase
records loaded from storage. Every accessor is total; malformed input reads
as empty or zero instead of raising.
"""

import math
from typing import Any, Mapping, Optional, Sequence

from variantstock.domain.constants import (
    CHILDREN_KEYS,
    KEY_ATTRIBUTE,
    KEY_QUANTITY,
    KEY_SKU,
    KEY_VALUE,
    KEY_VALUES,
    MINIMUM_QUANTITY_KEYS,
)
from variantstock.domain.variant_models import BranchValue, LeafValue, Variant

_EMPTY: Sequence[Any] = ()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_sequence(obj: Any) -> bool:
    """True for list/tuple containers (strings and mappings excluded)."""
    return isinstance(obj, (list, tuple))


def attribute_of(node: Any) -> str:
    """Return the attribute name of a variant node, or an empty string."""
    if isinstance(node, Variant):
        return node.attribute
    if isinstance(node, Mapping):
        return _as_label(node.get(KEY_ATTRIBUTE))
    return ""


def sku_of(node: Any) -> Optional[str]:
    if isinstance(node, Variant):
        return node.sku
    if isinstance(node, Mapping):
        sku = node.get(KEY_SKU)
        return str(sku) if sku else None
    return None


def values_of(node: Any) -> Sequence[Any]:
    """Return the ordered values of a variant node (empty when malformed)."""
    if isinstance(node, Variant):
        return node.values
    if isinstance(node, Mapping):
        values = node.get(KEY_VALUES)
        if is_sequence(values):
            return values
    return _EMPTY


def label_of(value: Any) -> str:
    """Return the display label of a variant value."""
    if isinstance(value, (LeafValue, BranchValue)):
        return value.value
    if isinstance(value, Mapping):
        return _as_label(value.get(KEY_VALUE))
    if isinstance(value, str):
        # Legacy records stored bare strings as values
        return value
    return ""


def children_of(value: Any) -> Sequence[Any]:
    """
    Return the sub-variants of a value.

    An empty result means the value is a leaf; a missing, empty or
    non-sequence children field all read the same way.
    """
    if isinstance(value, BranchValue):
        return value.sub_variants
    if isinstance(value, Mapping):
        for key in CHILDREN_KEYS:
            children = value.get(key)
            if is_sequence(children) and len(children) > 0:
                return children
    return _EMPTY


def quantity_of(value: Any) -> int:
    """Return the leaf quantity of a value, treating absent/non-numeric as 0."""
    if isinstance(value, LeafValue):
        return coerce_quantity(value.quantity)
    if isinstance(value, Mapping):
        return coerce_quantity(value.get(KEY_QUANTITY))
    return 0


def minimum_quantity_of(value: Any) -> Optional[int]:
    if isinstance(value, (LeafValue, BranchValue)):
        return value.minimum_quantity
    if isinstance(value, Mapping):
        for key in MINIMUM_QUANTITY_KEYS:
            if value.get(key) is not None:
                return coerce_quantity(value.get(key))
    return None


def coerce_quantity(raw: Any) -> int:
    """
    Convert a stored quantity into an int.

    Integers pass through unchanged (negative values included), finite floats
    are truncated and numeric strings are parsed. Anything else is 0.
    """
    if isinstance(raw, bool) or raw is None:
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    if isinstance(raw, str):
        try:
            return int(float(raw.strip()))
        except (ValueError, OverflowError):
            return 0
    return 0


def is_numeric_quantity(raw: Any) -> bool:
    """True when `raw` is a real number usable as a quantity."""
    if isinstance(raw, bool):
        return False
    if isinstance(raw, int):
        return True
    return isinstance(raw, float) and math.isfinite(raw)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_label(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)
