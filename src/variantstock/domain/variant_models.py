from __future__ import annotations

"""
Variant Tree Data Models.

Provides the recursive type definitions used to describe product variants
(e.g. Size -> Color -> Pattern). Quantities live only on leaf values; a
branch value owns sub-variants instead of a quantity of its own.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LeafValue:
    """
    Represents a terminal variant value carrying the authoritative stock.

    Attributes:
        value: Human-readable label (e.g. "Red").
        quantity: Units on hand for this exact combination.
        minimum_quantity: Optional low-stock threshold.
    """
    value: str
    quantity: int = 0
    minimum_quantity: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class BranchValue:
    """
    Represents a variant value that branches into further sub-variants.

    Attributes:
        value: Human-readable label (e.g. "L").
        sub_variants: Child variants forming the next hierarchy level.
        minimum_quantity: Optional low-stock threshold (kept for round-trips).
    """
    value: str
    sub_variants: Tuple["Variant", ...]
    minimum_quantity: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.sub_variants:
            raise ValueError(f"Branch value '{self.value}' needs at least one sub-variant.")

    @property
    def is_leaf(self) -> bool:
        return False


VariantValue = Union[LeafValue, BranchValue]


@dataclass(frozen=True)
class Variant:
    """
    A named product attribute with its ordered set of values.

    Attributes:
        attribute: Attribute name (e.g. "Size").
        values: Ordered values, each either a leaf or a branch.
        sku: Optional stock keeping unit attached to the attribute.
    """
    attribute: str
    values: Tuple[VariantValue, ...] = ()
    sku: Optional[str] = None

    @property
    def is_flat(self) -> bool:
        """True when none of the values branch further."""
        return all(isinstance(v, LeafValue) for v in self.values)


# Flat variants predating sub-variant support share the same shape
LegacyVariantValue = LeafValue
LegacyVariant = Variant
