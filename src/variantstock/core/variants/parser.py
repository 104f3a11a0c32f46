from __future__ import annotations

"""
Variant Ingestion Service.

Acts as the boundary between stored product records and the typed variant
tree. Raw JSON is validated once here; the engine then works over models
whose leaf/branch split is fixed by type. Also provides the inverse
serialization and the zero-quantity clone used by check-in forms.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from variantstock.core.variants.accessors import (
    coerce_quantity,
    is_numeric_quantity,
    is_sequence,
)
from variantstock.domain.constants import (
    CHILDREN_KEYS,
    KEY_ATTRIBUTE,
    KEY_MINIMUM_QUANTITY,
    KEY_QUANTITY,
    KEY_SKU,
    KEY_VALUE,
    KEY_VALUES,
    MINIMUM_QUANTITY_KEYS,
)
from variantstock.domain.product_models import ProductEntry
from variantstock.domain.variant_models import BranchValue, LeafValue, Variant, VariantValue

logger = logging.getLogger(__name__)


class VariantDataError(ValueError):
    """Raised in strict mode when stored variant data is malformed."""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_variants(raw: Any, *, strict: bool = False) -> List[Variant]:
    """
    Build typed variants from stored data.

    Lenient mode mirrors what the dashboard tolerates: entries that are not
    objects or lack an attribute are dropped, values without a label are
    dropped, bare string values become zero-quantity leaves and non-numeric
    quantities read as 0.

    Args:
        raw: Decoded JSON (expected: list of variant objects).
        strict: If True, raise VariantDataError instead of dropping/coercing.

    Returns:
        List[Variant]: Parsed variants, empty for absent or non-list input.
    """
    return _parse_variant_list(raw, "variants", strict)


def parse_product(raw: Any, *, strict: bool = False) -> ProductEntry:
    """
    Build a ProductEntry from a stored product record.

    Accepts both the camelCase dashboard shape and snake_case database rows
    (`minimum_quantity`, `id`).
    """
    if not isinstance(raw, Mapping):
        if strict:
            raise VariantDataError(f"product: expected object, received {type(raw).__name__}.")
        return ProductEntry(name="")

    minimum = _parse_minimum(raw, "product", strict) or 0

    product_id = raw.get("existingProductId") or raw.get("id") or raw.get("product_id")
    value = raw.get("value")

    return ProductEntry(
        name=str(raw.get("name") or "").strip(),
        quantity=_parse_quantity(raw.get(KEY_QUANTITY), "product", strict),
        variants=tuple(parse_variants(raw.get("variants"), strict=strict)),
        product_id=str(product_id) if product_id else None,
        sku=str(raw[KEY_SKU]) if raw.get(KEY_SKU) else None,
        minimum_quantity=max(minimum, 0),
        value=float(value) if is_numeric_quantity(value) else None,
    )


def variants_to_dicts(variants: List[Variant]) -> List[Dict[str, Any]]:
    """
    Serialize typed variants back to the stored camelCase shape.

    Branch values are written with `quantity: 0`, matching what the editor
    persists for interior nodes.
    """
    return [_variant_to_dict(v) for v in variants]


def clone_variants_with_zero_quantity(variants: List[Variant]) -> List[Variant]:
    """
    Deep-copy a variant tree with every leaf quantity reset to 0.

    Attribute names, SKUs and low-stock thresholds are preserved.
    """
    return [
        Variant(
            attribute=v.attribute,
            values=tuple(_zero_value(val) for val in v.values),
            sku=v.sku,
        )
        for v in variants
    ]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: PARSING
# -----------------------------------------------------------------------------

def _parse_variant_list(raw: Any, where: str, strict: bool) -> List[Variant]:
    if raw is None:
        return []
    if not is_sequence(raw):
        if strict:
            raise VariantDataError(f"{where}: expected list, received {type(raw).__name__}.")
        logger.debug(f"{where}: non-list variant data ignored ({type(raw).__name__}).")
        return []

    out: List[Variant] = []
    for i, entry in enumerate(raw):
        node_where = f"{where}[{i}]"
        if not isinstance(entry, Mapping) or not entry.get(KEY_ATTRIBUTE):
            if strict:
                raise VariantDataError(f"{node_where}: expected object with an attribute.")
            logger.debug(f"{node_where}: malformed variant dropped.")
            continue
        out.append(_parse_variant(entry, node_where, strict))
    return out


def _parse_variant(entry: Mapping[str, Any], where: str, strict: bool) -> Variant:
    raw_values = entry.get(KEY_VALUES)
    values: List[VariantValue] = []

    if is_sequence(raw_values):
        for j, raw_value in enumerate(raw_values):
            parsed = _parse_value(raw_value, f"{where}.values[{j}]", strict)
            if parsed is not None:
                values.append(parsed)
    elif raw_values is not None and strict:
        raise VariantDataError(f"{where}.values: expected list, received {type(raw_values).__name__}.")

    sku = entry.get(KEY_SKU)
    return Variant(
        attribute=str(entry.get(KEY_ATTRIBUTE)),
        values=tuple(values),
        sku=str(sku) if sku else None,
    )


def _parse_value(raw: Any, where: str, strict: bool) -> Optional[VariantValue]:
    if isinstance(raw, str) and raw:
        return LeafValue(value=raw, quantity=0)

    if not isinstance(raw, Mapping) or not raw.get(KEY_VALUE):
        if strict:
            raise VariantDataError(f"{where}: expected string or object with a value label.")
        return None

    label = str(raw.get(KEY_VALUE))
    minimum = _parse_minimum(raw, where, strict)

    children: List[Variant] = []
    for key in CHILDREN_KEYS:
        if key in raw and raw.get(key) is not None:
            children = _parse_variant_list(raw.get(key), f"{where}.{key}", strict)
            break

    if children:
        return BranchValue(value=label, sub_variants=tuple(children), minimum_quantity=minimum)

    return LeafValue(
        value=label,
        quantity=_parse_quantity(raw.get(KEY_QUANTITY), where, strict),
        minimum_quantity=minimum,
    )


def _parse_quantity(raw: Any, where: str, strict: bool, field: str = KEY_QUANTITY) -> int:
    if raw is None:
        return 0
    if strict:
        if not is_numeric_quantity(raw):
            raise VariantDataError(f"{where}.{field}: expected number, received {raw!r}.")
        if raw < 0:
            raise VariantDataError(f"{where}.{field}: must be 0 or greater, received {raw!r}.")
    return coerce_quantity(raw)


def _parse_minimum(raw: Mapping[str, Any], where: str, strict: bool) -> Optional[int]:
    for key in MINIMUM_QUANTITY_KEYS:
        if raw.get(key) is not None:
            return _parse_quantity(raw.get(key), where, strict, field=key)
    return None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: SERIALIZATION AND CLONING
# -----------------------------------------------------------------------------

def _variant_to_dict(variant: Variant) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        KEY_ATTRIBUTE: variant.attribute,
        KEY_VALUES: [_value_to_dict(v) for v in variant.values],
    }
    if variant.sku:
        out[KEY_SKU] = variant.sku
    return out


def _value_to_dict(value: VariantValue) -> Dict[str, Any]:
    out: Dict[str, Any] = {KEY_VALUE: value.value}
    if isinstance(value, BranchValue):
        out[KEY_QUANTITY] = 0
        out["subVariants"] = variants_to_dicts(list(value.sub_variants))
    else:
        out[KEY_QUANTITY] = value.quantity
        out["subVariants"] = []
    if value.minimum_quantity is not None:
        out[KEY_MINIMUM_QUANTITY] = value.minimum_quantity
    return out


def _zero_value(value: VariantValue) -> VariantValue:
    if isinstance(value, BranchValue):
        return BranchValue(
            value=value.value,
            sub_variants=tuple(clone_variants_with_zero_quantity(list(value.sub_variants))),
            minimum_quantity=value.minimum_quantity,
        )
    return LeafValue(value=value.value, quantity=0, minimum_quantity=value.minimum_quantity)
