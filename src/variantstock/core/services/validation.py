from __future__ import annotations

"""
Product Validation Service.

Gatekeeper for product records entering the system through forms and bulk
imports. Produces human-readable errors plus a cleaned copy of the record
(trimmed labels, empty entries removed) instead of raising.
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
    KEY_QUANTITY,
    KEY_SKU,
    KEY_VALUE,
    KEY_VALUES,
    MAX_ATTRIBUTE_LENGTH,
    MAX_PRODUCT_NAME_LENGTH,
    MAX_VALUE_LENGTH,
)
from variantstock.domain.product_models import BulkValidationResult, ValidationResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_product(product: Any) -> ValidationResult:
    """
    Validate and clean a raw product record before it is saved.

    Args:
        product: Raw product mapping (name, variants, quantity).

    Returns:
        ValidationResult: Validity flag, error list and cleaned record.
    """
    if not isinstance(product, Mapping):
        msg = f"Invalid product type: expected object, received {type(product).__name__}."
        return ValidationResult(valid=False, errors=[msg], cleaned={})

    errors: List[str] = []

    name = _trim(product.get("name"))
    if not name:
        errors.append("Product name is required and cannot be empty")
    elif len(name) > MAX_PRODUCT_NAME_LENGTH:
        errors.append(f"Product name must be less than {MAX_PRODUCT_NAME_LENGTH} characters")

    quantity = product.get(KEY_QUANTITY)
    if quantity is not None and (not is_numeric_quantity(quantity) or quantity < 0):
        errors.append("Quantity must be 0 or greater")

    cleaned_variants: List[Dict[str, Any]] = []
    raw_variants = product.get("variants")
    if is_sequence(raw_variants):
        for i, variant in enumerate(raw_variants):
            cleaned = _validate_variant(variant, i, errors)
            if cleaned is not None:
                cleaned_variants.append(cleaned)

    if errors:
        logger.debug(f"Product '{name}' failed validation with {len(errors)} error(s).")

    return ValidationResult(
        valid=not errors,
        errors=errors,
        cleaned={
            "name": name,
            "variants": cleaned_variants,
            KEY_QUANTITY: max(coerce_quantity(quantity), 0),
        },
    )


def validate_products(products: Any) -> BulkValidationResult:
    """Validate a batch of raw product records (bulk import)."""
    if not is_sequence(products):
        return BulkValidationResult(valid=True, results=[], total_errors=0)

    results = [validate_product(p) for p in products]
    total_errors = sum(len(r.errors) for r in results)
    logger.info(f"Bulk validation: {len(results)} product(s), {total_errors} error(s).")
    return BulkValidationResult(valid=total_errors == 0, results=results, total_errors=total_errors)


def clean_variants(variants: Any) -> List[Dict[str, Any]]:
    """
    Strip empty and malformed entries from raw variant data.

    Variants without an attribute or without any labelled value are dropped;
    bare string values are expanded into zero-quantity value objects.
    """
    if not is_sequence(variants):
        return []

    out: List[Dict[str, Any]] = []
    for variant in variants:
        if not isinstance(variant, Mapping) or not variant:
            continue
        attribute = _trim(variant.get(KEY_ATTRIBUTE))
        values = [
            _clean_value(v)
            for v in _as_list(variant.get(KEY_VALUES))
            if _value_label(v)
        ]
        if attribute and values:
            out.append({KEY_ATTRIBUTE: attribute, KEY_VALUES: values, KEY_SKU: variant.get(KEY_SKU)})
    return out

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _validate_variant(variant: Any, index: int, errors: List[str]) -> Optional[Dict[str, Any]]:
    if not isinstance(variant, Mapping):
        return None

    attribute = _trim(variant.get(KEY_ATTRIBUTE))
    raw_values = _as_list(variant.get(KEY_VALUES))

    # Completely empty rows left over from the editor are ignored
    if not attribute and not raw_values:
        return None

    if not attribute:
        errors.append(f"Variant {index + 1}: Attribute name is required")
        return None
    if len(attribute) > MAX_ATTRIBUTE_LENGTH:
        errors.append(f'Variant "{attribute}": Attribute name too long')

    cleaned_values: List[Dict[str, Any]] = []
    for j, val in enumerate(raw_values):
        if not val:
            continue

        label = _value_label(val)
        if not label:
            errors.append(f'Variant "{attribute}": Value {j + 1} cannot be empty')
            continue
        if len(label) > MAX_VALUE_LENGTH:
            errors.append(f'Variant "{attribute}": Value "{label}" too long')

        if isinstance(val, Mapping):
            quantity = val.get(KEY_QUANTITY)
            if quantity is not None and (not is_numeric_quantity(quantity) or quantity < 0):
                errors.append(f'Variant "{attribute}": Quantity for "{label}" must be 0 or greater')

        cleaned_values.append(_clean_value(val))

    if not cleaned_values:
        errors.append(f'Variant "{attribute}": At least one value is required')
        return None

    return {KEY_ATTRIBUTE: attribute, KEY_VALUES: cleaned_values, KEY_SKU: variant.get(KEY_SKU)}


def _clean_value(val: Any) -> Dict[str, Any]:
    if isinstance(val, str):
        return {KEY_VALUE: val.strip(), KEY_QUANTITY: 0, "subVariants": []}

    children: List[Any] = []
    for key in CHILDREN_KEYS:
        if is_sequence(val.get(key)):
            children = list(val.get(key))
            break

    return {
        KEY_VALUE: _value_label(val),
        KEY_QUANTITY: coerce_quantity(val.get(KEY_QUANTITY)),
        "subVariants": children,
    }


def _value_label(val: Any) -> str:
    if isinstance(val, str):
        return val.strip()
    if isinstance(val, Mapping):
        return _trim(val.get(KEY_VALUE))
    return ""


def _trim(raw: Any) -> str:
    return raw.strip() if isinstance(raw, str) else ""


def _as_list(raw: Any) -> List[Any]:
    return list(raw) if is_sequence(raw) else []
