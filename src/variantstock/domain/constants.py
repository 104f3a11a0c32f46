from __future__ import annotations

"""
Domain Constants.

Centralizes the separators, field names and limits shared by the variant
services so that the stored data shape is described in one place.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# BREAKDOWN / EXPORT PATH FORMATTING
# -----------------------------------------------------------------------------
LABEL_SEPARATOR = ": "
FIRST_LEVEL_SEPARATOR = " → "
DEEP_LEVEL_SEPARATOR = " - "
VALUE_SEPARATOR = " / "

DEFAULT_ATTRIBUTE_LABEL = "Variant"
DEFAULT_VALUE_LABEL = "N/A"

# -----------------------------------------------------------------------------
# STORED RECORD KEYS (camelCase, as persisted by the dashboard)
# -----------------------------------------------------------------------------
KEY_ATTRIBUTE = "attribute"
KEY_VALUES = "values"
KEY_VALUE = "value"
KEY_QUANTITY = "quantity"
KEY_MINIMUM_QUANTITY = "minimumQuantity"
KEY_SKU = "sku"

# Older snake_case exports are read as well
CHILDREN_KEYS: Tuple[str, ...] = ("subVariants", "sub_variants")
MINIMUM_QUANTITY_KEYS: Tuple[str, ...] = ("minimumQuantity", "minimum_quantity")

# -----------------------------------------------------------------------------
# VALIDATION LIMITS
# -----------------------------------------------------------------------------
MAX_PRODUCT_NAME_LENGTH = 200
MAX_ATTRIBUTE_LENGTH = 50
MAX_VALUE_LENGTH = 100

# -----------------------------------------------------------------------------
# LOW STOCK
# -----------------------------------------------------------------------------
DEFAULT_CRITICAL_RATIO = 0.5
