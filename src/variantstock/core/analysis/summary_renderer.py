from __future__ import annotations

"""
Variant Summary Renderer.

Converts a variant tree into the text lines shown next to a product: an
optional total followed by one line per breakdown entry, or a compact
collapsible-style header with indented entries.
"""

from typing import Any, List

from variantstock.core.variants.accessors import is_sequence
from variantstock.core.variants.engine import (
    calculate_nested_variant_quantity,
    get_variant_breakdown,
    has_nested_variants,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_variant_summary(
        nodes: Any,
        show_total: bool = True,
        compact: bool = False,
) -> List[str]:
    """
    Render the quantity summary of a variant tree.

    Nothing is rendered when the tree has no stocked leaf.

    Args:
        nodes: Sequence of variants (typed or raw).
        show_total: Prepend a "Total: N" line (full mode only).
        compact: Emit a "Variants (n)" header and indented entries.

    Returns:
        List[str]: Rendered lines.
    """
    if not is_sequence(nodes) or len(nodes) == 0:
        return []

    breakdown = get_variant_breakdown(nodes)
    if not breakdown:
        return []

    lines: List[str] = []

    if compact:
        header = "Nested variants" if has_nested_variants(nodes) else "Variants"
        lines.append(f"{header} ({len(breakdown)})")
        for path, qty in breakdown.items():
            lines.append(f"    {path}: {qty}")
        return lines

    if show_total:
        lines.append(f"Total: {calculate_nested_variant_quantity(nodes)}")

    width = max(len(path) for path in breakdown)
    for path, qty in breakdown.items():
        lines.append(f"{path.ljust(width)}  {qty}")

    return lines
