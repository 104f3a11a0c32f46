from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared variant trees (raw stored shape) used across unit tests.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def flat_variants() -> List[Dict[str, Any]]:
    """Single-level (legacy) Size variant: S=5, M=3."""
    return [
        {
            "attribute": "Size",
            "values": [
                {"value": "S", "quantity": 5},
                {"value": "M", "quantity": 3},
            ],
        }
    ]


@pytest.fixture
def nested_variants() -> List[Dict[str, Any]]:
    """Two-level Size -> Color tree: L/Red=4, L/Blue=6."""
    return [
        {
            "attribute": "Size",
            "values": [
                {
                    "value": "L",
                    "quantity": 0,
                    "subVariants": [
                        {
                            "attribute": "Color",
                            "values": [
                                {"value": "Red", "quantity": 4},
                                {"value": "Blue", "quantity": 6},
                            ],
                        }
                    ],
                }
            ],
        }
    ]


@pytest.fixture
def three_level_variants() -> List[Dict[str, Any]]:
    """
    Size -> Color -> Pattern tree with a flat sibling value.

    Leaves: M/Red/Striped=2, M/Red/Plain=0, M/Green/Dotted=7, XL=1.
    """
    return [
        {
            "attribute": "Size",
            "values": [
                {
                    "value": "M",
                    "quantity": 99,
                    "subVariants": [
                        {
                            "attribute": "Color",
                            "values": [
                                {
                                    "value": "Red",
                                    "subVariants": [
                                        {
                                            "attribute": "Pattern",
                                            "values": [
                                                {"value": "Striped", "quantity": 2},
                                                {"value": "Plain", "quantity": 0},
                                            ],
                                        }
                                    ],
                                },
                                {
                                    "value": "Green",
                                    "subVariants": [
                                        {
                                            "attribute": "Pattern",
                                            "values": [{"value": "Dotted", "quantity": 7}],
                                        }
                                    ],
                                },
                            ],
                        }
                    ],
                },
                {"value": "XL", "quantity": 1},
            ],
        }
    ]
