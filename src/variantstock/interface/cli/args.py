from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the config validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the variantstock CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="variantstock",
        description="Report totals and breakdowns of hierarchical product variants.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="JSON file holding a product record or a list of variants.",
    )
    p.add_argument(
        "--inventory",
        dest="inventory_path",
        default=None,
        help="JSON object of live inventory counts used by --low-stock.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed variant data instead of skipping it.",
    )

    # --- Rendering ---
    p.add_argument(
        "--compact",
        action="store_true",
        help="Render a compact header plus indented entries.",
    )
    p.add_argument(
        "--no-total",
        action="store_true",
        help="Omit the total line in full rendering.",
    )
    p.add_argument(
        "--low-stock",
        action="store_true",
        help="Evaluate minimum-quantity thresholds and list alerts.",
    )
    p.add_argument(
        "--critical-ratio",
        dest="critical_ratio",
        type=float,
        default=None,
        help="Fraction of the minimum under which an alert is critical.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the report as JSON.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Alternative configuration file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only flags that were actually given produce an entry.
    """
    overrides: Dict[str, Any] = {}

    if args.strict:
        overrides["strict"] = True
    if args.compact:
        overrides["compact"] = True
    if args.no_total:
        overrides["show_total"] = False
    if args.critical_ratio is not None:
        overrides["critical_ratio"] = args.critical_ratio
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
