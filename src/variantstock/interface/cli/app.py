from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, stored
file, CLI overrides), logging bootstrap, loading of the product JSON,
report computation and rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from variantstock.core.analysis.summary_renderer import render_variant_summary
from variantstock.core.services.config_validator import validate_config
from variantstock.core.services.report import build_variant_report
from variantstock.core.variants.accessors import coerce_quantity, is_sequence
from variantstock.core.variants.parser import VariantDataError, parse_product, parse_variants
from variantstock.domain.config import get_default_config, load_config
from variantstock.domain.product_models import ProductEntry, VariantReport
from variantstock.infra.fs import read_json_file
from variantstock.infra.logging import LoggingConfig, configure_logging, get_logger
from variantstock.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 data failure, 2 missing input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration (defaults vs stored file) and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = dict(base_conf)
    raw_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"] or None)
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    # 3. Pre-flight input verification
    input_path = args.input_path or ""
    if not input_path or not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path or '(none)'}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 4. Load and parse
    try:
        product = _load_product(input_path, strict=conf["strict"])
        inventory = _load_inventory(args.inventory_path) if args.inventory_path else None
    except (OSError, ValueError) as e:
        logger.error(f"Cannot process '{input_path}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Report computation and rendering
    report = build_variant_report(
        product,
        include_low_stock=args.low_stock,
        inventory=inventory,
        critical_ratio=conf["critical_ratio"],
    )

    if args.json_output:
        print(json.dumps(asdict(report), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(product, report, conf)

    return 0

# -----------------------------------------------------------------------------
# INPUT LOADING
# -----------------------------------------------------------------------------

def _load_product(path: str, *, strict: bool) -> ProductEntry:
    """
    Read a product JSON file.

    A top-level list is read as the variants of an unnamed product named
    after the file.
    """
    data = read_json_file(path)

    if is_sequence(data):
        name = os.path.splitext(os.path.basename(path))[0]
        return ProductEntry(name=name, variants=tuple(parse_variants(data, strict=strict)))

    if isinstance(data, dict):
        return parse_product(data, strict=strict)

    raise VariantDataError(f"Unsupported JSON document: {type(data).__name__}.")


def _load_inventory(path: str) -> Dict[str, int]:
    data: Any = read_json_file(path)
    if not isinstance(data, dict):
        raise VariantDataError("Inventory file must hold a JSON object of counts.")
    return {str(k): coerce_quantity(v) for k, v in data.items()}

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(product: ProductEntry, report: VariantReport, conf: Dict[str, Any]) -> None:
    """Print the report as terminal text."""
    structure = "nested" if report.nested else ("legacy" if report.legacy else "empty")
    print(f"Product: {report.product_name or '(unnamed)'} [{structure}]")

    lines = render_variant_summary(
        list(product.variants),
        show_total=conf["show_total"],
        compact=conf["compact"],
    )
    if lines:
        for line in lines:
            print(line)
    else:
        print("No stocked variants.")

    if report.low_stock:
        print("\nLow stock:")
        for item in report.low_stock:
            label = item.variant_path or "(product)"
            flag = "CRITICAL" if item.is_critical else "low"
            print(f"  - [{flag}] {label}: {item.current_stock} (min {item.minimum_quantity})")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
