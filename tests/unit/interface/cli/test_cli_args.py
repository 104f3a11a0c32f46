from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration overrides.
2. Flags left out produce no override.
"""

from variantstock.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping():
    args = parse_args([
        "-i", "product.json",
        "--strict",
        "--compact",
        "--no-total",
        "--critical-ratio", "0.3",
        "--log-file", "/tmp/vs.log",
        "--debug",
    ])

    overrides = args_to_overrides(args)

    assert args.input_path == "product.json"
    assert overrides == {
        "strict": True,
        "compact": True,
        "show_total": False,
        "critical_ratio": 0.3,
        "log_file": "/tmp/vs.log",
        "log_level": "DEBUG",
    }


def test_cli_no_flags_means_no_overrides():
    args = parse_args([])

    assert args_to_overrides(args) == {}
    assert args.input_path is None
    assert args.json_output is False
    assert args.low_stock is False
