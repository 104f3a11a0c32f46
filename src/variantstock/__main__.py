from __future__ import annotations

"""
Module entry point: `python -m variantstock`.
"""

import sys

from variantstock.interface.cli.app import main


def run() -> int:
    try:
        return main()
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(run())
