"""Smoke test for DeliveryTracker CLI.

Run:
  python test/smoke_test.py

Feeds a short scripted session to the menu and validates that packages are
added, sorted and found.
"""

from __future__ import annotations

import sys
from pathlib import Path

from click.testing import CliRunner


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))


SMOKE_INPUT = "\n".join(
    [
        "1", "Standard", "PKG00001", "12 Elm St", "5.0",
        "1", "Express", "PKG00002", "5 Oak Ave", "2.0",
        "3",
        "4", "PKG00001",
        "5",
    ]
) + "\n"


def main() -> int:
    from DeliveryTracker.cli import cli

    result = CliRunner().invoke(cli, ["menu"], input=SMOKE_INPUT, catch_exceptions=False)

    output = result.output
    assert result.exit_code == 0, output
    assert output.count("Package added successfully!") == 2, output
    assert "Cost: $8.00" in output, output
    assert "Package Found: Tracking ID: PKG00001" in output, output
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
