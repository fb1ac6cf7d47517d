"""
Checkout entry script for the port change validator.

Run from the web app root:

    python scripts/validate_port_changes.py
"""

from __future__ import annotations

try:
    from devports_cli.validate_port_changes import main
except ModuleNotFoundError as exc:
    if exc.name not in {"devports", "devports_cli"}:
        raise
    raise SystemExit(
        f"Missing import `{exc.name}`.\n"
        "Fix (from repo root):\n"
        "  python -m pip install -e .\n"
    ) from exc


if __name__ == "__main__":
    raise SystemExit(main())
