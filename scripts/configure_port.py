"""
Checkout entry script for the port configurator.

Rewrites the `dev`/`preview` scripts in package.json, regenerates vite.config.js
and, with `--docker`, docker-compose.override.yml. Ports default to
DEFAULT_PORTS (dev 5173, preview 4173) so nothing lands on port 3000.

    python scripts/configure_port.py [path] [dev_port] [preview_port] [--docker]
"""

from __future__ import annotations

try:
    from devports_cli.configure_port import main
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
