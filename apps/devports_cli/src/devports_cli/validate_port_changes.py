from __future__ import annotations

import argparse
import sys
from pathlib import Path

from devports import DEFAULT_PLAN, PlanError, load_plan, validate
from devports.console import configure_console_output


def build_parser() -> argparse.ArgumentParser:
    """Build the validate-port-changes argument parser."""
    parser = argparse.ArgumentParser(
        prog="validate-port-changes",
        description=(
            "Check that prompts, the port configuration script, the port documentation "
            "and vite.config.ts all follow the avoid-port-3000 convention."
        ),
    )
    parser.add_argument(
        "--repo-root",
        type=Path,
        default=None,
        help="Directory the checked paths are relative to (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file overriding the built-in check tables.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_console_output()
    args = build_parser().parse_args(argv)

    plan = DEFAULT_PLAN
    if args.config is not None:
        try:
            plan = load_plan(args.config)
        except PlanError as exc:
            print(f"❌ {exc}", file=sys.stderr)
            return 2

    report = validate(plan, root=args.repo_root)
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
