from __future__ import annotations

import argparse
import sys

from devports import (
    DEFAULT_PORTS,
    PortAssignment,
    PortRangeError,
    coerce_port,
    configure,
    recommended_ports,
)
from devports.console import configure_console_output

_HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})


def _epilog() -> str:
    dev = DEFAULT_PORTS["dev"]
    preview = DEFAULT_PORTS["preview"]
    return "\n".join(
        [
            "Examples:",
            f"  configure-port                          # default ports ({dev}/{preview})",
            "  configure-port . 4000 4001              # ports 4000/4001",
            "  configure-port /path/project 8080       # port 8080 for dev",
            f"  configure-port . {dev} {preview} --docker     # with a docker-compose override",
            "",
            "Recommended ports (avoid 3000):",
            f"  {recommended_ports()}",
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the configure-port argument parser."""
    parser = argparse.ArgumentParser(
        prog="configure-port",
        description=(
            "Point a Vite/Node project's dev and preview servers at non-conflicting ports. "
            "Rewrites package.json scripts, regenerates vite.config.js and optionally "
            "docker-compose.override.yml."
        ),
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Project directory (default: current directory).",
    )
    parser.add_argument(
        "dev_port",
        nargs="?",
        default=None,
        help=f"Dev server port (default: {DEFAULT_PORTS['dev']}).",
    )
    parser.add_argument(
        "preview_port",
        nargs="?",
        default=None,
        help=f"Preview server port (default: {DEFAULT_PORTS['preview']}).",
    )
    parser.add_argument(
        "--docker",
        action="store_true",
        help="Also write docker-compose.override.yml.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    CLI entrypoint.

    ``-h``/``--help`` anywhere on the command line prints usage and exits 0
    without touching any file.
    """

    configure_console_output()
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if _HELP_FLAGS.intersection(args_list):
        parser.print_help()
        return 0

    args = parser.parse_intermixed_args(args_list)
    ports = PortAssignment(
        dev_port=coerce_port(args.dev_port, DEFAULT_PORTS["dev"]),
        preview_port=coerce_port(args.preview_port, DEFAULT_PORTS["preview"]),
    )
    try:
        ports.validate()
    except PortRangeError as exc:
        parser.error(str(exc))

    ok = configure(args.path, ports.dev_port, ports.preview_port, docker=args.docker)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
