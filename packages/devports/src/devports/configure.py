from __future__ import annotations

import sys
from pathlib import Path

from devports.manifest import update_manifest
from devports.ports import CONFLICT_PORT, DEFAULT_PORTS, PortAssignment, PortRangeError
from devports.templates import write_compose_override, write_vite_config


def resolve_project_path(project_path: Path | str | None) -> Path:
    if project_path is None or str(project_path) == "":
        return Path.cwd().resolve()
    return Path(project_path).expanduser().resolve()


def _print_header(project_path: Path, ports: PortAssignment) -> None:
    print("🔧 Configuring ports to avoid conflicts...")
    print(f"📁 Project: {project_path}")
    print(f"🚀 Dev port: {ports.dev_port}")
    print(f"👀 Preview port: {ports.preview_port}")
    print("")


def _print_conflict_warning() -> None:
    print(
        f"⚠️  WARNING: port {CONFLICT_PORT} may already be taken by Dokploy or other services",
        file=sys.stderr,
    )
    print(f"💡 Recommended: port {DEFAULT_PORTS['dev']} (Vite default) or another alternative")


def _print_next_steps(ports: PortAssignment) -> None:
    print("")
    print("✅ Port configuration completed!")
    print("")
    print("📋 Next steps:")
    print(f"   npm run dev     # serve on localhost:{ports.dev_port}")
    print(f"   npm run preview # preview on localhost:{ports.preview_port}")
    print("")
    print("💡 Tips:")
    print("   - Make sure the ports are free before starting")
    print('   - Use "netstat -tulpn | grep :PORT" to see what holds a port')
    print(f"   - Dokploy usually runs on port {CONFLICT_PORT}")


def configure(
    project_path: Path | str | None = None,
    dev_port: int = DEFAULT_PORTS["dev"],
    preview_port: int = DEFAULT_PORTS["preview"],
    *,
    docker: bool = False,
) -> bool:
    """
    Rewrite a project's dev-server setup to use the given ports.

    Every requested step runs even when an earlier one failed; the result is
    the AND of all step results.

    Parameters
    ----------
    project_path:
        Project directory (defaults to the current working directory).
    dev_port, preview_port:
        Ports for ``npm run dev`` and ``npm run preview``.
    docker:
        Also regenerate ``docker-compose.override.yml``.

    Returns
    -------
    bool
        ``True`` when every step succeeded. Out-of-range ports yield ``False``
        before any file is written.
    """

    root = resolve_project_path(project_path)
    ports = PortAssignment(dev_port=dev_port, preview_port=preview_port)
    _print_header(root, ports)

    try:
        ports.validate()
    except PortRangeError as exc:
        print(f"❌ Invalid port: {exc}", file=sys.stderr)
        return False

    if ports.conflicts:
        _print_conflict_warning()

    success = True
    success &= update_manifest(root, dev_port=ports.dev_port, preview_port=ports.preview_port)
    success &= write_vite_config(root, dev_port=ports.dev_port, preview_port=ports.preview_port)
    if docker:
        success &= write_compose_override(root, dev_port=ports.dev_port)

    if success:
        _print_next_steps(ports)
    else:
        print("")
        print("❌ Some configuration steps failed", file=sys.stderr)
    return success
