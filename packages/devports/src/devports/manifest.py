from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any

MANIFEST_NAME = "package.json"

# Literal token match; a quoted "--port 1" inside an argument is stripped too.
_PORT_FLAG_RE = re.compile(r"--port\s+\d+")

_PORTED_SCRIPTS: tuple[str, ...] = ("dev", "preview")


def set_port_flag(command: str, port: int) -> str:
    """Drop every ``--port N`` token from ``command`` and append ``--port <port>``."""

    stripped = _PORT_FLAG_RE.sub("", command).strip()
    return f"{stripped} --port {port}"


def apply_script_ports(manifest: dict[str, Any], *, dev_port: int, preview_port: int) -> None:
    """Rewrite the ``dev``/``preview`` scripts in place.

    Entries missing from ``scripts`` are left missing; a non-string entry
    raises ``ValueError``.
    """

    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return
    ports = {"dev": dev_port, "preview": preview_port}
    for name in _PORTED_SCRIPTS:
        command = scripts.get(name)
        if not command:
            continue
        if not isinstance(command, str):
            raise ValueError(f"scripts.{name} must be a string, got {type(command).__name__}")
        scripts[name] = set_port_flag(command, ports[name])


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def load_manifest(raw: str) -> dict[str, Any]:
    """Parse manifest text strictly; ``NaN`` and ``Infinity`` are not JSON."""

    manifest = json.loads(raw, parse_constant=_reject_constant)
    if not isinstance(manifest, dict):
        raise ValueError(f"expected a JSON object, got {type(manifest).__name__}")
    return manifest


def dump_manifest(manifest: dict[str, Any], *, trailing_newline: bool) -> str:
    text = json.dumps(manifest, indent=2, ensure_ascii=False)
    return text + "\n" if trailing_newline else text


def update_manifest(project_path: Path, *, dev_port: int, preview_port: int) -> bool:
    """Point the manifest's ``dev`` and ``preview`` scripts at the given ports.

    Parameters
    ----------
    project_path:
        Directory that holds ``package.json``.
    dev_port, preview_port:
        Ports appended as ``--port`` flags.

    Returns
    -------
    bool
        ``True`` when the manifest was rewritten. Missing, unreadable or
        malformed manifests are reported on the console and yield ``False``.
    """

    manifest_path = project_path / MANIFEST_NAME
    if not manifest_path.exists():
        print(f"❌ {MANIFEST_NAME} not found: {manifest_path}")
        return False

    try:
        raw = manifest_path.read_text(encoding="utf-8")
        manifest = load_manifest(raw)
        apply_script_ports(manifest, dev_port=dev_port, preview_port=preview_port)
        manifest_path.write_text(
            dump_manifest(manifest, trailing_newline=raw.endswith("\n")),
            encoding="utf-8",
        )
    except (OSError, ValueError, RecursionError) as exc:
        print(f"❌ Failed to update {MANIFEST_NAME}: {exc}", file=sys.stderr)
        return False

    print(f"✅ {MANIFEST_NAME} updated - Dev: {dev_port}, Preview: {preview_port}")
    return True
