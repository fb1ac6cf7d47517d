from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from devports.plan import APPROVED_PORT_PHRASES
from devports.ports import CONFLICT_PORT, DEFAULT_PORTS

_PORT_TOKEN = str(CONFLICT_PORT)
_DEV_PORT_TOKEN = str(DEFAULT_PORTS["dev"])

DEV_CONFIG_EXPLICIT_DEFAULT = "explicit_default"
DEV_CONFIG_FRAMEWORK_DEFAULT = "framework_default"
DEV_CONFIG_CUSTOM = "custom"


@dataclass
class FileCheck:
    path: Path
    exists: bool
    found: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    port_warnings: list[tuple[int, str]] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.exists and self.error is None and not self.missing


@dataclass
class DevConfigCheck:
    path: Path
    exists: bool
    status: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.exists and self.error is None


def find_port_references(
    text: str, approved_phrases: Sequence[str] = APPROVED_PORT_PHRASES
) -> list[tuple[int, str]]:
    """Return ``(line_number, line)`` for lines naming port 3000 without an approved phrase."""

    hits: list[tuple[int, str]] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if _PORT_TOKEN not in line:
            continue
        if any(phrase in line for phrase in approved_phrases):
            continue
        hits.append((line_number, line))
    return hits


def check_file(
    path: Path,
    patterns: Sequence[str],
    description: str,
    *,
    approved_phrases: Sequence[str] = APPROVED_PORT_PHRASES,
) -> FileCheck:
    """
    Check that ``path`` contains every expected substring.

    Each pattern is reported on its own line. Stray mentions of port 3000 are
    printed as warnings and do not fail the check.

    Parameters
    ----------
    path:
        File to read.
    patterns:
        Substrings that must all be present.
    description:
        Label used in the console heading.
    approved_phrases:
        Phrases that make a "3000" line acceptable.

    Returns
    -------
    FileCheck
        Per-file outcome; ``ok`` is false for missing or unreadable files.
    """

    print(f"\n🔍 Checking {description}...")

    if not path.exists():
        print(f"❌ File not found: {path}")
        return FileCheck(path=path, exists=False)

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"❌ Failed reading {path}: {exc}", file=sys.stderr)
        return FileCheck(path=path, exists=True, error=str(exc))

    result = FileCheck(path=path, exists=True)
    for pattern in patterns:
        if pattern in content:
            print(f'✅ Found: "{pattern}"')
            result.found.append(pattern)
        else:
            print(f'❌ Not found: "{pattern}"')
            result.missing.append(pattern)

    result.port_warnings = find_port_references(content, approved_phrases)
    if result.port_warnings:
        print(
            f"⚠️  Found {len(result.port_warnings)} possible reference(s) "
            f"to port {_PORT_TOKEN}:"
        )
        for line_number, line in result.port_warnings:
            print(f'   {line_number}: "{line.strip()}"')

    return result


def classify_dev_config(content: str) -> str:
    if "port:" in content and _DEV_PORT_TOKEN in content:
        return DEV_CONFIG_EXPLICIT_DEFAULT
    if "port:" not in content:
        return DEV_CONFIG_FRAMEWORK_DEFAULT
    return DEV_CONFIG_CUSTOM


_DEV_CONFIG_MESSAGES: dict[str, str] = {
    DEV_CONFIG_EXPLICIT_DEFAULT: f"✅ Port {_DEV_PORT_TOKEN} configuration found",
    DEV_CONFIG_FRAMEWORK_DEFAULT: f"✅ Using the Vite default port ({_DEV_PORT_TOKEN})",
    DEV_CONFIG_CUSTOM: "⚠️  Custom port configuration found",
}


def check_dev_config(path: Path) -> DevConfigCheck:
    """Check the primary dev-server config. Any existing file passes."""

    print("\n⚙️ Checking the main Vite configuration...")

    if not path.exists():
        print(f"❌ File not found: {path}")
        return DevConfigCheck(path=path, exists=False)

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"❌ Failed reading {path}: {exc}", file=sys.stderr)
        return DevConfigCheck(path=path, exists=True, error=str(exc))

    status = classify_dev_config(content)
    print(_DEV_CONFIG_MESSAGES[status])
    return DevConfigCheck(path=path, exists=True, status=status)
