from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

DEFAULT_PORTS: dict[str, Any] = {
    "dev": 5173,
    "preview": 4173,
    "alternative": (4000, 8080, 3001, 5000, 8000),
}

# Dokploy (and plenty of Node templates) sit on this one.
CONFLICT_PORT = 3000

MIN_PORT = 1
MAX_PORT = 65535

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


class PortRangeError(ValueError):
    def __init__(self, message: str, *, port: int, role: str) -> None:
        super().__init__(message)
        self.port = port
        self.role = role


@dataclass(frozen=True)
class PortAssignment:
    dev_port: int = DEFAULT_PORTS["dev"]
    preview_port: int = DEFAULT_PORTS["preview"]

    def validate(self) -> None:
        for role, port in (("dev", self.dev_port), ("preview", self.preview_port)):
            if not MIN_PORT <= port <= MAX_PORT:
                raise PortRangeError(
                    f"{role} port {port} is outside {MIN_PORT}-{MAX_PORT}",
                    port=port,
                    role=role,
                )

    @property
    def conflicts(self) -> bool:
        return self.dev_port == CONFLICT_PORT


def coerce_port(value: str | None, default: int) -> int:
    """Read a port argument the lenient way.

    Leading integer digits are taken (``"8080abc"`` -> 8080). Empty,
    non-numeric and zero values fall back to ``default``.
    """

    if value is None:
        return default
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return default
    port = int(match.group(1))
    return port or default


def recommended_ports() -> str:
    alternatives = ", ".join(str(p) for p in DEFAULT_PORTS["alternative"])
    return f"{alternatives}, {DEFAULT_PORTS['dev']} (Vite default)"
