from __future__ import annotations

import sys
from typing import Any


def enable_console_backslashreplace(stream: Any) -> None:
    """Configure stream error handling to backslash escapes when supported."""
    reconfigure = getattr(stream, "reconfigure", None)
    if not callable(reconfigure):
        return
    try:
        if str(getattr(stream, "errors", "")).lower() == "backslashreplace":
            return
        reconfigure(errors="backslashreplace")
    except Exception:
        return


def configure_console_output() -> None:
    """Configure stdout and stderr so emoji status markers never raise."""
    enable_console_backslashreplace(sys.stdout)
    enable_console_backslashreplace(sys.stderr)


def rule(width: int = 60) -> str:
    return "=" * width
