from __future__ import annotations

import sys
from pathlib import Path

VITE_CONFIG_NAME = "vite.config.js"
COMPOSE_OVERRIDE_NAME = "docker-compose.override.yml"


def render_vite_config(*, dev_port: int, preview_port: int) -> str:
    return "\n".join(
        [
            "import { defineConfig } from 'vite'",
            "import react from '@vitejs/plugin-react'",
            "",
            "export default defineConfig({",
            "  plugins: [react()],",
            "  server: {",
            f"    port: {dev_port},",
            "    host: true,",
            "    strictPort: true,",
            "    open: false // do not launch a browser on start",
            "  },",
            "  preview: {",
            f"    port: {preview_port},",
            "    host: true",
            "  }",
            "})",
        ]
    )


def render_compose_override(*, dev_port: int) -> str:
    return "\n".join(
        [
            "version: '3.8'",
            "services:",
            "  app:",
            "    ports:",
            f'      - "{dev_port}:{dev_port}"',
            "    environment:",
            f"      - VITE_PORT={dev_port}",
            f"    command: npm run dev -- --host 0.0.0.0 --port {dev_port}",
            "",
        ]
    )


def _write_generated(path: Path, text: str) -> bool:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        print(f"❌ Failed to write {path.name}: {exc}", file=sys.stderr)
        return False
    return True


def write_vite_config(project_path: Path, *, dev_port: int, preview_port: int) -> bool:
    """Regenerate ``vite.config.js``; any previous content is discarded."""

    path = project_path / VITE_CONFIG_NAME
    if not _write_generated(path, render_vite_config(dev_port=dev_port, preview_port=preview_port)):
        return False
    print(f"✅ {VITE_CONFIG_NAME} written with dev port {dev_port}")
    return True


def write_compose_override(project_path: Path, *, dev_port: int) -> bool:
    """Regenerate ``docker-compose.override.yml`` for the dev port."""

    path = project_path / COMPOSE_OVERRIDE_NAME
    if not _write_generated(path, render_compose_override(dev_port=dev_port)):
        return False
    print(f"✅ {COMPOSE_OVERRIDE_NAME} written for port {dev_port}")
    return True
