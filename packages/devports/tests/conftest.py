from __future__ import annotations

from pathlib import Path

import pytest

from devports import DEFAULT_PLAN

PROMPT_TEXT = "\n".join(
    [
        "// Dev server rules",
        "NEVER use port 3000 for the dev server",
        "NUNCA use a porta 3000 para o servidor de desenvolvimento",
        "Prefer 5173 or one of the alternative ports (4000, 8080).",
        "Prefira 5173 ou uma das portas alternativas.",
        "",
    ]
)

SCRIPT_TEXT = "\n".join(
    [
        '"""Rewrites package.json, vite.config.js and docker-compose.override.yml."""',
        "DEFAULT_PORTS = {'dev': 5173, 'preview': 4173}",
        "",
    ]
)

DOC_TEXT = "\n".join(
    [
        "# Port Configuration Guide",
        "",
        "Dokploy listens on port 3000, which would conflict with the dev server, so use 5173.",
        "Other alternative ports: 4000, 8080.",
        "",
    ]
)


@pytest.fixture
def web_app(tmp_path: Path) -> Path:
    """A checkout where every default check passes."""
    for rel_path in DEFAULT_PLAN.prompts.paths:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(PROMPT_TEXT, encoding="utf-8")
    script = tmp_path / DEFAULT_PLAN.script.paths[0]
    script.parent.mkdir(parents=True, exist_ok=True)
    script.write_text(SCRIPT_TEXT, encoding="utf-8")
    (tmp_path / DEFAULT_PLAN.docs.paths[0]).write_text(DOC_TEXT, encoding="utf-8")
    (tmp_path / DEFAULT_PLAN.dev_config_path).write_text(
        "export default defineConfig({ plugins: [react()] })\n", encoding="utf-8"
    )
    return tmp_path
