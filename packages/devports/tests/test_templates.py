from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from devports import (
    render_compose_override,
    render_vite_config,
    write_compose_override,
    write_vite_config,
)


def test_render_vite_config_embeds_both_ports() -> None:
    text = render_vite_config(dev_port=4000, preview_port=4001)
    assert "    port: 4000," in text
    assert "    port: 4001," in text
    assert "strictPort: true" in text
    assert "host: true" in text
    assert "open: false" in text
    assert "5173" not in text


def test_render_compose_override_parses_as_yaml() -> None:
    data = yaml.safe_load(render_compose_override(dev_port=8080))
    app = data["services"]["app"]
    assert app["ports"] == ["8080:8080"]
    assert app["environment"] == ["VITE_PORT=8080"]
    assert app["command"] == "npm run dev -- --host 0.0.0.0 --port 8080"


def test_write_vite_config_overwrites_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "vite.config.js"
    path.write_text("// custom tweaks\n", encoding="utf-8")

    assert write_vite_config(tmp_path, dev_port=5173, preview_port=4173)

    text = path.read_text(encoding="utf-8")
    assert "custom tweaks" not in text
    assert text == render_vite_config(dev_port=5173, preview_port=4173)


def test_write_compose_override_creates_file(tmp_path: Path) -> None:
    assert write_compose_override(tmp_path, dev_port=5173)
    text = (tmp_path / "docker-compose.override.yml").read_text(encoding="utf-8")
    assert '"5173:5173"' in text


def test_write_vite_config_reports_write_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing_dir = tmp_path / "does-not-exist"
    assert write_vite_config(missing_dir, dev_port=5173, preview_port=4173) is False
    assert "Failed to write vite.config.js" in capsys.readouterr().err


def test_write_compose_override_reports_write_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing_dir = tmp_path / "does-not-exist"
    assert write_compose_override(missing_dir, dev_port=5173) is False
    assert "Failed to write docker-compose.override.yml" in capsys.readouterr().err
