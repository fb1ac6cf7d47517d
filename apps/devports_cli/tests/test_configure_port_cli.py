from __future__ import annotations

import json
from pathlib import Path

import pytest

from devports_cli.configure_port import build_parser, main


def _seed_manifest(project: Path) -> Path:
    path = project / "package.json"
    path.write_text(
        json.dumps({"scripts": {"dev": "vite", "preview": "vite preview"}}, indent=2) + "\n",
        encoding="utf-8",
    )
    return path


def test_help_lists_examples_and_recommended_ports(capsys: pytest.CaptureFixture[str]) -> None:
    parser = build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--help"])
    assert excinfo.value.code == 0

    out = capsys.readouterr().out
    assert "configure-port . 4000 4001" in out
    assert "Recommended ports (avoid 3000):" in out
    assert "4000, 8080, 3001, 5000, 8000, 5173 (Vite default)" in out


def test_help_wins_over_other_arguments(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    manifest = _seed_manifest(tmp_path)
    before = manifest.read_text(encoding="utf-8")

    assert main([str(tmp_path), "abc", "99999", "--docker", "-h"]) == 0

    assert "usage: configure-port" in capsys.readouterr().out
    assert manifest.read_text(encoding="utf-8") == before
    assert not (tmp_path / "vite.config.js").exists()


def test_main_configures_project(tmp_path: Path) -> None:
    manifest = _seed_manifest(tmp_path)

    assert main([str(tmp_path), "4000", "4001", "--docker"]) == 0

    scripts = json.loads(manifest.read_text(encoding="utf-8"))["scripts"]
    assert scripts == {"dev": "vite --port 4000", "preview": "vite preview --port 4001"}
    assert "port: 4001," in (tmp_path / "vite.config.js").read_text(encoding="utf-8")
    assert (tmp_path / "docker-compose.override.yml").exists()


def test_main_docker_flag_may_come_first(tmp_path: Path) -> None:
    _seed_manifest(tmp_path)
    assert main(["--docker", str(tmp_path), "8080"]) == 0
    text = (tmp_path / "docker-compose.override.yml").read_text(encoding="utf-8")
    assert "--port 8080" in text
    assert "port: 4173," in (tmp_path / "vite.config.js").read_text(encoding="utf-8")


def test_main_non_numeric_ports_fall_back_to_defaults(tmp_path: Path) -> None:
    _seed_manifest(tmp_path)
    assert main([str(tmp_path), "abc", "0"]) == 0
    vite = (tmp_path / "vite.config.js").read_text(encoding="utf-8")
    assert "port: 5173," in vite
    assert "port: 4173," in vite


def test_main_returns_1_when_manifest_missing(tmp_path: Path) -> None:
    assert main([str(tmp_path)]) == 1
    assert (tmp_path / "vite.config.js").exists()


def test_main_rejects_out_of_range_port(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_manifest(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path), "70000"])
    assert excinfo.value.code == 2
    assert "outside 1-65535" in capsys.readouterr().err
    assert not (tmp_path / "vite.config.js").exists()


def test_main_docker_flag_between_ports(tmp_path: Path) -> None:
    manifest = _seed_manifest(tmp_path)

    assert main([str(tmp_path), "4000", "--docker", "4001"]) == 0

    scripts = json.loads(manifest.read_text(encoding="utf-8"))["scripts"]
    assert scripts == {"dev": "vite --port 4000", "preview": "vite preview --port 4001"}
    assert (tmp_path / "docker-compose.override.yml").exists()
