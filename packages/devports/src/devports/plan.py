from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class CheckGroup:
    name: str
    description: str
    paths: tuple[str, ...]
    patterns: tuple[str, ...]


@dataclass(frozen=True)
class ValidationPlan:
    prompts: CheckGroup
    script: CheckGroup
    docs: CheckGroup
    dev_config_path: str
    approved_phrases: tuple[str, ...]


class PlanError(ValueError):
    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


PROMPT_FILES: tuple[str, ...] = (
    "app/lib/common/prompts/prompts.ts",
    "app/lib/common/prompts/optimized.ts",
    "app/lib/common/prompts/new-prompt.ts",
    "app/lib/common/prompts/discuss-prompt.ts",
)

# Lines mentioning 3000 are fine when they carry one of these.
APPROVED_PORT_PHRASES: tuple[str, ...] = (
    "NEVER use port 3000",
    "NUNCA use a porta 3000",
    "avoid port 3000",
    "evitar 3000",
    "conflito",
    "conflict",
)

DEFAULT_PLAN = ValidationPlan(
    prompts=CheckGroup(
        name="prompts",
        description="system prompts",
        paths=PROMPT_FILES,
        patterns=(
            "NEVER use port 3000",
            "NUNCA use a porta 3000",
            "5173",
            "alternative ports",
            "portas alternativas",
        ),
    ),
    script=CheckGroup(
        name="script",
        description="port configuration script",
        paths=("scripts/configure_port.py",),
        patterns=(
            "DEFAULT_PORTS",
            "5173",
            "vite.config.js",
            "package.json",
            "docker-compose.override.yml",
        ),
    ),
    docs=CheckGroup(
        name="docs",
        description="documentation",
        paths=("PORT_CONFIGURATION.md",),
        patterns=(
            "Port Configuration Guide",
            "port 3000",
            "Dokploy",
            "alternative ports",
            "5173",
        ),
    ),
    dev_config_path="vite.config.ts",
    approved_phrases=APPROVED_PORT_PHRASES,
)

_GROUP_KEYS: tuple[str, ...] = ("prompts", "script", "docs")
_ALLOWED_KEYS: frozenset[str] = frozenset({*_GROUP_KEYS, "dev_config", "approved_phrases"})


def _string_tuple(value: Any, *, path: Path, field: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise PlanError(
            f"Expected a non-empty list for {field} in {path}.",
            code="invalid_list",
            details={"field": field},
        )
    out: list[str] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str) or not item.strip():
            raise PlanError(
                f"Expected non-empty string for {field}[{idx}] in {path}.",
                code="invalid_string",
                details={"field": f"{field}[{idx}]"},
            )
        out.append(item)
    return tuple(out)


def _override_group(group: CheckGroup, raw: Any, *, path: Path) -> CheckGroup:
    if not isinstance(raw, dict):
        raise PlanError(
            f"Expected a mapping for {group.name} in {path}.",
            code="invalid_group",
            details={"group": group.name},
        )
    unknown = set(raw) - {"paths", "patterns", "description"}
    if unknown:
        raise PlanError(
            f"Unknown keys in {group.name} of {path}: {', '.join(sorted(unknown))}.",
            code="unknown_keys",
            details={"group": group.name, "keys": sorted(unknown)},
        )
    updated = group
    if "paths" in raw:
        updated = replace(
            updated,
            paths=_string_tuple(raw["paths"], path=path, field=f"{group.name}.paths"),
        )
    if "patterns" in raw:
        updated = replace(
            updated,
            patterns=_string_tuple(raw["patterns"], path=path, field=f"{group.name}.patterns"),
        )
    if "description" in raw:
        description = raw["description"]
        if not isinstance(description, str) or not description.strip():
            raise PlanError(
                f"Expected non-empty string for {group.name}.description in {path}.",
                code="invalid_string",
                details={"field": f"{group.name}.description"},
            )
        updated = replace(updated, description=description)
    return updated


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PlanError(f"Failed to read {path}: {e}", code="read_failed") from e
    except yaml.YAMLError as e:
        raise PlanError(f"Failed to parse YAML in {path}: {e}", code="parse_failed") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PlanError(
            f"Expected a YAML mapping in {path}, got {type(raw).__name__}.",
            code="not_a_mapping",
        )
    return raw


def load_plan(path: Path, *, base: ValidationPlan = DEFAULT_PLAN) -> ValidationPlan:
    """
    Load check tables from a YAML file on top of ``base``.

    Keys left out of the file keep their ``base`` values.

    Parameters
    ----------
    path:
        YAML file with any of ``prompts``, ``script``, ``docs`` (each a mapping
        of ``paths``/``patterns``), ``dev_config`` and ``approved_phrases``.
    base:
        Plan to override.

    Returns
    -------
    ValidationPlan
        The merged plan.
    """

    data = _load_yaml_mapping(path)
    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise PlanError(
            f"Unknown keys in {path}: {', '.join(sorted(unknown))}. "
            f"Allowed: {', '.join(sorted(_ALLOWED_KEYS))}.",
            code="unknown_keys",
            details={"keys": sorted(unknown)},
        )

    plan = base
    for key in _GROUP_KEYS:
        if key in data:
            plan = replace(plan, **{key: _override_group(getattr(plan, key), data[key], path=path)})

    if "dev_config" in data:
        dev_config = data["dev_config"]
        if not isinstance(dev_config, str) or not dev_config.strip():
            raise PlanError(
                f"Expected non-empty string for dev_config in {path}.",
                code="invalid_string",
                details={"field": "dev_config"},
            )
        plan = replace(plan, dev_config_path=dev_config)

    if "approved_phrases" in data:
        plan = replace(
            plan,
            approved_phrases=_string_tuple(
                data["approved_phrases"], path=path, field="approved_phrases"
            ),
        )
    return plan
