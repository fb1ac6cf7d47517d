from __future__ import annotations

from devports.checks import (
    DevConfigCheck,
    FileCheck,
    check_dev_config,
    check_file,
    classify_dev_config,
    find_port_references,
)
from devports.configure import configure, resolve_project_path
from devports.manifest import apply_script_ports, set_port_flag, update_manifest
from devports.plan import (
    APPROVED_PORT_PHRASES,
    DEFAULT_PLAN,
    PROMPT_FILES,
    CheckGroup,
    PlanError,
    ValidationPlan,
    load_plan,
)
from devports.ports import (
    CONFLICT_PORT,
    DEFAULT_PORTS,
    PortAssignment,
    PortRangeError,
    coerce_port,
    recommended_ports,
)
from devports.templates import (
    render_compose_override,
    render_vite_config,
    write_compose_override,
    write_vite_config,
)
from devports.validate import GroupResult, ValidationReport, validate

__all__ = [
    "APPROVED_PORT_PHRASES",
    "CONFLICT_PORT",
    "CheckGroup",
    "DEFAULT_PLAN",
    "DEFAULT_PORTS",
    "DevConfigCheck",
    "FileCheck",
    "GroupResult",
    "PROMPT_FILES",
    "PlanError",
    "PortAssignment",
    "PortRangeError",
    "ValidationPlan",
    "ValidationReport",
    "apply_script_ports",
    "check_dev_config",
    "check_file",
    "classify_dev_config",
    "coerce_port",
    "configure",
    "find_port_references",
    "load_plan",
    "recommended_ports",
    "render_compose_override",
    "render_vite_config",
    "resolve_project_path",
    "set_port_flag",
    "update_manifest",
    "validate",
    "write_compose_override",
    "write_vite_config",
]
