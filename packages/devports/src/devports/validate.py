from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from devports.checks import DevConfigCheck, FileCheck, check_dev_config, check_file
from devports.console import rule
from devports.plan import DEFAULT_PLAN, CheckGroup, ValidationPlan


@dataclass
class GroupResult:
    group: CheckGroup
    files: list[FileCheck]

    @property
    def ok(self) -> bool:
        return all(f.ok for f in self.files)


@dataclass
class ValidationReport:
    prompts: GroupResult
    script: GroupResult
    docs: GroupResult
    dev_config: DevConfigCheck

    @property
    def ok(self) -> bool:
        return self.prompts.ok and self.script.ok and self.docs.ok and self.dev_config.ok

    def failed_groups(self) -> list[str]:
        failed = [g.group.name for g in (self.prompts, self.script, self.docs) if not g.ok]
        if not self.dev_config.ok:
            failed.append("dev_config")
        return failed


def _check_group(
    group: CheckGroup, *, root: Path, approved_phrases: tuple[str, ...]
) -> GroupResult:
    files: list[FileCheck] = []
    for rel_path in group.paths:
        label = f"{group.description} ({rel_path})" if len(group.paths) > 1 else group.description
        files.append(
            check_file(
                root / rel_path,
                group.patterns,
                label,
                approved_phrases=approved_phrases,
            )
        )
    return GroupResult(group=group, files=files)


def _print_summary(report: ValidationReport) -> None:
    print("\n" + rule())
    if report.ok:
        print("✅ All validations passed!")
        print("\n📋 Summary:")
        print("   • System prompts steer away from port 3000")
        print("   • Port configuration script is in place")
        print("   • Port documentation is present")
        print("   • Vite configuration checked")
        print("\n🎯 The project is set up to avoid conflicts on port 3000")
        return
    print("❌ Some validations failed", file=sys.stderr)
    print(f"   Failed checks: {', '.join(report.failed_groups())}", file=sys.stderr)
    print("   See the log above for details", file=sys.stderr)


def validate(plan: ValidationPlan = DEFAULT_PLAN, *, root: Path | None = None) -> ValidationReport:
    """
    Run every check group of ``plan`` against files under ``root``.

    All groups always run; a missing file fails its own check only.
    """

    base = (root or Path.cwd()).resolve()
    approved = plan.approved_phrases

    print("🚀 Validating port configuration changes")
    print(rule())

    print("🎯 Validating system prompt files...")
    prompts = _check_group(plan.prompts, root=base, approved_phrases=approved)

    print("\n🔧 Validating the port configuration script...")
    script = _check_group(plan.script, root=base, approved_phrases=approved)

    print("\n📚 Validating documentation...")
    docs = _check_group(plan.docs, root=base, approved_phrases=approved)

    dev_config = check_dev_config(base / plan.dev_config_path)

    report = ValidationReport(prompts=prompts, script=script, docs=docs, dev_config=dev_config)
    _print_summary(report)
    return report
