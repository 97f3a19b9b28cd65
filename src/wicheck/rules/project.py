# SPDX-License-Identifier: MIT
"""Rule 1 (project): the work item must belong to the configured project."""

from __future__ import annotations

from wicheck.rules.base import Issue, RuleContext, Severity


class ProjectRule:
    """Flag work items without a project or assigned to another one."""

    id = "project"
    description = "Work item must be assigned to the target project"

    def run(self, ctx: RuleContext) -> list[Issue]:
        project = ctx.work_item.project
        target = ctx.policy.project
        if project is None:
            return [Issue(Severity.IMPORTANT, "NO-PROJECT", "No project assigned.")]
        if project != target:
            return [
                Issue(
                    Severity.IMPORTANT,
                    "WRONG-PROJECT",
                    f"The project is [{project.id}-{project.name}] "
                    f"while it should be [{target.id}-{target.name}].",
                )
            ]
        return []
