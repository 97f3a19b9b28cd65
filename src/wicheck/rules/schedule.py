# SPDX-License-Identifier: MIT
"""Rule 7 (schedule): scheduled work items belong to the current iteration and are estimated."""

from __future__ import annotations

from wicheck.rules.base import Issue, RuleContext, Severity


class ScheduleRule:
    """Check the item's iteration against the current one and require an estimate once scheduled.

    Runs with ``ctx.current_iteration`` possibly unset: the iteration
    comparison is then skipped and an unestimated scheduled item is reported
    with the non-current code.
    """

    id = "schedule"
    description = "Scheduled items belong to the current iteration and carry an estimate"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        current = ctx.current_iteration
        iteration = wi.iteration
        if iteration is None:
            return []

        results: list[Issue] = []
        if current is not None and iteration != current:
            results.append(
                Issue(
                    Severity.WARN,
                    "CURRENT-ITERATION-EXPECTED",
                    f"Workitem iteration [{iteration.name}] is not the current one "
                    f"[{current.name}].",
                )
            )

        unestimated = wi.plan_estimate is None and not wi.blocked and not wi.inquiry
        if not unestimated:
            return results
        if iteration == current:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "CURRENT-ITERATION-WITHOUT-ESTIMATION",
                    f"Workitem scheduled for current iteration [{iteration.name}] "
                    "while not estimated yet.",
                )
            )
        else:
            results.append(
                Issue(
                    Severity.WARN,
                    "SCHEDULED-WITHOUT-ESTIMATION",
                    f"Workitem scheduled for [{iteration.name}] while not estimated yet.",
                )
            )
        return results
