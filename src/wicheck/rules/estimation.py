# SPDX-License-Identifier: MIT
"""Rule 4 (estimation): estimate presence and value must match the schedule state."""

from __future__ import annotations

from wicheck.entities import ScheduleState
from wicheck.rules.base import Issue, RuleContext, Severity


class EstimationRule:
    """Check the plan estimate against the schedule state and the estimation series."""

    id = "estimation"
    description = "Estimated once defined, with a value from the estimation series"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        state = wi.schedule_state
        estimate = wi.plan_estimate

        results: list[Issue] = []
        if state > ScheduleState.UNDEFINED and estimate is None and not wi.inquiry:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "MISSING-ESTIMATION",
                    "Does not have any plan estimate while the schedule state is "
                    f"[{state.abbr}].",
                )
            )
        if (
            state > ScheduleState.UNDEFINED
            and estimate is not None
            and estimate not in ctx.policy.estimation_series
        ):
            results.append(
                Issue(
                    Severity.WARN,
                    "WRONG-ESTIMATION-VALUE",
                    f"The estimation value {estimate} is not standard.",
                )
            )
        if state == ScheduleState.UNDEFINED and estimate is not None:
            results.append(
                Issue(
                    Severity.WARN,
                    "UNEXPECTED-ESTIMATION",
                    f"Has a plan estimate while the schedule state is [{state.abbr}].",
                )
            )
        return results
