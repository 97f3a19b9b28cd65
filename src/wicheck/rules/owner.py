# SPDX-License-Identifier: MIT
"""Rule 5 (owner): ownership must follow the hand-off between dev team and client roles.

"Client" here means one of the roles the item is handed back to for input or
validation: the product owner, the story validator, or the defect validator.
An item with no owner is not assigned to a client.
"""

from __future__ import annotations

from wicheck.entities import ScheduleState, WorkItemKind
from wicheck.rules.base import Issue, RuleContext, Severity


class OwnerRule:
    """Check owner, blocked flag and blocked reason against state and iteration."""

    id = "owner"
    description = "Owner must match the workflow stage of the work item"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        policy = ctx.policy
        state = wi.schedule_state
        client = policy.is_client(wi.owner)

        results: list[Issue] = []
        if ScheduleState.DEFINED < state < ScheduleState.ACCEPTED and not wi.blocked and client:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "UNEXPECTED-CLIENT-OWNER-UNBLOCKED",
                    "Assigned to client while it is not blocked and schedule state is "
                    f"[{state.abbr}].",
                )
            )
        if wi.blocked and not (wi.blocked_reason or "").strip():
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "MISSING-BLOCKED-REASON",
                    "Blocked while the blocked reason is empty.",
                )
            )
        if state == ScheduleState.IN_PROGRESS and not wi.blocked and client:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "PREMATURE-ASSIGMENT",
                    "Assigned to client while in progress.",
                )
            )
        if wi.blocked and not client:
            results.append(
                Issue(Severity.WARN, "UNEXPECTED-BLOCK", "Blocked while assigned to the dev team.")
            )
        if state == ScheduleState.UNDEFINED and wi.owner is not None and not wi.blocked:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "UNEXPECTED-OWNER",
                    f"Has owner [{wi.owner.display_name}] while in schedule state "
                    f"[{state.abbr}].",
                )
            )
        if (
            state == ScheduleState.DEFINED
            and wi.iteration is not None
            and client
            and not wi.blocked
        ):
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "UNEXPECTED-CLIENT-OWNER-DEFINED",
                    "Assigned to client while ready to progress (iteration and schedule state).",
                )
            )
        if (state < ScheduleState.DEFINED or wi.iteration is None) and not client:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "UNEXPECTED-OWNER-UNDEFINED",
                    "Assigned to dev team while not ready to progress "
                    "(iteration and schedule state).",
                )
            )

        ready_for_validation = state == ScheduleState.ACCEPTED and wi.tagged_as_deployed
        if (
            ready_for_validation
            and wi.kind == WorkItemKind.DEFECT
            and wi.owner != policy.defect_validator
        ):
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "DEFECT-VALIDATOR-EXPECTED",
                    "Defect not correctly assigned while ready for validation.",
                )
            )
        if (
            ready_for_validation
            and wi.kind == WorkItemKind.HIERARCHICAL_REQUIREMENT
            and wi.owner != policy.story_validator
        ):
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "US-VALIDATOR-EXPECTED",
                    "User story not correctly assigned while ready for validation.",
                )
            )
        return results
