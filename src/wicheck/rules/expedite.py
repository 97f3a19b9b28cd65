# SPDX-License-Identifier: MIT
"""Rule 3 (expedite): defects are expedited, user stories are not."""

from __future__ import annotations

from wicheck.entities import WorkItemKind
from wicheck.rules.base import Issue, RuleContext, Severity


class ExpediteRule:
    """Check the expedite flag against the work-item kind."""

    id = "expedite"
    description = "Defects must be expedited; user stories must not"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        if wi.kind == WorkItemKind.DEFECT and not wi.expedite:
            return [Issue(Severity.WARN, "DEFECT-NOT-EXPEDITE", "Not 'expedite' defect.")]
        if wi.kind == WorkItemKind.HIERARCHICAL_REQUIREMENT and wi.expedite:
            return [Issue(Severity.WARN, "US-EXPEDITE", "'Expedite' user story.")]
        return []
