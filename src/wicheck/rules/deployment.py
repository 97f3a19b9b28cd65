# SPDX-License-Identifier: MIT
"""Rule 2 (deployment): environment tags must agree with each other and the schedule state."""

from __future__ import annotations

from wicheck.entities import ScheduleState, Tag
from wicheck.rules.base import Issue, RuleContext, Severity


class DeploymentRule:
    """Check UAT/PRE/PRO/NOT TO DEPLOY tags against schedule state and inquiry flag."""

    id = "deployment"
    description = "Deployment tags must be consistent with state and with each other"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        uat = wi.has_tag(Tag.UAT)
        pre = wi.has_tag(Tag.PRE)
        pro = wi.has_tag(Tag.PRO)
        not_to_deploy = wi.has_tag(Tag.NOT_TO_DEPLOY)
        deployed = uat or pre or pro

        results: list[Issue] = []
        if wi.schedule_state < ScheduleState.COMPLETED and deployed:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "WRONG-DEPLOYMENT-TAG-STATE",
                    "Tagged as deployed while the schedule states is "
                    f"[{wi.schedule_state.abbr}].",
                )
            )
        if wi.schedule_state > ScheduleState.COMPLETED and not deployed and not not_to_deploy:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "MISSING-DEPLOYMENT-TAG",
                    "No deployment tag while schedule state beyond [C].",
                )
            )
        if pro and not pre and not uat:
            results.append(
                Issue(
                    Severity.WARN,
                    "WRONG-DEPLOYMENT-TAG-SEQUENCE",
                    "Tagged as deployed in PRO while not in PRE nor in UAT.",
                )
            )
        if not_to_deploy and deployed:
            results.append(
                Issue(
                    Severity.IMPORTANT,
                    "INCOMPATIBLE-DEPLOYMENT-TAGS",
                    "Tagged as 'NOT TO DEPLOY' while tagged as deployed.",
                )
            )
        if wi.inquiry and not not_to_deploy:
            results.append(
                Issue(Severity.WARN, "DEPLOYABLE-INQUIRY", "Inquiry w/o 'NOT TO DEPLOY'.")
            )
        return results
