# SPDX-License-Identifier: MIT
"""Rule 6 (portfolio): inquiries are not filed as defects."""

from __future__ import annotations

from wicheck.entities import PortfolioItem
from wicheck.rules.base import Issue, RuleContext, Severity


class PortfolioRule:
    id = "portfolio"
    description = "Defects must not belong to the Inquiries portfolio item"

    def run(self, ctx: RuleContext) -> list[Issue]:
        wi = ctx.work_item
        if wi.is_defect and wi.portfolio_item == PortfolioItem.INQUIRIES:
            return [Issue(Severity.WARN, "INQUIRY-DEFECT", "Inquiry as defect.")]
        return []
