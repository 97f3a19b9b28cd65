# SPDX-License-Identifier: MIT
"""Rule class registry: explicit, ordered rule lists for each validation pipeline."""

from __future__ import annotations

from wicheck.rules.base import Rule
from wicheck.rules.deployment import DeploymentRule
from wicheck.rules.estimation import EstimationRule
from wicheck.rules.expedite import ExpediteRule
from wicheck.rules.owner import OwnerRule
from wicheck.rules.portfolio import PortfolioRule
from wicheck.rules.project import ProjectRule
from wicheck.rules.schedule import ScheduleRule

# Rules that need nothing beyond the work item and the policy, in evaluation order.
RULE_REGISTRY: list[type[Rule]] = [
    ProjectRule,
    DeploymentRule,
    ExpediteRule,
    EstimationRule,
    OwnerRule,
]

# Service-backed pipeline: the base rules followed by the portfolio rule.
SERVICE_RULE_REGISTRY: list[type[Rule]] = [*RULE_REGISTRY, PortfolioRule]

SCHEDULE_RULES: list[type[Rule]] = [ScheduleRule]
