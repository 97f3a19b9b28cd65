# SPDX-License-Identifier: MIT
"""Work-item rule catalog: deterministic policy rules over a single work item."""

from wicheck.rules.base import SEVERITY_VALUES, Issue, Report, Rule, RuleContext, Severity
from wicheck.rules.config import (
    DEFAULT_POLICY,
    PolicyConfig,
    ProfileConfig,
    load_policy,
    load_profile,
)
from wicheck.rules.engine import RuleEngine

__all__ = [
    "DEFAULT_POLICY",
    "SEVERITY_VALUES",
    "Issue",
    "PolicyConfig",
    "ProfileConfig",
    "Report",
    "Rule",
    "RuleContext",
    "RuleEngine",
    "Severity",
    "load_policy",
    "load_profile",
]


def check_gate(issues: Report | list[Issue], profile: ProfileConfig) -> bool:
    """Convenience: check if any issue meets or exceeds the profile gate."""
    engine = RuleEngine(rule_classes=[])
    return engine.check_gate(issues, profile)
