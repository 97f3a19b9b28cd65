# SPDX-License-Identifier: MIT
"""Rule engine: instantiates rule classes and runs them, in order, against a work item."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from wicheck.rules.base import Issue, Rule

if TYPE_CHECKING:
    from wicheck.rules.base import RuleContext
    from wicheck.rules.config import ProfileConfig


class RuleEngine:
    """Instantiates rules from class registry and runs them against a context."""

    def __init__(self, rule_classes: list[type[Rule]] | None = None) -> None:
        from wicheck.rules.registry import RULE_REGISTRY

        classes = RULE_REGISTRY if rule_classes is None else rule_classes
        self._rules: list[Rule] = [cls() for cls in classes]

    @property
    def rule_ids(self) -> list[str]:
        return [rule.id for rule in self._rules]

    def run(self, ctx: RuleContext, issues: list[Issue] | None = None) -> list[Issue]:
        """Run all rules in registry order, appending to ``issues`` when given."""
        results: list[Issue] = [] if issues is None else issues
        for rule in self._rules:
            results.extend(rule.run(ctx))
        return results

    def check_gate(self, issues: Iterable[Issue], config: ProfileConfig) -> bool:
        """Return True if any issue meets or exceeds the profile's fail_on threshold."""
        return any(issue.severity >= config.fail_on for issue in issues)
