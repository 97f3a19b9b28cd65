# SPDX-License-Identifier: MIT
"""Work-item validator: sequences the rule catalog and the tracker-backed checks.

Two modes share one pipeline:

- ``WorkItemValidator.validate_wi()`` runs synchronously with a caller-supplied
  current iteration (or none, in which case the schedule rule is skipped).
- ``await WorkItemValidator(service).validate()`` runs the base rules and the
  portfolio rule, fetches the current iteration for the schedule rule, and
  for user stories with predecessors compares the item against each
  unaccepted predecessor with a prioritization comparator built once per
  validator instance.

Tracker failures propagate to the caller; no partial report is returned.
"""

from __future__ import annotations

import asyncio
import logging

from wicheck.entities import Iteration, ScheduleState, WorkItem, WorkItemKind
from wicheck.rules.base import Issue, Report, RuleContext, Severity
from wicheck.rules.config import DEFAULT_POLICY, PolicyConfig
from wicheck.rules.engine import RuleEngine
from wicheck.rules.registry import RULE_REGISTRY, SCHEDULE_RULES, SERVICE_RULE_REGISTRY
from wicheck.service import Comparator, ComparatorFactory, PrioritizationComparator, TrackerService

log = logging.getLogger(__name__)

NO_WORK_ITEM_REPORT = Report([Issue(Severity.INFO, "NO-WI", "No workitem provided.")])

_BASE_ENGINE = RuleEngine(RULE_REGISTRY)
_SERVICE_ENGINE = RuleEngine(SERVICE_RULE_REGISTRY)
_SCHEDULE_ENGINE = RuleEngine(SCHEDULE_RULES)


class WorkItemValidator:
    """Validate work items against the project policy."""

    def __init__(
        self,
        service: TrackerService,
        *,
        policy: PolicyConfig = DEFAULT_POLICY,
        comparator_factory: ComparatorFactory = PrioritizationComparator,
    ) -> None:
        self._service = service
        self._policy = policy
        self._comparator_factory = comparator_factory
        self._comparator: Comparator | None = None
        self._comparator_lock = asyncio.Lock()

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    @staticmethod
    def validate_wi(
        work_item: WorkItem | None,
        current_iteration: Iteration | None = None,
        *,
        policy: PolicyConfig = DEFAULT_POLICY,
    ) -> Report | None:
        """Validate with a caller-supplied current iteration. Never suspends.

        Returns None when no work item is given.
        """
        if work_item is None:
            return None
        ctx = RuleContext(work_item=work_item, policy=policy, current_iteration=current_iteration)
        issues = _BASE_ENGINE.run(ctx)
        if current_iteration is not None:
            _SCHEDULE_ENGINE.run(ctx, issues)
        return Report(issues)

    async def validate(self, work_item: WorkItem | None) -> Report:
        """Validate against the tracker: current iteration and predecessor ordering.

        Returns the fixed NO-WI report when no work item is given.

        Raises:
            Exception: Whatever the tracker service raises, unchanged.
        """
        if work_item is None:
            return NO_WORK_ITEM_REPORT

        ctx = RuleContext(work_item=work_item, policy=self._policy)
        issues = _SERVICE_ENGINE.run(ctx)

        current = await self._service.current_iteration()
        ctx = RuleContext(work_item=work_item, policy=self._policy, current_iteration=current)
        _SCHEDULE_ENGINE.run(ctx, issues)

        if (
            work_item.kind == WorkItemKind.HIERARCHICAL_REQUIREMENT
            and work_item.predecessors_count > 0
        ):
            issues.extend(await self._check_predecessors(work_item))

        return Report(issues)

    async def _ensure_comparator(self) -> Comparator:
        async with self._comparator_lock:
            if self._comparator is None:
                iteration = await self._service.current_iteration()
                self._comparator = self._comparator_factory(iteration)
                log.info(
                    "Prioritization comparator built for iteration %s",
                    iteration.name if iteration is not None else None,
                )
            return self._comparator

    async def _check_predecessors(self, story: WorkItem) -> list[Issue]:
        comparator = await self._ensure_comparator()
        predecessors = await self._service.predecessors_of(story) or []
        log.debug("%s: %d predecessor(s) fetched", story.formatted_id, len(predecessors))

        results: list[Issue] = []
        for pred in predecessors:
            if pred.schedule_state >= ScheduleState.ACCEPTED:
                continue
            if comparator.compare(story, pred) < 0:
                results.append(
                    Issue(
                        Severity.IMPORTANT,
                        "PREDECESSOR",
                        f"Has a predecessor with a lower prioritization [{pred.formatted_id}].",
                    )
                )
        return results


def validate_wi(
    work_item: WorkItem | None,
    current_iteration: Iteration | None = None,
    *,
    policy: PolicyConfig = DEFAULT_POLICY,
) -> Report | None:
    """Convenience: validate a work item with a caller-supplied current iteration."""
    return WorkItemValidator.validate_wi(work_item, current_iteration, policy=policy)
