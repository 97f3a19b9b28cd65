# SPDX-License-Identifier: MIT
"""Tests for Rule 7, schedule."""

from __future__ import annotations

from typing import Any

from wicheck.entities import Iteration, WorkItem
from wicheck.rules.base import RuleContext, Severity
from wicheck.rules.config import DEFAULT_POLICY
from wicheck.rules.schedule import ScheduleRule

CURRENT = Iteration(id="it-8", name="Sprint 8")
PAST = Iteration(id="it-7", name="Sprint 7")


def _run(current: Iteration | None, **fields: Any) -> list[tuple[Severity, str]]:
    ctx = RuleContext(
        work_item=WorkItem(**fields), policy=DEFAULT_POLICY, current_iteration=current
    )
    return [(r.severity, r.code) for r in ScheduleRule().run(ctx)]


class TestScheduleRule:
    def test_unscheduled_item(self) -> None:
        assert _run(CURRENT) == []

    def test_other_iteration(self) -> None:
        assert _run(CURRENT, iteration=PAST, plan_estimate=3) == [
            (Severity.WARN, "CURRENT-ITERATION-EXPECTED")
        ]

    def test_other_iteration_message(self) -> None:
        ctx = RuleContext(
            work_item=WorkItem(iteration=PAST, plan_estimate=3),
            policy=DEFAULT_POLICY,
            current_iteration=CURRENT,
        )
        assert ScheduleRule().run(ctx)[0].message == (
            "Workitem iteration [Sprint 7] is not the current one [Sprint 8]."
        )

    def test_current_iteration_without_estimation(self) -> None:
        results = _run(CURRENT, iteration=Iteration(id="it-8", name="Sprint 8"))
        assert results == [(Severity.IMPORTANT, "CURRENT-ITERATION-WITHOUT-ESTIMATION")]

    def test_other_iteration_without_estimation(self) -> None:
        assert _run(CURRENT, iteration=PAST) == [
            (Severity.WARN, "CURRENT-ITERATION-EXPECTED"),
            (Severity.WARN, "SCHEDULED-WITHOUT-ESTIMATION"),
        ]

    def test_unknown_current_iteration(self) -> None:
        assert _run(None, iteration=PAST) == [(Severity.WARN, "SCHEDULED-WITHOUT-ESTIMATION")]

    def test_blocked_or_inquiry_need_no_estimate(self) -> None:
        assert _run(CURRENT, iteration=CURRENT, blocked=True) == []
        assert _run(CURRENT, iteration=CURRENT, inquiry=True) == []

    def test_estimated_in_current_iteration(self) -> None:
        assert _run(CURRENT, iteration=CURRENT, plan_estimate=5) == []
