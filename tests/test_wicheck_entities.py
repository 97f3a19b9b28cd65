# SPDX-License-Identifier: MIT
"""Tests for wicheck.entities: work-item model parsing and identity."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wicheck.entities import Iteration, Project, ScheduleState, Tag, User, WorkItem, WorkItemKind


class TestScheduleState:
    def test_order(self) -> None:
        assert (
            ScheduleState.UNDEFINED
            < ScheduleState.DEFINED
            < ScheduleState.IN_PROGRESS
            < ScheduleState.COMPLETED
            < ScheduleState.ACCEPTED
        )

    def test_abbr(self) -> None:
        assert "".join(s.abbr for s in ScheduleState) == "UDPCA"

    @pytest.mark.parametrize(
        "raw",
        ["IN_PROGRESS", "in_progress", "In-Progress", "P", 2, ScheduleState.IN_PROGRESS],
    )
    def test_parse(self, raw: object) -> None:
        assert ScheduleState.parse(raw) is ScheduleState.IN_PROGRESS

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown schedule state"):
            ScheduleState.parse("Released")


class TestIdentity:
    def test_iteration_compares_by_id(self) -> None:
        assert Iteration(id="it-1", name="Sprint 1") == Iteration(id="it-1", name="renamed")
        assert Iteration(id="it-1") != Iteration(id="it-2")
        assert len({Iteration(id="it-1"), Iteration(id="it-1", name="x")}) == 1

    def test_distinct_types_differ(self) -> None:
        assert User(id="x") != Project(id="x")

    def test_none_is_not_equal(self) -> None:
        assert Iteration(id="it-1") != None  # noqa: E711


class TestWorkItem:
    def test_defaults(self) -> None:
        wi = WorkItem()
        assert wi.kind == WorkItemKind.GENERIC
        assert wi.schedule_state == ScheduleState.UNDEFINED
        assert wi.tags == frozenset()
        assert wi.project is None
        assert wi.predecessors_count == 0

    def test_from_json(self) -> None:
        wi = WorkItem.model_validate_json(
            """{
                "formatted_id": "US42",
                "kind": "hierarchical_requirement",
                "schedule_state": "Completed",
                "tags": ["UAT", "customer"],
                "plan_estimate": 3,
                "owner": {"id": "dev-1", "display_name": "Dev One"},
                "iteration": {"id": "it-7", "name": "Sprint 7"}
            }"""
        )
        assert wi.is_user_story
        assert wi.schedule_state is ScheduleState.COMPLETED
        assert wi.has_tag(Tag.UAT)
        assert wi.tagged_as_deployed
        assert wi.plan_estimate == 3.0
        assert wi.iteration == Iteration(id="it-7")

    def test_not_to_deploy_is_not_deployed(self) -> None:
        wi = WorkItem(tags=frozenset({Tag.NOT_TO_DEPLOY}))
        assert not wi.tagged_as_deployed

    def test_null_tags(self) -> None:
        assert WorkItem.model_validate({"tags": None}).tags == frozenset()

    def test_bad_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkItem.model_validate({"kind": "epic"})

    def test_frozen(self) -> None:
        wi = WorkItem()
        with pytest.raises(ValidationError):
            wi.blocked = True  # type: ignore[misc]
