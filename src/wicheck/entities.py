# SPDX-License-Identifier: MIT
"""Work-item entities read by the validator: immutable pydantic models and enums."""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScheduleState(IntEnum):
    """Schedule states, ordered along the workflow."""

    UNDEFINED = 0
    DEFINED = 1
    IN_PROGRESS = 2
    COMPLETED = 3
    ACCEPTED = 4

    @property
    def abbr(self) -> str:
        return _STATE_ABBR[self]

    @property
    def display_name(self) -> str:
        return _STATE_DISPLAY[self]

    @classmethod
    def parse(cls, value: Any) -> ScheduleState:
        """Resolve a state from its enum name, display name, abbreviation or integer.

        Raises:
            ValueError: If the value matches no state.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip()
            for state in cls:
                if key.upper() in (state.name, state.abbr) or key == state.display_name:
                    return state
        msg = f"Unknown schedule state: {value!r}"
        raise ValueError(msg)


_STATE_ABBR = {
    ScheduleState.UNDEFINED: "U",
    ScheduleState.DEFINED: "D",
    ScheduleState.IN_PROGRESS: "P",
    ScheduleState.COMPLETED: "C",
    ScheduleState.ACCEPTED: "A",
}

_STATE_DISPLAY = {
    ScheduleState.UNDEFINED: "Undefined",
    ScheduleState.DEFINED: "Defined",
    ScheduleState.IN_PROGRESS: "In-Progress",
    ScheduleState.COMPLETED: "Completed",
    ScheduleState.ACCEPTED: "Accepted",
}


class WorkItemKind(StrEnum):
    GENERIC = "generic"
    DEFECT = "defect"
    HIERARCHICAL_REQUIREMENT = "hierarchical_requirement"


class Tag(StrEnum):
    UAT = "UAT"
    PRE = "PRE"
    PRO = "PRO"
    NOT_TO_DEPLOY = "NOT TO DEPLOY"


DEPLOYED_TAGS = frozenset({Tag.UAT, Tag.PRE, Tag.PRO})


class PortfolioItem(StrEnum):
    INQUIRIES = "Inquiries"


class _Identified(BaseModel):
    """Base for tracker entities that compare and hash by ``id`` only."""

    model_config = ConfigDict(frozen=True)

    id: str

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))


class Project(_Identified):
    name: str = ""


class User(_Identified):
    display_name: str = ""


class Iteration(_Identified):
    name: str = ""


class WorkItem(BaseModel):
    """A tracker work item: generic, defect, or user story (hierarchical requirement)."""

    model_config = ConfigDict(frozen=True)

    formatted_id: str = ""
    name: str = ""
    kind: WorkItemKind = WorkItemKind.GENERIC
    project: Project | None = None
    tags: frozenset[str] = Field(default_factory=frozenset)
    schedule_state: ScheduleState = ScheduleState.UNDEFINED
    plan_estimate: float | None = None
    owner: User | None = None
    blocked: bool = False
    blocked_reason: str | None = None
    iteration: Iteration | None = None
    inquiry: bool = False
    expedite: bool = False
    portfolio_item: str | None = None
    predecessors_count: int = 0
    rank: str | None = None

    @field_validator("schedule_state", mode="before")
    @classmethod
    def _parse_schedule_state(cls, value: Any) -> ScheduleState:
        return ScheduleState.parse(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_tags(cls, value: Any) -> Any:
        return frozenset() if value is None else value

    @property
    def is_defect(self) -> bool:
        return self.kind == WorkItemKind.DEFECT

    @property
    def is_user_story(self) -> bool:
        return self.kind == WorkItemKind.HIERARCHICAL_REQUIREMENT

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    @property
    def tagged_as_deployed(self) -> bool:
        """True when any of the UAT/PRE/PRO environment tags is present."""
        return not DEPLOYED_TAGS.isdisjoint(self.tags)
