"""wicheck: policy checks for project-tracker work items."""

from wicheck.entities import (
    Iteration,
    PortfolioItem,
    Project,
    ScheduleState,
    Tag,
    User,
    WorkItem,
    WorkItemKind,
)
from wicheck.rules import (
    DEFAULT_POLICY,
    SEVERITY_VALUES,
    Issue,
    PolicyConfig,
    Report,
    Severity,
    check_gate,
    load_policy,
    load_profile,
)
from wicheck.service import PrioritizationComparator, TrackerService
from wicheck.validator import NO_WORK_ITEM_REPORT, WorkItemValidator, validate_wi

__all__ = [
    "DEFAULT_POLICY",
    "NO_WORK_ITEM_REPORT",
    "SEVERITY_VALUES",
    "Issue",
    "Iteration",
    "PolicyConfig",
    "PortfolioItem",
    "PrioritizationComparator",
    "Project",
    "Report",
    "ScheduleState",
    "Severity",
    "Tag",
    "TrackerService",
    "User",
    "WorkItem",
    "WorkItemKind",
    "WorkItemValidator",
    "check_gate",
    "load_policy",
    "load_profile",
    "validate_wi",
]
