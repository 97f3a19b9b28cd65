# SPDX-License-Identifier: MIT
"""Severity, issue, report, and the Rule protocol for the work-item rule catalog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wicheck.entities import Iteration, WorkItem
    from wicheck.rules.config import PolicyConfig


class Severity(IntEnum):
    """Issue severities, ordered so that IMPORTANT > WARN > INFO."""

    INFO = 1
    WARN = 2
    IMPORTANT = 3

    @property
    def label(self) -> str:
        """Canonical name, as used in serialized reports."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, name: str) -> Severity | None:
        for severity in cls:
            if severity.label == name:
                return severity
        return None


# Public listing of severities. WARN is not part of it.
SEVERITY_VALUES: tuple[Severity, ...] = (Severity.IMPORTANT, Severity.INFO)


@dataclass(frozen=True)
class Issue:
    """A single rule violation."""

    severity: Severity
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"severity": self.severity.label, "code": self.code, "message": self.message}


class Report:
    """Ordered, immutable collection of issues from one validation run."""

    def __init__(self, issues: Iterable[Issue] | None = None) -> None:
        self._issues: tuple[Issue, ...] = tuple(issues or ())
        self._counts: dict[Severity, int] = {}

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self._issues

    @property
    def has_issues(self) -> bool:
        return len(self._issues) > 0

    @property
    def codes(self) -> list[str]:
        return [issue.code for issue in self._issues]

    def issues_of(self, severity: Severity) -> list[Issue]:
        """Return the issues at exactly ``severity``, in report order."""
        return [issue for issue in self._issues if issue.severity == severity]

    def has(self, severity: Severity) -> bool:
        # Count is computed once per severity and cached for the report's lifetime.
        if severity not in self._counts:
            self._counts[severity] = len(self.issues_of(severity))
        return self._counts[severity] > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_issues": self.has_issues,
            "issues": [issue.to_dict() for issue in self._issues],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Report:
        """Rebuild a report from :meth:`to_dict` output.

        Raises:
            ValueError: If an issue carries an unknown severity name.
        """
        issues: list[Issue] = []
        for raw in data.get("issues") or []:
            severity = Severity.parse(raw["severity"])
            if severity is None:
                msg = f"Unknown severity: {raw['severity']!r}"
                raise ValueError(msg)
            issues.append(Issue(severity=severity, code=raw["code"], message=raw["message"]))
        return cls(issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self._issues == other._issues

    def __repr__(self) -> str:
        return f"Report(codes={self.codes!r})"


@dataclass(frozen=True)
class RuleContext:
    """Context passed to each rule: the work item, policy, and optional current iteration."""

    work_item: WorkItem
    policy: PolicyConfig
    current_iteration: Iteration | None = None


@runtime_checkable
class Rule(Protocol):
    """Protocol that every work-item rule must satisfy."""

    id: str
    description: str

    def run(self, ctx: RuleContext) -> list[Issue]: ...
