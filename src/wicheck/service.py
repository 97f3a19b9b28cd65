# SPDX-License-Identifier: MIT
"""Tracker collaborator protocols and the default prioritization comparator.

The validator never talks to the tracker directly: it is handed a
``TrackerService`` that fetches the current iteration and a user story's
predecessors, and a comparator factory that ranks two work items within an
iteration.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from wicheck.entities import Iteration, WorkItem


@runtime_checkable
class TrackerService(Protocol):
    """Protocol for the project-tracker client. Both calls may raise."""

    async def current_iteration(self) -> Iteration | None: ...

    async def predecessors_of(self, work_item: WorkItem) -> Sequence[WorkItem] | None: ...


@runtime_checkable
class Comparator(Protocol):
    """Total order over work items: positive when ``a`` has higher priority than ``b``."""

    def compare(self, a: WorkItem, b: WorkItem) -> int: ...


ComparatorFactory = Callable[[Iteration | None], Comparator]


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


class PrioritizationComparator:
    """Rank work items for a given iteration.

    Keys, first difference wins:
    - scheduled in the comparator's iteration ranks higher
    - expedited ranks higher
    - lower drag-and-drop ``rank`` ranks higher; items without a rank come last
    """

    def __init__(self, iteration: Iteration | None) -> None:
        self.iteration = iteration

    def _in_iteration(self, item: WorkItem) -> bool:
        return self.iteration is not None and item.iteration == self.iteration

    def compare(self, a: WorkItem, b: WorkItem) -> int:
        result = _cmp(self._in_iteration(a), self._in_iteration(b))
        if result:
            return result
        result = _cmp(a.expedite, b.expedite)
        if result:
            return result
        if a.rank == b.rank:
            return 0
        if a.rank is None:
            return -1
        if b.rank is None:
            return 1
        # Lexicographically smaller rank sits higher on the board.
        return _cmp(b.rank, a.rank)
