"""Priority-ordered study goals with a record of completed ones."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class Goal:
    """A study goal; a smaller priority value means more urgent."""

    title: str
    priority: int
    completed: bool = False


class GoalNotFoundError(LookupError):
    """Raised when no pending goal has the requested title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"goal not found: {title!r}")
        self.title = title


class NoPendingGoalsError(LookupError):
    """Raised when a goal is requested but none are pending."""


class Totals(NamedTuple):
    pending: int
    completed: int


class GoalTracker:
    """Keeps pending goals in priority order and remembers completed ones."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Goal]] = []
        self._completed: list[Goal] = []
        self._order = itertools.count()

    def add_goal(self, title: str, priority: int) -> Goal:
        """Add a pending goal and return it."""
        goal = Goal(title, priority)
        heapq.heappush(self._heap, (priority, next(self._order), goal))
        return goal

    def complete_goal(self) -> Goal:
        """Mark the most urgent pending goal as completed and return it."""
        if not self._heap:
            raise NoPendingGoalsError("no pending goals")
        _, _, goal = heapq.heappop(self._heap)
        goal.completed = True
        self._completed.append(goal)
        return goal

    def pending(self) -> list[Goal]:
        """Pending goals, most urgent first."""
        return [goal for _, _, goal in sorted(self._heap)]

    def completed(self) -> list[Goal]:
        """Completed goals in the order they were completed."""
        return list(self._completed)

    def find(self, title: str) -> Goal:
        """Return the most urgent pending goal with this title."""
        for goal in self.pending():
            if goal.title == title:
                return goal
        raise GoalNotFoundError(title)

    def delete(self, title: str) -> int:
        """Remove every pending goal with this title; return how many went."""
        kept = [entry for entry in self._heap if entry[2].title != title]
        removed = len(self._heap) - len(kept)
        if not removed:
            raise GoalNotFoundError(title)
        heapq.heapify(kept)
        self._heap = kept
        return removed

    def update_priority(self, title: str, priority: int) -> int:
        """Give every pending goal with this title a new priority; return the count."""
        updated = 0
        rebuilt = []
        for old_priority, order, goal in self._heap:
            if goal.title == title:
                goal.priority = priority
                updated += 1
                rebuilt.append((priority, order, goal))
            else:
                rebuilt.append((old_priority, order, goal))
        if not updated:
            raise GoalNotFoundError(title)
        heapq.heapify(rebuilt)
        self._heap = rebuilt
        return updated

    def totals(self) -> Totals:
        """Counts of pending and completed goals."""
        return Totals(len(self._heap), len(self._completed))

    def clear_completed(self) -> int:
        """Forget all completed goals; return how many were cleared."""
        cleared = len(self._completed)
        self._completed.clear()
        return cleared