"""Interactive menu for the study goal tracker."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from goaltrack.tracker import GoalNotFoundError, GoalTracker, NoPendingGoalsError

_MENU = (
    "\n====== Study Goal Tracker ======\n"
    "1. Add Goal\n"
    "2. Complete Top Priority Goal\n"
    "3. View Pending Goals\n"
    "4. View Completed Goals\n"
    "5. Search Goal\n"
    "6. Delete Goal\n"
    "7. Update Goal Priority\n"
    "8. Show Total Goals\n"
    "9. Clear Completed Goals\n"
    "10. Exit\n"
)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.tracker = GoalTracker()

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_priority(self, prompt: str) -> int | None:
        priority = _parse_int(self.ask(prompt))
        if priority is None:
            self.say("⚠️ Invalid priority!")
        return priority

    def add(self) -> None:
        title = self.ask("Enter goal title: ")
        priority = self.ask_priority("Enter priority (smaller = higher priority): ")
        if priority is not None:
            self.tracker.add_goal(title, priority)
            self.say(f"✅ Goal Added: {title}")

    def complete(self) -> None:
        try:
            goal = self.tracker.complete_goal()
        except NoPendingGoalsError:
            self.say("⚠️ No pending goals!")
        else:
            self.say(f"🎉 Goal Completed: {goal.title}")

    def view_pending(self) -> None:
        goals = self.tracker.pending()
        if not goals:
            self.say("👍 No pending goals!")
            return
        self.say("\n📌 Pending Goals (by priority):")
        for goal in goals:
            self.say(f"- {goal.title} (Priority: {goal.priority})")

    def view_completed(self) -> None:
        goals = self.tracker.completed()
        if not goals:
            self.say("❌ No goals completed yet!")
            return
        self.say("\n✅ Completed Goals:")
        for goal in goals:
            self.say(f"- {goal.title}")

    def search(self) -> None:
        title = self.ask("Enter goal title to search: ")
        try:
            goal = self.tracker.find(title)
        except GoalNotFoundError:
            self.say("❌ Goal not found!")
        else:
            self.say(f"🔍 Found Goal: {goal.title} (Priority: {goal.priority})")

    def delete(self) -> None:
        title = self.ask("Enter goal title to delete: ")
        try:
            removed = self.tracker.delete(title)
        except GoalNotFoundError:
            self.say("❌ Goal not found to delete!")
            return
        for _ in range(removed):
            self.say(f"🗑️ Goal Deleted: {title}")

    def update(self) -> None:
        title = self.ask("Enter goal title to update: ")
        priority = self.ask_priority("Enter new priority: ")
        if priority is None:
            return
        try:
            updated = self.tracker.update_priority(title, priority)
        except GoalNotFoundError:
            self.say("❌ Goal not found to update!")
            return
        for _ in range(updated):
            self.say(f"✏️ Updated Priority of: {title} to {priority}")

    def totals(self) -> None:
        totals = self.tracker.totals()
        self.say(f"📊 Total Pending Goals: {totals.pending}")
        self.say(f"📊 Total Completed Goals: {totals.completed}")

    def clear(self) -> None:
        if self.tracker.clear_completed():
            self.say("🧹 Cleared all completed goals!")
        else:
            self.say("⚠️ No completed goals to clear!")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends; return the exit code."""
    session = _Session(stdin, stdout)
    actions = {
        1: session.add,
        2: session.complete,
        3: session.view_pending,
        4: session.view_completed,
        5: session.search,
        6: session.delete,
        7: session.update,
        8: session.totals,
        9: session.clear,
    }
    try:
        while True:
            stdout.write(_MENU)
            choice = _parse_int(session.ask("Enter your choice: "))
            if choice == 10:
                session.say("👋 Exiting... Keep learning!")
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                session.say("⚠️ Invalid choice! Try again.")
            else:
                action()
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive study goal tracker."""
    parser = argparse.ArgumentParser(
        prog="goaltrack", description="Track study goals by priority."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())