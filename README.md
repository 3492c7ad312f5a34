# goaltrack

Keep a list of study goals ordered by priority, finish them one at a time
and see what you have done so far.

A smaller number means a higher priority. The pending goal with the
smallest priority number is always the next one to complete; goals with the
same priority come out in the order they were added.

## Installing

```
pip install .
```

## The console tracker

```
goaltrack
```

This starts a menu:

```
====== Study Goal Tracker ======
1. Add Goal
2. Complete Top Priority Goal
3. View Pending Goals
4. View Completed Goals
5. Search Goal
6. Delete Goal
7. Update Goal Priority
8. Show Total Goals
9. Clear Completed Goals
10. Exit
```

Pick an option by its number and answer the prompts that follow. An
unknown choice prints a warning and shows the menu again; a priority that
is not a whole number is refused. Choosing 10, or reaching the end of
input, ends the session.

## What it does not do

Goals are kept in memory only. Nothing is saved to disk, so every goal is
gone once the tracker exits.

## Using the tracker from code

```python
from goaltrack.tracker import GoalTracker, NoPendingGoalsError

tracker = GoalTracker()
tracker.add_goal("Read chapter 3", 2)
tracker.add_goal("Practice recursion", 1)

for goal in tracker.pending():
    print(goal.title, goal.priority)

done = tracker.complete_goal()        # "Practice recursion"
tracker.update_priority("Read chapter 3", 5)
print(tracker.totals())               # Totals(pending=1, completed=1)
```

- `add_goal(title, priority)` adds a pending `Goal` and returns it.
- `complete_goal()` marks the most urgent pending goal completed and
  returns it; it raises `NoPendingGoalsError` when nothing is pending.
- `pending()` lists pending goals, most urgent first; `completed()` lists
  completed goals in the order they were finished.
- `find(title)` returns the most urgent pending goal with that title.
- `delete(title)` removes every pending goal with that title and
  `update_priority(title, priority)` re-prioritises every one; both return
  how many goals they touched.
- `find`, `delete` and `update_priority` raise `GoalNotFoundError` when no
  pending goal has the given title.
- `totals()` returns the pending and completed counts; `clear_completed()`
  forgets completed goals and returns how many there were.

The menu can also be driven from any pair of text streams with
`goaltrack.cli.run(stdin, stdout)`, which returns the exit code.

## Small algorithms

The package also carries a few array, number and list routines:

- `goaltrack.algorithms`: `linear_search`, `reverse_in_place`, `subarrays`,
  `two_sum`, `find_median_sorted_arrays`, `is_palindrome`, `roman_to_int`,
  `three_sum`, `remove_element`
- `goaltrack.linked`: `ListNode`, `from_iterable`, `merge_two_lists`
- `goaltrack.complex_number`: `Complex`, an integer complex number that adds
  with `+` and prints as `3 + 4i`

```python
from goaltrack.algorithms import two_sum, roman_to_int
from goaltrack.linked import from_iterable, merge_two_lists

two_sum([2, 7, 11, 15], 9)            # (0, 1); None when no pair exists
roman_to_int("MCMXCIV")               # 1994
list(merge_two_lists(from_iterable([1, 2, 4]), from_iterable([1, 3, 4])))
# [1, 1, 2, 3, 4, 4]
```

`roman_to_int` raises `ValueError` for characters that are not Roman
numerals, and `find_median_sorted_arrays` raises `ValueError` when both
inputs are empty or not sorted.

## Running the tests

```
pip install .[test]
pytest
```