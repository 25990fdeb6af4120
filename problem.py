# problem.py
# Problem representation: item -> conditions it satisfies

from __future__ import annotations

Item = int
Condition = int
Problem = dict[Item, list[Condition]]
Solution = list[Item]


def add_condition(problem: Problem, item: Item, condition: Condition) -> None:
    """Append condition to the row of item, creating the row if needed."""
    problem.setdefault(item, []).append(condition)


def conditions_of(problem: Problem) -> set[Condition]:
    """All distinct conditions referenced by any row."""
    conditions: set[Condition] = set()
    for row in problem.values():
        conditions.update(row)
    return conditions
