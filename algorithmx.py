# algorithmx.py
# Algorithm X over a dict-of-sets column index

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from columns import Column, ColumnIndex
from config import RECURSION_HEADROOM
from errors import (
    ConflictingPreselectedItem,
    SearchInvariantError,
    UnknownPreselectedItem,
)
from logging_utils import get_logger
from problem import Condition, Item, Problem, Solution

logger = get_logger("algorithmx")


@dataclass
class Scratch:
    """Undo record of one select: removed columns in removal order."""

    required: int = 0
    removed: list[tuple[Condition, Column]] = field(default_factory=list)


def select(index: ColumnIndex, problem: Problem, item: Item) -> Scratch:
    scratch = Scratch()
    row = problem.get(item)
    if row is None:
        return scratch

    columns = index.columns
    for j in row:
        column = columns.get(j)
        if column is None:
            continue
        # Every item competing for j conflicts with this choice.
        for i in column.items:
            for k in problem[i]:
                if k != j:
                    other = columns.get(k)
                    if other is not None:
                        other.items.discard(i)
        if column.required:
            scratch.required += 1
        scratch.removed.append((j, columns.pop(j)))
    return scratch


def deselect(index: ColumnIndex, problem: Problem, item: Item, scratch: Scratch) -> None:
    # Strict LIFO: last column removed is the first restored.
    columns = index.columns
    while scratch.removed:
        j, column = scratch.removed.pop()
        if column.required:
            scratch.required -= 1
        for i in column.items:
            for k in problem[i]:
                if k != j:
                    other = columns.get(k)
                    if other is not None:
                        other.items.add(i)
        columns[j] = column


def preselect(index: ColumnIndex, problem: Problem, item: Item) -> int:
    """Permanently cover item. Returns the number of required columns removed."""
    for condition in problem[item]:
        if condition not in index:
            raise ConflictingPreselectedItem(item, condition)
    return select(index, problem, item).required


class AlgorithmXSolver:
    """
    Backtracking search over the column index of one problem.

    When ``stop`` is given, the search checks it before every node and
    unwinds without further solutions once it is set.
    """

    def __init__(
        self,
        problem: Problem,
        preselected: Optional[Iterable[Item]] = None,
        optional: Optional[Iterable[Condition]] = None,
        stop: Optional[threading.Event] = None,
    ):
        self.problem = problem
        self.index = ColumnIndex.build(problem, optional)
        self.required = self.index.required_count()
        self.path: Solution = []
        self.stop = stop
        self.nodes = 0
        self.solutions_found = 0

        fixed = list(preselected) if preselected is not None else []
        for item in fixed:
            if item not in problem:
                logger.warning("Rejecting problem: unknown preselected item %s", item)
                raise UnknownPreselectedItem(item)

        for item in fixed:
            try:
                self.required -= preselect(self.index, problem, item)
            except ConflictingPreselectedItem:
                logger.warning("Rejecting problem: preselected item %s conflicts", item)
                raise
            self.path.append(item)

    def _stopped(self) -> bool:
        return self.stop is not None and self.stop.is_set()

    def _choose_column(self) -> Condition:
        condition = self.index.most_constrained()
        if condition is None:
            raise SearchInvariantError(
                f"{self.required} required conditions left but no required column"
            )
        return condition

    def solve(self) -> Iterator[Solution]:
        # Each level of the search is one nested generator frame. The limit
        # is process-wide, so it is put back once the search ends.
        previous_limit = sys.getrecursionlimit()
        needed = len(self.index) + len(self.path) + RECURSION_HEADROOM
        if previous_limit < needed:
            logger.debug("Raising recursion limit to %d", needed)
            sys.setrecursionlimit(needed)

        logger.debug(
            "Starting search: %d required conditions, %d preselected items",
            self.required, len(self.path),
        )
        try:
            yield from self._search(self.required)
        finally:
            if sys.getrecursionlimit() != previous_limit:
                sys.setrecursionlimit(previous_limit)

        if self._stopped():
            logger.debug("Search stopped after %d nodes", self.nodes)
        else:
            logger.debug(
                "Search exhausted: %d nodes visited, %d solutions",
                self.nodes, self.solutions_found,
            )

    def _search(self, required: int) -> Iterator[Solution]:
        if self._stopped():
            return
        self.nodes += 1
        if required == 0:
            self.solutions_found += 1
            yield list(self.path)
            return

        # Sorted copy: the column changes while its items are tried.
        order = sorted(self.index.columns[self._choose_column()].items)
        for item in order:
            if self._stopped():
                return
            self.path.append(item)
            scratch = select(self.index, self.problem, item)
            try:
                if scratch.removed:
                    yield from self._search(required - scratch.required)
            finally:
                # Also runs when the consumer closes the generator early.
                if scratch.removed:
                    deselect(self.index, self.problem, item, scratch)
                self.path.pop()

    def solve_one(self) -> Optional[Solution]:
        search = self.solve()
        try:
            return next(search, None)
        finally:
            search.close()
