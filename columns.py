# columns.py
# Column index: condition -> items that can still satisfy it

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from errors import ItemWithOnlyOptionalConditions, UnknownOptionalCondition
from logging_utils import get_logger
from problem import Condition, Item, Problem, conditions_of

logger = get_logger("columns")


@dataclass
class Column:
    required: bool
    items: set[Item] = field(default_factory=set)


class ColumnIndex:
    """
    Columnar view of a Problem.

    Only the columns are mutated during search; rows are always looked up in
    the Problem itself. A column that has been covered is absent from
    ``columns`` until it is uncovered again.
    """

    def __init__(self, columns: dict[Condition, Column]):
        self.columns = columns

    @classmethod
    def build(
        cls,
        problem: Problem,
        optional: Optional[Iterable[Condition]] = None,
    ) -> ColumnIndex:
        conditions = conditions_of(problem)
        optional_set = frozenset(optional) if optional is not None else frozenset()

        for condition in sorted(optional_set):
            if condition not in conditions:
                logger.warning("Rejecting problem: unknown optional condition %s", condition)
                raise UnknownOptionalCondition(condition)

        if optional_set:
            for item, row in problem.items():
                # Empty rows satisfy nothing and are never chosen.
                if row and all(c in optional_set for c in row):
                    logger.warning("Rejecting problem: item %s has only optional conditions", item)
                    raise ItemWithOnlyOptionalConditions(item)

        columns = {c: Column(required=c not in optional_set) for c in conditions}
        for item, row in problem.items():
            for condition in row:
                columns[condition].items.add(item)

        index = cls(columns)
        logger.debug(
            "Built column index: %d items, %d columns (%d required)",
            len(problem), len(columns), index.required_count(),
        )
        return index

    def __len__(self) -> int:
        return len(self.columns)

    def __contains__(self, condition: Condition) -> bool:
        return condition in self.columns

    def required_count(self) -> int:
        return sum(1 for col in self.columns.values() if col.required)

    def most_constrained(self) -> Optional[Condition]:
        # Heuristic: required column with the fewest items, lowest id on ties.
        best: Optional[Condition] = None
        best_size = 0
        for condition, column in self.columns.items():
            if not column.required:
                continue
            size = len(column.items)
            if best is None or size < best_size or (size == best_size and condition < best):
                best = condition
                best_size = size
        return best

    def snapshot(self) -> dict[Condition, tuple[bool, frozenset[Item]]]:
        """Content copy of the index, for comparing states."""
        return {
            condition: (column.required, frozenset(column.items))
            for condition, column in self.columns.items()
        }
