# solver.py
# Entry points: build the solver for a problem and hand out its solutions

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Optional

from algorithmx import AlgorithmXSolver
from logging_utils import get_logger
from problem import Condition, Item, Problem, Solution
from stream import SolutionStream

logger = get_logger("solver")


def solve(
    problem: Problem,
    preselected: Optional[Iterable[Item]] = None,
    optional: Optional[Iterable[Condition]] = None,
) -> Iterator[Solution]:
    """Lazy generator of every solution, searched on the calling thread.

    Invalid input raises here, not on the first ``next()``.
    """
    return AlgorithmXSolver(problem, preselected, optional).solve()


def run(
    problem: Problem,
    preselected: Optional[Iterable[Item]] = None,
    optional: Optional[Iterable[Condition]] = None,
) -> SolutionStream:
    """
    Validate the problem, apply the preselection and start searching on a
    worker thread.

    Each solution is a list of items: the preselected ones first, then the
    ones chosen by the search. The worker owns a private copy of the problem,
    so the caller may keep editing its own.
    """
    owned = {item: list(row) for item, row in problem.items()}
    stop = threading.Event()
    solver = AlgorithmXSolver(owned, preselected, optional, stop=stop)
    logger.info(
        "Searching %d items, %d conditions (%d required left after preselection)",
        len(owned), len(solver.index), solver.required,
    )
    return SolutionStream(solver.solve(), stop=stop)


def solve_all(
    problem: Problem,
    preselected: Optional[Iterable[Item]] = None,
    optional: Optional[Iterable[Condition]] = None,
) -> list[Solution]:
    return list(solve(problem, preselected, optional))


def solve_one(
    problem: Problem,
    preselected: Optional[Iterable[Item]] = None,
    optional: Optional[Iterable[Condition]] = None,
) -> Optional[Solution]:
    return AlgorithmXSolver(problem, preselected, optional).solve_one()


def count_solutions(
    problem: Problem,
    preselected: Optional[Iterable[Item]] = None,
    optional: Optional[Iterable[Condition]] = None,
) -> int:
    return sum(1 for _ in solve(problem, preselected, optional))
