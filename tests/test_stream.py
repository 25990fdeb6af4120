"""Tests for the threaded solution stream and the solver entry points."""

import time

import pytest

import solver
from errors import (
    ConflictingPreselectedItem,
    ItemWithOnlyOptionalConditions,
    UnknownOptionalCondition,
    UnknownPreselectedItem,
)
from queens import build_problem as queens_problem
from stream import SolutionStream


def numbers(count, fail_after=None):
    for i in range(count):
        if fail_after is not None and i == fail_after:
            raise KeyError("boom")
        yield [i]


class TestSolutionStream:
    def test_yields_everything_in_order(self):
        stream = SolutionStream(numbers(5))
        assert list(stream) == [[0], [1], [2], [3], [4]]
        assert not stream.running

    def test_small_buffer(self):
        stream = SolutionStream(numbers(20), buffer_size=1)
        assert len(list(stream)) == 20

    def test_not_restartable(self):
        stream = SolutionStream(numbers(2))
        assert len(list(stream)) == 2
        assert list(stream) == []

    def test_worker_error_reaches_consumer(self):
        stream = SolutionStream(numbers(5, fail_after=2))
        assert next(stream) == [0]
        assert next(stream) == [1]
        with pytest.raises(KeyError):
            next(stream)
        with pytest.raises(StopIteration):
            next(stream)

    def test_close_stops_worker(self):
        closed = []

        def endless():
            try:
                i = 0
                while True:
                    yield [i]
                    i += 1
            finally:
                closed.append(True)

        stream = SolutionStream(endless(), buffer_size=2)
        assert next(stream) == [0]
        stream.close()

        assert not stream.running
        assert closed == [True]
        with pytest.raises(StopIteration):
            next(stream)

    def test_context_manager_closes(self):
        with SolutionStream(numbers(1000), buffer_size=1) as stream:
            first = next(stream)
        assert first == [0]
        assert not stream.running


class TestRun:
    def test_scenario_two_covers(self):
        stream = solver.run({1: [0], 2: [1], 3: [0, 1]})
        assert list(stream) == [[1, 2], [3]]

    def test_no_required_conditions(self):
        assert list(solver.run({})) == [[]]

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            ({"optional": {1}}, UnknownOptionalCondition),
            ({"optional": {0}}, ItemWithOnlyOptionalConditions),
            ({"preselected": [2]}, UnknownPreselectedItem),
        ],
    )
    def test_setup_errors_raise_from_run(self, kwargs, error):
        with pytest.raises(error):
            solver.run({1: [0]}, **kwargs)

    def test_conflicting_preselection_raises_from_run(self):
        with pytest.raises(ConflictingPreselectedItem):
            solver.run({1: [0], 2: [0, 1]}, preselected=[1, 2])

    def test_worker_owns_a_copy_of_the_problem(self):
        problem = {1: [0], 2: [1], 3: [0, 1]}
        stream = solver.run(problem)
        problem[4] = [0]
        problem[1].append(1)
        assert list(stream) == [[1, 2], [3]]

    def test_close_while_search_finds_nothing(self):
        # eleven pigeons, ten holes: no solution, a long search
        problem = {p * 10 + h: [p, 11 + h] for p in range(11) for h in range(10)}
        stream = solver.run(problem, optional=set(range(11, 21)))
        time.sleep(0.2)
        assert stream.running

        started = time.monotonic()
        stream.close()

        assert not stream.running
        assert time.monotonic() - started < 2.0
        with pytest.raises(StopIteration):
            next(stream)

    def test_early_close_on_large_search(self):
        problem, optional = queens_problem(8)
        with solver.run(problem, optional=optional) as stream:
            first = next(stream)
        assert len(first) == 8
        assert not stream.running

    def test_same_solution_set_as_in_thread_search(self):
        problem, optional = queens_problem(6)
        threaded = {frozenset(s) for s in solver.run(problem, optional=optional)}
        direct = {frozenset(s) for s in solver.solve(problem, optional=optional)}
        assert threaded == direct
        assert len(threaded) == 4


class TestHelpers:
    def test_solve_validates_eagerly(self):
        with pytest.raises(UnknownOptionalCondition):
            solver.solve({1: [0]}, optional=[5])

    def test_solve_all(self):
        assert solver.solve_all({1: [0], 2: [1], 3: [0, 1]}) == [[1, 2], [3]]

    def test_solve_one(self):
        assert solver.solve_one({1: [0], 2: [1], 3: [0, 1]}, preselected=[3]) == [3]
        assert solver.solve_one({1: [0, 1], 2: [1, 2]}) is None

    def test_count_solutions(self):
        problem, optional = queens_problem(5)
        assert solver.count_solutions(problem, optional=optional) == 10
