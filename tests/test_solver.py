import pytest
from core.constraints import validate, is_order_valid
from core.state import TimetableState
from core.activity import timetables_equal
from exceptions.custom_errors import CUSTOM_ERRORS, InvalidActivityError, InvalidDayBoundsError
from scheduler import solver as solver_module
from scheduler.apply import apply_timetable
from scheduler.solver import SolveStatus, solve_timetable


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def __call__(self, timetable):
        self.calls.append(timetable)


def make_state(timetable, now=None):
    state = TimetableState()
    state.set_default(timetable)
    state.set_clock(now)
    return state


def spans(timetable):
    return [(act.start, act.duration) for act in timetable]


def test_nothing_to_adjust_commits_locks_without_scoring(make_activity, monkeypatch):
    original = [make_activity("A", 480, 60, 30, 90), make_activity("B", 540, 60, 30, 90)]
    state = make_state(original, now=700)
    render = RecordingRenderer()

    def fail(*args, **kwargs):
        raise AssertionError("scoring must not run")

    monkeypatch.setattr(solver_module, "select_best", fail)

    result = solve_timetable(state, 480, 1000, render=render)

    assert result.status == SolveStatus.NOTHING_TO_ADJUST
    assert spans(state.get()) == spans(original)
    assert all(act.locked for act in state.get())
    assert len(render.calls) == 1
    assert spans(render.calls[0]) == spans(original)


def test_inflexible_only_timetable_is_left_alone(make_activity):
    original = [make_activity("A", 480, 60, flexible=False), make_activity("B", 540, 60, flexible=False)]
    state = make_state(original)

    result = solve_timetable(state, 480, 1000, notify=False)

    assert result.status == SolveStatus.NOTHING_TO_ADJUST
    assert state.get() == original


def test_overlap_is_resolved_with_a_valid_commit(make_activity):
    state = make_state([make_activity("A", 480, 60, 30, 90), make_activity("B", 530, 60, 30, 90)])
    render = RecordingRenderer()

    result = solve_timetable(state, 480, 720, render=render)

    committed = state.get()
    assert result.status == SolveStatus.SOLVED
    assert validate(committed, 480, 720).violations == []
    assert is_order_valid(committed)
    assert result.score > 0
    assert result.candidate_count > 0
    assert len(render.calls) == 1
    assert spans(render.calls[0]) == spans(committed)


def test_finished_activities_are_never_moved(make_activity):
    state = make_state(
        [
            make_activity("Done", 480, 60, 30, 90),
            make_activity("Now", 545, 60, 30, 90),
            make_activity("Next", 600, 60, 30, 90),
        ],
        now=550,
    )

    result = solve_timetable(state, 480, 1000, notify=False)

    committed = state.get()
    assert result.status == SolveStatus.SOLVED
    assert spans(committed)[0] == (480, 60)
    assert committed[0].locked
    assert validate(committed, 480, 1000).valid


def test_no_solution_commits_locked_timetable(make_activity):
    original = [make_activity("Long", 480, 60, 60, 60)]
    state = make_state(original)
    render = RecordingRenderer()

    result = solve_timetable(state, 480, 500, render=render)

    assert result.status == SolveStatus.NO_SOLUTION
    assert result.score is None
    assert spans(state.get()) == spans(original)
    assert len(render.calls) == 1


def test_truncated_search_still_commits_best_found(make_activity):
    state = make_state([make_activity("A", 600, 60, 30, 90)])

    result = solve_timetable(state, 480, 1020, notify=False, max_candidates=1)

    assert result.status == SolveStatus.TRUNCATED
    assert result.truncated is True
    assert result.candidate_count == 1
    # First grid point: duration 45, start 585
    assert spans(state.get()) == [(585, 45)]
    assert result.score == 15 + 15 + 10


def test_opting_out_of_notification(make_activity):
    state = make_state([make_activity("A", 600, 60, 30, 90)])
    render = RecordingRenderer()

    solve_timetable(state, 480, 1020, render=render, notify=False)

    assert render.calls == []


def test_already_optimal_timetable_is_kept(make_activity):
    original = [make_activity("A", 480, 60, 30, 90), make_activity("B", 540, 60, 30, 90)]
    state = make_state(original)

    result = solve_timetable(state, 480, 1000, notify=False)

    assert result.status == SolveStatus.SOLVED
    assert result.score == 0
    assert timetables_equal(state.get(), original)


def test_solve_is_undoable(make_activity):
    state = make_state([make_activity("A", 480, 60, 30, 90), make_activity("B", 530, 60, 30, 90)])

    solve_timetable(state, 480, 720, notify=False)
    state.undo()

    assert spans(state.get()) == [(480, 60), (530, 60)]


def test_invalid_day_bounds(make_activity):
    state = make_state([make_activity("A", 480, 60)])
    with pytest.raises(InvalidDayBoundsError):
        solve_timetable(state, 1000, 480)


def test_apply_timetable_locks_and_renders(make_activity):
    state = make_state([make_activity("A", 480, 60)], now=600)
    render = RecordingRenderer()

    committed = apply_timetable(state, [make_activity("A", 480, 60)], render)

    assert committed[0].locked
    assert state.get()[0].locked
    assert len(render.calls) == 1


def test_activity_with_inverted_bounds_is_rejected(make_activity):
    state = make_state([make_activity("A", 480, 60, 90, 30)])

    with pytest.raises(InvalidActivityError):
        solve_timetable(state, 480, 1000, notify=False)

    assert state.undo() is False
    assert CUSTOM_ERRORS[InvalidActivityError] == 400


def test_negative_start_is_rejected(make_activity):
    state = make_state([make_activity("A", -10, 60, 30, 90)])

    with pytest.raises(InvalidActivityError):
        solve_timetable(state, 480, 1000, notify=False)


def test_unsorted_session_timetable_is_committed_in_start_order(make_activity):
    state = make_state([make_activity("B", 540, 60, 30, 90), make_activity("A", 480, 60, 30, 90)])

    result = solve_timetable(state, 480, 1000, notify=False)

    assert result.status == SolveStatus.SOLVED
    assert result.score == 0
    assert [act.name for act in state.get()] == ["A", "B"]
    assert is_order_valid(state.get())
    assert validate(state.get(), 480, 1000).valid


def test_running_activity_keeps_ending_after_now(make_activity):
    state = make_state([make_activity("A", 600, 30, 15, 45), make_activity("B", 620, 30, 15, 45)], now=610)

    result = solve_timetable(state, 480, 1000, notify=False)

    assert result.status == SolveStatus.SOLVED
    assert all(act.end > 610 for act in state.get())
