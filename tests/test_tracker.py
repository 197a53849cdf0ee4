"""Tests for the progress tracker."""

import random

from gocube_ble.moves import D, D_PRIME, R, R_PRIME, SEXY_MOVE, Face, Move, Turn
from gocube_ble.phases import Phase, detect_phase
from gocube_ble.tracker import ProgressTracker


def test_initial_state():
    tracker = ProgressTracker()
    assert tracker.is_solved()
    assert tracker.current_phase() is Phase.SOLVED
    assert tracker.last_phase is Phase.SOLVED
    assert tracker.highest_phase is Phase.SCRAMBLED


def test_callback_fires_once_per_new_high():
    tracker = ProgressTracker()
    seen = []
    tracker.register_phase_callback(seen.append)

    tracker.apply_move(D)
    assert seen == [Phase.BOTTOM_CROSS_DONE]
    assert tracker.highest_phase is Phase.BOTTOM_CROSS_DONE

    tracker.apply_move(D_PRIME)
    assert seen == [Phase.BOTTOM_CROSS_DONE, Phase.SOLVED]
    assert tracker.is_solved()


def test_no_callback_on_regression():
    tracker = ProgressTracker()
    seen = []
    tracker.register_phase_callback(seen.append)
    tracker.apply_moves([D, D_PRIME, R])

    assert seen == [Phase.BOTTOM_CROSS_DONE, Phase.SOLVED]
    assert tracker.last_phase is Phase.SCRAMBLED
    assert tracker.current_phase() is Phase.SCRAMBLED
    assert tracker.highest_phase is Phase.SOLVED

    tracker.apply_move(R_PRIME)
    assert seen == [Phase.BOTTOM_CROSS_DONE, Phase.SOLVED]


def test_scrambled_does_not_fire():
    tracker = ProgressTracker()
    seen = []
    tracker.register_phase_callback(seen.append)
    tracker.apply_move(R)
    assert seen == []
    assert tracker.highest_phase is Phase.SCRAMBLED


def test_unsubscribe():
    tracker = ProgressTracker()
    seen = []
    unsubscribe = tracker.register_phase_callback(seen.append)
    unsubscribe()
    unsubscribe()
    tracker.apply_move(D)
    assert seen == []


def test_reset():
    tracker = ProgressTracker()
    seen = []
    tracker.register_phase_callback(seen.append)
    tracker.apply_moves([D, D_PRIME, R])
    tracker.reset()

    assert tracker.is_solved()
    assert tracker.last_phase is Phase.SOLVED
    assert tracker.highest_phase is Phase.SCRAMBLED

    tracker.apply_move(D)
    assert seen[-1] is Phase.BOTTOM_CROSS_DONE


def test_highest_phase_is_running_maximum():
    rng = random.Random(1234)
    tracker = ProgressTracker()
    moves = [Move(face, turn) for face in Face for turn in Turn]
    best = Phase.SCRAMBLED
    previous = tracker.highest_phase
    for _ in range(300):
        move = rng.choice(moves)
        tracker.apply_move(move)
        best = max(best, detect_phase(tracker.snapshot()))
        assert tracker.highest_phase >= previous
        assert tracker.highest_phase == best
        previous = tracker.highest_phase


def test_sexy_move_returns_to_solved():
    tracker = ProgressTracker()
    for _ in range(6):
        tracker.apply_moves(SEXY_MOVE)
    assert tracker.is_solved()
    assert tracker.highest_phase is Phase.SOLVED


def test_snapshot_is_independent():
    tracker = ProgressTracker()
    snapshot = tracker.snapshot()
    tracker.apply_move(R)
    assert snapshot.is_solved()
    assert not tracker.is_solved()


def test_progress():
    tracker = ProgressTracker()
    tracker.apply_move(D)
    assert tracker.progress().bottom_cross
    assert not tracker.progress().solved
