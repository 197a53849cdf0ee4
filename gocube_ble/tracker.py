"""Solve progress tracking over a simulated cube."""

from __future__ import annotations

from typing import Callable, Iterable, List

from .cube import PuzzleState
from .moves import Move
from .phases import Phase, PhaseProgress, detect_phase, get_progress


class ProgressTracker:
    """Apply moves to a cube and track the best phase reached.

    ``last_phase`` follows the cube and may go down when the cube is
    scrambled again. ``highest_phase`` only goes up until ``reset()``, and
    phase callbacks fire each time it does. The tracker is not thread safe;
    callers must apply moves from one thread at a time.
    """

    def __init__(self) -> None:
        self._puzzle = PuzzleState()
        self._last_phase = Phase.SOLVED
        self._highest_phase = Phase.SCRAMBLED
        self._phase_callbacks: List[Callable[[Phase], None]] = []

    def register_phase_callback(
        self, callback: Callable[[Phase], None]
    ) -> Callable[[], None]:
        """Register a callback for new highest phases."""

        def unsubscribe() -> None:
            if callback in self._phase_callbacks:
                self._phase_callbacks.remove(callback)

        self._phase_callbacks.append(callback)
        return unsubscribe

    def apply_move(self, move: Move) -> None:
        """Apply a move and report a new highest phase if one was reached."""
        self._puzzle.apply_move(move)
        current = detect_phase(self._puzzle)
        self._last_phase = current
        if current > self._highest_phase:
            self._highest_phase = current
            for callback in list(self._phase_callbacks):
                callback(current)

    def apply_moves(self, moves: Iterable[Move]) -> None:
        """Apply moves in order."""
        for move in moves:
            self.apply_move(move)

    def reset(self) -> None:
        """Start a new session from a solved cube."""
        self._puzzle = PuzzleState()
        self._last_phase = Phase.SOLVED
        self._highest_phase = Phase.SCRAMBLED

    def current_phase(self) -> Phase:
        """Return the phase of the cube as it is now."""
        return detect_phase(self._puzzle)

    @property
    def last_phase(self) -> Phase:
        """Return the phase computed after the last move."""
        return self._last_phase

    @property
    def highest_phase(self) -> Phase:
        """Return the best phase reached since the last reset."""
        return self._highest_phase

    def is_solved(self) -> bool:
        """Return whether the cube is solved."""
        return self._puzzle.is_solved()

    def progress(self) -> PhaseProgress:
        """Return which phase predicates hold."""
        return get_progress(self._puzzle)

    def snapshot(self) -> PuzzleState:
        """Return a copy of the cube that later moves will not change."""
        return self._puzzle.clone()

    def __str__(self) -> str:
        return str(self._puzzle)
