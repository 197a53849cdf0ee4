"""Helpers for building cube state and solved face data."""

from __future__ import annotations

import time
from typing import Dict, Tuple

from ..const import COLOR_FACE_MAPPING
from ..cube import PuzzleState
from ..models import CubeData
from ..phases import Phase

FACE_TILE_INDICES = {
    "U": list(range(0, 9)),
    "R": list(range(9, 18)),
    "F": list(range(18, 27)),
    "D": list(range(27, 36)),
    "L": list(range(36, 45)),
    "B": list(range(45, 54)),
}


def build_face_states(state_string: str) -> Tuple[Dict[str, bool], bool]:
    """Return face solved map and solved flag from a state string."""
    if not state_string or len(state_string) < 54:
        return {}, False

    face_states: Dict[str, bool] = {}
    for color_name, face_letter in COLOR_FACE_MAPPING.items():
        tiles = FACE_TILE_INDICES[face_letter]
        face_states[color_name.capitalize()] = all(
            state_string[index] == face_letter for index in tiles
        )

    is_solved = all(face_states.values())
    return face_states, is_solved


def update_cube_state(
    data: CubeData,
    puzzle: PuzzleState,
    phase: Phase,
    highest_phase: Phase,
) -> None:
    """Update data fields from a simulated cube."""
    data.state_string = puzzle.to_facelet_string()
    data.face_states, data.is_solved = build_face_states(data.state_string)
    data.phase = phase
    data.highest_phase = highest_phase
    data.last_update = time.time()
