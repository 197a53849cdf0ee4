"""Tests for the facelet cube model."""

import pytest

from gocube_ble.cube import Color, PuzzleState
from gocube_ble.moves import (
    D,
    F,
    R,
    R2,
    R_PRIME,
    SEXY_MOVE,
    T_PERM,
    U,
    Face,
    Move,
    Turn,
)

SOLVED_STRING = "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9


def test_new_cube_is_solved():
    state = PuzzleState()
    assert state.is_solved()
    assert state.to_facelet_string() == SOLVED_STRING


def test_single_move_breaks_solved():
    state = PuzzleState()
    state.apply(R)
    assert not state.is_solved()


@pytest.mark.parametrize("face", list(Face))
def test_four_quarter_turns_are_identity(face):
    move = Move(face, Turn.CLOCKWISE)
    state = PuzzleState()
    for i in range(4):
        state.apply(move)
        assert state.is_solved() == (i == 3)


@pytest.mark.parametrize("face", list(Face))
def test_two_half_turns_are_identity(face):
    state = PuzzleState()
    state.apply(Move(face, Turn.HALF), Move(face, Turn.HALF))
    assert state.is_solved()


@pytest.mark.parametrize("face", list(Face))
def test_move_then_inverse_is_identity(face):
    move = Move(face, Turn.CLOCKWISE)
    state = PuzzleState()
    state.apply(move, move.inverse())
    assert state.is_solved()


@pytest.mark.parametrize("face", list(Face))
def test_half_turn_equals_two_quarter_turns(face):
    quarter = Move(face, Turn.CLOCKWISE)
    first = PuzzleState()
    first.apply(quarter, quarter)
    second = PuzzleState()
    second.apply(Move(face, Turn.HALF))
    assert first == second


@pytest.mark.parametrize("face", list(Face))
def test_counter_clockwise_equals_three_quarter_turns(face):
    quarter = Move(face, Turn.CLOCKWISE)
    first = PuzzleState()
    first.apply(quarter, quarter, quarter)
    second = PuzzleState()
    second.apply(Move(face, Turn.COUNTER_CLOCKWISE))
    assert first == second


def test_sexy_move_six_times_is_identity():
    state = PuzzleState()
    for i in range(6):
        state.apply(*SEXY_MOVE)
        assert state.is_solved() == (i == 5)


def test_t_perm_twice_is_identity():
    state = PuzzleState()
    state.apply(*T_PERM)
    assert not state.is_solved()
    state.apply(*T_PERM)
    assert state.is_solved()


def test_apply_notation():
    state = PuzzleState()
    state.apply_notation("R U R' U'")
    assert not state.is_solved()
    for _ in range(5):
        state.apply_notation("R U R' U'")
    assert state.is_solved()


def test_right_turn_moves_front_column_up():
    state = PuzzleState()
    state.apply(R)
    for i in (2, 5, 8):
        assert state.faces[Face.U][i] == Color.GREEN
        assert state.faces[Face.F][i] == Color.YELLOW
        assert state.faces[Face.D][i] == Color.BLUE
    for i in (0, 3, 6):
        assert state.faces[Face.B][i] == Color.WHITE
    assert state.faces[Face.U][0] == Color.WHITE


def test_up_turn_moves_right_row_to_front():
    state = PuzzleState()
    state.apply(U)
    assert state.faces[Face.F][:3] == [Color.RED] * 3
    assert state.faces[Face.L][:3] == [Color.GREEN] * 3
    assert state.faces[Face.B][:3] == [Color.ORANGE] * 3
    assert state.faces[Face.R][:3] == [Color.BLUE] * 3


def test_front_turn_moves_up_row_to_right():
    state = PuzzleState()
    state.apply(F)
    assert [state.faces[Face.R][i] for i in (0, 3, 6)] == [Color.WHITE] * 3
    assert [state.faces[Face.D][i] for i in (0, 1, 2)] == [Color.RED] * 3
    assert [state.faces[Face.L][i] for i in (2, 5, 8)] == [Color.YELLOW] * 3
    assert state.faces[Face.U][6:] == [Color.ORANGE] * 3


def test_face_cells_rotate_clockwise():
    state = PuzzleState()
    state.faces[Face.U][0] = Color.RED
    state.faces[Face.U][1] = Color.BLUE
    state.apply(U)
    assert state.faces[Face.U][2] == Color.RED
    assert state.faces[Face.U][5] == Color.BLUE
    state.apply(U.inverse())
    assert state.faces[Face.U][0] == Color.RED
    assert state.faces[Face.U][1] == Color.BLUE


def test_centers_never_move():
    state = PuzzleState()
    state.apply(R, U, F, D, R2, R_PRIME, *T_PERM)
    for face, cells in state.faces.items():
        assert cells[4] == PuzzleState().faces[face][4]


def test_color_counts_preserved():
    state = PuzzleState()
    state.apply_notation("R U2 F' L D B2 R' U F2 L'")
    facelets = state.to_facelet_string()
    assert len(facelets) == 54
    for letter in "URFDLB":
        assert facelets.count(letter) == 9


def test_unknown_face_is_noop():
    state = PuzzleState()
    state.apply(Move("X", Turn.CLOCKWISE))
    assert state.is_solved()


def test_clone_is_independent():
    state = PuzzleState()
    state.apply(R)
    copy = state.clone()
    assert copy == state
    state.apply(U)
    assert copy != state
    copy.apply(R_PRIME)
    assert copy.is_solved()


def test_reset():
    state = PuzzleState()
    state.apply(*T_PERM)
    state.reset()
    assert state.is_solved()


def test_str_renders_net():
    lines = str(PuzzleState()).splitlines()
    assert len(lines) == 9
    assert lines[0].strip() == "W W W"
    assert lines[3] == "O O O G G G R R R B B B"
    assert lines[8].strip() == "Y Y Y"


def test_color_letters_and_centers():
    assert [color.letter for color in Color] == ["W", "Y", "G", "B", "R", "O"]
    cube = PuzzleState()
    cube.apply(R, U, R_PRIME)
    assert cube.center(Face.U) is Color.WHITE
    assert cube.center(Face.F) is Color.GREEN
    assert cube.center(Face.L) is Color.ORANGE
