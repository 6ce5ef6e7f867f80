"""
Tests for move validation, turn order and game end detection.
"""

import pytest

from conftest import DRAW_MOVES, WIN_MOVES
from tictactoe.core import (
    GameStatus,
    InvalidMoveError,
    MoveError,
    apply_move,
    create_game,
    legal_positions,
    validate_move,
)


def play(game, moves):
    for position, player in moves:
        game = apply_move(game, position, player)
    return game


def test_create_game():
    game = create_game()

    assert game.board_string == " " * 9
    assert game.current_player == "X"
    assert game.status == GameStatus.ACTIVE
    assert game.id
    assert game.etag


def test_games_get_distinct_ids_and_etags():
    a, b = create_game(), create_game()
    assert a.id != b.id
    assert a.etag != b.etag


def test_valid_move_updates_game(fresh_game):
    game = apply_move(fresh_game, 0, "X")

    assert game.board_string == "X        "
    assert game.current_player == "O"
    assert game.status == GameStatus.ACTIVE
    assert game.id == fresh_game.id
    assert game.etag != fresh_game.etag


def test_apply_move_does_not_modify_input(fresh_game):
    before = fresh_game.board_string
    apply_move(fresh_game, 4, "X")

    assert fresh_game.board_string == before
    assert fresh_game.current_player == "X"


@pytest.mark.parametrize("position", range(9))
def test_valid_move_changes_exactly_one_cell(fresh_game, position):
    game = apply_move(fresh_game, position, "X")

    changed = [i for i in range(9) if game.board[i] != fresh_game.board[i]]
    assert changed == [position]
    assert game.board[position] == "X"


@pytest.mark.parametrize("position", [-1, 9, 100, -100])
def test_invalid_position(fresh_game, position):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(fresh_game, position, "X")
    assert exc_info.value.code == MoveError.INVALID_POSITION


@pytest.mark.parametrize("position", ["3", 2.0, None, True])
def test_non_integer_position_is_invalid(fresh_game, position):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(fresh_game, position, "X")
    assert exc_info.value.code == MoveError.INVALID_POSITION


@pytest.mark.parametrize("player", ["Z", "x", "o", "", "XO", None])
def test_invalid_player(fresh_game, player):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(fresh_game, 0, player)
    assert exc_info.value.code == MoveError.INVALID_PLAYER


def test_occupied_position(fresh_game):
    game = apply_move(fresh_game, 0, "X")

    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(game, 0, "O")
    assert exc_info.value.code == MoveError.POSITION_OCCUPIED
    assert game.board_string == "X        "


def test_wrong_turn(fresh_game):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(fresh_game, 0, "O")
    assert exc_info.value.code == MoveError.WRONG_TURN


def test_x_cannot_move_twice(fresh_game):
    game = apply_move(fresh_game, 0, "X")

    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(game, 1, "X")
    assert exc_info.value.code == MoveError.WRONG_TURN


# ---- Precondition order ----


def test_position_checked_before_everything(won_game):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(won_game, 9, "Z")
    assert exc_info.value.code == MoveError.INVALID_POSITION


def test_player_checked_before_status(won_game):
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(won_game, 0, "Z")
    assert exc_info.value.code == MoveError.INVALID_PLAYER


def test_status_checked_before_occupancy(won_game):
    # Cell 0 is occupied and it is not O's turn, but the game is over
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(won_game, 0, "O")
    assert exc_info.value.code == MoveError.GAME_NOT_ACTIVE


def test_occupancy_checked_before_turn(fresh_game):
    game = apply_move(fresh_game, 0, "X")

    # O's turn: X on an occupied cell is both occupied and out of turn
    with pytest.raises(InvalidMoveError) as exc_info:
        apply_move(game, 0, "X")
    assert exc_info.value.code == MoveError.POSITION_OCCUPIED


def test_rejection_is_repeatable_and_leaves_state_identical(fresh_game):
    game = apply_move(fresh_game, 4, "X")
    snapshot = (game.board_string, game.current_player, game.status, game.etag)

    codes = []
    for _ in range(2):
        with pytest.raises(InvalidMoveError) as exc_info:
            apply_move(game, 4, "O")
        codes.append(exc_info.value.code)
        assert (game.board_string, game.current_player, game.status, game.etag) == snapshot

    assert codes == [MoveError.POSITION_OCCUPIED, MoveError.POSITION_OCCUPIED]


def test_validate_move_does_not_apply(fresh_game):
    assert validate_move(fresh_game, 0, "X") is None
    assert fresh_game.board_string == " " * 9

    with pytest.raises(InvalidMoveError):
        validate_move(fresh_game, 0, "O")


# ---- Turn order and game end ----


def test_turns_alternate_until_game_ends(fresh_game):
    game = fresh_game
    expected = "X"
    for position, player in DRAW_MOVES[:-1]:
        assert game.current_player == expected == player
        game = apply_move(game, position, player)
        expected = "O" if expected == "X" else "X"
    assert game.status == GameStatus.ACTIVE


def test_win_scenario(won_game):
    assert won_game.board_string == "XXXOO    "
    assert won_game.status == GameStatus.WON
    assert won_game.current_player == "X"


def test_o_win_records_o_as_current_player(fresh_game):
    moves = [(0, "X"), (3, "O"), (1, "X"), (4, "O"), (8, "X"), (5, "O")]
    game = play(fresh_game, moves)

    assert game.status == GameStatus.WON
    assert game.current_player == "O"


def test_draw_scenario(drawn_game):
    assert drawn_game.status == GameStatus.DRAW
    assert " " not in drawn_game.board_string
    assert drawn_game.board_string == "XOXXOOOXX"
    # Last mover is kept
    assert drawn_game.current_player == "X"


def test_win_on_last_cell_beats_draw(fresh_game):
    moves = [
        (0, "X"), (1, "O"), (2, "X"), (3, "O"), (4, "X"),
        (5, "O"), (7, "X"), (6, "O"), (8, "X"),
    ]
    game = play(fresh_game, moves)

    assert " " not in game.board_string
    assert game.status == GameStatus.WON
    assert game.current_player == "X"


@pytest.mark.parametrize("fixture_name", ["won_game", "drawn_game"])
@pytest.mark.parametrize("player", ["X", "O"])
def test_no_moves_after_game_ends(request, fixture_name, player):
    game = request.getfixturevalue(fixture_name)
    before = (game.board_string, game.current_player, game.status, game.etag)

    for position in range(9):
        with pytest.raises(InvalidMoveError) as exc_info:
            apply_move(game, position, player)
        assert exc_info.value.code == MoveError.GAME_NOT_ACTIVE

    assert (game.board_string, game.current_player, game.status, game.etag) == before


def test_legal_positions(fresh_game, won_game, drawn_game):
    assert legal_positions(fresh_game) == list(range(9))
    assert legal_positions(apply_move(fresh_game, 4, "X")) == [0, 1, 2, 3, 5, 6, 7, 8]
    assert legal_positions(won_game) == []
    assert legal_positions(drawn_game) == []
