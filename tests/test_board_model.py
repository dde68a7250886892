import dataclasses

import pytest

from slidepair.engine.board import (
    Board,
    board_from_kinds,
    board_to_text,
    clear_cells,
    count_remaining,
    create_board_from_deck,
    create_empty_board,
    get_piece,
    set_piece,
    set_pieces,
)
from slidepair.engine.catalog import PieceInstance, build_catalog, catalog_index, generate_deck


def test_empty_board_dimensions():
    board = create_empty_board(2, 3)
    assert board.height == 2
    assert board.width == 3
    assert count_remaining(board) == 0


def test_deck_fills_row_major_and_leaves_tail_empty():
    deck = generate_deck(build_catalog()[:5], copies_per_kind=1)
    board = create_board_from_deck(deck, 2, 3)
    assert [get_piece(board, 0, c).kind_id for c in range(3)] == [0, 1, 2]
    assert get_piece(board, 1, 1).kind_id == 4
    assert get_piece(board, 1, 2) is None


def test_deck_larger_than_board_is_rejected():
    deck = generate_deck(build_catalog()[:2], copies_per_kind=4)
    with pytest.raises(ValueError):
        create_board_from_deck(deck, 2, 3)


def test_grid_must_match_dimensions():
    with pytest.raises(ValueError):
        Board(width=3, height=1, grid=((None, None),))


def test_board_is_immutable_and_set_piece_returns_new_board():
    board = board_from_kinds([[0, None]])
    piece = PieceInstance(instance_id=9, kind_id=2)
    updated = set_piece(board, 0, 1, piece)

    assert get_piece(board, 0, 1) is None
    assert get_piece(updated, 0, 1) == piece
    with pytest.raises(dataclasses.FrozenInstanceError):
        board.width = 5


def test_set_pieces_without_updates_returns_same_board():
    board = board_from_kinds([[0, 1]])
    assert set_pieces(board, []) is board


def test_out_of_range_reads_are_empty():
    board = board_from_kinds([[0]])
    assert get_piece(board, -1, 0) is None
    assert get_piece(board, 0, 1) is None


def test_board_from_kinds_numbers_instances_row_major():
    board = board_from_kinds([[5, None], [7, 5]])
    assert get_piece(board, 0, 0).instance_id == 0
    assert get_piece(board, 1, 0).instance_id == 1
    assert get_piece(board, 1, 1).instance_id == 2
    assert count_remaining(clear_cells(board, [(1, 0)])) == 2


def test_board_to_text_uses_codes_when_kinds_are_given():
    board = board_from_kinds([[0, None], [27, 1]])
    assert board_to_text(board, catalog_index(build_catalog())) == "1m ..\nzE 2m"
    assert board_to_text(board) == " 0 ..\n27  1"
