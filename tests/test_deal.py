import logging
import random

from slidepair.engine.board import count_remaining
from slidepair.engine.catalog import build_catalog
from slidepair.engine.deal import deal_board
from slidepair.engine.pairs import has_pairs


def test_default_deal_fills_board_with_a_direct_pair():
    result = deal_board(build_catalog(), rng=random.Random(7))
    assert result.solvable
    assert result.attempts >= 1
    assert result.board.height == 8
    assert result.board.width == 17
    assert count_remaining(result.board) == 136
    assert has_pairs(result.board)


def test_small_deal_uses_selected_kinds():
    result = deal_board(build_catalog()[:2], 2, 4, rng=random.Random(2))
    kinds = {piece.kind_id for row in result.board.grid for piece in row}
    assert kinds == {0, 1}
    assert result.solvable == has_pairs(result.board)


def test_deal_falls_back_when_no_shuffle_qualifies(caplog):
    with caplog.at_level(logging.WARNING):
        result = deal_board(build_catalog()[:1], 1, 2, copies_per_kind=1, rng=random.Random(1), max_retries=3)
    assert not result.solvable
    assert result.attempts == 3
    assert count_remaining(result.board) == 1
    assert "dealing anyway" in caplog.text
