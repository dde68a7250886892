"""Pair elimination: single waves, full chains and post-slide chains."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from slidepair.engine.board import Board, Position, clear_cells, iter_occupied
from slidepair.engine.pairs import Pair, PairKey, find_all_pairs, pair_keys


@dataclass(frozen=True, slots=True)
class Wave:
    """Pairs removed together and the board left behind."""

    eliminated: Tuple[Pair, ...]
    board_after: Board

    @property
    def positions(self) -> List[Position]:
        return [pos for pair in self.eliminated for pos in pair.positions]


Chain = List[Wave]


def select_disjoint_pairs(pairs: Iterable[Pair]) -> List[Pair]:
    """Greedy pick in the given order; a pair is dropped if a cell is already claimed."""
    claimed: Set[int] = set()
    selected: List[Pair] = []
    for pair in pairs:
        ia, ib = pair.a.piece.instance_id, pair.b.piece.instance_id
        if ia in claimed or ib in claimed:
            continue
        claimed.add(ia)
        claimed.add(ib)
        selected.append(pair)
    return selected


def _eliminate(board: Board, pairs: List[Pair]) -> Board:
    return clear_cells(board, [pos for pair in pairs for pos in pair.positions])


def eliminate_pair(board: Board, pair: Pair) -> Wave:
    """Remove exactly one pair (a direct click). Never chains."""
    return Wave(eliminated=(pair,), board_after=_eliminate(board, [pair]))


def apply_one_wave(board: Board) -> Tuple[Board, List[Pair]]:
    """Clear a conflict-free subset of all current pairs.

    With no pairs the input board is returned unchanged with an empty list.
    """
    pairs = find_all_pairs(board)
    if not pairs:
        return board, []
    accepted = select_disjoint_pairs(pairs)
    return _eliminate(board, accepted), accepted


def resolve_chain_elimination(board: Board) -> Chain:
    """Repeat ``apply_one_wave`` until a wave finds nothing; return the non-empty waves."""
    waves: Chain = []
    current = board
    while True:
        current, eliminated = apply_one_wave(current)
        if not eliminated:
            break
        waves.append(Wave(eliminated=tuple(eliminated), board_after=current))
    return waves


def resolve_new_pair_chain(board_before: Board, board_after_slide: Board) -> Chain:
    """Chain-eliminate only pairs that did not exist before the slide.

    Pairs are identified by their instance ids since coordinates move when a
    group slides. Pairs that existed before stay on the board for the player,
    in every wave, even if a later wave exposes them again. An empty chain
    means the slide created nothing and should be reverted by the caller.
    """
    before: Set[PairKey] = pair_keys(board_before)

    def new_pairs(board: Board) -> List[Pair]:
        return [pair for pair in find_all_pairs(board) if pair.key not in before]

    waves: Chain = []
    current = board_after_slide
    candidates = new_pairs(current)
    while candidates:
        accepted = select_disjoint_pairs(candidates)
        current = _eliminate(current, accepted)
        waves.append(Wave(eliminated=tuple(accepted), board_after=current))
        candidates = new_pairs(current)
    return waves


def check_victory(board: Board) -> bool:
    return next(iter_occupied(board), None) is None
