"""New-game dealing with the direct-pair solvability gate."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from slidepair.constants import BOARD_COLS, BOARD_ROWS, COPIES_PER_KIND, MAX_SHUFFLE_RETRIES
from slidepair.engine.board import Board, create_board_from_deck
from slidepair.engine.catalog import PieceKind, generate_deck, shuffle_deck
from slidepair.engine.pairs import has_pairs

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DealResult:
    board: Board
    attempts: int
    solvable: bool


def deal_board(
    catalog: Sequence[PieceKind],
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    *,
    copies_per_kind: int = COPIES_PER_KIND,
    rng: random.Random | None = None,
    max_retries: int = MAX_SHUFFLE_RETRIES,
) -> DealResult:
    """Shuffle and deal until the board holds a direct pair.

    A full board cannot slide, so a direct pair is the only way to start. If no
    shuffle within ``max_retries`` qualifies, the last one is used and
    ``solvable`` is False.
    """
    rng = rng or random.Random()
    deck = generate_deck(catalog, copies_per_kind)
    attempts = max(1, max_retries)
    board = None
    for attempt in range(1, attempts + 1):
        board = create_board_from_deck(shuffle_deck(deck, rng), rows, cols)
        if has_pairs(board):
            return DealResult(board=board, attempts=attempt, solvable=True)
    logger.warning("no shuffle produced a direct pair after %d attempts; dealing anyway", attempts)
    return DealResult(board=board, attempts=attempts, solvable=False)
