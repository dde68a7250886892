from slidepair.engine.board import (
    Board,
    Cell,
    Position,
    board_from_kinds,
    board_to_text,
    clear_cells,
    count_remaining,
    create_board_from_deck,
    create_empty_board,
    get_piece,
    occupied_cells,
    set_piece,
    set_pieces,
)
from slidepair.engine.catalog import (
    PieceInstance,
    PieceKind,
    TileCategory,
    build_catalog,
    generate_deck,
    shuffle_deck,
)
from slidepair.engine.deal import DealResult, deal_board
from slidepair.engine.elimination import (
    Wave,
    apply_one_wave,
    check_victory,
    eliminate_pair,
    resolve_chain_elimination,
    resolve_new_pair_chain,
)
from slidepair.engine.hints import Hint, find_hint, is_deadlocked
from slidepair.engine.movement import (
    Axis,
    SlideBounds,
    apply_slide,
    calc_max_slide,
    clamp_delta,
    lock_drag_axis,
    pixels_to_cells,
    select_group,
)
from slidepair.engine.pairs import Pair, find_all_pairs, find_pair_at, scan_line
from slidepair.engine.reshuffle import reshuffle_remaining_tiles

__all__ = [
    "Axis",
    "Board",
    "Cell",
    "DealResult",
    "Hint",
    "Pair",
    "PieceInstance",
    "PieceKind",
    "Position",
    "SlideBounds",
    "TileCategory",
    "Wave",
    "apply_one_wave",
    "apply_slide",
    "board_from_kinds",
    "board_to_text",
    "build_catalog",
    "calc_max_slide",
    "check_victory",
    "clamp_delta",
    "clear_cells",
    "count_remaining",
    "create_board_from_deck",
    "create_empty_board",
    "deal_board",
    "eliminate_pair",
    "find_all_pairs",
    "find_hint",
    "find_pair_at",
    "generate_deck",
    "get_piece",
    "is_deadlocked",
    "lock_drag_axis",
    "occupied_cells",
    "pixels_to_cells",
    "reshuffle_remaining_tiles",
    "resolve_chain_elimination",
    "resolve_new_pair_chain",
    "scan_line",
    "select_group",
    "set_piece",
    "set_pieces",
    "shuffle_deck",
]
