"""Tile catalog: the 34 mahjong piece kinds and deck generation."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from slidepair.constants import COPIES_PER_KIND

CHINESE_NUMERALS = ('一', '二', '三', '四', '五', '六', '七', '八', '九')
HONOR_LABELS = ('东', '南', '西', '北', '中', '发', '白')
HONOR_CODES = ('E', 'S', 'W', 'N', 'C', 'F', 'P')


class TileCategory(Enum):
    WAN = 'wan'    # characters
    TIAO = 'tiao'  # bamboo
    TONG = 'tong'  # dots
    ZI = 'zi'      # winds and dragons


_SUIT_SUFFIX = {
    TileCategory.WAN: '万',
    TileCategory.TIAO: '条',
    TileCategory.TONG: '筒',
}
_SUIT_CODE = {
    TileCategory.WAN: 'm',
    TileCategory.TIAO: 's',
    TileCategory.TONG: 'p',
}


@dataclass(frozen=True, slots=True)
class PieceKind:
    """A matchable face. Two pieces match when their kind ids are equal."""

    id: int
    category: TileCategory
    value: int
    label: str

    @property
    def code(self) -> str:
        """Two-character ASCII code, e.g. ``3m`` or ``zE``."""
        if self.category is TileCategory.ZI:
            return 'z' + HONOR_CODES[self.value - 1]
        return f"{self.value}{_SUIT_CODE[self.category]}"


@dataclass(frozen=True, slots=True)
class PieceInstance:
    """One physical piece. ``instance_id`` is unique and stable for the game."""

    instance_id: int
    kind_id: int


def build_catalog() -> Tuple[PieceKind, ...]:
    """Return the 34 kinds in id order: 9 wan, 9 tiao, 9 tong, 7 honors."""
    kinds: List[PieceKind] = []
    for category in (TileCategory.WAN, TileCategory.TIAO, TileCategory.TONG):
        suffix = _SUIT_SUFFIX[category]
        for value in range(1, 10):
            kinds.append(
                PieceKind(
                    id=len(kinds),
                    category=category,
                    value=value,
                    label=CHINESE_NUMERALS[value - 1] + suffix,
                )
            )
    for value, label in enumerate(HONOR_LABELS, start=1):
        kinds.append(PieceKind(id=len(kinds), category=TileCategory.ZI, value=value, label=label))
    return tuple(kinds)


def catalog_index(catalog: Iterable[PieceKind]) -> Dict[int, PieceKind]:
    return {kind.id: kind for kind in catalog}


def generate_deck(
    catalog: Sequence[PieceKind],
    copies_per_kind: int = COPIES_PER_KIND,
) -> List[PieceInstance]:
    """Create ``copies_per_kind`` instances of every kind, in catalog order.

    Instance ids are assigned sequentially from 0, so repeated calls with the same
    catalog produce the same id-to-kind mapping.
    """
    if copies_per_kind < 1:
        raise ValueError("copies_per_kind must be at least 1")
    deck: List[PieceInstance] = []
    for kind in catalog:
        for _ in range(copies_per_kind):
            deck.append(PieceInstance(instance_id=len(deck), kind_id=kind.id))
    return deck


def shuffle_deck(deck: Sequence[PieceInstance], rng: random.Random | None = None) -> List[PieceInstance]:
    """Return a Fisher-Yates shuffled copy of ``deck``; the input is not touched."""
    rng = rng or random.Random()
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
