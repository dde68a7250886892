from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from slidepair.engine.catalog import PieceKind, catalog_index


@dataclass(slots=True)
class TileCatalog:
    """Piece kinds known to the session and the subset dealt into new decks.

    Lives on the session entity. ``active`` keeps catalog order; an empty
    selection falls back to every kind.
    """
    kinds: Tuple[PieceKind, ...]
    active: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.set_active(self.active or [kind.id for kind in self.kinds])

    def kind(self, kind_id: int) -> PieceKind:
        for kind in self.kinds:
            if kind.id == kind_id:
                return kind
        raise KeyError(kind_id)

    def index(self) -> Dict[int, PieceKind]:
        return catalog_index(self.kinds)

    def active_kinds(self) -> List[PieceKind]:
        wanted = set(self.active)
        return [kind for kind in self.kinds if kind.id in wanted]

    def set_active(self, kind_ids: Iterable[int]) -> None:
        known = {kind.id for kind in self.kinds}
        requested = list(dict.fromkeys(kind_ids))
        unknown = [kind_id for kind_id in requested if kind_id not in known]
        if unknown:
            raise ValueError(f"unknown kind ids: {unknown}")
        chosen = set(requested) or known
        self.active = [kind.id for kind in self.kinds if kind.id in chosen]
