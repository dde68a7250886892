from dataclasses import dataclass

from slidepair.constants import COPIES_PER_KIND


@dataclass(slots=True)
class BoardShape:
    rows: int
    cols: int
    copies_per_kind: int = COPIES_PER_KIND

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("board dimensions must be positive")
        if self.copies_per_kind < 1:
            raise ValueError("copies_per_kind must be at least 1")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
