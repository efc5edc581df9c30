from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

Tile = int  # 0 .. image_count - 1
Coord = Tuple[int, int]  # (x, y): column, row; row 0 is the top

EMPTY: Tile = -1


@dataclass
class Board:
    """Represents the mutable grid of tiles, row-major, with EMPTY marking cleared cells."""
    width: int
    height: int
    grid: List[Tile] = field(default_factory=list)  # length == width * height

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'Board dimensions must be positive, got {self.width}x{self.height}')
        if len(self.grid) != self.width * self.height:
            raise ValueError(
                f'Grid length {len(self.grid)} does not match {self.width}x{self.height}'
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Tile]]]) -> 'Board':
        """Builds a board from a list of rows, top row first. None marks an empty cell."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        flat: List[Tile] = []
        for row in rows:
            if len(row) != width:
                raise ValueError('All rows must have the same length')
            flat.extend(EMPTY if cell is None else int(cell) for cell in row)
        return cls(width=width, height=height, grid=flat)

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Tile:
        """Gets the tile at a given column and row. Off-grid reads yield EMPTY."""
        if not self.in_bounds(x, y):
            return EMPTY
        return self.grid[self.index(x, y)]

    def set(self, x: int, y: int, tile: Tile) -> None:
        self.grid[self.index(x, y)] = tile

    def is_empty(self, x: int, y: int) -> bool:
        return self.at(x, y) == EMPTY

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row by row from the top."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def column(self, x: int) -> List[Tile]:
        """Returns column x from top to bottom."""
        return [self.grid[self.index(x, y)] for y in range(self.height)]

    def rows(self) -> List[List[Tile]]:
        return [self.grid[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def tile_count(self) -> int:
        """Number of non-empty cells."""
        return sum(1 for t in self.grid if t != EMPTY)

    def copy(self) -> 'Board':
        return Board(width=self.width, height=self.height, grid=list(self.grid))

    def pretty(self, highlight: Optional[Set[Coord]] = None) -> str:
        """Generates a human-readable grid with column/row labels; highlighted cells show as '*'."""
        marks = highlight or set()
        header = "   " + " ".join(str(x % 10) for x in range(self.width))
        lines: List[str] = [header]
        for y in range(self.height):
            row: List[str] = []
            for x in range(self.width):
                tile = self.at(x, y)
                if (x, y) in marks:
                    row.append("*")
                elif tile == EMPTY:
                    row.append(".")
                else:
                    row.append(str(tile))
            lines.append(f"{y:2d} " + " ".join(row))
        return "\n".join(lines)
