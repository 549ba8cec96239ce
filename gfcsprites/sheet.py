"""Sprite-sheet grids and the order in which their tiles are taken.

A sheet is described fluently, for example::

    sheet(8, 4).row(2).start(0).to(7)   # row 2, columns 0..7
    sheet(8, 4).col(3).start(1).to(0)   # column 3, rows 1 down to 0
    sheet(8, 4).tile(5, 1)              # the single tile at column 5, row 1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

Tile = tuple[int, int]


def tile_sequence(
    num_cols: int,
    num_rows: int,
    col_from: int,
    row_from: int,
    col_to: int,
    row_to: int,
    horizontally: bool = True,
) -> Iterator[Tile]:
    """Yield ``(col, row)`` pairs covering a block of a ``num_cols`` x ``num_rows`` grid.

    Negative start indices mean the first tile and negative end indices the
    last one; indices past the grid are clamped.  Ranges may run backwards.
    With ``horizontally`` set, each row is walked across its columns before
    moving to the next row; otherwise each column is walked down its rows.
    """
    if col_from < 0:
        col_from = 0
    if row_from < 0:
        row_from = 0
    if col_to < 0:
        col_to = num_cols - 1
    if row_to < 0:
        row_to = num_rows - 1

    if col_to >= num_cols:
        col_to = num_cols - 1
    if col_from >= num_cols:
        col_from = col_to
    if row_to >= num_rows:
        row_to = num_rows - 1
    if row_from >= num_rows:
        row_from = row_to

    row_step = 1 if row_to >= row_from else -1
    col_step = 1 if col_to >= col_from else -1
    rows = range(row_from, row_to + row_step, row_step)
    cols = range(col_from, col_to + col_step, col_step)

    if horizontally:
        for row in rows:
            for col in cols:
                yield col, row
    else:
        for col in cols:
            for row in rows:
                yield col, row


@dataclass(frozen=True)
class SheetGrid:
    """A sheet divided into ``num_cols`` x ``num_rows`` equal tiles."""

    num_cols: int
    num_rows: int

    def row(self, index: int) -> SheetLine:
        """Select a row; the animation then runs across its columns."""
        return SheetLine(self, index, True)

    def col(self, index: int) -> SheetLine:
        """Select a column; the animation then runs down its rows."""
        return SheetLine(self, index, False)

    def tile(self, col: int, row: int) -> Sheet:
        """Select the single tile at ``(col, row)``."""
        return self.col(col).start(row).to(row)


@dataclass(frozen=True)
class SheetLine:
    """A row or column of a grid."""

    grid: SheetGrid
    index: int
    horizontally: bool

    def start(self, index: int) -> SheetRange:
        """Set the first tile index along the line."""
        return SheetRange(self, index)


@dataclass(frozen=True)
class SheetRange:
    """A line of a grid with its starting tile chosen."""

    line: SheetLine
    first: int

    def to(self, index: int) -> Sheet:
        """Set the last tile index along the line."""
        return Sheet(self, index)


@dataclass(frozen=True)
class Sheet:
    """A complete selection: grid, line, first and last tile."""

    range: SheetRange
    last: int

    @property
    def grid(self) -> SheetGrid:
        return self.range.line.grid

    @property
    def horizontally(self) -> bool:
        return self.range.line.horizontally

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """The ``(col_from, row_from, col_to, row_to)`` block described."""
        line = self.range.line
        if line.horizontally:
            return self.range.first, line.index, self.last, line.index
        return line.index, self.range.first, line.index, self.last

    @property
    def first_tile(self) -> Tile:
        """The ``(col, row)`` of the starting tile, used for single images."""
        col_from, row_from, _, _ = self.bounds
        return col_from, row_from

    def tiles(self) -> list[Tile]:
        """All ``(col, row)`` tiles of the selection, in animation order."""
        col_from, row_from, col_to, row_to = self.bounds
        return list(
            tile_sequence(
                self.grid.num_cols,
                self.grid.num_rows,
                col_from,
                row_from,
                col_to,
                row_to,
                self.horizontally,
            )
        )


def sheet(num_cols: int, num_rows: int) -> SheetGrid:
    """Start describing a sheet of ``num_cols`` x ``num_rows`` tiles."""
    return SheetGrid(num_cols, num_rows)