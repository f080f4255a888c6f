from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

from .blocks import EMPTY, Block

LEVEL_WIDTH = 32
LEVEL_HEIGHT = 18
GRID_SIZE = LEVEL_WIDTH * LEVEL_HEIGHT

T = TypeVar("T")

# Numeric or named key of a level inside AS3 source.
LevelId = int | str


def empty_grid() -> list[Block]:
    return [EMPTY] * GRID_SIZE


def index_of(x: int, y: int) -> int:
    if not (0 <= x < LEVEL_WIDTH and 0 <= y < LEVEL_HEIGHT):
        raise ValueError(f"cell ({x}, {y}) outside {LEVEL_WIDTH}x{LEVEL_HEIGHT} level")
    return y * LEVEL_WIDTH + x


def position_of(index: int) -> tuple[int, int]:
    if not (0 <= index < GRID_SIZE):
        raise ValueError(f"index {index} outside level")
    return (index % LEVEL_WIDTH, index // LEVEL_WIDTH)


def iter_rows(cells: Sequence[T]) -> Iterator[tuple[int, Sequence[T]]]:
    """Yield (row_index, row) chunks of LEVEL_WIDTH cells, row-major."""
    for y, start in enumerate(range(0, len(cells), LEVEL_WIDTH)):
        yield y, cells[start : start + LEVEL_WIDTH]
