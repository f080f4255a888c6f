from __future__ import annotations

from typing import Callable

import pytest

from sksld.blocks import BackgroundType, Block, BlockKind, Direction
from sksld.grid import GRID_SIZE, LEVEL_HEIGHT, LEVEL_WIDTH, empty_grid


@pytest.fixture
def sample_cells() -> list[Block]:
    cells = empty_grid()
    cells[0] = Block(BlockKind.BLOCK)
    cells[33] = Block(BlockKind.SPIKE, direction=Direction.LEFT)
    cells[70] = Block(BlockKind.ONE_WAY_WALL, direction=Direction.UP)
    cells[100] = Block.note('Hello, world! "quoted" \\ back; [x] = {y}')
    cells[200] = Block(BlockKind.BACKGROUND, background=BackgroundType.BRICK)
    cells[201] = Block(BlockKind.KEY)
    cells[GRID_SIZE - 1] = Block(BlockKind.EXIT)
    return cells


@pytest.fixture
def zero_row() -> str:
    return ", ".join(["0"] * LEVEL_WIDTH)


@pytest.fixture
def make_as3(zero_row: str) -> Callable[..., str]:
    """Build AS3 source; `bodies` maps row index -> array body text."""

    def build(
        rows: list[int] | None = None,
        *,
        level: str = "0",
        bodies: dict[int, str] | None = None,
    ) -> str:
        rows = list(range(LEVEL_HEIGHT)) if rows is None else rows
        bodies = bodies or {}
        return "".join(f"lvlArray[{level}][{r}] = [{bodies.get(r, zero_row)}];\n" for r in rows)

    return build
