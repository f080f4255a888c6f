from __future__ import annotations

import logging

from .as3 import format_level_id
from .blocks import EMPTY, BackgroundType, Block
from .codec import decode, encode
from .errors import LevelContractError
from .fileformat import FileFormat
from .grid import GRID_SIZE, LevelId, empty_grid

logger = logging.getLogger(__name__)


class Level:
    """
    Editable level: a full grid of blocks plus dark mode, background and an
    optional level id. Owned by one editing session; not thread-safe.
    """

    def __init__(self) -> None:
        self._cells: list[Block] = empty_grid()
        self._dark = False
        self._background = BackgroundType.COBBLE
        self._level_id: LevelId | None = None

    @classmethod
    def from_text(cls, text: str, fmt: FileFormat | None = None) -> Level:
        lvl = cls()
        lvl.import_text(text, fmt)
        return lvl

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._cells)

    @property
    def is_dark(self) -> bool:
        return self._dark

    def set_dark(self, dark: bool) -> None:
        self._dark = bool(dark)

    @property
    def background(self) -> BackgroundType:
        return self._background

    def set_background(self, background: BackgroundType) -> None:
        self._background = background

    @property
    def level_id(self) -> LevelId | None:
        return self._level_id

    def set_level(self, level_id: LevelId | None) -> None:
        if level_id is not None:
            # Reject ids that could never be exported.
            format_level_id(level_id)
        self._level_id = level_id

    def _check_index(self, index: int) -> None:
        if not (0 <= index < GRID_SIZE):
            raise LevelContractError(f"index {index} outside level (size {GRID_SIZE})")

    def get_block(self, index: int) -> Block:
        self._check_index(index)
        return self._cells[index]

    def add_block(self, index: int, block: Block) -> None:
        self._check_index(index)
        if not self._cells[index].is_empty:
            raise LevelContractError(f"index = {index} is already occupied by {self._cells[index]}")
        self._cells[index] = block

    def remove_block(self, index: int) -> Block:
        self._check_index(index)
        prev = self._cells[index]
        self._cells[index] = EMPTY
        return prev

    def import_text(self, text: str, fmt: FileFormat | None = None) -> LevelId | None:
        """
        Replace the grid with the decoded text. Nothing changes if decoding
        fails. A level id found in the text replaces the current one.
        """
        level_id, cells = decode(text, fmt)
        self._cells = list(cells)
        if level_id is not None:
            self._level_id = level_id
        logger.debug("imported level %r", self._level_id)
        return level_id

    def export_text(self, fmt: FileFormat) -> str:
        return encode(self._cells, fmt, self._level_id)
