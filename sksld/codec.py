from __future__ import annotations

import logging
from typing import Sequence

from .as3 import decode_as3, encode_as3
from .blocks import Block
from .errors import EncodeError, UnrecognizedFormat
from .fileformat import FileFormat, guess_format
from .grid import GRID_SIZE, LevelId
from .lbl import decode_lbl, encode_lbl

logger = logging.getLogger(__name__)


def decode(text: str, fmt: FileFormat | None = None) -> tuple[LevelId | None, list[Block]]:
    """
    Decode level text into (level_id, cells). The format is sniffed from the
    first line unless given; LBL text never carries a level id.
    """
    if fmt is None:
        fmt = guess_format(text)
        if fmt is None:
            raise UnrecognizedFormat("could not recognise level format (expected lbl or as3)")
    logger.debug("decoding %d chars as %s", len(text), fmt.value)
    if fmt is FileFormat.LBL:
        return None, decode_lbl(text)
    return decode_as3(text)


def encode(cells: Sequence[Block], fmt: FileFormat, level_id: LevelId | None = None) -> str:
    if len(cells) != GRID_SIZE:
        raise EncodeError(f"level has {len(cells)} cells (expected {GRID_SIZE})")
    if fmt is FileFormat.LBL:
        return encode_lbl(cells)
    return encode_as3(cells, level_id)
