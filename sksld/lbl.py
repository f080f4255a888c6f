from __future__ import annotations

import logging
from typing import Sequence

from .blocks import Block, decode_token, encode_block
from .errors import SizeViolation, UnknownToken
from .grid import GRID_SIZE

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """
    Split on "\\n" only (tolerating "\\r\\n"); a single trailing newline does not
    start another line. Other unicode line separators are kept as text.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def decode_lbl(text: str) -> list[Block]:
    out: list[Block] = []
    for line in split_lines(text):
        block = decode_token(line)
        if block is None:
            raise UnknownToken(line)
        out.append(block)
    if len(out) != GRID_SIZE:
        raise SizeViolation(len(out), GRID_SIZE)
    logger.debug("decoded %d lbl cells", len(out))
    return out


def encode_lbl(cells: Sequence[Block]) -> str:
    return "\n".join(encode_block(b) for b in cells)
