from __future__ import annotations

import logging
from enum import Enum

from .as3 import LEVEL_ARRAY_NAME
from .blocks import decode_token
from .lbl import split_lines

logger = logging.getLogger(__name__)


class FileFormat(Enum):
    LBL = "lbl"
    AS3 = "as3"

    @classmethod
    def parse(cls, name: str) -> FileFormat:
        s = name.strip().lower()
        for fmt in cls:
            if fmt.value == s:
                return fmt
        raise ValueError(f"unknown file format: {name!r} (expected 'lbl' or 'as3')")


def guess_format(text: str) -> FileFormat | None:
    """
    Classify text by its first line only. This is a sniff, not a validation:
    the matching decoder may still reject the text.
    """
    lines = split_lines(text)
    if not lines:
        return None
    first = lines[0]
    if decode_token(first) is not None:
        fmt: FileFormat | None = FileFormat.LBL
    elif first.startswith(LEVEL_ARRAY_NAME):
        fmt = FileFormat.AS3
    else:
        fmt = None
    logger.debug("guessed format %s from first line %r", fmt, first[:40])
    return fmt
