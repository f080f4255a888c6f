from __future__ import annotations

from collections import Counter
from typing import Literal, Sequence

from .blocks import Block, BlockKind, encode_block
from .grid import LEVEL_HEIGHT, LEVEL_WIDTH, LevelId, iter_rows


PreviewView = Literal["glyph", "mask"]

_GLYPHS: dict[BlockKind, str] = {
    BlockKind.EMPTY: ".",
    BlockKind.BLOCK: "#",
    BlockKind.EXIT: "E",
    BlockKind.SECRET_EXIT: "e",
    BlockKind.KEY: "k",
    BlockKind.LOCK: "L",
    BlockKind.PIPE_IN: "(",
    BlockKind.PIPE_OUT: ")",
    BlockKind.PIPE_PHASE: "|",
    BlockKind.POWER_UP_BURROW: "b",
    BlockKind.POWER_UP_RECALL: "r",
    BlockKind.TOGGLE_SOLID: "T",
    BlockKind.TOGGLE_GHOST: "t",
    BlockKind.SCAFFOLD: "=",
    BlockKind.TORCH: "*",
    BlockKind.BACKGROUND: ":",
    BlockKind.NOTE: "?",
}

# Indexed by Direction value (up, right, down, left).
_SPIKE_GLYPHS = "^>v<"


def block_glyph(block: Block) -> str:
    if block.direction is not None:
        if block.kind is BlockKind.SPIKE:
            return _SPIKE_GLYPHS[block.direction.value]
        return "W"
    return _GLYPHS[block.kind]


def preview_blocks(
    cells: Sequence[Block],
    *,
    view: PreviewView = "glyph",
    title: str = "level",
    level_id: LevelId | None = None,
) -> str:
    lines: list[str] = []
    suffix = "" if level_id is None else f" level={level_id!r}"
    lines.append(f"{title} ({LEVEL_WIDTH}x{LEVEL_HEIGHT}){suffix}")

    for _, row in iter_rows(cells):
        if view == "glyph":
            lines.append("".join(block_glyph(b) for b in row))
        elif view == "mask":
            lines.append("".join("." if b.is_empty else "#" for b in row))
        else:
            raise ValueError(f"unknown view: {view}")

    # Token legend + counts
    cnt = Counter("Note" if b.is_note else encode_block(b) for b in cells if not b.is_empty)
    lines.append("")
    if cnt:
        lines.append("blocks:")
        for tok in sorted(cnt):
            lines.append(f"  {tok:>4}  count={cnt[tok]}")
    else:
        lines.append("blocks: <none>")

    notes = [b.text for b in cells if b.is_note]
    if notes:
        lines.append("")
        lines.append("notes:")
        for text in notes:
            lines.append(f"  {text}")

    lines.append("")
    lines.append(f"empty cells: {sum(1 for b in cells if b.is_empty)}")
    return "\n".join(lines) + "\n"
