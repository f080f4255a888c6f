from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    # Clockwise, starting at the top.
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class BackgroundType(Enum):
    COBBLE = 0
    WATERFALL = 1
    SKULLS = 2
    BRICK = 3


class BlockKind(Enum):
    EMPTY = "empty"
    BLOCK = "block"
    EXIT = "exit"
    SECRET_EXIT = "secret_exit"
    KEY = "key"
    LOCK = "lock"
    SPIKE = "spike"
    ONE_WAY_WALL = "one_way_wall"
    PIPE_IN = "pipe_in"
    PIPE_OUT = "pipe_out"
    PIPE_PHASE = "pipe_phase"
    POWER_UP_BURROW = "power_up_burrow"
    POWER_UP_RECALL = "power_up_recall"
    TOGGLE_SOLID = "toggle_solid"
    TOGGLE_GHOST = "toggle_ghost"
    SCAFFOLD = "scaffold"
    TORCH = "torch"
    BACKGROUND = "background"
    NOTE = "note"


DIRECTIONAL_KINDS = frozenset({BlockKind.SPIKE, BlockKind.ONE_WAY_WALL})

NOTE_PREFIX = "Note:"


@dataclass(frozen=True, slots=True)
class Block:
    kind: BlockKind
    direction: Direction | None = None
    background: BackgroundType | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if (self.direction is not None) != (self.kind in DIRECTIONAL_KINDS):
            raise ValueError(f"{self.kind.value} block: direction mismatch ({self.direction})")
        if (self.background is not None) != (self.kind is BlockKind.BACKGROUND):
            raise ValueError(f"{self.kind.value} block: background mismatch ({self.background})")
        if (self.text is not None) != (self.kind is BlockKind.NOTE):
            raise ValueError(f"{self.kind.value} block: text mismatch")
        if self.text is not None and ("\n" in self.text or "\r" in self.text):
            raise ValueError("note text must be a single line")

    @classmethod
    def note(cls, text: str) -> Block:
        return cls(BlockKind.NOTE, text=text)

    @property
    def is_empty(self) -> bool:
        return self.kind is BlockKind.EMPTY

    @property
    def is_note(self) -> bool:
        return self.kind is BlockKind.NOTE


EMPTY = Block(BlockKind.EMPTY)


def _build_token_table() -> tuple[tuple[str, Block], ...]:
    plain = [
        ("0", BlockKind.EMPTY),
        ("B0", BlockKind.BLOCK),
        ("E0", BlockKind.EXIT),
        ("E1", BlockKind.SECRET_EXIT),
        ("K0", BlockKind.KEY),
        ("L0", BlockKind.LOCK),
        ("P0", BlockKind.PIPE_IN),
        ("P1", BlockKind.PIPE_OUT),
        ("P2", BlockKind.PIPE_PHASE),
        ("U0", BlockKind.POWER_UP_BURROW),
        ("U1", BlockKind.POWER_UP_RECALL),
        ("T0", BlockKind.TOGGLE_SOLID),
        ("T1", BlockKind.TOGGLE_GHOST),
        ("Z0", BlockKind.SCAFFOLD),
        ("F0", BlockKind.TORCH),
    ]
    out: list[tuple[str, Block]] = [(tok, Block(kind)) for tok, kind in plain]
    for d in Direction:
        out.append((f"X{d.value}", Block(BlockKind.SPIKE, direction=d)))
    for d in Direction:
        out.append((f"W{d.value}", Block(BlockKind.ONE_WAY_WALL, direction=d)))
    for bg in BackgroundType:
        out.append((f"M{bg.value}", Block(BlockKind.BACKGROUND, background=bg)))
    return tuple(out)


# Every fixed-token block. Notes are the only variant not listed here.
TOKEN_TABLE = _build_token_table()

_BLOCK_BY_TOKEN: dict[str, Block] = {tok: block for tok, block in TOKEN_TABLE}
_TOKEN_BY_BLOCK: dict[Block, str] = {block: tok for tok, block in TOKEN_TABLE}


def decode_token(token: str) -> Block | None:
    """
    Map a token to its block, or None when the token is not recognised.
    `Note:<text>` decodes to a note carrying <text>.
    """
    block = _BLOCK_BY_TOKEN.get(token)
    if block is not None:
        return block
    if token.startswith(NOTE_PREFIX):
        text = token[len(NOTE_PREFIX) :]
        if "\n" in text or "\r" in text:
            return None
        return Block.note(text)
    return None


def encode_block(block: Block) -> str:
    if block.is_note:
        return NOTE_PREFIX + str(block.text)
    return _TOKEN_BY_BLOCK[block]
