from __future__ import annotations

import json
import logging
from typing import Any, Iterator, Sequence

import esprima
from esprima.error_handler import Error as EsprimaError

from .blocks import Block, decode_token, encode_block
from .errors import (
    EncodeError,
    MissingLevelIdentifier,
    MixedLevelIdentifiers,
    ParseFailure,
    RowOrderViolation,
    RowWidthViolation,
    SizeViolation,
    StructuralMismatch,
    UnknownToken,
)
from .grid import GRID_SIZE, LEVEL_WIDTH, LevelId, iter_rows

logger = logging.getLogger(__name__)

LEVEL_ARRAY_NAME = "lvlArray"

# esprima AST node (attribute access by field name).
Node = Any

# Largest integer an ECMAScript number holds exactly.
MAX_SAFE_INTEGER = 2**53 - 1


def _js_string(s: str) -> str:
    # Astral characters are written raw; U+2028/U+2029 stay escaped.
    return json.dumps(s, ensure_ascii=False).replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def _join_surrogates(s: str) -> str:
    """Merge `\\uD83D\\uDC80`-style escape pairs that the parser leaves split."""
    if not any("\ud800" <= ch <= "\udfff" for ch in s):
        return s
    return s.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _iter_assignments(node: Node) -> Iterator[Node]:
    """
    Yield assignment expressions reachable through plain statement lists,
    expression statements and comma sequences. Anything else (functions,
    conditionals, declarations) is not looked into.
    """
    t = node.type
    if t in ("Program", "BlockStatement"):
        for stmt in node.body:
            yield from _iter_assignments(stmt)
    elif t == "ExpressionStatement":
        yield from _iter_assignments(node.expression)
    elif t == "SequenceExpression":
        for expr in node.expressions:
            yield from _iter_assignments(expr)
    elif t == "AssignmentExpression":
        yield node
        yield from _iter_assignments(node.right)


def _is_computed_member(node: Node) -> bool:
    return node.type == "MemberExpression" and bool(node.computed)


def _level_target(left: Node) -> tuple[Node, Node] | None:
    """Return (level_node, row_node) for `lvlArray[level][row]`, else None."""
    if not _is_computed_member(left) or not _is_computed_member(left.object):
        return None
    root = left.object.object
    if root.type != "Identifier" or root.name != LEVEL_ARRAY_NAME:
        return None
    return left.object.property, left.property


def _as_index(node: Node) -> int | None:
    if node.type != "Literal":
        return None
    v = node.value
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    if v < 0 or v > MAX_SAFE_INTEGER or not float(v).is_integer():
        return None
    return int(v)


def _parse_level_id(node: Node) -> LevelId:
    idx = _as_index(node)
    if idx is not None:
        return idx
    if node.type == "Literal" and isinstance(node.value, str):
        return _join_surrogates(node.value)
    if node.type == "Identifier":
        return node.name
    raise StructuralMismatch(f"unsupported level index expression: {node.type}")


def _element_token(row: int, node: Node | None) -> str:
    if node is None:
        raise StructuralMismatch(f"row {row}: empty array slot")
    if node.type == "Identifier":
        return node.name
    if node.type == "Literal":
        v = node.value
        if isinstance(v, str):
            return _join_surrogates(v)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return node.raw
    raise StructuralMismatch(f"row {row}: unsupported element {node.type}")


def _decode_row(row: int, node: Node) -> list[Block]:
    if node.type != "ArrayExpression":
        raise StructuralMismatch(f"row {row}: right-hand side is not an array literal")
    if len(node.elements) != LEVEL_WIDTH:
        raise RowWidthViolation(row, len(node.elements))
    out: list[Block] = []
    for el in node.elements:
        token = _element_token(row, el)
        block = decode_token(token)
        if block is None:
            raise UnknownToken(token)
        out.append(block)
    return out


def decode_as3(text: str) -> tuple[LevelId, list[Block]]:
    """
    Extract a level from `lvlArray[<level>][<row>] = [...];` statements.

    Rows must appear in order starting at 0, every row must hold LEVEL_WIDTH
    elements and all rows must belong to the same level. Assignments to
    anything other than `lvlArray[a][b]` are ignored. The first problem
    found is raised.
    """
    try:
        program = esprima.parseScript(text)
        return _extract_level(program)
    except EsprimaError as e:
        raise ParseFailure(f"invalid source: {e}") from e
    except RecursionError as e:
        raise ParseFailure("invalid source: expression nested too deeply") from e


def _extract_level(program: Node) -> tuple[LevelId, list[Block]]:
    level_id: LevelId | None = None
    cells: list[Block] = []
    for node in _iter_assignments(program):
        target = _level_target(node.left)
        if target is None:
            logger.debug("ignoring assignment to %s", node.left.type)
            continue
        if node.operator != "=":
            raise StructuralMismatch(f"unsupported assignment operator {node.operator!r}")
        level_node, row_node = target
        row = _as_index(row_node)
        if row is None:
            raise StructuralMismatch("row index must be a non-negative integer literal")
        lvl = _parse_level_id(level_node)
        if level_id is None:
            level_id = lvl
        elif lvl != level_id:
            raise MixedLevelIdentifiers(f"rows for level {lvl!r} mixed into level {level_id!r}")

        expected = len(cells) // LEVEL_WIDTH
        if row != expected:
            raise RowOrderViolation(row, expected)
        cells.extend(_decode_row(row, node.right))

    if len(cells) != GRID_SIZE or level_id is None:
        raise SizeViolation(len(cells), GRID_SIZE)
    logger.debug("decoded as3 level %r (%d rows)", level_id, len(cells) // LEVEL_WIDTH)
    return level_id, cells


def format_level_id(level_id: LevelId) -> str:
    if isinstance(level_id, bool):
        raise EncodeError(f"invalid level id: {level_id!r}")
    if isinstance(level_id, int):
        if level_id < 0:
            raise EncodeError(f"level id must be non-negative, got {level_id}")
        if level_id > MAX_SAFE_INTEGER:
            raise EncodeError(f"level id {level_id} is too large for an AS3 number literal")
        return str(level_id)
    if isinstance(level_id, str):
        return _js_string(level_id)
    raise EncodeError(f"invalid level id: {level_id!r}")


def _element_text(block: Block) -> str:
    token = encode_block(block)
    if block.is_note:
        return _js_string(token)
    return token


def encode_as3(cells: Sequence[Block], level_id: LevelId | None) -> str:
    if level_id is None:
        raise MissingLevelIdentifier("as3 export needs a level id")
    level = format_level_id(level_id)
    out: list[str] = []
    for y, row in iter_rows(cells):
        items = ", ".join(_element_text(b) for b in row)
        out.append(f"{LEVEL_ARRAY_NAME}[{level}][{y}] = [{items}];\n")
    return "".join(out)
