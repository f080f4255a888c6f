from __future__ import annotations

import argparse
import logging
import sys

from .blocks import NOTE_PREFIX, TOKEN_TABLE, BackgroundType
from .codec import decode, encode
from .errors import DecodeError, EncodeError
from .fileformat import FileFormat, guess_format
from .grid import LevelId
from .level import Level
from .preview import preview_blocks
from .render_png import RenderConfig, render_blocks_png


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_text(out: str, data: str) -> None:
    if out == "-":
        sys.stdout.write(data)
    else:
        with open(out, "w", encoding="utf-8") as f:
            f.write(data)


def _parse_level_id(s: str) -> LevelId:
    return int(s) if s.isdecimal() else s


def _add_verbose(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("-v", "--verbose", action="store_true", help="Log codec debug output to stderr")


def _setup_logging(ns: argparse.Namespace) -> None:
    if ns.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _cmd_detect(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="sksld detect")
    ap.add_argument("path", type=str, help="Level file or '-' for stdin")
    _add_verbose(ap)
    ns = ap.parse_args(argv)
    _setup_logging(ns)

    fmt = guess_format(_read_text(ns.path))
    print(fmt.value if fmt is not None else "unknown")
    return 0 if fmt is not None else 1


def _cmd_convert(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="sksld convert")
    ap.add_argument("path", type=str, help="Level file or '-' for stdin")
    ap.add_argument("--to", type=str, required=True, choices=[f.value for f in FileFormat])
    ap.add_argument("--from", dest="src_format", type=str, default=None, choices=[f.value for f in FileFormat])
    ap.add_argument("--level", type=str, default=None, help="Level id for as3 output (overrides the source's)")
    ap.add_argument("--out", type=str, default="-", help="Output path or '-' for stdout")
    _add_verbose(ap)
    ns = ap.parse_args(argv)
    _setup_logging(ns)

    src_fmt = FileFormat.parse(ns.src_format) if ns.src_format else None
    try:
        level_id, cells = decode(_read_text(ns.path), src_fmt)
        if ns.level is not None:
            level_id = _parse_level_id(ns.level)
        data = encode(cells, FileFormat.parse(ns.to), level_id)
    except (DecodeError, EncodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not data.endswith("\n"):
        data += "\n"
    _write_text(ns.out, data)
    return 0


def _cmd_preview(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="sksld preview")
    ap.add_argument("path", type=str, help="Level file (lbl or as3)")
    ap.add_argument("--view", type=str, default="glyph", choices=["glyph", "mask"])
    _add_verbose(ap)
    ns = ap.parse_args(argv)
    _setup_logging(ns)

    try:
        level_id, cells = decode(_read_text(ns.path))
    except DecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(preview_blocks(cells, view=ns.view, title=ns.path, level_id=level_id))
    return 0


def _cmd_export_png(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="sksld export-png")
    ap.add_argument("path", type=str, help="Level file (lbl or as3)")
    ap.add_argument("--scale", type=int, default=16)
    ap.add_argument("--no-grid", action="store_true")
    ap.add_argument("--dark", action="store_true", help="Render with the dark-mode palette")
    ap.add_argument("--background", type=str, default="cobble", choices=[b.name.lower() for b in BackgroundType])
    ap.add_argument("--out", type=str, required=True, help="Output .png path")
    _add_verbose(ap)
    ns = ap.parse_args(argv)
    _setup_logging(ns)

    try:
        lvl = Level.from_text(_read_text(ns.path))
    except DecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    lvl.set_dark(ns.dark)
    lvl.set_background(BackgroundType[ns.background.upper()])
    render_blocks_png(
        lvl.blocks,
        out_path=ns.out,
        background=lvl.background,
        cfg=RenderConfig(scale=ns.scale, draw_grid=not ns.no_grid, dark=lvl.is_dark),
    )
    return 0


def _cmd_tokens(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="sksld tokens")
    ap.parse_args(argv)

    for tok, block in TOKEN_TABLE:
        extra = ""
        if block.direction is not None:
            extra = f" {block.direction.name.lower()}"
        elif block.background is not None:
            extra = f" {block.background.name.lower()}"
        print(f"{tok:>6}  {block.kind.value}{extra}")
    print(f"{NOTE_PREFIX + '<text>':>6}  note")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in ("-h", "--help"):
        print("sksld commands: detect, convert, preview, export-png, tokens")
        print("Example: sksld detect level.txt")
        print("Example: sksld convert level.txt --to as3 --level 3 --out level.as")
        print("Example: sksld convert level.as --to lbl --out level.txt")
        print("Example: sksld preview level.txt")
        print("Example: sksld export-png level.txt --out level.png")
        return 0

    cmd = argv[0]
    sub_argv = argv[1:]
    if cmd == "detect":
        return _cmd_detect(sub_argv)
    if cmd == "convert":
        return _cmd_convert(sub_argv)
    if cmd == "preview":
        return _cmd_preview(sub_argv)
    if cmd == "export-png":
        return _cmd_export_png(sub_argv)
    if cmd == "tokens":
        return _cmd_tokens(sub_argv)

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
