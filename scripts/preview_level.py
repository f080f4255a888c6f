#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from sksld.codec import decode  # noqa: E402
from sksld.preview import preview_blocks  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="Path to a level file (lbl or as3)")
    ap.add_argument("--view", default="glyph", choices=["glyph", "mask"])
    ns = ap.parse_args(argv)
    with open(ns.path, "r", encoding="utf-8") as f:
        level_id, cells = decode(f.read())
    sys.stdout.write(preview_blocks(cells, view=ns.view, title=ns.path, level_id=level_id))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
