from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .blocks import BackgroundType, Block, BlockKind
from .grid import LEVEL_HEIGHT, LEVEL_WIDTH, iter_rows


@dataclass(frozen=True, slots=True)
class RenderConfig:
    scale: int = 16
    draw_grid: bool = True
    dark: bool = False


_BACKGROUND_RGB: dict[BackgroundType, tuple[int, int, int]] = {
    BackgroundType.COBBLE: (118, 112, 104),
    BackgroundType.WATERFALL: (70, 104, 140),
    BackgroundType.SKULLS: (120, 96, 86),
    BackgroundType.BRICK: (140, 82, 66),
}

_KIND_RGB: dict[BlockKind, tuple[int, int, int]] = {
    BlockKind.BLOCK: (40, 40, 40),
    BlockKind.EXIT: (60, 200, 90),
    BlockKind.SECRET_EXIT: (40, 140, 70),
    BlockKind.KEY: (240, 200, 40),
    BlockKind.LOCK: (170, 130, 30),
    BlockKind.SPIKE: (210, 50, 50),
    BlockKind.ONE_WAY_WALL: (90, 90, 160),
    BlockKind.PIPE_IN: (60, 170, 200),
    BlockKind.PIPE_OUT: (40, 120, 180),
    BlockKind.PIPE_PHASE: (120, 200, 230),
    BlockKind.POWER_UP_BURROW: (200, 120, 220),
    BlockKind.POWER_UP_RECALL: (150, 80, 200),
    BlockKind.TOGGLE_SOLID: (230, 140, 40),
    BlockKind.TOGGLE_GHOST: (240, 200, 150),
    BlockKind.SCAFFOLD: (160, 120, 80),
    BlockKind.TORCH: (255, 160, 60),
    BlockKind.NOTE: (250, 250, 250),
}


def _shade(rgb: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    r, g, b = rgb
    return (int(r * factor), int(g * factor), int(b * factor))


def render_blocks_png(
    cells: Sequence[Block],
    *,
    out_path: str,
    background: BackgroundType = BackgroundType.COBBLE,
    cfg: RenderConfig = RenderConfig(),
) -> None:
    """
    Renders a level to a flat-colour PNG for quick visual checks.

    Requires Pillow, but imports lazily so text-only workflows don't break.
    """
    try:
        from PIL import Image, ImageDraw  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("Pillow is required for PNG rendering; install with: pip install '.[image]'") from e

    scale = max(1, int(cfg.scale))
    factor = 0.45 if cfg.dark else 1.0
    w, h = LEVEL_WIDTH * scale, LEVEL_HEIGHT * scale
    img = Image.new("RGBA", (w, h), _shade(_BACKGROUND_RGB[background], factor) + (255,))
    draw = ImageDraw.Draw(img)

    for y, row in iter_rows(cells):
        for x, block in enumerate(row):
            if block.is_empty:
                continue
            if block.background is not None:
                rgb = _BACKGROUND_RGB[block.background]
            else:
                rgb = _KIND_RGB[block.kind]
            x0, y0 = x * scale, y * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=_shade(rgb, factor) + (255,))
            if block.direction is not None and scale >= 6:
                # Mark the side the block faces.
                edge = max(1, scale // 5)
                d = block.direction.value
                if d == 0:
                    box = [x0, y0, x0 + scale - 1, y0 + edge - 1]
                elif d == 1:
                    box = [x0 + scale - edge, y0, x0 + scale - 1, y0 + scale - 1]
                elif d == 2:
                    box = [x0, y0 + scale - edge, x0 + scale - 1, y0 + scale - 1]
                else:
                    box = [x0, y0, x0 + edge - 1, y0 + scale - 1]
                draw.rectangle(box, fill=(255, 255, 255, 200))

    if cfg.draw_grid and scale >= 6:
        # Light grid lines.
        for x in range(LEVEL_WIDTH + 1):
            xx = x * scale
            draw.line([(xx, 0), (xx, h)], fill=(0, 0, 0, 40), width=1)
        for y in range(LEVEL_HEIGHT + 1):
            yy = y * scale
            draw.line([(0, yy), (w, yy)], fill=(0, 0, 0, 40), width=1)

    img.save(out_path, format="PNG")
