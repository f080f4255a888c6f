import pytest

from sksld.blocks import BackgroundType
from sksld.render_png import RenderConfig, render_blocks_png


def test_render_png_size_and_cells(tmp_path, sample_cells) -> None:
    Image = pytest.importorskip("PIL.Image")
    out = tmp_path / "level.png"
    render_blocks_png(sample_cells, out_path=str(out), cfg=RenderConfig(scale=4, draw_grid=False))
    img = Image.open(out)
    assert img.size == (32 * 4, 18 * 4)
    # Cell 0 is a plain block, cell 1 is empty (background colour).
    assert img.getpixel((1, 1))[:3] == (40, 40, 40)
    assert img.getpixel((5, 1))[:3] == (118, 112, 104)


def test_render_png_dark_palette(tmp_path, sample_cells) -> None:
    Image = pytest.importorskip("PIL.Image")
    out = tmp_path / "dark.png"
    cfg = RenderConfig(scale=4, draw_grid=False, dark=True)
    render_blocks_png(sample_cells, out_path=str(out), background=BackgroundType.BRICK, cfg=cfg)
    img = Image.open(out)
    assert img.getpixel((5, 1))[:3] == (63, 36, 29)
