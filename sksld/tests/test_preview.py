from sksld.blocks import Block, BlockKind, Direction
from sksld.grid import LEVEL_HEIGHT, empty_grid
from sksld.preview import block_glyph, preview_blocks


def test_preview_glyph_view(sample_cells) -> None:
    out = preview_blocks(sample_cells, title="t.txt", level_id=2)
    lines = out.splitlines()
    assert lines[0] == "t.txt (32x18) level=2"
    grid_lines = lines[1 : 1 + LEVEL_HEIGHT]
    assert all(len(ln) == 32 for ln in grid_lines)
    assert grid_lines[0][0] == "#"
    assert grid_lines[1][1] == "<"
    assert "    B0  count=1" in lines
    assert "notes:" in lines
    assert out.endswith(f"empty cells: {len(sample_cells) - 7}\n")


def test_preview_mask_view_empty_level() -> None:
    out = preview_blocks(empty_grid(), view="mask")
    lines = out.splitlines()
    assert lines[1] == "." * 32
    assert "blocks: <none>" in lines


def test_block_glyphs() -> None:
    assert block_glyph(Block(BlockKind.SPIKE, direction=Direction.UP)) == "^"
    assert block_glyph(Block(BlockKind.ONE_WAY_WALL, direction=Direction.DOWN)) == "W"
    assert block_glyph(Block.note("hi")) == "?"
