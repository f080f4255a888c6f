import pytest

from sksld.codec import decode, encode
from sksld.errors import DecodeError, EncodeError, MissingLevelIdentifier, UnrecognizedFormat
from sksld.fileformat import FileFormat
from sksld.grid import empty_grid


def test_decode_detects_lbl(sample_cells) -> None:
    text = encode(sample_cells, FileFormat.LBL)
    assert decode(text) == (None, sample_cells)


def test_decode_detects_as3(sample_cells) -> None:
    text = encode(sample_cells, FileFormat.AS3, 12)
    assert decode(text) == (12, sample_cells)


def test_decode_with_explicit_format(make_as3) -> None:
    # A leading comment defeats the sniff but not an explicit format.
    text = "// exported level\n" + make_as3(level='"intro"')
    with pytest.raises(UnrecognizedFormat):
        decode(text)
    assert decode(text, FileFormat.AS3) == ("intro", empty_grid())


def test_decode_unrecognized() -> None:
    with pytest.raises(UnrecognizedFormat) as ei:
        decode("not a level")
    assert isinstance(ei.value, DecodeError)


def test_encode_checks_grid_size(sample_cells) -> None:
    with pytest.raises(EncodeError):
        encode(sample_cells[:-1], FileFormat.LBL)
    with pytest.raises(MissingLevelIdentifier):
        encode(sample_cells, FileFormat.AS3)
