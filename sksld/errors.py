from __future__ import annotations


class DecodeError(ValueError):
    """Raised when level text cannot be turned into a grid."""


class ParseFailure(DecodeError):
    pass


class StructuralMismatch(DecodeError):
    pass


class MixedLevelIdentifiers(StructuralMismatch):
    pass


class RowOrderViolation(DecodeError):
    def __init__(self, row: int, expected: int) -> None:
        super().__init__(f"row {row} out of order (expected row {expected})")
        self.row = row
        self.expected = expected


class RowWidthViolation(DecodeError):
    def __init__(self, row: int, width: int) -> None:
        super().__init__(f"row {row} has {width} elements")
        self.row = row
        self.width = width


class UnknownToken(DecodeError):
    def __init__(self, token: str) -> None:
        super().__init__(f"unknown token: {token!r}")
        self.token = token


class SizeViolation(DecodeError):
    def __init__(self, size: int, expected: int) -> None:
        super().__init__(f"level has {size} cells (expected {expected})")
        self.size = size
        self.expected = expected


class UnrecognizedFormat(DecodeError):
    pass


class EncodeError(ValueError):
    pass


class MissingLevelIdentifier(EncodeError):
    pass


class LevelContractError(AssertionError):
    """Caller misuse of a Level (bad index, writing over an occupied cell)."""
