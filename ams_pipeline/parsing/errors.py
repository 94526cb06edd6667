from typing import Optional

class ArchiveFormatError(ValueError):
    """Raised when archive text does not follow the annual-maximum layout.

    Carries the 1-based station block index and the offending line (when known)
    so callers can locate the bad input.
    """

    def __init__(self, message: str, block_index: Optional[int] = None, line: Optional[str] = None):
        self.message = message
        self.block_index = block_index
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        parts = [self.message]
        if self.block_index is not None:
            parts.append(f"block {self.block_index}")
        if self.line is not None:
            parts.append(f"line {self.line!r}")
        return " | ".join(parts)

class HeaderArityError(ArchiveFormatError):
    def __init__(self, field_count: int, block_index: Optional[int] = None, line: Optional[str] = None):
        self.field_count = field_count
        super().__init__(
            f"Station header has {field_count} fields, expected 6 or 7",
            block_index=block_index,
            line=line,
        )

class NumericFieldError(ArchiveFormatError):
    def __init__(self, field: str, token: str, block_index: Optional[int] = None, line: Optional[str] = None):
        self.field = field
        self.token = token
        super().__init__(
            f"Could not parse {field} from {token!r}",
            block_index=block_index,
            line=line,
        )

class EmptyArchiveError(ArchiveFormatError):
    def __init__(self):
        super().__init__("Archive contains no station blocks")
