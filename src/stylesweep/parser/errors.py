"""Parser error types."""


class ParseError(Exception):
    """Raised when source text cannot be tokenized or its delimiters do not balance."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def location(self) -> str:
        """``:line:column`` suffix for messages; empty when the position is unknown."""
        if self.line is None:
            return ""
        return f":{self.line}:{self.column}"
