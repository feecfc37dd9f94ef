"""Immutable input stream for combinator parsing.

A Stream is a reference to a text buffer plus an offset into it. Parsers
never slice the buffer while matching: they read one character with get(),
step with next(), and hand the new Stream on. Every derived Stream shares
the same buffer object, so stepping is O(1) in time and memory.

Design Philosophy:
    - Stream is immutable (frozen dataclass)
    - EOF is a state (at_end), not a return value
    - Reading or stepping past the end is a contract violation, not a
      parse failure: parsers must check at_end first
    - Line:column computed on-demand (only needed for diagnostics)

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from strandparse.diagnostics import ContractViolationError, ErrorTemplate, StreamBoundsError

__all__ = ["Stream", "make_stream"]


@dataclass(frozen=True, slots=True, eq=False)
class Stream:
    """Immutable cursor over a text buffer.

    Equality is identity of the buffer plus equality of the cursor: two
    streams over equal but distinct strings are different inputs.

    Example:
        >>> s = make_stream("omg")
        >>> s.get()
        'o'
        >>> s.next().get()
        'm'
        >>> s.get()  # Original unchanged
        'o'
        >>> s.next().next().next().at_end
        True
    """

    buffer: str
    cursor: int = 0

    def __post_init__(self) -> None:
        """Validate 0 <= cursor <= len(buffer).

        Raises:
            StreamBoundsError: If the cursor lies outside the buffer
        """
        if not 0 <= self.cursor <= len(self.buffer):
            raise StreamBoundsError(
                ErrorTemplate.cursor_out_of_range(self.cursor, len(self.buffer))
            )

    @property
    def at_end(self) -> bool:
        """True if the cursor is at the end of the buffer."""
        return self.cursor >= len(self.buffer)

    def get(self) -> str:
        """Return the character at the cursor.

        Raises:
            StreamBoundsError: If at end of input
        """
        if self.at_end:
            raise StreamBoundsError(ErrorTemplate.read_past_end(self.cursor))
        return self.buffer[self.cursor]

    def next(self) -> "Stream":
        """Return a new Stream pointing at the next character.

        Raises:
            StreamBoundsError: If at end of input
        """
        if self.at_end:
            raise StreamBoundsError(ErrorTemplate.step_past_end(self.cursor))
        return Stream(self.buffer, self.cursor + 1)

    def slice_to(self, end: "Stream") -> str:
        """Return the text between this stream and a later one.

        Args:
            end: A stream over the same buffer at or after this cursor

        Returns:
            buffer[self.cursor:end.cursor]

        Raises:
            ContractViolationError: If end is over another buffer or before
                this cursor
        """
        same_buffer = end.buffer is self.buffer
        if not same_buffer or end.cursor < self.cursor:
            raise ContractViolationError(
                ErrorTemplate.invalid_slice(self.cursor, end.cursor, same_buffer=same_buffer)
            )
        return self.buffer[self.cursor : end.cursor]

    def line_col(self) -> tuple[int, int]:
        """Compute (line, column) of the cursor.

        Returns:
            Line is 1-indexed, column is 0-indexed, matching the header of
            Failure.render()

        Performance:
            O(n) in the cursor offset. Only call for diagnostics.
        """
        line = self.buffer.count("\n", 0, self.cursor) + 1
        column = self.cursor - (self.buffer.rfind("\n", 0, self.cursor) + 1)
        return (line, column)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stream):
            return NotImplemented
        return self.buffer is other.buffer and self.cursor == other.cursor

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.cursor))

    def __repr__(self) -> str:
        return f"Stream(cursor={self.cursor}, length={len(self.buffer)})"


def make_stream(text: str) -> Stream:
    """Create a Stream at the start of text."""
    return Stream(text, 0)
