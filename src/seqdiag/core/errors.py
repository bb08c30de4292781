"""
Error types for SEQDIAG tokenizing, parsing, and sequence generation.

Every error is fatal for the document being converted: there is no recovery
and no partial result.
"""

from dataclasses import dataclass
from typing import Optional


class SeqDiagError(Exception):
    """Base exception for all SEQDIAG errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(SeqDiagError):
    """
    Raised when source text cannot be tokenized or a line cannot be parsed.

    Examples:
    - Unterminated quoted string
    - Unknown command
    - Malformed block, terminator, or note line
    """

    pass


class UnterminatedToken(ParseError):
    """End of input reached inside a quoted string."""


class UnrecognisedCommand(ParseError):
    """No statement form matches the line."""


class InvalidBlockCommand(ParseError):
    """A block keyword is followed by unexpected filler tokens."""


class UnknownTerminator(ParseError):
    """A terminators line names an unsupported mode."""


class InvalidNoteArity(ParseError):
    """A note/text/state line lists too few or too many agents."""


class GenerateError(SeqDiagError):
    """
    Raised when parsed statements violate the structure of a sequence.

    Examples:
    - Jump to a marker that has not been defined yet
    - Unbalanced block begin/end statements
    - Explicitly showing or hiding a reserved agent

    Attributes:
        statement_index: Index of the offending statement in the parse
            result, or None when the error concerns the whole stream
    """

    def __init__(self, message: str, statement_index: int | None = None):
        self.statement_index = statement_index
        if statement_index is not None:
            message = f"{message} (statement {statement_index})"
        super().__init__(message)


class UndefinedMarker(GenerateError):
    """An async jump refers to a marker not defined earlier in the stream."""


class ReservedAgentError(GenerateError):
    """A sentinel or block boundary agent was explicitly begun or ended."""


class ExtraBlockEnd(GenerateError):
    """A block end appeared with no open block."""


class UnterminatedBlock(GenerateError):
    """Statements ran out while a block was still open."""


class InvalidSplit(GenerateError):
    """A block split appeared outside a block that can be split."""


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Name of the source (a path, or "<input>" for in-memory text)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional reconstructed source line
    """

    file: str
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "diagram.seq:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and an error marker."""
        if not self.snippet:
            return ""

        formatted = []
        for i, line in enumerate(self.snippet.split("\n")):
            prefix = f"{self.line + i:4d} | "
            formatted.append(prefix + line)
            if i == 0:
                formatted.append(" " * len(prefix) + "^^^")

        return "\n".join(formatted)


def make_parse_error(
    message: str,
    file: str,
    line: int,
    column: int,
    snippet: str | None = None,
    error_type: type[ParseError] = ParseError,
) -> ParseError:
    """
    Helper to create a ParseError (or subclass) with context.

    Args:
        message: Error description
        file: Source name
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional reconstructed source line
        error_type: Concrete ParseError subclass to raise

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return error_type(message, context)
