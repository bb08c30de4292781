"""
SEQDIAG Line Parser Package.

This package provides a modular parser for SEQDIAG source lines.
The parser is built using mixins to separate parsing logic by statement
family, making it easier to maintain and extend.

The main exports are:
- Parser: The complete parser class
- parse_dsl: Convenience function to parse source text

Usage:
    from seqdiag.core.dsl_parser_impl import parse_dsl

    result = parse_dsl(text, "diagram.seq")
"""

import logging
from collections.abc import Callable

from .. import ir
from ..errors import UnrecognisedCommand
from ..lexer import tokenize
from ..lines import Line, split_lines
from .agent import AgentParserMixin
from .base import BaseLineParser
from .block import BLOCK_KEYWORDS, BlockParserMixin
from .connection import CONNECTION_TYPES, ConnectionParserMixin
from .marker import MarkerParserMixin
from .meta import MetaParserMixin
from .note import NOTE_KEYWORDS, NoteParserMixin

logger = logging.getLogger(__name__)

# A matcher returns a statement, True for a metadata update, or None when the
# line is not of its form.
Matcher = Callable[[Line], ir.RawStatement | bool | None]


class Parser(
    BaseLineParser,
    MetaParserMixin,
    BlockParserMixin,
    AgentParserMixin,
    MarkerParserMixin,
    NoteParserMixin,
    ConnectionParserMixin,
):
    """
    Complete SEQDIAG line parser.

    Each line is dispatched on its leading token to the matchers for that
    keyword, then to the shape matchers (connection, marker). The first
    matcher to accept the line wins:

    - MetaParserMixin: title, terminators
    - BlockParserMixin: if, elif, else, repeat, bare end
    - AgentParserMixin: define, begin, end with an agent list
    - MarkerParserMixin: simultaneously, markers
    - NoteParserMixin: note, text, state
    - ConnectionParserMixin: arrows
    """

    def keyword_matchers(self, keyword: str) -> tuple[Matcher, ...]:
        """Matchers selected by a line's leading token."""
        if keyword == "title":
            return (self.parse_title,)
        if keyword == "terminators":
            return (self.parse_terminators,)
        if keyword == "end":
            return (self.parse_block, self.parse_agent_command)
        if keyword in BLOCK_KEYWORDS:
            return (self.parse_block,)
        if keyword in ("define", "begin"):
            return (self.parse_agent_command,)
        if keyword == "simultaneously":
            return (self.parse_async,)
        if keyword in NOTE_KEYWORDS:
            return (self.parse_note,)
        return ()

    def parse_line(self, line: Line) -> ir.RawStatement | None:
        """
        Parse one line.

        Returns:
            The statement for the line, or None if the line only updated
            document metadata

        Raises:
            ParseError: If the line is malformed or matches no statement form
        """
        matchers = self.keyword_matchers(line[0].value) + (
            self.parse_connection,
            self.parse_mark,
        )
        for matcher in matchers:
            result = matcher(line)
            if result is True:
                return None
            if result is not None:
                return result
        raise self.error("Unrecognised command", line, UnrecognisedCommand)

    def parse_lines(self, lines: list[Line]) -> ir.ParseResult:
        """Parse all lines of a document into a ParseResult."""
        statements: list[ir.RawStatement] = []
        for line in lines:
            statement = self.parse_line(line)
            if statement is not None:
                statements.append(statement)

        logger.debug("Parsed %s: %d statements", self.file, len(statements))
        return ir.ParseResult(meta=self.meta(), statements=statements)


def parse_dsl(
    text: str,
    file: str | None = None,
    default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
) -> ir.ParseResult:
    """
    Tokenize and parse SEQDIAG source text.

    Args:
        text: Source text
        file: Source name for error reporting
        default_terminators: Terminator mode used when the document has no
            ``terminators`` line

    Returns:
        ParseResult with metadata and the flat statement stream

    Raises:
        ParseError: On any lexical or syntactic error
    """
    tokens = tokenize(text, file)
    lines = split_lines(tokens)
    parser = Parser(file, default_terminators)
    return parser.parse_lines(lines)


__all__ = [
    "CONNECTION_TYPES",
    "Parser",
    "parse_dsl",
]
