"""
Lexer/Tokenizer for SEQDIAG source text.

Converts raw diagram text into a stream of tokens. Each token keeps the
whitespace that preceded it so labels can be reconstructed verbatim.

Token classes are tried in a fixed priority order at every scan position.
Matching is done by pure functions over ``(text, pos)``; the class table is
read-only and may be reused by syntax highlighters.
"""

import logging
import re
from bisect import bisect_right
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .errors import UnterminatedToken, make_parse_error

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Token classes of the SEQDIAG language."""

    COMMENT = "comment"
    DOUBLE_QUOTED = "double_quoted"
    SINGLE_QUOTED = "single_quoted"
    WORD = "word"
    SYMBOL = "symbol"
    COMMA = "comma"
    COLON = "colon"
    NEWLINE = "newline"


def _unescape(match: re.Match[str]) -> str:
    char = match.group(1)
    if char == "n":
        return "\n"
    return char


@dataclass(frozen=True)
class TokenClass:
    """
    Scanning rules for one token class.

    Attributes:
        kind: Token class identifier
        start: Pattern that opens the class at the scan position
        end: Pattern that closes the class; None for single-unit classes
        escape: Pattern checked before ``end`` while inside the class
        unescape: Maps an ``escape`` match to the text it stands for
        omit: Drop the token instead of emitting it (comments)
        quoted: Mark emitted tokens as quoted
        value: Fixed value for single-unit classes
    """

    kind: TokenKind
    start: re.Pattern[str]
    end: re.Pattern[str] | None = None
    escape: re.Pattern[str] | None = None
    unescape: Callable[[re.Match[str]], str] | None = None
    omit: bool = False
    quoted: bool = False
    value: str = ""


_DELIMITERS = r" \t\r\n:+\-<>,"

TOKEN_CLASSES: tuple[TokenClass, ...] = (
    TokenClass(
        TokenKind.COMMENT,
        start=re.compile(r"#"),
        end=re.compile(r"(?=\n)|\Z"),
        omit=True,
    ),
    TokenClass(
        TokenKind.DOUBLE_QUOTED,
        start=re.compile(r'"'),
        end=re.compile(r'"'),
        escape=re.compile(r"\\(.)"),
        unescape=_unescape,
        quoted=True,
    ),
    TokenClass(
        TokenKind.SINGLE_QUOTED,
        start=re.compile(r"'"),
        end=re.compile(r"'"),
        escape=re.compile(r"\\(.)"),
        unescape=_unescape,
        quoted=True,
    ),
    TokenClass(
        TokenKind.WORD,
        start=re.compile(rf"(?=[^{_DELIMITERS}])"),
        end=re.compile(rf"(?=[{_DELIMITERS}])|\Z"),
    ),
    TokenClass(
        TokenKind.SYMBOL,
        start=re.compile(r"(?=[+\-<>])"),
        end=re.compile(r"(?=[^+\-<>])|\Z"),
    ),
    TokenClass(TokenKind.COMMA, start=re.compile(r","), value=","),
    TokenClass(TokenKind.COLON, start=re.compile(r":"), value=":"),
    TokenClass(TokenKind.NEWLINE, start=re.compile(r"\n"), value="\n"),
)


@dataclass(frozen=True)
class Token:
    """
    A single token of source text.

    Attributes:
        value: Token text (quotes removed and escapes resolved for strings)
        separator: Inert text (whitespace) that preceded the token
        quoted: True for quoted strings; disables newline-as-separator
        line: Line number of the token start (1-indexed, diagnostics only)
        column: Column number of the token start (1-indexed, diagnostics only)
    """

    value: str
    separator: str = ""
    quoted: bool = False
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __repr__(self) -> str:
        quoted = " quoted" if self.quoted else ""
        return f"Token({self.value!r}, sep={self.separator!r}{quoted}, {self.line}:{self.column})"


def match_begin(text: str, pos: int) -> tuple[int, TokenClass | None]:
    """
    Find the token class that opens at ``pos``.

    Returns:
        Tuple of (matched length, token class). When no class matches, the
        class is None and the length is 1: that character is separator text.
    """
    for token_class in TOKEN_CLASSES:
        match = token_class.start.match(text, pos)
        if match:
            return match.end() - pos, token_class
    return 1, None


def match_continue(text: str, pos: int, token_class: TokenClass) -> tuple[int, str, bool]:
    """
    Advance inside an open token class.

    Escapes are checked first, then the end pattern, else one character is
    consumed into the token value.

    Returns:
        Tuple of (matched length, text to append to the value, class ended).
        At end of input with no end match the length is 0 and ended is False.
    """
    if token_class.escape and token_class.unescape:
        match = token_class.escape.match(text, pos)
        if match:
            return match.end() - pos, token_class.unescape(match), False

    if token_class.end is not None:
        match = token_class.end.match(text, pos)
        if match:
            return match.end() - pos, "", True

    if pos >= len(text):
        return 0, "", False
    return 1, text[pos], False


class _LineIndex:
    """Maps text offsets to 1-indexed line/column pairs."""

    def __init__(self, text: str):
        self.starts = [0] + [i + 1 for i, ch in enumerate(text) if ch == "\n"]

    def position(self, offset: int) -> tuple[int, int]:
        line = bisect_right(self.starts, offset)
        return line, offset - self.starts[line - 1] + 1


def tokenize(text: str, file: str | None = None) -> list[Token]:
    """
    Tokenize source text.

    Args:
        text: Source text
        file: Source name for error reporting

    Returns:
        List of tokens (comments omitted)

    Raises:
        UnterminatedToken: If input ends inside a quoted string
    """
    file = file or "<input>"
    index = _LineIndex(text)
    tokens: list[Token] = []

    pos = 0
    separator = ""
    while pos < len(text):
        length, token_class = match_begin(text, pos)
        if token_class is None:
            separator += text[pos]
            pos += length
            continue

        start = pos
        pos += length
        value = token_class.value
        ended = token_class.end is None
        while not ended:
            length, appended, ended = match_continue(text, pos, token_class)
            if not ended and length == 0:
                line, column = index.position(start)
                raise make_parse_error(
                    f"Unterminated {token_class.kind.value.replace('_', ' ')} token",
                    file,
                    line,
                    column,
                    snippet=text[start:].split("\n", 1)[0],
                    error_type=UnterminatedToken,
                )
            value += appended
            pos += length

        if not token_class.omit:
            line, column = index.position(start)
            tokens.append(
                Token(
                    value=value,
                    separator=separator,
                    quoted=token_class.quoted,
                    line=line,
                    column=column,
                )
            )
        separator = ""

    logger.debug("Tokenized %s into %d tokens", file, len(tokens))
    return tokens
