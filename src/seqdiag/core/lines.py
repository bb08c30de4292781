"""
Line assembly for SEQDIAG token streams.

Groups tokens into logical lines and provides helpers to reconstruct source
text from a run of tokens.
"""

import logging

from .lexer import Token

logger = logging.getLogger(__name__)

Line = list[Token]


def is_line_break(token: Token) -> bool:
    """True for a newline token outside quotes."""
    return token.value == "\n" and not token.quoted


def split_lines(tokens: list[Token]) -> list[Line]:
    """
    Split a token stream on unquoted newline tokens.

    Empty lines are dropped, so every returned line has at least one token.
    """
    lines: list[Line] = []
    line: Line = []
    for token in tokens:
        if is_line_break(token):
            if line:
                lines.append(line)
                line = []
        else:
            line.append(token)
    if line:
        lines.append(line)

    logger.debug("Assembled %d lines from %d tokens", len(lines), len(tokens))
    return lines


def join_label(line: Line, begin: int, end: int | None = None) -> str:
    """
    Reconstruct the text of ``line[begin:end]``.

    The separator of the first token is dropped; every later token keeps the
    whitespace that preceded it.
    """
    if end is None:
        end = len(line)
    if end <= begin:
        return ""
    parts = [line[begin].value]
    for token in line[begin + 1 : end]:
        parts.append(token.separator + token.value)
    return "".join(parts)


def line_text(line: Line) -> str:
    """Reconstruct a whole line, used in diagnostics."""
    return join_label(line, 0, len(line))


def find_token(line: Line, value: str, start: int = 0) -> int:
    """Index of the first token with ``value`` at or after ``start``, or -1."""
    for i in range(start, len(line)):
        if line[i].value == value:
            return i
    return -1
