"""Tests for the SEQDIAG tokenizer."""

import pytest

from seqdiag.core.errors import UnterminatedToken
from seqdiag.core.lexer import (
    TOKEN_CLASSES,
    Token,
    TokenKind,
    match_begin,
    match_continue,
    tokenize,
)


def values(text: str) -> list[str]:
    return [token.value for token in tokenize(text)]


class TestBareWords:
    """Words are split on whitespace and punctuation."""

    def test_words_keep_preceding_whitespace(self) -> None:
        assert tokenize("foo  bar") == [Token("foo"), Token("bar", "  ")]

    def test_empty_input(self) -> None:
        assert tokenize("") == []

    def test_whitespace_only(self) -> None:
        assert tokenize("  \t ") == []

    def test_brackets_are_word_characters(self) -> None:
        assert values("[ -> ]") == ["[", "->", "]"]


class TestSymbols:
    """Runs of + - < > form a single token."""

    @pytest.mark.parametrize("arrow", ["->", "<-", "<->", "-->", "<--", "<-->"])
    def test_arrows_are_single_tokens(self, arrow: str) -> None:
        assert values(f"A{arrow}B") == ["A", arrow, "B"]

    def test_prefix_separated_by_space(self) -> None:
        assert values("+A -> -B") == ["+", "A", "->", "-", "B"]

    def test_adjacent_prefix_joins_arrow(self) -> None:
        assert values("A ->+B") == ["A", "->+", "B"]


class TestPunctuation:
    """Comma, colon and newline are single-character tokens."""

    def test_comma_and_colon(self) -> None:
        assert tokenize("A,B: c") == [
            Token("A"),
            Token(","),
            Token("B"),
            Token(":"),
            Token("c", " "),
        ]

    def test_newline_token(self) -> None:
        assert values("a\nb") == ["a", "\n", "b"]

    def test_carriage_return_is_separator(self) -> None:
        assert tokenize("a\r\nb") == [Token("a"), Token("\n", "\r"), Token("b")]


class TestComments:
    """Comments run to the end of the line and are not emitted."""

    def test_comment_dropped_newline_kept(self) -> None:
        assert tokenize("a # note\nb") == [Token("a"), Token("\n"), Token("b")]

    def test_comment_at_end_of_input(self) -> None:
        assert tokenize("a # trailing") == [Token("a")]

    def test_hash_inside_quotes_is_text(self) -> None:
        assert tokenize('"a # b"') == [Token("a # b", quoted=True)]


class TestQuotedStrings:
    """Quoted strings support escapes and literal newlines."""

    def test_double_quoted(self) -> None:
        assert tokenize('x "y z"') == [Token("x"), Token("y z", " ", quoted=True)]

    def test_single_quoted(self) -> None:
        assert tokenize("'it\\'s'") == [Token("it's", quoted=True)]

    def test_escapes(self) -> None:
        assert values('"a\\nb\\"c\\\\d\\qe"') == ['a\nb"c\\dqe']

    def test_literal_newline(self) -> None:
        tokens = tokenize('"a\nb"')
        assert tokens == [Token("a\nb", quoted=True)]

    def test_quoted_newline_escape_only(self) -> None:
        tokens = tokenize('"\\n"')
        assert tokens == [Token("\n", quoted=True)]

    def test_punctuation_inside_quotes(self) -> None:
        assert values('"A -> B: c, d"') == ["A -> B: c, d"]


class TestUnterminated:
    """End of input inside a quoted string is an error."""

    def test_unterminated_double_quote(self) -> None:
        with pytest.raises(UnterminatedToken):
            tokenize('title "abc')

    def test_unterminated_after_escape(self) -> None:
        with pytest.raises(UnterminatedToken):
            tokenize("'abc\\'")

    def test_error_location(self) -> None:
        with pytest.raises(UnterminatedToken) as exc_info:
            tokenize('a\n  "abc', "diagram.seq")
        context = exc_info.value.context
        assert context is not None
        assert context.file == "diagram.seq"
        assert (context.line, context.column) == (2, 3)


class TestPositions:
    """Tokens record where they start."""

    def test_line_and_column(self) -> None:
        tokens = tokenize("a\n  bc -> d")
        b = tokens[2]
        assert b.value == "bc"
        assert (b.line, b.column) == (2, 3)
        assert (tokens[3].line, tokens[3].column) == (2, 6)

    def test_positions_do_not_affect_equality(self) -> None:
        assert Token("a", line=3, column=4) == Token("a")


class TestMatchers:
    """Matchers are pure functions of (text, pos)."""

    def test_priority_order(self) -> None:
        kinds = [token_class.kind for token_class in TOKEN_CLASSES]
        assert kinds[0] is TokenKind.COMMENT
        assert kinds.index(TokenKind.DOUBLE_QUOTED) < kinds.index(TokenKind.WORD)

    def test_begin_word_is_zero_width(self) -> None:
        length, token_class = match_begin("abc", 0)
        assert length == 0
        assert token_class is not None and token_class.kind is TokenKind.WORD

    def test_begin_separator(self) -> None:
        assert match_begin(" x", 0) == (1, None)

    def test_begin_at_offset(self) -> None:
        length, token_class = match_begin("ab->c", 2)
        assert token_class is not None and token_class.kind is TokenKind.SYMBOL

    def test_continue_escape(self) -> None:
        _, quoted = match_begin('"a', 0)
        assert quoted is not None
        assert match_continue('"\\nx"', 1, quoted) == (2, "\n", False)

    def test_continue_end(self) -> None:
        _, quoted = match_begin('"', 0)
        assert quoted is not None
        assert match_continue('"a"', 2, quoted) == (1, "", True)

    def test_continue_at_end_of_input(self) -> None:
        _, quoted = match_begin('"', 0)
        assert quoted is not None
        assert match_continue('"a', 2, quoted) == (0, "", False)
