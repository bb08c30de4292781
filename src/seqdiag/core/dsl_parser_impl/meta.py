"""
Metadata line parsing for SEQDIAG.

Handles ``title`` and ``terminators`` lines, which update document metadata
instead of producing statements.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import UnknownTerminator
from ..lines import Line, join_label


class MetaParserMixin:
    """
    Mixin providing metadata line parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        title: str
        terminators: ir.TerminatorMode
        error: Any

    def parse_title(self, line: Line) -> bool:
        """
        Parse a title line.

        Syntax:
            title Any text, spacing kept verbatim
        """
        self.title = join_label(line, 1)
        return True

    def parse_terminators(self, line: Line) -> bool:
        """
        Parse a terminators line.

        Syntax:
            terminators none|box|cross|bar
        """
        if len(line) < 2:
            raise self.error("Unknown termination", line, UnknownTerminator)
        try:
            self.terminators = ir.TerminatorMode(line[1].value)
        except ValueError:
            raise self.error("Unknown termination", line, UnknownTerminator) from None
        return True
