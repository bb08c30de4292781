"""
Marker and async jump parsing for SEQDIAG.
"""

from .. import ir
from ..lines import Line, join_label


class MarkerParserMixin:
    """
    Mixin providing marker and ``simultaneously`` parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    def parse_async(self, line: Line) -> ir.AsyncJump | None:
        """
        Parse an async jump.

        Syntax:
            simultaneously:
            simultaneously with marker name:
        """
        if line[-1].value != ":":
            return None
        target = ""
        if len(line) > 2:
            if line[1].value != "with":
                return None
            target = join_label(line, 2, len(line) - 1)
        return ir.AsyncJump(target=target)

    def parse_mark(self, line: Line) -> ir.Mark | None:
        """
        Parse a marker.

        Syntax:
            marker name:
        """
        if len(line) < 2 or line[-1].value != ":":
            return None
        return ir.Mark(name=join_label(line, 0, len(line) - 1))
