"""
Connection parsing for SEQDIAG.

Handles arrow lines such as ``A -> B: label``.
"""

from typing import TYPE_CHECKING, Any, NamedTuple

from .. import ir
from ..lines import Line, find_token, join_label


class Arrow(NamedTuple):
    line: ir.LineStyle
    left: bool
    right: bool


CONNECTION_TYPES: dict[str, Arrow] = {
    "->": Arrow(ir.LineStyle.SOLID, left=False, right=True),
    "<-": Arrow(ir.LineStyle.SOLID, left=True, right=False),
    "<->": Arrow(ir.LineStyle.SOLID, left=True, right=True),
    "-->": Arrow(ir.LineStyle.DASH, left=False, right=True),
    "<--": Arrow(ir.LineStyle.DASH, left=True, right=False),
    "<-->": Arrow(ir.LineStyle.DASH, left=True, right=True),
}


class ConnectionParserMixin:
    """
    Mixin providing connection parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        read_agent: Any

    def parse_connection(self, line: Line) -> ir.Connection | None:
        """
        Parse a connection line.

        Syntax:
            [+|-]A <arrow> [+|-]B [: label]

        The arrow is the first token naming a connection type. It must have
        an agent on both sides before the label colon.
        """
        label_split = find_token(line, ":")
        if label_split == -1:
            label_split = len(line)

        type_split = -1
        arrow: Arrow | None = None
        for i, token in enumerate(line):
            arrow = CONNECTION_TYPES.get(token.value)
            if arrow is not None:
                type_split = i
                break

        if arrow is None or type_split <= 0 or type_split >= label_split - 1:
            return None

        source = self.read_agent(line, 0, type_split)
        destination = self.read_agent(line, type_split + 1, label_split)
        if not source.name or not destination.name:
            return None

        return ir.Connection(
            agents=[source, destination],
            label=join_label(line, label_split + 1),
            line=arrow.line,
            left=arrow.left,
            right=arrow.right,
        )
