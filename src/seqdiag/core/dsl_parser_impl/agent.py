"""
Agent manipulation parsing for SEQDIAG.

Handles ``define``, ``begin`` and ``end`` followed by an agent list.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lines import Line


class AgentParserMixin:
    """
    Mixin providing agent manipulation parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        parse_agent_list: Any

    def parse_agent_command(
        self, line: Line
    ) -> ir.AgentDefine | ir.AgentBegin | ir.AgentEnd | None:
        """
        Parse an agent manipulation line.

        Syntax:
            define A, B, Long Name
            begin A, B
            end A, B
        """
        if len(line) <= 1:
            return None

        agents = self.parse_agent_list(line, 1, len(line))
        keyword = line[0].value
        if keyword == "define":
            return ir.AgentDefine(agents=agents)
        if keyword == "begin":
            return ir.AgentBegin(agents=agents, mode=ir.TerminatorMode.BOX)
        if keyword == "end":
            return ir.AgentEnd(agents=agents, mode=ir.TerminatorMode.CROSS)
        return None
