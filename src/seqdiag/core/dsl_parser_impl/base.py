"""
Base parser class for SEQDIAG lines.

Provides the shared token utilities and error construction used by all
parser mixins.
"""

from .. import ir
from ..errors import ParseError, make_parse_error
from ..lines import Line, join_label, line_text


class BaseLineParser:
    """
    Base parser class with line manipulation utilities.

    Holds the document metadata while lines are parsed; metadata is frozen
    into an ``ir.Meta`` once all lines have been consumed.
    """

    def __init__(
        self,
        file: str | None = None,
        default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
    ):
        """
        Initialize parser.

        Args:
            file: Source name (for error reporting)
            default_terminators: Terminator mode used when the document has
                no ``terminators`` line
        """
        self.file = file or "<input>"
        self.title = ""
        self.terminators = default_terminators

    def meta(self) -> ir.Meta:
        """Snapshot of the metadata collected so far."""
        return ir.Meta(title=self.title, terminators=self.terminators)

    def error(
        self,
        message: str,
        line: Line,
        error_type: type[ParseError] = ParseError,
    ) -> ParseError:
        """Build a parse error pointing at the start of ``line``."""
        text = line_text(line)
        return make_parse_error(
            f"{message}: {text}",
            self.file,
            line[0].line,
            line[0].column,
            snippet=text,
            error_type=error_type,
        )

    def skip_over(self, line: Line, start: int, skip: tuple[str, ...]) -> int:
        """
        Skip a fixed token sequence if present.

        Returns:
            Index after the sequence, or ``start`` if it does not match
        """
        for i, value in enumerate(skip):
            if start + i >= len(line) or line[start + i].value != value:
                return start
        return start + len(skip)

    def parse_agent_list(self, line: Line, start: int, end: int) -> list[ir.AgentRef]:
        """
        Parse a comma separated agent list from ``line[start:end]``.

        Names spanning several tokens keep their inner spacing; empty entries
        are skipped.
        """
        agents: list[ir.AgentRef] = []
        current = ""
        first = True
        for token in line[start:end]:
            if token.value == ",":
                if current:
                    agents.append(ir.AgentRef(name=current))
                    current = ""
                first = True
            else:
                if not first:
                    current += token.separator
                first = False
                current += token.value
        if current:
            agents.append(ir.AgentRef(name=current))
        return agents

    def read_agent(self, line: Line, begin: int, end: int) -> ir.AgentRef:
        """Read one agent reference with an optional ``+``/``-`` prefix."""
        flag = line[begin].value
        if flag in ("+", "-"):
            return ir.AgentRef(name=join_label(line, begin + 1, end), flag=flag)
        return ir.AgentRef(name=join_label(line, begin, end))
