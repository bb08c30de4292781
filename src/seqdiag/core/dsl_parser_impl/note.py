"""
Note parsing for SEQDIAG.

Handles ``note``, ``text`` and ``state`` lines.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import InvalidNoteArity
from ..lines import Line, find_token, join_label


@dataclass(frozen=True)
class NotePlacement:
    """
    Rules for one note position keyword.

    Attributes:
        type: Statement type produced
        filler: Optional tokens skipped after the position (``left of``)
        min_agents: Fewest agents allowed
        max_agents: Most agents allowed, or None for no limit
    """

    type: ir.NoteType
    filler: tuple[str, ...] = ()
    min_agents: int = 0
    max_agents: int | None = None


NOTE_KEYWORDS: dict[str, tuple[ir.NoteMode, dict[str, NotePlacement]]] = {
    "text": (
        ir.NoteMode.TEXT,
        {
            "left": NotePlacement("note left", filler=("of",)),
            "right": NotePlacement("note right", filler=("of",)),
        },
    ),
    "note": (
        ir.NoteMode.NOTE,
        {
            "over": NotePlacement("note over"),
            "left": NotePlacement("note left", filler=("of",)),
            "right": NotePlacement("note right", filler=("of",)),
            "between": NotePlacement("note between", min_agents=2),
        },
    ),
    "state": (
        ir.NoteMode.STATE,
        {
            "over": NotePlacement("note over", min_agents=1, max_agents=1),
        },
    ),
}


class NoteParserMixin:
    """
    Mixin providing note parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        error: Any
        skip_over: Any
        parse_agent_list: Any

    def parse_note(self, line: Line) -> ir.Note | None:
        """
        Parse a note line.

        Syntax:
            note over [A, B]: label
            note left [of] [A]: label
            note right [of] [A]: label
            note between A, B: label
            text left|right [of] [A]: label
            state over A: label
        """
        keyword = NOTE_KEYWORDS.get(line[0].value)
        label_split = find_token(line, ":")
        if keyword is None or label_split == -1 or len(line) < 2:
            return None

        mode, placements = keyword
        placement = placements.get(line[1].value)
        if placement is None:
            return None

        skip = self.skip_over(line, 2, placement.filler)
        agents = self.parse_agent_list(line, skip, label_split)
        if len(agents) < placement.min_agents or (
            placement.max_agents is not None and len(agents) > placement.max_agents
        ):
            raise self.error(f"Invalid {mode.value}", line, InvalidNoteArity)

        return ir.Note(
            type=placement.type,
            agents=agents,
            mode=mode,
            label=join_label(line, label_split + 1),
        )
