"""
Normalized sequence types for SEQDIAG IR.

A Sequence is the fully resolved output of the generator: every agent is
named in the ordering, visibility changes are explicit stages, and blocks
are a real tree of sections.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .meta import BlockMode, LineStyle, Meta, NoteMode, TerminatorMode
from .statements import AsyncJump, Mark, NoteType


class AgentBeginStage(BaseModel):
    """Agents become visible."""

    type: Literal["agent begin"] = "agent begin"
    agents: list[str]
    mode: TerminatorMode = TerminatorMode.BOX

    model_config = ConfigDict(frozen=True)


class AgentEndStage(BaseModel):
    """Agents are hidden with the given terminator."""

    type: Literal["agent end"] = "agent end"
    agents: list[str]
    mode: TerminatorMode = TerminatorMode.NONE

    model_config = ConfigDict(frozen=True)


class ConnectionStage(BaseModel):
    """An arrow between two resolved agents."""

    type: Literal["connection"] = "connection"
    agents: list[str]
    label: str = ""
    line: LineStyle = LineStyle.SOLID
    left: bool = False
    right: bool = True

    model_config = ConfigDict(frozen=True)


class NoteStage(BaseModel):
    """A note over, beside or between resolved agents."""

    type: NoteType
    agents: list[str]
    mode: NoteMode = NoteMode.NOTE
    label: str = ""

    model_config = ConfigDict(frozen=True)


class BlockStage(BaseModel):
    """
    A composite block with its boundary agents.

    Attributes:
        left: Name of the virtual agent marking the block's left edge
        right: Name of the virtual agent marking the block's right edge
        sections: Sections in source order (``if`` then any ``else``)
    """

    type: Literal["block"] = "block"
    left: str
    right: str
    sections: list[Section]

    model_config = ConfigDict(frozen=True)


Stage = Annotated[
    Mark
    | AsyncJump
    | ConnectionStage
    | AgentBeginStage
    | AgentEndStage
    | NoteStage
    | BlockStage,
    Field(discriminator="type"),
]


class Section(BaseModel):
    """One labelled region of a block."""

    mode: BlockMode
    label: str = ""
    stages: list[Stage] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Sequence(BaseModel):
    """
    Final IR handed to a renderer.

    Attributes:
        meta: Title and terminator mode
        agents: Agent ordering, bounded by the two sentinel agents
        stages: Top-level stages in display order
    """

    meta: Meta = Field(default_factory=Meta)
    agents: list[str]
    stages: list[Stage] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Renderer-facing JSON-compatible representation."""
        return self.model_dump(mode="json")


BlockStage.model_rebuild()
