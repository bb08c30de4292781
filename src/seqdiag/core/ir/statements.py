"""
Raw statement types produced by the SEQDIAG line parser.

Statements are a flat stream: blocks are still encoded as begin/split/end
markers and agents are still raw name references.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .meta import BlockMode, LineStyle, Meta, NoteMode, TerminatorMode

NoteType = Literal["note over", "note left", "note right", "note between"]


class AgentRef(BaseModel):
    """
    An agent as written in the source.

    Attributes:
        name: Agent name
        flag: Participation prefix: "+" (begin before use), "-" (end after
            use) or "" (implicit)
    """

    name: str
    flag: Literal["", "+", "-"] = ""

    model_config = ConfigDict(frozen=True)


class BlockBegin(BaseModel):
    """Opens a block (``if`` / ``repeat``)."""

    type: Literal["block begin"] = "block begin"
    mode: BlockMode
    label: str = ""

    model_config = ConfigDict(frozen=True)


class BlockSplit(BaseModel):
    """Starts a new section in the open block (``else`` / ``elif``)."""

    type: Literal["block split"] = "block split"
    mode: BlockMode = BlockMode.ELSE
    label: str = ""

    model_config = ConfigDict(frozen=True)


class BlockEnd(BaseModel):
    """Closes the innermost open block."""

    type: Literal["block end"] = "block end"

    model_config = ConfigDict(frozen=True)


class AgentDefine(BaseModel):
    """Registers agents in the ordering without showing them."""

    type: Literal["agent define"] = "agent define"
    agents: list[AgentRef]

    model_config = ConfigDict(frozen=True)


class AgentBegin(BaseModel):
    """Explicitly shows agents."""

    type: Literal["agent begin"] = "agent begin"
    agents: list[AgentRef]
    mode: TerminatorMode = TerminatorMode.BOX

    model_config = ConfigDict(frozen=True)


class AgentEnd(BaseModel):
    """Explicitly hides agents."""

    type: Literal["agent end"] = "agent end"
    agents: list[AgentRef]
    mode: TerminatorMode = TerminatorMode.CROSS

    model_config = ConfigDict(frozen=True)


class Connection(BaseModel):
    """
    An arrow between two agents.

    Attributes:
        agents: Source and destination, in written order
        label: Text after the label colon
        line: Solid or dashed line
        left: Arrow head on the left agent
        right: Arrow head on the right agent
    """

    type: Literal["connection"] = "connection"
    agents: list[AgentRef]
    label: str = ""
    line: LineStyle = LineStyle.SOLID
    left: bool = False
    right: bool = True

    model_config = ConfigDict(frozen=True)


class Note(BaseModel):
    """A note, text or state box positioned relative to agents."""

    type: NoteType
    agents: list[AgentRef] = Field(default_factory=list)
    mode: NoteMode = NoteMode.NOTE
    label: str = ""

    model_config = ConfigDict(frozen=True)


class Mark(BaseModel):
    """A named position that later async jumps may refer to."""

    type: Literal["mark"] = "mark"
    name: str

    model_config = ConfigDict(frozen=True)


class AsyncJump(BaseModel):
    """
    Continue the diagram at an earlier marker (``simultaneously``).

    An empty target refers to the current position.
    """

    type: Literal["async"] = "async"
    target: str = ""

    model_config = ConfigDict(frozen=True)


RawStatement = Annotated[
    BlockBegin
    | BlockSplit
    | BlockEnd
    | AgentDefine
    | AgentBegin
    | AgentEnd
    | Connection
    | Note
    | Mark
    | AsyncJump,
    Field(discriminator="type"),
]


class ParseResult(BaseModel):
    """
    Output of parsing one document.

    Attributes:
        meta: Title and terminator mode
        statements: Flat statement stream in source order
    """

    meta: Meta = Field(default_factory=Meta)
    statements: list[RawStatement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
