"""
SEQDIAG Intermediate Representation (IR) types.

Types are organized into submodules:

- meta: document metadata and shared enumerations
- statements: raw statements produced by the line parser
- sequence: normalized stages produced by the generator

All types are re-exported from this package.
"""

from .meta import BlockMode, LineStyle, Meta, NoteMode, TerminatorMode
from .sequence import (
    AgentBeginStage,
    AgentEndStage,
    BlockStage,
    ConnectionStage,
    NoteStage,
    Section,
    Sequence,
    Stage,
)
from .statements import (
    AgentBegin,
    AgentDefine,
    AgentEnd,
    AgentRef,
    AsyncJump,
    BlockBegin,
    BlockEnd,
    BlockSplit,
    Connection,
    Mark,
    Note,
    NoteType,
    ParseResult,
    RawStatement,
)

__all__ = [
    # Metadata
    "BlockMode",
    "LineStyle",
    "Meta",
    "NoteMode",
    "TerminatorMode",
    # Raw statements
    "AgentBegin",
    "AgentDefine",
    "AgentEnd",
    "AgentRef",
    "AsyncJump",
    "BlockBegin",
    "BlockEnd",
    "BlockSplit",
    "Connection",
    "Mark",
    "Note",
    "NoteType",
    "ParseResult",
    "RawStatement",
    # Sequence
    "AgentBeginStage",
    "AgentEndStage",
    "BlockStage",
    "ConnectionStage",
    "NoteStage",
    "Section",
    "Sequence",
    "Stage",
]
