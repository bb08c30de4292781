"""
Document-level metadata and shared enumerations for SEQDIAG IR.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TerminatorMode(str, Enum):
    """Visual style used when an agent is shown or hidden."""

    NONE = "none"
    BOX = "box"
    CROSS = "cross"
    BAR = "bar"


class BlockMode(str, Enum):
    """Kinds of block sections."""

    IF = "if"
    ELSE = "else"
    REPEAT = "repeat"


class NoteMode(str, Enum):
    """Visual flavour of a note statement."""

    NOTE = "note"
    TEXT = "text"
    STATE = "state"


class LineStyle(str, Enum):
    """Line style of a connection arrow."""

    SOLID = "solid"
    DASH = "dash"


class Meta(BaseModel):
    """
    Document metadata collected while parsing.

    Attributes:
        title: Diagram title, verbatim from the ``title`` line
        terminators: Mode used to hide agents still visible at the end
    """

    title: str = ""
    terminators: TerminatorMode = TerminatorMode.NONE

    model_config = ConfigDict(frozen=True)
