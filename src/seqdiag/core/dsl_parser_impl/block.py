"""
Block statement parsing for SEQDIAG.

Handles ``if``/``elif``/``else``/``repeat`` and the bare ``end`` line.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import InvalidBlockCommand
from ..lines import Line, join_label


@dataclass(frozen=True)
class BlockKeyword:
    """
    Parsing rules for a block keyword.

    Attributes:
        split: True when the keyword continues an open block
        mode: Section mode produced
        filler: Optional tokens allowed after the keyword (``else if``).
            When set, anything other than the filler or a label colon
            directly after the keyword is an error.
    """

    split: bool
    mode: ir.BlockMode
    filler: tuple[str, ...] = ()


BLOCK_KEYWORDS: dict[str, BlockKeyword] = {
    "if": BlockKeyword(split=False, mode=ir.BlockMode.IF),
    "else": BlockKeyword(split=True, mode=ir.BlockMode.ELSE, filler=("if",)),
    "elif": BlockKeyword(split=True, mode=ir.BlockMode.ELSE),
    "repeat": BlockKeyword(split=False, mode=ir.BlockMode.REPEAT),
}


class BlockParserMixin:
    """
    Mixin providing block statement parsing.

    Note: This mixin expects to be combined with BaseLineParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        error: Any
        skip_over: Any

    def parse_block(self, line: Line) -> ir.BlockBegin | ir.BlockSplit | ir.BlockEnd | None:
        """
        Parse a block line.

        Syntax:
            if [:] [label]
            elif [:] [label]
            else [if [label]] [: label]
            repeat [:] [label]
            end
        """
        keyword = line[0].value
        if keyword == "end":
            return ir.BlockEnd() if len(line) == 1 else None

        block = BLOCK_KEYWORDS.get(keyword)
        if block is None:
            return None

        skip = self.skip_over(line, 1, block.filler)
        if block.filler and skip == 1 and len(line) > 1 and line[1].value != ":":
            raise self.error("Invalid block command", line, InvalidBlockCommand)
        if skip < len(line) and line[skip].value == ":":
            skip += 1

        label = join_label(line, skip)
        if block.split:
            return ir.BlockSplit(mode=block.mode, label=label)
        return ir.BlockBegin(mode=block.mode, label=label)
