"""
Sequence generator for SEQDIAG.

Turns the flat statement stream of a ParseResult into a normalized Sequence:

1. Agents are registered in first-use order between the two sentinels
2. Hidden agents are shown implicitly before they are used
3. Adjacent show/hide stages of the same mode are merged
4. Block begin/split/end statements become a tree of sections
5. Blocks without visible content are dropped with their boundary agents
6. Agents still visible at the end are hidden with the document terminator

Each call to ``generate`` owns all of its working state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from . import ir
from .agents import (
    LEFT_SENTINEL,
    RIGHT_SENTINEL,
    AgentRegistry,
    block_bounds,
    merge_names,
)
from .errors import (
    ExtraBlockEnd,
    InvalidSplit,
    ReservedAgentError,
    UndefinedMarker,
    UnterminatedBlock,
)

logger = logging.getLogger(__name__)

NOTE_DEFAULT_AGENTS: dict[str, list[str]] = {
    "note over": [LEFT_SENTINEL, RIGHT_SENTINEL],
    "note left": [LEFT_SENTINEL],
    "note right": [RIGHT_SENTINEL],
}

VisibilityStage = ir.AgentBeginStage | ir.AgentEndStage


@dataclass
class AgentState:
    visible: bool = False
    locked: bool = False


@dataclass
class SectionBuilder:
    mode: ir.BlockMode
    label: str
    stages: list[ir.Stage] = field(default_factory=list)

    def build(self) -> ir.Section:
        return ir.Section(mode=self.mode, label=self.label, stages=self.stages)


@dataclass
class Nest:
    """
    An open block (or the implicit top level) being built.

    Attributes:
        mode: Mode of the block's first section; None at top level
        left: Left boundary agent name
        right: Right boundary agent name
        sections: Sections opened so far
        agents: Every agent used inside the nest, nested bounds included
        has_content: True once a visible stage was added
    """

    mode: ir.BlockMode | None
    left: str
    right: str
    sections: list[SectionBuilder]
    agents: list[str] = field(default_factory=list)
    has_content: bool = False

    @property
    def section(self) -> SectionBuilder:
        return self.sections[-1]

    def build(self) -> ir.BlockStage:
        return ir.BlockStage(
            left=self.left,
            right=self.right,
            sections=[section.build() for section in self.sections],
        )


class SequenceBuilder:
    """Working state for one generation pass."""

    def __init__(self, meta: ir.Meta):
        self.meta = meta
        self.registry = AgentRegistry()
        self.agent_states: dict[str, AgentState] = {}
        self.markers: set[str] = set()
        self.nesting: list[Nest] = []
        self.block_count = 0
        self.index: int | None = None

        self.handlers: dict[str, Callable[..., None]] = {
            "mark": self.handle_mark,
            "async": self.handle_async,
            "connection": self.handle_connection,
            "note over": self.handle_note,
            "note left": self.handle_note,
            "note right": self.handle_note,
            "note between": self.handle_note,
            "agent define": self.handle_agent_define,
            "agent begin": self.handle_agent_begin,
            "agent end": self.handle_agent_end,
            "block begin": self.handle_block_begin,
            "block split": self.handle_block_split,
            "block end": self.handle_block_end,
        }

    @property
    def nest(self) -> Nest:
        return self.nesting[-1]

    def begin_nest(self, mode: ir.BlockMode | None, label: str, left: str, right: str) -> Nest:
        section = SectionBuilder(mode=mode or ir.BlockMode.IF, label=label)
        nest = Nest(mode=mode, left=left, right=right, sections=[section], agents=[left, right])
        self.agent_states[left] = AgentState(locked=True)
        self.agent_states[right] = AgentState(locked=True)
        self.nesting.append(nest)
        return nest

    def add_stage(self, stage: ir.Stage, visible: bool = True) -> None:
        self.nest.section.stages.append(stage)
        if visible:
            self.nest.has_content = True

    def define_agents(self, names: list[str]) -> None:
        merge_names(self.nest.agents, names)
        self.registry.define(names)

    def set_visibility(
        self,
        names: list[str],
        visible: bool,
        mode: ir.TerminatorMode,
        checked: bool = False,
    ) -> None:
        """
        Show or hide agents, emitting at most one begin/end stage.

        Agents already in the requested state are skipped. Locked agents are
        skipped too, unless the change was requested explicitly (``checked``).
        """
        changed: list[str] = []
        for name in names:
            state = self.agent_states.get(name, AgentState())
            if state.locked:
                if checked:
                    raise ReservedAgentError(f"Cannot begin/end agent: {name}", self.index)
                continue
            if state.visible != visible and name not in changed:
                changed.append(name)
        if not changed:
            return

        for name in changed:
            self.agent_states[name] = AgentState(visible=visible)

        stage_type: type[VisibilityStage] = ir.AgentBeginStage if visible else ir.AgentEndStage
        stages = self.nest.section.stages
        last = stages[-1] if stages else None
        if isinstance(last, stage_type) and last.mode == mode:
            agents = list(last.agents)
            merge_names(agents, changed)
            stages[-1] = stage_type(agents=agents, mode=mode)
        else:
            self.add_stage(stage_type(agents=changed, mode=mode))
        self.define_agents(changed)

    def handle_mark(self, statement: ir.Mark) -> None:
        self.markers.add(statement.name)
        self.add_stage(statement, visible=False)

    def handle_async(self, statement: ir.AsyncJump) -> None:
        if statement.target and statement.target not in self.markers:
            raise UndefinedMarker(f"Unknown marker: {statement.target}", self.index)
        self.add_stage(statement, visible=False)

    def handle_connection(self, statement: ir.Connection) -> None:
        names = [agent.name for agent in statement.agents]
        self.define_agents(names)
        begin = [agent.name for agent in statement.agents if agent.flag == "+"]
        if begin:
            self.set_visibility(begin, True, ir.TerminatorMode.BOX, checked=True)
        self.set_visibility(names, True, ir.TerminatorMode.BOX)
        self.add_stage(
            ir.ConnectionStage(
                agents=names,
                label=statement.label,
                line=statement.line,
                left=statement.left,
                right=statement.right,
            )
        )
        end = [agent.name for agent in statement.agents if agent.flag == "-"]
        if end:
            self.set_visibility(end, False, ir.TerminatorMode.CROSS, checked=True)

    def handle_note(self, statement: ir.Note) -> None:
        names = [agent.name for agent in statement.agents]
        if not names:
            names = list(NOTE_DEFAULT_AGENTS.get(statement.type, []))
        self.define_agents(names)
        self.set_visibility(names, True, ir.TerminatorMode.BOX)
        self.add_stage(
            ir.NoteStage(
                type=statement.type,
                agents=names,
                mode=statement.mode,
                label=statement.label,
            )
        )

    def handle_agent_define(self, statement: ir.AgentDefine) -> None:
        self.define_agents([agent.name for agent in statement.agents])

    def handle_agent_begin(self, statement: ir.AgentBegin) -> None:
        names = [agent.name for agent in statement.agents]
        self.define_agents(names)
        self.set_visibility(names, True, statement.mode, checked=True)

    def handle_agent_end(self, statement: ir.AgentEnd) -> None:
        names = [agent.name for agent in statement.agents]
        self.define_agents(names)
        self.set_visibility(names, False, statement.mode, checked=True)

    def handle_block_begin(self, statement: ir.BlockBegin) -> None:
        left, right = block_bounds(self.block_count)
        self.block_count += 1
        self.begin_nest(statement.mode, statement.label, left, right)

    def handle_block_split(self, statement: ir.BlockSplit) -> None:
        container = self.nest.mode
        if container is not ir.BlockMode.IF:
            inside = container.value if container else "global"
            raise InvalidSplit(
                f'Invalid block nesting ("else" inside {inside})', self.index
            )
        self.nest.sections.append(SectionBuilder(mode=statement.mode, label=statement.label))

    def handle_block_end(self, statement: ir.BlockEnd) -> None:
        if len(self.nesting) <= 1:
            raise ExtraBlockEnd('Invalid block nesting (too many "end"s)', self.index)

        nested = self.nesting.pop()
        if not nested.has_content:
            logger.debug("Dropping block %s with no visible content", nested.left[:-1])
            return

        self.define_agents(nested.agents)
        self.registry.place_bounds(nested.left, nested.right, nested.agents)
        self.add_stage(nested.build())

    def run(self, statements: list[ir.RawStatement]) -> ir.Sequence:
        top = self.begin_nest(None, "", LEFT_SENTINEL, RIGHT_SENTINEL)

        for index, statement in enumerate(statements):
            self.index = index
            self.handlers[statement.type](statement)
        self.index = None

        if len(self.nesting) != 1:
            raise UnterminatedBlock(
                f"Invalid block nesting ({len(self.nesting) - 1} unclosed)"
            )

        self.set_visibility(self.registry.names(), False, self.meta.terminators)
        self.registry.place_bounds(LEFT_SENTINEL, RIGHT_SENTINEL)

        logger.debug(
            "Generated sequence: %d agents, %d top-level stages, %d blocks",
            len(self.registry),
            len(top.section.stages),
            self.block_count,
        )
        return ir.Sequence(
            meta=self.meta,
            agents=self.registry.names(),
            stages=top.section.stages,
        )


def generate(parse_result: ir.ParseResult) -> ir.Sequence:
    """
    Normalize a parse result into a Sequence.

    Args:
        parse_result: Metadata and flat statement stream from the parser

    Returns:
        Sequence with resolved agent ordering, visibility and block tree

    Raises:
        GenerateError: If the statement stream is structurally invalid
    """
    builder = SequenceBuilder(parse_result.meta)
    return builder.run(parse_result.statements)
