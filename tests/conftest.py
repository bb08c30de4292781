"""Shared pytest fixtures for SEQDIAG tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from seqdiag.core import ir


@pytest.fixture
def write_diagram(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory writing diagram source into the temp directory."""

    def _write(text: str, name: str = "diagram.seq") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def login_parse_result() -> ir.ParseResult:
    """Return a small parse result with a conditional block."""
    return ir.ParseResult(
        meta=ir.Meta(title="Login", terminators=ir.TerminatorMode.BOX),
        statements=[
            ir.Connection(agents=[ir.AgentRef(name="User"), ir.AgentRef(name="Server")]),
            ir.BlockBegin(mode=ir.BlockMode.IF, label="valid"),
            ir.Connection(agents=[ir.AgentRef(name="Server"), ir.AgentRef(name="User")]),
            ir.BlockSplit(mode=ir.BlockMode.ELSE, label="invalid"),
            ir.Connection(agents=[ir.AgentRef(name="Server"), ir.AgentRef(name="User")]),
            ir.BlockEnd(),
        ],
    )
