"""End-to-end tests for the compile pipeline and package API."""

import logging
from importlib.metadata import PackageNotFoundError
from pathlib import Path

import pytest

import seqdiag
from seqdiag._version import get_version
from seqdiag.core import compile_file, compile_text, ir, parse_file, parse_text
from seqdiag.core.errors import ParseError, UnterminatedToken
from seqdiag.core.generator import generate

LOGIN = """\
title Login
terminators box

User -> Server: credentials
if: valid
  Server -> User: token
else: invalid
  Server -> User: error
end
"""


def test_generate_login(login_parse_result: ir.ParseResult) -> None:
    result = generate(login_parse_result)
    assert result.meta == ir.Meta(title="Login", terminators=ir.TerminatorMode.BOX)
    assert result.agents == ["[", "__BLOCK0[", "User", "Server", "__BLOCK0]", "]"]
    assert [stage.type for stage in result.stages] == [
        "agent begin",
        "connection",
        "block",
        "agent end",
    ]
    assert result.stages[-1] == ir.AgentEndStage(
        agents=["User", "Server"], mode=ir.TerminatorMode.BOX
    )


def test_compile_text_matches_parse_then_generate() -> None:
    assert compile_text(LOGIN) == generate(parse_text(LOGIN))


def test_compile_text_labels() -> None:
    result = compile_text(LOGIN)
    block = result.stages[2]
    assert isinstance(block, ir.BlockStage)
    assert [section.label for section in block.sections] == ["valid", "invalid"]
    connection = block.sections[1].stages[0]
    assert connection == ir.ConnectionStage(agents=["Server", "User"], label="error")


def test_default_terminators() -> None:
    result = compile_text("A -> B", default_terminators=ir.TerminatorMode.CROSS)
    assert result.stages[-1] == ir.AgentEndStage(
        agents=["A", "B"], mode=ir.TerminatorMode.CROSS
    )


def test_parse_file(write_diagram) -> None:
    path = write_diagram(LOGIN)
    result = parse_file(path)
    assert result.meta.title == "Login"
    assert len(result.statements) == 6


def test_compile_file(write_diagram) -> None:
    path = write_diagram(LOGIN)
    assert compile_file(path) == compile_text(LOGIN)


def test_file_name_in_errors(write_diagram) -> None:
    path = write_diagram('title "oops')
    with pytest.raises(UnterminatedToken) as exc_info:
        compile_file(path)
    assert exc_info.value.context is not None
    assert exc_info.value.context.file == str(path)


def test_in_memory_source_name() -> None:
    with pytest.raises(ParseError) as exc_info:
        compile_text("???")
    assert str(exc_info.value).startswith("<input>:1:1")


def test_package_exports() -> None:
    assert seqdiag.compile_text is compile_text
    assert isinstance(seqdiag.__version__, str)
    assert issubclass(seqdiag.ParseError, seqdiag.SeqDiagError)
    assert issubclass(seqdiag.GenerateError, seqdiag.SeqDiagError)


def test_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="seqdiag"):
        compile_text("if\nend\nA -> B")
    messages = [record.getMessage() for record in caplog.records]
    assert any("Dropping block __BLOCK0" in m for m in messages)
    assert any(m.startswith("Generated sequence: 4 agents") for m in messages)


def test_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.seq"
    with pytest.raises(FileNotFoundError):
        parse_file(path)


def test_version_without_installed_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    def not_installed(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr("seqdiag._version.version", not_installed)
    assert get_version() == "0.0.0"
