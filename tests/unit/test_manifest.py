"""Tests for seqdiag.toml loading."""

from pathlib import Path

import pytest

from seqdiag.core import ir
from seqdiag.core.errors import SeqDiagError, UnknownTerminator
from seqdiag.core.manifest import find_manifest, load_manifest, load_project_manifest


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_manifest(tmp_path: Path):
    path = write(
        tmp_path / "seqdiag.toml",
        """
[compiler]
default_terminators = "box"

[output]
indent = 4
""",
    )
    manifest = load_manifest(path)
    assert manifest.compiler.default_terminators == ir.TerminatorMode.BOX
    assert manifest.output.indent == 4
    assert manifest.path == path


def test_empty_manifest_uses_defaults(tmp_path: Path):
    manifest = load_manifest(write(tmp_path / "seqdiag.toml", ""))
    assert manifest.compiler.default_terminators == ir.TerminatorMode.NONE
    assert manifest.output.indent == 2


def test_invalid_toml(tmp_path: Path):
    path = write(tmp_path / "seqdiag.toml", "[compiler\n")
    with pytest.raises(SeqDiagError, match="Invalid manifest"):
        load_manifest(path)


def test_unknown_terminator(tmp_path: Path):
    path = write(tmp_path / "seqdiag.toml", '[compiler]\ndefault_terminators = "zigzag"\n')
    with pytest.raises(UnknownTerminator, match="zigzag"):
        load_manifest(path)


def test_find_manifest_in_parent(tmp_path: Path):
    path = write(tmp_path / "seqdiag.toml", "")
    nested = tmp_path / "docs" / "flows"
    nested.mkdir(parents=True)
    diagram = write(nested / "a.seq", "A -> B")
    assert find_manifest(diagram) == path.resolve()
    assert find_manifest(nested) == path.resolve()


def test_project_manifest_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("seqdiag.core.manifest.find_manifest", lambda start: None)
    manifest = load_project_manifest(tmp_path)
    assert manifest.path is None
    assert manifest.output.indent == 2


@pytest.mark.parametrize("value", ['"wide"', "[2]"])
def test_non_integer_indent(tmp_path: Path, value: str):
    path = write(tmp_path / "seqdiag.toml", f"[output]\nindent = {value}\n")
    with pytest.raises(SeqDiagError, match="indent must be an integer"):
        load_manifest(path)
