import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SeqDiagError, UnknownTerminator
from .ir import TerminatorMode

MANIFEST_NAME = "seqdiag.toml"


@dataclass
class CompilerConfig:
    """Settings applied while compiling a document."""

    default_terminators: TerminatorMode = TerminatorMode.NONE  # used without a terminators line


@dataclass
class OutputConfig:
    """Settings for host output."""

    indent: int = 2  # JSON indent


@dataclass
class ProjectManifest:
    """
    Contents of a ``seqdiag.toml`` file.

    Example:

        [compiler]
        default_terminators = "box"

        [output]
        indent = 4
    """

    compiler: CompilerConfig = field(default_factory=CompilerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    path: Path | None = None


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load and validate a ``seqdiag.toml`` file.

    Raises:
        SeqDiagError: If the file is not valid TOML or a value has the wrong type
        UnknownTerminator: If ``default_terminators`` names an unsupported mode
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise SeqDiagError(f"Invalid manifest {path}: {e}") from e

    compiler_data = data.get("compiler", {})
    output_data = data.get("output", {})

    terminators = compiler_data.get("default_terminators", TerminatorMode.NONE.value)
    try:
        default_terminators = TerminatorMode(terminators)
    except ValueError:
        raise UnknownTerminator(
            f"Unknown termination in {path}: default_terminators = {terminators!r}"
        ) from None

    indent = output_data.get("indent", 2)
    try:
        indent = int(indent)
    except (TypeError, ValueError):
        raise SeqDiagError(
            f"Invalid manifest {path}: indent must be an integer, got {indent!r}"
        ) from None

    return ProjectManifest(
        compiler=CompilerConfig(default_terminators=default_terminators),
        output=OutputConfig(indent=indent),
        path=path,
    )


def find_manifest(start: Path) -> Path | None:
    """Locate ``seqdiag.toml`` in ``start`` or one of its parents."""
    start = start.resolve()
    if start.is_file():
        start = start.parent
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.exists():
            return candidate
    return None


def load_project_manifest(start: Path) -> ProjectManifest:
    """Load the nearest manifest, or defaults when there is none."""
    path = find_manifest(start)
    if path is None:
        return ProjectManifest()
    return load_manifest(path)
