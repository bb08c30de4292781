from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_dsl
from .generator import generate


def parse_text(
    text: str,
    file: str | None = None,
    default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
) -> ir.ParseResult:
    """
    Parse source text into a ParseResult.

    Args:
        text: Diagram source
        file: Source name for error reporting
        default_terminators: Terminator mode used when the document has no
            ``terminators`` line

    Returns:
        ParseResult with metadata and the flat statement stream
    """
    return parse_dsl(text, file, default_terminators)


def parse_file(
    path: Path,
    default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
) -> ir.ParseResult:
    """Parse a diagram file."""
    text = path.read_text(encoding="utf-8")
    return parse_dsl(text, str(path), default_terminators)


def compile_text(
    text: str,
    file: str | None = None,
    default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
) -> ir.Sequence:
    """
    Run the whole pipeline: tokenize, split lines, parse, generate.

    Raises:
        SeqDiagError: On any lexical, syntactic or structural error
    """
    return generate(parse_dsl(text, file, default_terminators))


def compile_file(
    path: Path,
    default_terminators: ir.TerminatorMode = ir.TerminatorMode.NONE,
) -> ir.Sequence:
    """Compile a diagram file into a Sequence."""
    return generate(parse_file(path, default_terminators))
