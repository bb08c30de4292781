"""
SEQDIAG CLI.

A thin host around the compiler core:
- compile: print the tokens, statements or sequence of a diagram as JSON
- check: report whether a diagram compiles
"""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from seqdiag._version import get_version
from seqdiag.core.errors import ParseError, SeqDiagError
from seqdiag.core.generator import generate
from seqdiag.core.lexer import tokenize
from seqdiag.core.manifest import ProjectManifest, load_manifest, load_project_manifest
from seqdiag.core.parser import parse_text

app = typer.Typer(
    help="SEQDIAG – sequence diagram compiler front end",
    no_args_is_help=True,
)


class PipelineStage(str, Enum):
    TOKENS = "tokens"
    STATEMENTS = "statements"
    SEQUENCE = "sequence"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"seqdiag {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details"),
) -> None:
    """SEQDIAG CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _resolve_manifest(source: Path, manifest: Path | None) -> ProjectManifest:
    if manifest is not None:
        return load_manifest(manifest)
    return load_project_manifest(source)


def _run(source: Path, manifest: Path | None, stage: PipelineStage) -> tuple[Any, int]:
    mf = _resolve_manifest(source, manifest)
    text = source.read_text(encoding="utf-8")

    if stage is PipelineStage.TOKENS:
        tokens = tokenize(text, str(source))
        data: Any = [
            {"separator": t.separator, "value": t.value, "quoted": t.quoted} for t in tokens
        ]
        return data, mf.output.indent

    result = parse_text(text, str(source), mf.compiler.default_terminators)
    if stage is PipelineStage.STATEMENTS:
        return result.model_dump(mode="json"), mf.output.indent

    return generate(result).to_dict(), mf.output.indent


@app.command(name="compile")
def compile_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Diagram source file"),
    stage: PipelineStage = typer.Option(
        PipelineStage.SEQUENCE, "--stage", "-s", help="Pipeline stage to print"
    ),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", help="Path to seqdiag.toml (default: nearest to SOURCE)"
    ),
) -> None:
    """Compile a diagram and print the chosen pipeline stage as JSON."""
    try:
        data, indent = _run(source, manifest, stage)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except SeqDiagError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(data, indent=indent, ensure_ascii=False))


@app.command(name="check")
def check_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Diagram source file"),
    manifest: Path | None = typer.Option(None, "--manifest", "-m", help="Path to seqdiag.toml"),
) -> None:
    """Report whether a diagram compiles."""
    try:
        _run(source, manifest, PipelineStage.SEQUENCE)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except SeqDiagError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("OK")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
