"""Core SEQDIAG functionality: IR, tokenizer, line parser, sequence generator."""

from . import ir
from .errors import (
    ErrorContext,
    ExtraBlockEnd,
    GenerateError,
    InvalidBlockCommand,
    InvalidNoteArity,
    InvalidSplit,
    ParseError,
    ReservedAgentError,
    SeqDiagError,
    UndefinedMarker,
    UnknownTerminator,
    UnrecognisedCommand,
    UnterminatedBlock,
    UnterminatedToken,
)
from .generator import generate
from .lexer import Token, tokenize
from .lines import split_lines
from .manifest import ProjectManifest, load_manifest, load_project_manifest
from .parser import compile_file, compile_text, parse_file, parse_text

__all__ = [
    "ir",
    # Errors
    "SeqDiagError",
    "ErrorContext",
    "ParseError",
    "UnterminatedToken",
    "UnrecognisedCommand",
    "InvalidBlockCommand",
    "UnknownTerminator",
    "InvalidNoteArity",
    "GenerateError",
    "UndefinedMarker",
    "ReservedAgentError",
    "ExtraBlockEnd",
    "UnterminatedBlock",
    "InvalidSplit",
    # Pipeline
    "Token",
    "tokenize",
    "split_lines",
    "parse_text",
    "parse_file",
    "generate",
    "compile_text",
    "compile_file",
    # Configuration
    "ProjectManifest",
    "load_manifest",
    "load_project_manifest",
]
