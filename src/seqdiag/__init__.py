"""
SEQDIAG - compiler front end for a line-oriented sequence diagram language.

Turns diagram source text into a normalized intermediate representation
ready for layout and rendering.
"""

from __future__ import annotations

from ._version import get_version
from .core import compile_text, generate, ir, parse_text
from .core.errors import GenerateError, ParseError, SeqDiagError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_text",
    "generate",
    "compile_text",
    "SeqDiagError",
    "ParseError",
    "GenerateError",
]
