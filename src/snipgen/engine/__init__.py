"""Snippet emission engine.

The engine turns a request into target code in three strictly ordered
steps: body compilation, header compilation and assembly. Targets plug in
through ``TargetGrammar`` (statement templates) and ``Target.assemble()``.
"""

from .assembler import SnippetContext, Target
from .body import FILE_PLACEHOLDER, compile_body
from .fragments import BodyFragment, HeaderFragment, SnippetOutput
from .grammar import TargetGrammar
from .headers import compile_headers, headers_for_request

__all__ = [
    "FILE_PLACEHOLDER",
    "BodyFragment",
    "HeaderFragment",
    "SnippetContext",
    "SnippetOutput",
    "Target",
    "TargetGrammar",
    "compile_body",
    "compile_headers",
    "headers_for_request",
]
