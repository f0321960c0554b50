"""Snippet assembly shared by all targets.

A ``Target`` resolves options, compiles the body before the headers (the
body mode can add headers), compiles the headers and hands everything to
its ``assemble()`` template through a ``SnippetContext``.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from ..errors import ConverterError
from ..options import OptionSpec, describe_options, indent_for, sanitize_options
from ..request import Request, build_request
from ..urls import url_string
from .body import compile_body
from .fragments import BodyFragment, HeaderFragment, SnippetOutput
from .grammar import TargetGrammar
from .headers import compile_headers, headers_for_request
from .helpers import timeout_ms

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[object, str], T]


@dataclass(frozen=True)
class SnippetContext:
    """Everything a target template needs to assemble one snippet.

    Attributes:
        request: The request being converted
        options: Resolved options (exactly the target's option ids)
        indent: One level of indentation
        url: The fully-qualified URL string
        body: Compiled body fragment
        headers: Compiled header fragment
    """

    request: Request
    options: dict[str, object]
    indent: str
    url: str
    body: BodyFragment
    headers: HeaderFragment

    @property
    def timeout(self) -> int:
        return timeout_ms(self.options)

    @property
    def follow_redirect(self) -> bool:
        return self.options.get("followRedirect", True) is not False


class Target(TargetGrammar):
    """A code generation target.

    Subclasses declare their identity and option schema, implement the
    grammar templates and ``assemble()``.
    """

    id: ClassVar[str]
    label: ClassVar[str]
    language: ClassVar[str]
    variant: ClassVar[str]
    syntax_mode: ClassVar[str]
    options: ClassVar[tuple[OptionSpec, ...]]

    def get_options(self) -> list[dict[str, object]]:
        return describe_options(self.options)

    def grammar(self, options: dict[str, object]) -> TargetGrammar:
        """Grammar used for body and header statements."""
        return self

    def generate(
        self,
        request: Request | Mapping[str, object],
        options: Mapping[str, object] | None = None,
    ) -> SnippetOutput:
        """Generate a snippet for ``request``.

        Args:
            request: A Request, or plain data accepted by build_request()
            options: User options; unknown keys and invalid values are ignored

        Returns:
            SnippetOutput holding the snippet text
        """
        if not isinstance(request, Request):
            request = build_request(request)
        resolved = sanitize_options(options, self.options)
        indent = indent_for(resolved)
        grammar = self.grammar(resolved)
        body = compile_body(request.body, grammar, resolved.get("trimRequestBody") is True, indent)
        headers = compile_headers(headers_for_request(request), grammar, indent)
        ctx = SnippetContext(
            request=request,
            options=resolved,
            indent=indent,
            url=url_string(request.url),
            body=body,
            headers=headers,
        )
        code = self.assemble(ctx)
        logger.debug(f"Generated {self.id} snippet ({len(code)} characters)")
        return SnippetOutput(code=code)

    def convert(
        self,
        request: Request | Mapping[str, object],
        options: Mapping[str, object] | Callback[T] | None = None,
        callback: Callback[T] | None = None,
    ) -> T:
        """Generate a snippet and pass it to ``callback(None, snippet)``.

        ``options`` may be omitted by passing the callback in its place.

        Raises:
            ConverterError: If no callable callback is given
        """
        if callback is None and callable(options):
            callback, options = options, None
        if not callable(callback):
            raise ConverterError(f"{self.label} converter: callback is not a valid function")
        snippet = self.generate(request, options if isinstance(options, Mapping) else None).code
        return callback(None, snippet)

    @abstractmethod
    def assemble(self, ctx: SnippetContext) -> str:
        """Compose the complete snippet from precompiled fragments."""
