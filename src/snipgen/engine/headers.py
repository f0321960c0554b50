from __future__ import annotations

import logging

from ..request import Header, Request
from ..sanitize import sanitize
from .fragments import HeaderFragment
from .grammar import TargetGrammar

logger = logging.getLogger(__name__)


def headers_for_request(request: Request) -> tuple[Header, ...]:
    """Headers to emit for a request, including inferred ones.

    A ``file`` body without an explicit Content-Type is sent as text/plain.
    The request itself is left untouched.
    """
    if request.body_mode == "file" and not request.has_header("Content-Type"):
        return request.headers + (Header(key="Content-Type", value="text/plain"),)
    return request.headers


def compile_headers(
    headers: tuple[Header, ...],
    grammar: TargetGrammar,
    indent: str,
) -> HeaderFragment:
    """Compile enabled headers into target code.

    Keys are always trimmed, values never are.
    """
    lines: list[str] = []
    for header in headers:
        if header.disabled:
            logger.debug(f"Skipping disabled header {header.key!r}")
            continue
        key = sanitize(header.key, grammar.header_context, True)
        value = sanitize(header.value, grammar.header_context, False)
        lines.append(grammar.header_line(key, value, indent))
    if not lines:
        return HeaderFragment()
    return HeaderFragment(code=grammar.header_block(lines, indent), count=len(lines))
