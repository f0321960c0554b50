"""Body compilation.

``compile_body()`` branches on the body mode and produces the statements
that build the outgoing payload in the target language:

- no body, a disabled body or an unknown mode: empty fragment
- raw: one statement holding the escaped payload literal
- urlencoded: enabled entries percent-encoded and joined as ``k=v&k=v``
- formdata: one statement per enabled entry; file entries open the file at
  runtime and report I/O errors
- file: a placeholder payload, the file itself is never read
"""

from __future__ import annotations

import logging

from ..request import Body, FormParam
from ..sanitize import URLENCODED, sanitize
from .fragments import BodyFragment
from .grammar import TargetGrammar
from .helpers import file_name

logger = logging.getLogger(__name__)

FILE_PLACEHOLDER = "<file contents here>"


def compile_body(
    body: Body | None,
    grammar: TargetGrammar,
    trim: bool,
    indent: str,
) -> BodyFragment:
    """Compile a request body into target code.

    Args:
        body: The request body, or None
        grammar: Statement templates of the target
        trim: Whether to trim body fields before escaping
        indent: One level of indentation

    Returns:
        A BodyFragment; empty when there is nothing to send
    """
    if body is None:
        return BodyFragment()
    mode = body.effective_mode
    if mode is None:
        if body.mode is not None:
            logger.debug(f"Unsupported or disabled body mode {body.mode!r}; emitting no body")
        return BodyFragment()
    if mode == "raw":
        return _compile_raw(body, grammar, trim, indent)
    if mode == "urlencoded":
        return _compile_urlencoded(body.urlencoded, grammar, trim, indent)
    if mode == "formdata":
        return _compile_formdata(body.formdata, grammar, trim, indent)
    return _compile_file(grammar, indent)


def _compile_raw(body: Body, grammar: TargetGrammar, trim: bool, indent: str) -> BodyFragment:
    if not body.raw:
        return BodyFragment()
    literal = sanitize(body.raw, grammar.raw_context, trim)
    return BodyFragment(
        code=grammar.raw_body(literal, indent),
        payload_symbol=grammar.payload_symbol("raw"),
        mode="raw",
    )


def _compile_urlencoded(
    params: tuple[FormParam, ...],
    grammar: TargetGrammar,
    trim: bool,
    indent: str,
) -> BodyFragment:
    pairs = [
        f"{sanitize(param.key, URLENCODED, trim)}={sanitize(param.value, URLENCODED, trim)}"
        for param in _enabled(params, "urlencoded")
    ]
    if not pairs:
        return BodyFragment()
    return BodyFragment(
        code=grammar.urlencoded_body("&".join(pairs), indent),
        payload_symbol=grammar.payload_symbol("urlencoded"),
        mode="urlencoded",
    )


def _compile_formdata(
    params: tuple[FormParam, ...],
    grammar: TargetGrammar,
    trim: bool,
    indent: str,
) -> BodyFragment:
    enabled = _enabled(params, "formdata")
    if not enabled:
        return BodyFragment()
    context = grammar.form_context
    statements = [grammar.form_open(indent)]
    files = 0
    for param in enabled:
        key = sanitize(param.key, context, trim)
        if param.type == "file":
            files += 1
            src = param.src or ""
            statements.append(
                grammar.form_file(key, sanitize(src, context), sanitize(file_name(src), context), files, indent)
            )
        else:
            statements.append(grammar.form_text(key, sanitize(param.value, context, trim), indent))
    statements.append(grammar.form_close(indent))
    return BodyFragment(
        code="\n".join(statement for statement in statements if statement),
        payload_symbol=grammar.payload_symbol("formdata"),
        needs_multipart=True,
        needs_file_io=files > 0,
        mode="formdata",
    )


def _compile_file(grammar: TargetGrammar, indent: str) -> BodyFragment:
    return BodyFragment(
        code=grammar.file_body(FILE_PLACEHOLDER, indent),
        payload_symbol=grammar.payload_symbol("file"),
        mode="file",
    )


def _enabled(params: tuple[FormParam, ...], mode: str) -> list[FormParam]:
    enabled: list[FormParam] = []
    for param in params:
        if not isinstance(param, FormParam):
            continue
        if param.disabled:
            logger.debug(f"Skipping disabled {mode} entry {param.key!r}")
            continue
        enabled.append(param)
    return enabled
