from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import indent_lines
from ..options import INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY
from ..sanitize import sanitize
from .js_fetch import browser_file_field


class JsJqueryTarget(Target):
    """JavaScript, using ``$.ajax`` from jQuery."""

    id = "javascript-jquery"
    label = "JavaScript - jQuery"
    language = "javascript"
    variant = "jquery"
    syntax_mode = "javascript"
    options = (INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY)

    header_context = None
    payload_name = "data"

    def payload_symbol(self, mode: str) -> str:
        return "form" if mode == "formdata" else self.payload_name

    def raw_body(self, literal: str, indent: str) -> str:
        return f"var data = {literal};"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f'var data = "{encoded}";'

    def form_open(self, indent: str) -> str:
        return "var form = new FormData();"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return f'form.append("{key}", "{value}");'

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return browser_file_field("form", key, src, filename, indent)

    def form_close(self, indent: str) -> str:
        return ""

    def file_body(self, placeholder: str, indent: str) -> str:
        return f'var data = "{placeholder}";'

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f'"{key}": "{value}"'

    def header_block(self, lines: list[str], indent: str) -> str:
        entries = ",\n".join(f"{indent}{line}" for line in lines)
        return f'"headers": {{\n{entries}\n}}'

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        entries = [
            f'"url": "{sanitize(ctx.url)}"',
            f'"method": "{sanitize(ctx.request.method)}"',
        ]
        if ctx.timeout > 0:
            entries.append(f'"timeout": {ctx.timeout}')
        if ctx.headers:
            entries.append(ctx.headers.code)
        if ctx.body.needs_multipart:
            entries.extend(['"processData": false', '"mimeType": "multipart/form-data"', '"contentType": false'])
        if ctx.body.payload_symbol:
            entries.append(f'"data": {ctx.body.payload_symbol}')

        sections: list[str] = []
        if ctx.body:
            sections.append(ctx.body.code)
        settings = ",\n".join(indent_lines(entry, indent) for entry in entries)
        sections.append(f"var settings = {{\n{settings}\n}};")
        sections.append(f"$.ajax(settings).done(function (response) {{\n{indent}console.log(response);\n}});")
        return "\n\n".join(sections)
