from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import indent_lines
from ..options import COMMON_OPTIONS
from ..sanitize import FORMDATA, sanitize
from ..urls import host_string, request_path

BOUNDARY = "----WebKitFormBoundary7MA4YWxkTrZu0gW"

_CRLF = "\\r\\n"


class NodejsNativeTarget(Target):
    """NodeJS, using the built-in ``http``/``https`` modules."""

    id = "nodejs-native"
    label = "NodeJs - Native"
    language = "nodejs"
    variant = "native"
    syntax_mode = "javascript"
    options = COMMON_OPTIONS

    form_context = FORMDATA
    payload_name = "postData"

    def raw_body(self, literal: str, indent: str) -> str:
        return f"var postData = {literal};"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f"var postData = '{encoded}';"

    def form_open(self, indent: str) -> str:
        return f"var boundary = '{BOUNDARY}';\nvar parts = [];"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return (
            f"parts.push(Buffer.from('--' + boundary + '{_CRLF}"
            f'Content-Disposition: form-data; name="{key}"{_CRLF}{_CRLF}'
            f"{value}{_CRLF}'));"
        )

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        content = f"fileContent{index}"
        return "\n".join(
            [
                "try {",
                f"{indent}var {content} = fs.readFileSync('{src}');",
                f"{indent}parts.push(Buffer.from('--' + boundary + '{_CRLF}"
                f'Content-Disposition: form-data; name="{key}"; filename="{filename}"{_CRLF}'
                f"Content-Type: application/octet-stream{_CRLF}{_CRLF}'));",
                f"{indent}parts.push({content}, Buffer.from('{_CRLF}'));",
                "}",
                "catch (error) {",
                f"{indent}console.error(error);",
                "}",
            ]
        )

    def form_close(self, indent: str) -> str:
        return f"parts.push(Buffer.from('--' + boundary + '--{_CRLF}'));\nvar postData = Buffer.concat(parts);"

    def file_body(self, placeholder: str, indent: str) -> str:
        return f'var postData = "{placeholder}";'

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f"'{key}': '{value}'"

    def header_block(self, lines: list[str], indent: str) -> str:
        entries = ",\n".join(f"{indent}{line}" for line in lines)
        return f"'headers': {{\n{entries}\n}}"

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        url = ctx.request.url
        module = "http" if (url.protocol or "").lower() == "http" else "https"
        body = ctx.body

        sections: list[str] = []
        if ctx.follow_redirect:
            preamble = [f"var {module} = require('follow-redirects').{module};"]
        else:
            preamble = [f"var {module} = require('{module}');"]
        if body.needs_file_io:
            preamble.append("var fs = require('fs');")
        sections.append("\n".join(preamble))

        entries = [
            f"'method': '{sanitize(ctx.request.method, FORMDATA)}'",
            f"'hostname': '{sanitize(host_string(url), FORMDATA)}'",
        ]
        if url.port:
            entries.append(f"'port': '{sanitize(url.port, FORMDATA)}'")
        entries.append(f"'path': '{sanitize(request_path(url), FORMDATA)}'")
        if ctx.headers:
            entries.append(ctx.headers.code)
        if ctx.follow_redirect:
            entries.append("'maxRedirects': 20")
        options = ",\n".join(indent_lines(entry, indent) for entry in entries)
        sections.append(f"var options = {{\n{options}\n}};")

        sections.append(
            "\n".join(
                [
                    f"var req = {module}.request(options, function (res) {{",
                    f"{indent}var chunks = [];",
                    "",
                    f'{indent}res.on("data", function (chunk) {{',
                    f"{indent * 2}chunks.push(chunk);",
                    f"{indent}}});",
                    "",
                    f'{indent}res.on("end", function (chunk) {{',
                    f"{indent * 2}var body = Buffer.concat(chunks);",
                    f"{indent * 2}console.log(body.toString());",
                    f"{indent}}});",
                    "",
                    f'{indent}res.on("error", function (error) {{',
                    f"{indent * 2}console.error(error);",
                    f"{indent}}});",
                    "});",
                ]
            )
        )

        if body.payload_symbol:
            sections.append(body.code)
            if ctx.request.method == "DELETE":
                sections.append(f"req.setHeader('Content-Length', {body.payload_symbol}.length);")
            if body.needs_multipart:
                sections.append("req.setHeader('Content-Type', 'multipart/form-data; boundary=' + boundary);")
            sections.append(f"req.write({body.payload_symbol});")

        if ctx.timeout > 0:
            sections.append(f"req.setTimeout({ctx.timeout}, function() {{\n{indent}req.abort();\n}});")

        sections.append("req.end();")
        return "\n\n".join(sections)
