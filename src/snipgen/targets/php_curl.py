from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import indent_lines
from ..options import COMMON_OPTIONS
from ..sanitize import FORMDATA, HEADER, sanitize


class PhpCurlTarget(Target):
    """PHP, using the cURL extension.

    Every literal is single-quoted, where only backslashes and single quotes
    need escaping and ``$`` is not interpolated.
    """

    id = "php-curl"
    label = "PHP - cURL"
    language = "php"
    variant = "curl"
    syntax_mode = "php"
    options = COMMON_OPTIONS

    raw_context = FORMDATA
    form_context = FORMDATA
    payload_name = "$postFields"

    def raw_body(self, literal: str, indent: str) -> str:
        return f"$postFields = '{literal}';"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f"$postFields = '{encoded}';"

    def form_open(self, indent: str) -> str:
        return "$postFields = array();"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return f"$postFields['{key}'] = '{value}';"

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return "\n".join(
            [
                f"if (!is_readable('{src}')) {{",
                f"{indent}echo 'Cannot open file {src}' . PHP_EOL;",
                f"{indent}exit(1);",
                "}",
                f"$postFields['{key}'] = new CURLFile('{src}', '', '{filename}');",
            ]
        )

    def form_close(self, indent: str) -> str:
        return ""

    def file_body(self, placeholder: str, indent: str) -> str:
        return f"$postFields = '{placeholder}';"

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f"'{key}: {value}'"

    def header_block(self, lines: list[str], indent: str) -> str:
        entries = ",\n".join(f"{indent}{line}" for line in lines)
        return f"CURLOPT_HTTPHEADER => array(\n{entries}\n)"

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        body = ctx.body
        sections = ["<?php", "$curl = curl_init();"]
        if body:
            sections.append(body.code)

        entries = [
            f"CURLOPT_URL => '{sanitize(ctx.url, HEADER)}'",
            "CURLOPT_RETURNTRANSFER => true",
            "CURLOPT_ENCODING => ''",
            "CURLOPT_MAXREDIRS => 10",
        ]
        if ctx.timeout > 0:
            entries.append(f"CURLOPT_TIMEOUT_MS => {ctx.timeout}")
        entries.append(f"CURLOPT_FOLLOWLOCATION => {'true' if ctx.follow_redirect else 'false'}")
        entries.append("CURLOPT_HTTP_VERSION => CURL_HTTP_VERSION_1_1")
        entries.append(f"CURLOPT_CUSTOMREQUEST => '{sanitize(ctx.request.method, HEADER)}'")
        if body.payload_symbol:
            entries.append(f"CURLOPT_POSTFIELDS => {body.payload_symbol}")
        if ctx.headers:
            entries.append(ctx.headers.code)
        options = "".join(f"{indent_lines(entry, indent)},\n" for entry in entries)
        sections.append(f"curl_setopt_array($curl, array(\n{options}));")

        sections.append("$response = curl_exec($curl);")
        sections.append("curl_close($curl);\necho $response;")
        return "\n\n".join(sections) + "\n"
