from __future__ import annotations

from ..engine import SnippetContext, Target, TargetGrammar
from ..engine.helpers import indent_lines
from ..options import (
    BOOLEAN,
    ENUM,
    FOLLOW_REDIRECT,
    INDENT_COUNT,
    INDENT_TYPE,
    REQUEST_TIMEOUT,
    TRIM_REQUEST_BODY,
    OptionSpec,
)
from ..sanitize import C, sanitize

INCLUDE_BOILERPLATE = OptionSpec(
    id="includeBoilerplate",
    name="Include boilerplate",
    type=BOOLEAN,
    default=False,
    description="Include class definition and import statements in snippet",
)
PROTOCOL = OptionSpec(
    id="protocol",
    name="Protocol",
    type=ENUM,
    default="https",
    description="The protocol to use when the URL does not name one",
    available_options=("http", "https"),
)
USE_MIME_TYPE = OptionSpec(
    id="useMimeType",
    name="Use curl_mime",
    type=BOOLEAN,
    default=True,
    description="Use curl_mime to send multipart/form-data requests; curl_formadd is used otherwise",
)


class _CurlGrammar(TargetGrammar):
    """libcurl statements, multipart bodies through the ``curl_mime`` API."""

    raw_context = C
    form_context = C
    header_context = C
    payload_name = "data"

    def raw_body(self, literal: str, indent: str) -> str:
        return _postfields(f'"{literal}"')

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return _postfields(f'"{encoded}"')

    def form_open(self, indent: str) -> str:
        return "curl_mime *mime;\ncurl_mimepart *part;\nmime = curl_mime_init(curl);"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return "\n".join(
            [
                "part = curl_mime_addpart(mime);",
                f'curl_mime_name(part, "{key}");',
                f'curl_mime_data(part, "{value}", CURL_ZERO_TERMINATED);',
            ]
        )

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return "\n".join(
            [
                "part = curl_mime_addpart(mime);",
                f'curl_mime_name(part, "{key}");',
                f'if(curl_mime_filedata(part, "{src}") != CURLE_OK) {{',
                _report_file_error(src, indent),
                "}",
            ]
        )

    def form_close(self, indent: str) -> str:
        return "curl_easy_setopt(curl, CURLOPT_MIMEPOST, mime);"

    def file_body(self, placeholder: str, indent: str) -> str:
        return _postfields(f'"{placeholder}"')

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f'headers = curl_slist_append(headers, "{key}: {value}");'

    def header_block(self, lines: list[str], indent: str) -> str:
        return "\n".join(
            ["struct curl_slist *headers = NULL;", *lines, "curl_easy_setopt(curl, CURLOPT_HTTPHEADER, headers);"]
        )


class _FormaddGrammar(_CurlGrammar):
    """Multipart statements for the older ``curl_formadd`` API."""

    def form_open(self, indent: str) -> str:
        return "struct curl_httppost *post = NULL;\nstruct curl_httppost *last = NULL;"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return (
            f'curl_formadd(&post, &last, CURLFORM_COPYNAME, "{key}", '
            f'CURLFORM_COPYCONTENTS, "{value}", CURLFORM_END);'
        )

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return "\n".join(
            [
                f'if(curl_formadd(&post, &last, CURLFORM_COPYNAME, "{key}", '
                f'CURLFORM_FILE, "{src}", CURLFORM_END) != CURL_FORMADD_OK) {{',
                _report_file_error(src, indent),
                "}",
            ]
        )

    def form_close(self, indent: str) -> str:
        return "curl_easy_setopt(curl, CURLOPT_HTTPPOST, post);"


_FORMADD_GRAMMAR = _FormaddGrammar()


class LibcurlTarget(_CurlGrammar, Target):
    """C, using libcurl's easy interface."""

    id = "c-libcurl"
    label = "C - libcurl"
    language = "c"
    variant = "libcurl"
    syntax_mode = "c_cpp"
    options = (
        INCLUDE_BOILERPLATE,
        PROTOCOL,
        INDENT_COUNT,
        INDENT_TYPE,
        FOLLOW_REDIRECT,
        TRIM_REQUEST_BODY,
        USE_MIME_TYPE,
        REQUEST_TIMEOUT,
    )

    def grammar(self, options: dict[str, object]) -> TargetGrammar:
        if options.get("useMimeType") is False:
            return _FORMADD_GRAMMAR
        return self

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        options = ctx.options
        protocol = options.get("protocol", "https")
        url = ctx.url
        if url and not ctx.request.url.protocol:
            url = f"{protocol}://{url}"

        block = [
            f'curl_easy_setopt(curl, CURLOPT_CUSTOMREQUEST, "{sanitize(ctx.request.method, C)}");',
            f'curl_easy_setopt(curl, CURLOPT_URL, "{sanitize(url, C)}");',
            f"curl_easy_setopt(curl, CURLOPT_FOLLOWLOCATION, {1 if ctx.follow_redirect else 0}L);",
            f'curl_easy_setopt(curl, CURLOPT_DEFAULT_PROTOCOL, "{protocol}");',
        ]
        if ctx.headers:
            block.append(ctx.headers.code)
        if ctx.body:
            block.append(ctx.body.code)
        if ctx.timeout > 0:
            block.append(f"curl_easy_setopt(curl, CURLOPT_TIMEOUT_MS, {ctx.timeout}L);")
        block.append("res = curl_easy_perform(curl);")
        if ctx.body.needs_multipart:
            block.append("curl_formfree(post);" if options.get("useMimeType") is False else "curl_mime_free(mime);")
        if ctx.headers:
            block.append("curl_slist_free_all(headers);")

        lines = [
            "CURL *curl;",
            "CURLcode res;",
            "curl = curl_easy_init();",
            "if(curl) {",
            indent_lines("\n".join(block), indent),
            "}",
            "curl_easy_cleanup(curl);",
        ]
        if options.get("includeBoilerplate") is not True:
            return "\n".join(lines)
        return "\n".join(
            [
                "#include <stdio.h>",
                "#include <string.h>",
                "#include <curl/curl.h>",
                "int main(int argc, char *argv[]){",
                indent_lines("\n".join(lines), indent),
                f"{indent}return (int)res;",
                "}",
            ]
        )


def _postfields(literal: str) -> str:
    return f"const char *data = {literal};\ncurl_easy_setopt(curl, CURLOPT_POSTFIELDS, data);"


def _report_file_error(src: str, indent: str) -> str:
    return f'{indent}fprintf(stderr, "cannot open file: %s\\n", "{src}");'
