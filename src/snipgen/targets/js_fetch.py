from __future__ import annotations

from ..engine import SnippetContext, Target
from ..options import COMMON_OPTIONS
from ..sanitize import sanitize


class JsFetchTarget(Target):
    """JavaScript, using the Fetch API."""

    id = "javascript-fetch"
    label = "JavaScript - Fetch"
    language = "javascript"
    variant = "fetch"
    syntax_mode = "javascript"
    options = COMMON_OPTIONS

    header_context = None

    def payload_symbol(self, mode: str) -> str:
        return mode

    def raw_body(self, literal: str, indent: str) -> str:
        return f"var raw = {literal};"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f'var urlencoded = new URLSearchParams("{encoded}");'

    def form_open(self, indent: str) -> str:
        return "var formdata = new FormData();"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return f'formdata.append("{key}", "{value}");'

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return browser_file_field("formdata", key, src, filename, indent)

    def form_close(self, indent: str) -> str:
        return ""

    def file_body(self, placeholder: str, indent: str) -> str:
        return f'var file = "{placeholder}";'

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f'myHeaders.append("{key}", "{value}");'

    def header_block(self, lines: list[str], indent: str) -> str:
        return "\n".join(["var myHeaders = new Headers();", *lines])

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        url = sanitize(ctx.url)
        sections: list[str] = []
        if ctx.headers:
            sections.append(ctx.headers.code)
        if ctx.body:
            sections.append(ctx.body.code)

        entries = [f'method: "{sanitize(ctx.request.method)}"']
        if ctx.headers:
            entries.append("headers: myHeaders")
        if ctx.body.payload_symbol:
            entries.append(f"body: {ctx.body.payload_symbol}")
        entries.append(f"redirect: \"{'follow' if ctx.follow_redirect else 'manual'}\"")
        request_options = ["var requestOptions = {"]
        request_options.append(",\n".join(f"{indent}{entry}" for entry in entries))
        request_options.append("};")
        sections.append("\n".join(request_options))

        if ctx.timeout > 0:
            sections.append(
                "\n".join(
                    [
                        "var promise = Promise.race([",
                        f'{indent}fetch("{url}", requestOptions)',
                        f"{indent * 2}.then(response => response.text()),",
                        f"{indent}new Promise((resolve, reject) =>",
                        f"{indent * 2}setTimeout(() => reject(new Error(\"Timeout\")), {ctx.timeout})",
                        f"{indent})",
                        "]);",
                        "",
                        "promise",
                        f"{indent}.then(result => console.log(result))",
                        f'{indent}.catch(error => console.log("error", error));',
                    ]
                )
            )
        else:
            sections.append(
                "\n".join(
                    [
                        f'fetch("{url}", requestOptions)',
                        f"{indent}.then(response => response.text())",
                        f"{indent}.then(result => console.log(result))",
                        f'{indent}.catch(error => console.log("error", error));',
                    ]
                )
            )
        return "\n\n".join(sections)


def browser_file_field(form: str, key: str, src: str, filename: str, indent: str) -> str:
    """Attach the file chosen in a ``fileInput`` element, reporting a missing selection.

    Browsers cannot open arbitrary paths, so ``src`` only names the expected file.
    """
    return "\n".join(
        [
            "if (!fileInput.files.length) {",
            f'{indent}console.log("error", "no file selected for {key} ({src})");',
            "}",
            f'{form}.append("{key}", fileInput.files[0], "{filename}");',
        ]
    )
