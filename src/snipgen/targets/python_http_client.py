from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import seconds
from ..options import INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY
from ..sanitize import FORMDATA, sanitize
from ..urls import host_string, request_path

BOUNDARY = "wL36Yn8afVp8Ag7AmP8qZ0SA4n1v9T"


class PythonHttpClientTarget(Target):
    """Python, using ``http.client`` from the standard library.

    ``http.client`` never follows redirects, so the target has no
    followRedirect option.
    """

    id = "python-http.client"
    label = "Python - http.client"
    language = "python"
    variant = "http.client"
    syntax_mode = "python"
    options = (INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY)

    form_context = FORMDATA

    def raw_body(self, literal: str, indent: str) -> str:
        return f"payload = {literal}"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f"payload = '{encoded}'"

    def form_open(self, indent: str) -> str:
        return f"dataList = []\nboundary = '{BOUNDARY}'"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return "\n".join(
            [
                "dataList.append(encode('--' + boundary))",
                f"dataList.append(encode('Content-Disposition: form-data; name=\"{key}\"'))",
                "dataList.append(encode('Content-Type: text/plain'))",
                "dataList.append(encode(''))",
                f"dataList.append(encode('{value}'))",
            ]
        )

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        # Python blocks need some indentation even when indentCount is 0
        block = indent or "    "
        return "\n".join(
            [
                "dataList.append(encode('--' + boundary))",
                "dataList.append(encode("
                f"'Content-Disposition: form-data; name=\"{key}\"; filename=\"{filename}\"'))",
                f"fileType = mimetypes.guess_type('{src}')[0] or 'application/octet-stream'",
                "dataList.append(encode('Content-Type: {}'.format(fileType)))",
                "dataList.append(encode(''))",
                "try:",
                f"{block}with open('{src}', 'rb') as f:",
                f"{block * 2}dataList.append(f.read())",
                "except OSError as error:",
                f"{block}print(error)",
                f"{block}dataList.append(b'')",
            ]
        )

    def form_close(self, indent: str) -> str:
        return "\n".join(
            [
                "dataList.append(encode('--' + boundary + '--'))",
                "dataList.append(encode(''))",
                "payload = b'\\r\\n'.join(dataList)",
            ]
        )

    def file_body(self, placeholder: str, indent: str) -> str:
        return f'payload = "{placeholder}"'

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f"'{key}': '{value}'"

    def header_block(self, lines: list[str], indent: str) -> str:
        entries = ",\n".join(f"{indent}{line}" for line in lines)
        return f"headers = {{\n{entries}\n}}"

    def assemble(self, ctx: SnippetContext) -> str:
        url = ctx.request.url
        body = ctx.body
        imports = ["import http.client"]
        if body.needs_file_io:
            imports.append("import mimetypes")
        if body.needs_multipart:
            imports.append("from codecs import encode")

        connection = "HTTPConnection" if (url.protocol or "").lower() == "http" else "HTTPSConnection"
        arguments = [f'"{sanitize(host_string(url))}"']
        if url.port:
            arguments.append(f'"{sanitize(url.port)}"' if not url.port.isdigit() else url.port)
        if ctx.timeout > 0:
            arguments.append(f"timeout={seconds(ctx.timeout)}")

        lines = ["\n".join(imports), "", f"conn = http.client.{connection}({', '.join(arguments)})"]
        if body:
            lines.append(body.code)
        if ctx.headers:
            lines.append(ctx.headers.code)
        if body.needs_multipart:
            if not ctx.headers:
                lines.append("headers = {}")
            lines.append("headers['Content-Type'] = 'multipart/form-data; boundary={}'.format(boundary)")

        call = [f'"{sanitize(ctx.request.method)}"', f'"{sanitize(request_path(url))}"']
        if body.payload_symbol:
            call.append(body.payload_symbol)
        if ctx.headers or body.needs_multipart:
            call.append("headers" if body.payload_symbol else "headers=headers")
        lines.append(f"conn.request({', '.join(call)})")
        lines.append("res = conn.getresponse()")
        lines.append("data = res.read()")
        lines.append('print(data.decode("utf-8"))')
        return "\n".join(lines)
