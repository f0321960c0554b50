from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import indent_lines, seconds
from ..options import INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY
from ..sanitize import SWIFT, sanitize

_CRLF = "\\r\\n"


class SwiftUrlSessionTarget(Target):
    """Swift, using ``URLSession`` from Foundation.

    URLSession follows redirects on its own, so the target has no
    followRedirect option. A zero timeout is spelled ``Double.infinity``.
    """

    id = "swift-urlsession"
    label = "Swift - URLSession"
    language = "swift"
    variant = "urlsession"
    syntax_mode = "swift"
    options = (INDENT_COUNT, INDENT_TYPE, REQUEST_TIMEOUT, TRIM_REQUEST_BODY)

    raw_context = SWIFT
    form_context = SWIFT
    header_context = SWIFT
    payload_name = "postData"

    def raw_body(self, literal: str, indent: str) -> str:
        return _parameters(f'"{literal}"')

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return _parameters(f'"{encoded}"')

    def form_open(self, indent: str) -> str:
        return 'let boundary = "Boundary-\\(UUID().uuidString)"\nvar body = Data()'

    def form_text(self, key: str, value: str, indent: str) -> str:
        return "\n".join(
            [
                _append(f"--\\(boundary){_CRLF}"),
                _append(f'Content-Disposition: form-data; name=\\"{key}\\"{_CRLF}{_CRLF}'),
                _append(f"{value}{_CRLF}"),
            ]
        )

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        return "\n".join(
            [
                _append(f"--\\(boundary){_CRLF}"),
                _append(f'Content-Disposition: form-data; name=\\"{key}\\"; filename=\\"{filename}\\"{_CRLF}'),
                _append(f"Content-Type: application/octet-stream{_CRLF}{_CRLF}"),
                f'if let fileData{index} = FileManager.default.contents(atPath: "{src}") {{',
                f"{indent}body.append(fileData{index})",
                "} else {",
                f'{indent}print("cannot open file: {src}")',
                "}",
                _append(_CRLF),
            ]
        )

    def form_close(self, indent: str) -> str:
        return "\n".join([_append(f"--\\(boundary)--{_CRLF}"), "let postData = body"])

    def file_body(self, placeholder: str, indent: str) -> str:
        return _parameters(f'"{placeholder}"')

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f'request.addValue("{value}", forHTTPHeaderField: "{key}")'

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        body = ctx.body
        sections = [
            "\n".join(
                [
                    "import Foundation",
                    "#if canImport(FoundationNetworking)",
                    "import FoundationNetworking",
                    "#endif",
                ]
            ),
            "var semaphore = DispatchSemaphore (value: 0)",
        ]
        if body:
            sections.append(body.code)

        timeout = seconds(ctx.timeout) if ctx.timeout > 0 else "Double.infinity"
        request = [
            f'var request = URLRequest(url: URL(string: "{sanitize(ctx.url, SWIFT)}")!,timeoutInterval: {timeout})'
        ]
        if ctx.headers:
            request.append(ctx.headers.code)
        if body.needs_multipart:
            request.append(
                'request.addValue("multipart/form-data; boundary=\\(boundary)", forHTTPHeaderField: "Content-Type")'
            )
        sections.append("\n".join(request))

        method = [f'request.httpMethod = "{sanitize(ctx.request.method, SWIFT)}"']
        if body.payload_symbol:
            method.append(f"request.httpBody = {body.payload_symbol}")
        sections.append("\n".join(method))

        handler = "\n".join(
            [
                "guard let data = data else {",
                f"{indent}print(String(describing: error))",
                f"{indent}semaphore.signal()",
                f"{indent}return",
                "}",
                "print(String(data: data, encoding: .utf8)!)",
                "semaphore.signal()",
            ]
        )
        sections.append(
            "\n".join(
                [
                    "let task = URLSession.shared.dataTask(with: request) { data, response, error in",
                    indent_lines(handler, indent),
                    "}",
                ]
            )
        )
        sections.append("task.resume()\nsemaphore.wait()")
        return "\n\n".join(sections)


def _parameters(literal: str) -> str:
    return f"let parameters = {literal}\nlet postData = parameters.data(using: .utf8)"


def _append(content: str) -> str:
    return f'body.append("{content}".data(using: .utf8)!)'
