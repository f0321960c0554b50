from __future__ import annotations

from ..engine import SnippetContext, Target
from ..engine.helpers import indent_lines
from ..options import COMMON_OPTIONS
from ..sanitize import sanitize


class GoNativeTarget(Target):
    """Go, using ``net/http`` from the standard library."""

    id = "go-native"
    label = "Go"
    language = "go"
    variant = "native"
    syntax_mode = "golang"
    options = COMMON_OPTIONS

    header_context = None

    def raw_body(self, literal: str, indent: str) -> str:
        return f"payload := strings.NewReader({literal})"

    def urlencoded_body(self, encoded: str, indent: str) -> str:
        return f'payload := strings.NewReader("{encoded}")'

    def form_open(self, indent: str) -> str:
        return "payload := &bytes.Buffer{}\nwriter := multipart.NewWriter(payload)"

    def form_text(self, key: str, value: str, indent: str) -> str:
        return f'_ = writer.WriteField("{key}", "{value}")'

    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        err = f"errFile{index}"
        lines = [
            f'file, {err} := os.Open("{src}")',
            *_print_and_return(err, indent),
            "defer file.Close()",
            f'part{index}, {err} := writer.CreateFormFile("{key}", filepath.Base("{src}"))',
            f"_, {err} = io.Copy(part{index}, file)",
            *_print_and_return(err, indent),
        ]
        return "\n".join(lines)

    def form_close(self, indent: str) -> str:
        return "\n".join(["err := writer.Close()", *_print_and_return("err", indent)])

    def file_body(self, placeholder: str, indent: str) -> str:
        return f'payload := strings.NewReader("{placeholder}")'

    def header_line(self, key: str, value: str, indent: str) -> str:
        return f'req.Header.Add("{key}", "{value}")'

    def assemble(self, ctx: SnippetContext) -> str:
        indent = ctx.indent
        body = ctx.body
        lines = ["package main", "", "import ("]
        lines.extend(f'{indent}"{name}"' for name in _imports(ctx))
        lines.extend([")", "", "func main() {", ""])
        lines.append(f'{indent}url := "{sanitize(ctx.url)}"')
        lines.append(f'{indent}method := "{sanitize(ctx.request.method)}"')
        lines.append("")
        if body:
            lines.append(indent_lines(body.code, indent))
            lines.append("")
        if ctx.timeout > 0:
            lines.append(f"{indent}timeout := time.Duration({ctx.timeout}) * time.Millisecond")
        lines.append(f"{indent}client := &http.Client{{")
        if not ctx.follow_redirect:
            lines.append(f"{indent * 2}CheckRedirect: func(req *http.Request, via []*http.Request) error {{")
            lines.append(f"{indent * 3}return http.ErrUseLastResponse")
            lines.append(f"{indent * 2}}},")
        if ctx.timeout > 0:
            lines.append(f"{indent * 2}Timeout: timeout,")
        lines.append(f"{indent}}}")
        payload = body.payload_symbol if body.payload_symbol else "nil"
        lines.append(f"{indent}req, err := http.NewRequest(method, url, {payload})")
        lines.append("")
        lines.extend(f"{indent}{line}" for line in _print_and_return("err", indent))
        if ctx.headers:
            lines.append(indent_lines(ctx.headers.code, indent))
        if body.needs_multipart:
            lines.append(f'{indent}req.Header.Set("Content-Type", writer.FormDataContentType())')
        lines.append("")
        lines.append(f"{indent}res, err := client.Do(req)")
        lines.extend(f"{indent}{line}" for line in _print_and_return("err", indent))
        lines.append(f"{indent}defer res.Body.Close()")
        lines.append("")
        lines.append(f"{indent}body, err := io.ReadAll(res.Body)")
        lines.extend(f"{indent}{line}" for line in _print_and_return("err", indent))
        lines.append(f"{indent}fmt.Println(string(body))")
        lines.append("}")
        return "\n".join(lines)


def _imports(ctx: SnippetContext) -> list[str]:
    names = ["fmt"]
    if ctx.timeout > 0:
        names.append("time")
    if ctx.body.needs_multipart:
        names.extend(["bytes", "mime/multipart"])
    elif ctx.body:
        names.append("strings")
    if ctx.body.needs_file_io:
        names.extend(["os", "path/filepath"])
    names.extend(["net/http", "io"])
    return names


def _print_and_return(err: str, indent: str) -> list[str]:
    return [f"if {err} != nil {{", f"{indent}fmt.Println({err})", f"{indent}return", "}"]
