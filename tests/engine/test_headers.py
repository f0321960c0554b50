from __future__ import annotations

from snipgen.engine import HeaderFragment, compile_headers
from snipgen.engine.headers import headers_for_request
from snipgen.request import Header, build_request
from snipgen.targets import GoNativeTarget, PythonHttpClientTarget


class TestCompileHeaders:
    def test_trims_keys_but_not_values(self) -> None:
        fragment = compile_headers((Header(key="  a  ", value="  b  "),), GoNativeTarget(), "  ")
        assert fragment.code == 'req.Header.Add("a", "  b  ")'
        assert fragment.count == 1

    def test_skips_disabled_headers(self) -> None:
        headers = (
            Header(key="keep", value="1"),
            Header(key="drop", value="2", disabled=True),
        )
        fragment = compile_headers(headers, GoNativeTarget(), "  ")
        assert "keep" in fragment.code
        assert "drop" not in fragment.code
        assert fragment.count == 1

    def test_no_enabled_headers_is_empty(self) -> None:
        fragment = compile_headers((Header(key="a", value="b", disabled=True),), GoNativeTarget(), "  ")
        assert fragment == HeaderFragment()
        assert not fragment

    def test_escapes_for_single_quoted_literals(self) -> None:
        fragment = compile_headers((Header(key="x", value="it's"),), PythonHttpClientTarget(), "  ")
        assert fragment.code == "headers = {\n  'x': 'it\\'s'\n}"

    def test_escapes_for_double_quoted_literals(self) -> None:
        fragment = compile_headers((Header(key="x", value='say "hi"'),), GoNativeTarget(), "  ")
        assert fragment.code == 'req.Header.Add("x", "say \\"hi\\"")'

    def test_preserves_order(self) -> None:
        headers = (Header(key="b", value="1"), Header(key="a", value="2"))
        code = compile_headers(headers, GoNativeTarget(), "  ").code
        assert code.index('"b"') < code.index('"a"')


class TestHeadersForRequest:
    def test_file_body_gets_text_plain(self) -> None:
        request = build_request({"method": "POST", "url": "https://x.test", "body": {"mode": "file", "file": {"src": "a"}}})
        headers = headers_for_request(request)
        assert headers[-1] == Header(key="Content-Type", value="text/plain")
        assert request.headers == ()

    def test_explicit_content_type_is_kept(self) -> None:
        request = build_request(
            {
                "method": "POST",
                "url": "https://x.test",
                "header": [{"key": " content-type ", "value": "application/octet-stream"}],
                "body": {"mode": "file", "file": {"src": "a"}},
            }
        )
        assert headers_for_request(request) == request.headers

    def test_disabled_content_type_does_not_count(self) -> None:
        request = build_request(
            {
                "method": "POST",
                "url": "https://x.test",
                "header": [{"key": "Content-Type", "value": "x", "disabled": True}],
                "body": {"mode": "file", "file": {"src": "a"}},
            }
        )
        assert len(headers_for_request(request)) == 2

    def test_other_modes_are_untouched(self) -> None:
        request = build_request({"method": "POST", "url": "https://x.test", "body": {"mode": "raw", "raw": "x"}})
        assert headers_for_request(request) == ()
