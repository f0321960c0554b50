from __future__ import annotations

import pytest

from urllib.parse import parse_qs

from snipgen.sanitize import sanitize


class TestSanitize:
    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(123, id="int"),
            pytest.param(None, id="none"),
            pytest.param({}, id="dict"),
            pytest.param([], id="list"),
            pytest.param(b"bytes", id="bytes"),
        ],
    )
    def test_non_string_returns_empty(self, value: object) -> None:
        assert sanitize(value, "raw", False) == ""
        assert sanitize(value) == ""

    def test_trims_when_requested(self) -> None:
        assert sanitize("inputString     ", None, True) == "inputString"
        assert sanitize("  inputString  ", "header", True) == "inputString"

    def test_trim_requires_true(self) -> None:
        assert sanitize(" a ", None, "yes") == " a "
        assert sanitize(" a ", None, 1) == " a "

    def test_raw_is_a_json_string_literal(self) -> None:
        assert sanitize('a"b\\c\n', "raw") == '"a\\"b\\\\c\\n"'
        assert sanitize("tab\there", "raw") == '"tab\\there"'

    def test_raw_keeps_non_ascii(self) -> None:
        assert sanitize("grüße", "raw") == '"grüße"'

    def test_urlencoded_percent_encodes(self) -> None:
        assert sanitize("a b&c=d/ü", "urlencoded") == "a%20b%26c%3Dd/%C3%BC"
        assert sanitize("@*_-.", "urlencoded") == "@*_-."

    def test_urlencoded_plus_survives_form_decoding(self) -> None:
        assert sanitize("a+b", "urlencoded") == "a%2Bb"
        assert parse_qs("x=" + sanitize("a+b c", "urlencoded"))["x"] == ["a+b c"]

    def test_c_literal_escapes_control_characters(self) -> None:
        assert sanitize("a\"b\\c\n\t\x01\x7fü", "c") == "a\\\"b\\\\c\\n\\t\\001\\177ü"

    def test_swift_literal_escapes_control_characters(self) -> None:
        assert sanitize("a\"b\\c\r\x1b", "swift") == "a\\\"b\\\\c\\r\\u{1b}"
        assert sanitize("\\(x)", "swift") == "\\\\(x)"

    @pytest.mark.parametrize("context", ["formdata", "file", "header"])
    def test_single_quoted_contexts(self, context: str) -> None:
        assert sanitize("a'b\\c\"d", context) == "a\\'b\\\\c\"d"

    @pytest.mark.parametrize(
        "context",
        [
            pytest.param(None, id="none"),
            pytest.param("url", id="url"),
            pytest.param("unknown", id="unknown"),
            pytest.param(123, id="non-string"),
            pytest.param([], id="unhashable"),
        ],
    )
    def test_default_context_escapes_double_quotes(self, context: object) -> None:
        assert sanitize("a'b\\c\"d", context) == "a'b\\\\c\\\"d"

    def test_is_deterministic(self) -> None:
        value = "  some \"text\" with 'quotes' \\ "
        for context in (None, "raw", "urlencoded", "formdata", "header"):
            assert sanitize(value, context, True) == sanitize(value, context, True)
