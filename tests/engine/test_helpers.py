from __future__ import annotations

import pytest

from snipgen.engine.helpers import file_name, indent_lines, seconds, timeout_ms


class TestHelpers:
    def test_indent_lines_skips_empty_lines(self) -> None:
        assert indent_lines("a\n\nb", "  ") == "  a\n\n  b"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            pytest.param("/tmp/a.txt", "a.txt", id="posix"),
            pytest.param("C:\\data\\b.png", "b.png", id="windows"),
            pytest.param("c.txt", "c.txt", id="bare"),
        ],
    )
    def test_file_name(self, path: str, expected: str) -> None:
        assert file_name(path) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param(3000, "3", id="whole"),
            pytest.param(1500, "1.5", id="fraction"),
            pytest.param(1, "0.001", id="small"),
            pytest.param("3000", "0", id="not-a-number"),
        ],
    )
    def test_seconds(self, value: object, expected: str) -> None:
        assert seconds(value) == expected

    def test_timeout_ms(self) -> None:
        assert timeout_ms({"requestTimeout": 250}) == 250
        assert timeout_ms({"requestTimeout": True}) == 0
        assert timeout_ms({}) == 0
