from __future__ import annotations

import json
from pathlib import Path

import pytest

from snipgen.__main__ import main
from snipgen.targets import list_targets


def _write(tmp_path: Path, document: dict[str, object], name: str = "request.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestMain:
    def test_list_targets(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-targets"]) == 0
        out = capsys.readouterr().out
        for target in list_targets():
            assert target.id in out

    def test_generates_default_target(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], get_request_document: dict[str, object]
    ) -> None:
        path = _write(tmp_path, get_request_document)
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "import http.client" in out
        assert 'conn.request("GET", "/get", headers=headers)' not in out
        assert 'conn.request("GET", "/get")' in out

    def test_options_are_forwarded(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], get_request_document: dict[str, object]
    ) -> None:
        path = _write(tmp_path, get_request_document)
        argv = [str(path), "-t", "go-native", "--timeout", "3000", "--no-follow-redirect", "--indent-type", "Tab"]
        assert main(argv) == 0
        out = capsys.readouterr().out
        assert "\ttimeout := time.Duration(3000) * time.Millisecond" in out
        assert "CheckRedirect" in out

    def test_generic_option(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], formdata_file_document: dict[str, object]
    ) -> None:
        path = _write(tmp_path, formdata_file_document)
        assert main([str(path), "-t", "c-libcurl", "--option", "useMimeType=false"]) == 0
        assert "curl_formadd" in capsys.readouterr().out

    def test_named_collection_request(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        collection = {
            "item": [
                {"name": "First", "request": {"method": "GET", "url": "https://x.test/first"}},
                {
                    "name": "Folder",
                    "item": [{"name": "Second", "request": {"method": "PUT", "url": "https://x.test/second"}}],
                },
            ]
        }
        path = _write(tmp_path, collection)
        assert main([str(path), "-t", "javascript-fetch", "--request", "Second"]) == 0
        out = capsys.readouterr().out
        assert 'method: "PUT"' in out
        assert "https://x.test/second" in out

    def test_writes_output_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], get_request_document: dict[str, object]
    ) -> None:
        path = _write(tmp_path, get_request_document)
        output = tmp_path / "snippet.php"
        assert main([str(path), "-t", "php-curl", "-o", str(output)]) == 0
        assert capsys.readouterr().out == ""
        assert output.read_text(encoding="utf-8").startswith("<?php")

    def test_unknown_target(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], get_request_document: dict[str, object]
    ) -> None:
        path = _write(tmp_path, get_request_document)
        assert main([str(path), "-t", "cobol"]) == 1
        assert "error: Unknown target: cobol" in capsys.readouterr().err

    def test_missing_request_name(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, {"item": []})
        assert main([str(path), "--request", "Nope"]) == 1
        assert "No request named 'Nope'" in capsys.readouterr().err

    def test_missing_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main([])
