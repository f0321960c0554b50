from __future__ import annotations

import pytest


@pytest.fixture()
def get_request_document() -> dict[str, object]:
    return {
        "method": "GET",
        "url": "https://postman-echo.com/get",
    }


@pytest.fixture()
def formdata_file_document() -> dict[str, object]:
    return {
        "method": "POST",
        "url": "https://postman-echo.com/post",
        "body": {
            "mode": "formdata",
            "formdata": [
                {"key": "f", "src": "/tmp/a.txt", "type": "file"},
            ],
        },
    }
