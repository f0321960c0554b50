"""Pytest fixtures for integration tests.

This module provides fixtures for:
- Starting/stopping the FastAPI echo server
- Running generated Python snippets against it
"""

from __future__ import annotations

import subprocess
import sys
import threading
import time
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest
import uvicorn

from .server import app

TEST_SERVER_HOST = "127.0.0.1"
TEST_SERVER_PORT = 18766


class ServerThread(threading.Thread):
    """Thread that runs uvicorn server."""

    def __init__(self) -> None:
        super().__init__(daemon=True)
        self.server: uvicorn.Server | None = None

    def run(self) -> None:
        config = uvicorn.Config(
            app,
            host=TEST_SERVER_HOST,
            port=TEST_SERVER_PORT,
            log_level="error",
        )
        self.server = uvicorn.Server(config)
        self.server.run()

    def stop(self) -> None:
        if self.server:
            self.server.should_exit = True


@pytest.fixture(scope="session")
def server() -> Generator[str, None, None]:
    """Start the test server and return the base URL."""
    server_thread = ServerThread()
    server_thread.start()

    base_url = f"http://{TEST_SERVER_HOST}:{TEST_SERVER_PORT}"
    max_retries = 50
    for _ in range(max_retries):
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.ConnectError:
            time.sleep(0.1)
    else:
        raise RuntimeError("Test server failed to start")

    yield base_url

    server_thread.stop()


@pytest.fixture
def run_snippet(tmp_path: Path) -> Callable[[str], subprocess.CompletedProcess[str]]:
    """Write a snippet to a file and execute it with the current interpreter."""

    def run(code: str) -> subprocess.CompletedProcess[str]:
        script = tmp_path / "snippet.py"
        script.write_text(code, encoding="utf-8")
        return subprocess.run(
            [sys.executable, str(script)],
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )

    return run
