"""
Shared fixtures for the ce-runner test suite.

No test opens a real socket: every request goes through an
``httpx.MockTransport`` that records what was sent and answers with a
canned body.
"""

from pathlib import Path
from typing import List

import httpx
import pytest

SAMPLE_SOURCE = "int main(){}"
SAMPLE_RESPONSE = '{"code":0,"stdout":["ok"]}'


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it was handed."""

    def __init__(self, body: str = SAMPLE_RESPONSE, status_code: int = 200):
        self.requests: List[httpx.Request] = []
        self.body = body
        self.status_code = status_code
        super().__init__(self._respond)

    def _respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def source_dir(tmp_path: Path, monkeypatch) -> Path:
    """Working directory holding a main.cpp with the sample program."""
    (tmp_path / "main.cpp").write_text(SAMPLE_SOURCE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
