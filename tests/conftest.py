from __future__ import annotations

from pathlib import Path

import pytest


class RecordingListener:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class RecordingSink:
    def __init__(self) -> None:
        self.calls = []

    def upload(self, spec, bucket, shared_publicly, listener) -> None:
        self.calls.append((spec, bucket, shared_publicly))


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


def touch(path: Path, content: str = "x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "ws"
    touch(ws / "app.jar")
    touch(ws / "lib" / "dep.jar")
    touch(ws / "lib" / "deep" / "other.jar")
    touch(ws / "notes.txt")
    touch(ws / "out" / "42" / "test.log")
    touch(ws / ".git" / "config.jar")
    return ws
