import io
from dataclasses import dataclass, field

import pytest

from ssoutil import timefmt
from ssoutil.urls import UrlHandler

NOW = 1_700_000_000


@dataclass
class Recorder:
    """Stands in for the clipboard and browser sinks."""

    calls: list[tuple] = field(default_factory=list)
    fail: bool = False

    def clip(self, url: str) -> None:
        if self.fail:
            raise RuntimeError("there was an error")
        self.calls.append(("clip", url))

    def open(self, url: str) -> None:
        if self.fail:
            raise RuntimeError("there was an error")
        self.calls.append(("open", url, "default browser"))

    def open_with(self, url: str, browser: str) -> None:
        if self.fail:
            raise RuntimeError("there was an error")
        self.calls.append(("open", url, browser))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def handler(recorder: Recorder, output: io.StringIO) -> UrlHandler:
    return UrlHandler(
        output=output,
        clipboard_writer=recorder.clip,
        url_opener=recorder.open,
        url_opener_with=recorder.open_with,
    )


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr(timefmt, "_now", lambda: float(NOW))
    return NOW
