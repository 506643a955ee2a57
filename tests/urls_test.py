import io
import webbrowser
from pathlib import Path

import pyperclip
import pytest

from ssoutil import urls
from ssoutil.errors import UnsupportedActionError, UrlSinkError
from ssoutil.urls import UrlHandler


def test_unsupported_action(handler: UrlHandler, recorder, output: io.StringIO) -> None:
    with pytest.raises(UnsupportedActionError):
        handler.handle_url("foo", "browser", "bar", "pre", "post")
    assert recorder.calls == []
    assert output.getvalue() == ""


def test_print(handler: UrlHandler, recorder, output: io.StringIO) -> None:
    handler.handle_url("print", "browser", "bar", "pre", "post")
    assert output.getvalue() == "prebarpost"
    assert recorder.calls == []


def test_clip(handler: UrlHandler, recorder) -> None:
    handler.handle_url("clip", "browser", "url", "pre", "post")
    assert recorder.calls == [("clip", "url")]


def test_open(handler: UrlHandler, recorder) -> None:
    handler.handle_url("open", "other-browser", "other-url", "pre", "post")
    handler.handle_url("open", "", "some-url", "pre", "post")
    assert recorder.calls == [
        ("open", "other-url", "other-browser"),
        ("open", "some-url", "default browser"),
    ]


@pytest.mark.parametrize(("action", "browser"), [("open", ""), ("open", "foo"), ("clip", "")])
def test_sink_errors(handler: UrlHandler, recorder, action: str, browser: str) -> None:
    recorder.fail = True
    with pytest.raises(UrlSinkError) as exc:
        handler.handle_url(action, browser, "url", "pre", "post")
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_print_error() -> None:
    class Broken(io.StringIO):
        def write(self, s: str) -> int:
            raise OSError("disk full")

    with pytest.raises(UrlSinkError):
        UrlHandler(output=Broken()).handle_url("print", "", "url")


def test_print_defaults_to_stdout(capsys: pytest.CaptureFixture) -> None:
    UrlHandler().handle_url("print", "", "https://example.com", "Visit ", "\n")
    assert capsys.readouterr().out == "Visit https://example.com\n"


def test_default_clipboard(monkeypatch: pytest.MonkeyPatch) -> None:
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    UrlHandler().handle_url("clip", "", "https://example.com")
    assert copied == ["https://example.com"]


def test_default_clipboard_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(url: str) -> None:
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, "copy", fail)
    with pytest.raises(UrlSinkError):
        UrlHandler().handle_url("clip", "", "https://example.com")


def test_default_opener(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = []
    monkeypatch.setattr(webbrowser, "open", lambda url: opened.append(url) or True)
    UrlHandler().handle_url("open", "", "https://example.com")
    assert opened == ["https://example.com"]

    monkeypatch.setattr(webbrowser, "open", lambda url: False)
    with pytest.raises(UrlSinkError):
        UrlHandler().handle_url("open", "", "https://example.com")


def test_named_opener_path_with_spaces(tmp_path: Path) -> None:
    browser_dir = tmp_path / "My Browser's"
    browser_dir.mkdir()
    opened = tmp_path / "opened.txt"
    exe = browser_dir / "browser"
    exe.write_text(f'#!/bin/sh\nprintf "%s" "$1" > "{opened}"\n')
    exe.chmod(0o755)

    UrlHandler().handle_url("open", str(exe), "https://example.com")
    assert opened.read_text() == "https://example.com"


def test_named_opener_missing_executable(tmp_path: Path) -> None:
    with pytest.raises(UrlSinkError):
        UrlHandler().handle_url("open", str(tmp_path / "no such browser"), "https://example.com")


def test_module_handle_url(capsys: pytest.CaptureFixture) -> None:
    urls.handle_url("print", "", "bar", "pre", "post")
    assert capsys.readouterr().out == "prebarpost"
    with pytest.raises(UnsupportedActionError):
        urls.handle_url("bogus", "", "bar")
