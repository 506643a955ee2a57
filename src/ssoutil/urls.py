"""Send a URL to stdout, the clipboard or a web browser.

The three sinks are plain callables handed to `UrlHandler`, so tests can
pass recording fakes instead of touching the real clipboard or browser.
"""
import logging
import sys
import webbrowser
from collections.abc import Callable
from typing import TextIO

import pyperclip

from ssoutil.errors import UnsupportedActionError, UrlSinkError

logger = logging.getLogger(__name__)

ACTIONS = ("print", "clip", "open")

ClipboardWriter = Callable[[str], None]
UrlOpener = Callable[[str], None]
UrlOpenerWith = Callable[[str, str], None]


def copy_to_clipboard(url: str) -> None:
    try:
        pyperclip.copy(url)
    except pyperclip.PyperclipException as e:
        raise UrlSinkError(f"Unable to copy URL to clipboard: {e}") from e


def open_in_browser(url: str) -> None:
    if not webbrowser.open(url):
        raise UrlSinkError(f"Unable to open {url} in the default browser")


def open_in_named_browser(url: str, browser: str) -> None:
    """Open url with the given browser executable (e.g. 'firefox').

    The name is used as a single argv entry, so paths containing spaces work.
    """
    controller = webbrowser.GenericBrowser([browser, "%s"])
    if not controller.open(url):
        raise UrlSinkError(f"Unable to open {url} with {browser}")


class UrlHandler:
    """Dispatches a URL to one of the print/clip/open sinks.

    Any sink left as None uses the real one: sys.stdout, the system clipboard
    (pyperclip) and the web browser (webbrowser).
    """

    def __init__(
        self,
        output: TextIO | None = None,
        clipboard_writer: ClipboardWriter | None = None,
        url_opener: UrlOpener | None = None,
        url_opener_with: UrlOpenerWith | None = None,
    ) -> None:
        self._output = output
        self._clipboard_writer = clipboard_writer or copy_to_clipboard
        self._url_opener = url_opener or open_in_browser
        self._url_opener_with = url_opener_with or open_in_named_browser

    def handle_url(
        self,
        action: str,
        browser: str,
        url: str,
        pre_message: str = "",
        post_message: str = "",
    ) -> None:
        if action not in ACTIONS:
            raise UnsupportedActionError(f"Unsupported URL action: '{action}'")

        logger.debug(f"Handling URL with action '{action}'")
        try:
            if action == "print":
                self._print(f"{pre_message}{url}{post_message}")
            elif action == "clip":
                self._clipboard_writer(url)
                logger.info("Please open the URL copied to your clipboard")
            elif browser:
                self._url_opener_with(url, browser)
                logger.info(f"Opening URL in {browser}")
            else:
                self._url_opener(url)
                logger.info("Opening URL in your default browser")
        except UrlSinkError:
            raise
        except Exception as e:
            raise UrlSinkError(f"Unable to {action} URL: {e}") from e

    def _print(self, text: str) -> None:
        output = self._output if self._output is not None else sys.stdout
        output.write(text)
        output.flush()


_default_handler = UrlHandler()


def handle_url(
    action: str,
    browser: str,
    url: str,
    pre_message: str = "",
    post_message: str = "",
) -> None:
    """handle_url on a UrlHandler wired to the real print/clipboard/browser sinks."""
    _default_handler.handle_url(action, browser, url, pre_message, post_message)
