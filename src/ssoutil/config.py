"""Command-line defaults from ~/.ssoutil and SSOUTIL_* environment variables."""
import configparser
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from ssoutil.paths import get_home_path

logger = logging.getLogger(__name__)

CONFIG_FILE = "~/.ssoutil"
CONFIG_SECTION = "default"


@dataclass
class Settings:
    url_action: str = "open"
    browser: str = ""


def str_bool(inp: str) -> bool:
    inp = inp.upper()
    if not inp or inp == "0" or inp.startswith("F") or inp.startswith("N"):
        return False
    return True


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    if environ is None:
        environ = os.environ
    return str_bool(environ.get("SSOUTIL_DEBUG", ""))


def load_settings(
    config_file: str = CONFIG_FILE, environ: Mapping[str, str] | None = None
) -> Settings:
    """Built-in defaults, overridden by the config file, then the environment.

    The file is INI style; only the [default] section is read.  Values are
    not validated here, `url_action` is checked when a URL is handled.
    """
    if environ is None:
        environ = os.environ
    settings = Settings()

    path = get_home_path(config_file)
    config = configparser.ConfigParser(interpolation=None)
    if config.read(path) and config.has_section(CONFIG_SECTION):
        for key, value in config.items(CONFIG_SECTION):
            if key == "url_action":
                settings.url_action = value
            elif key == "browser":
                settings.browser = value
            else:
                logger.warning(f"{path}: unknown setting '{key}'")

    settings.url_action = environ.get("SSOUTIL_URL_ACTION", settings.url_action)
    settings.browser = environ.get("SSOUTIL_BROWSER", settings.browser)
    return settings
