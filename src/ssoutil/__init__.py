"""Helpers for AWS SSO role ARNs, paths, expiry display and URL sinks."""
from ssoutil.errors import (
    InvalidAccountIdError,
    InvalidArnError,
    InvalidTimeFormatError,
    SsoUtilError,
    UnsupportedActionError,
    UrlSinkError,
)
from ssoutil.paths import ensure_dir_exists, get_home_path
from ssoutil.timefmt import parse_time_string, time_remain
from ssoutil.urls import UrlHandler, handle_url
from ssoutil.utils import (
    account_id_to_int,
    account_id_to_string,
    make_role_arn,
    make_role_arn_from_str,
    parse_role_arn,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidAccountIdError",
    "InvalidArnError",
    "InvalidTimeFormatError",
    "SsoUtilError",
    "UnsupportedActionError",
    "UrlHandler",
    "UrlSinkError",
    "account_id_to_int",
    "account_id_to_string",
    "ensure_dir_exists",
    "get_home_path",
    "handle_url",
    "make_role_arn",
    "make_role_arn_from_str",
    "parse_role_arn",
    "parse_time_string",
    "time_remain",
]
