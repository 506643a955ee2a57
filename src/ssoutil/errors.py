class SsoUtilError(Exception):
    """Base class for every error raised by ssoutil."""


class InvalidAccountIdError(SsoUtilError, ValueError):
    """Account ID is not a non-negative number of at most 12 digits."""


class InvalidArnError(SsoUtilError, ValueError):
    """String is not an IAM role ARN."""


class InvalidTimeFormatError(SsoUtilError, ValueError):
    """Timestamp does not match the 'YYYY-MM-DD HH:MM:SS -0700 MST' layout."""


class UnsupportedActionError(SsoUtilError, ValueError):
    """URL action is not one of print, clip or open."""


class UrlSinkError(SsoUtilError):
    """Printing, copying or opening a URL failed."""
