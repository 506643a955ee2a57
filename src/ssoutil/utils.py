import re

from botocore.utils import ArnParser

from ssoutil.errors import InvalidAccountIdError, InvalidArnError

MAX_ACCOUNT_ID = 999_999_999_999

_ACCOUNT_RE = re.compile(r"[0-9]{1,12}")
_ROLE_PREFIX = "role/"


def account_id_to_string(account_id: int) -> str:
    """Render an account ID as the 12-digit zero-padded string AWS uses."""
    if account_id < 0 or account_id > MAX_ACCOUNT_ID:
        raise InvalidAccountIdError(f"Invalid AWS account ID: {account_id}")
    return f"{account_id:012d}"


def account_id_to_int(account_id: str) -> int:
    """Parse a (possibly zero-padded) account ID of up to 12 digits."""
    if not _ACCOUNT_RE.fullmatch(account_id):
        raise InvalidAccountIdError(f"Invalid AWS account ID: '{account_id}'")
    return int(account_id)


def make_role_arn(account_id: int, role: str) -> str:
    """Build arn:aws:iam::<account>:role/<role>.  The role name is not checked."""
    account = account_id_to_string(account_id)
    return f"arn:aws:iam::{account}:role/{role}"


def make_role_arn_from_str(account_id: str, role: str) -> str:
    """Same as make_role_arn, but the account ID is given as a string."""
    return make_role_arn(account_id_to_int(account_id), role)


def parse_role_arn(arn: str) -> tuple[int, str]:
    """Parse an IAM role ARN into (account ID, role name).

    Only a role directly under the account is accepted: role paths such as
    ``role/path/Name`` are rejected.
    """
    if arn.count(":") != 5 or not ArnParser.is_arn(arn):
        raise InvalidArnError(f"Invalid role ARN: '{arn}'")

    parts = ArnParser().parse_arn(arn)
    if parts["partition"] != "aws" or parts["service"] != "iam":
        raise InvalidArnError(f"Not an AWS IAM ARN: '{arn}'")

    try:
        account_id = account_id_to_int(parts["account"])
    except InvalidAccountIdError as e:
        raise InvalidArnError(f"Invalid account in ARN '{arn}': {e}") from e

    resource = parts["resource"]
    if not resource.startswith(_ROLE_PREFIX):
        raise InvalidArnError(f"ARN does not name a role: '{arn}'")
    role = resource.removeprefix(_ROLE_PREFIX)
    if "/" in role:
        raise InvalidArnError(f"Role paths are not supported: '{arn}'")

    return account_id, role
