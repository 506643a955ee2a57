import argparse
import configparser
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from ssoutil import __version__
from ssoutil.config import debug_enabled, load_settings
from ssoutil.errors import SsoUtilError
from ssoutil.formatter import print_role_table, print_time_remaining
from ssoutil.paths import ensure_dir_exists, get_home_path
from ssoutil.timefmt import parse_time_string, time_remain
from ssoutil.urls import ACTIONS, handle_url
from ssoutil.utils import make_role_arn_from_str, parse_role_arn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssoutil",
        description="Helpers for AWS SSO role ARNs, credential expiry and login URLs",
        epilog=(
            "examples:\n"
            "  ssoutil arn -a 123456789012 -r AdministratorAccess\n"
            "  ssoutil parse arn:aws:iam::123456789012:role/AdministratorAccess\n"
            "  ssoutil expires '2030-01-01 00:00:00 +0000 UTC' --long\n"
            "  ssoutil url -a clip https://example.awsapps.com/start\n"
            "  ssoutil mkdir ~/.aws-sso/cache.json\n"
            "\n"
            "defaults for 'url' are read from ~/.ssoutil (url_action, browser)\n"
            "and the SSOUTIL_URL_ACTION / SSOUTIL_BROWSER environment variables"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"ssoutil {__version__}")
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=None,
        help="enable debug logging [env: SSOUTIL_DEBUG]",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    arn = sub.add_parser("arn", help="Build a role ARN from an account ID and role name")
    arn.add_argument("-a", "--account", required=True, help="AWS account ID (up to 12 digits)")
    arn.add_argument("-r", "--role", required=True, help="IAM role name")

    parse = sub.add_parser("parse", help="Parse one or more role ARNs")
    parse.add_argument("arns", nargs="+", metavar="ARN", help="Role ARN, e.g. arn:aws:iam::123456789012:role/Name")

    expires = sub.add_parser("expires", help="Show the time remaining until an expiry timestamp")
    expires.add_argument("timestamp", help="Timestamp such as '2006-01-02 15:04:05 -0700 MST'")
    expires.add_argument("-l", "--long", action="store_true", help="Fixed-width output ('5h 5m')")

    url = sub.add_parser("url", help="Print, copy or open a URL")
    url.add_argument("url", help="URL to handle")
    url.add_argument("-a", "--action", choices=ACTIONS, help="What to do with the URL (default: open)")
    url.add_argument("-b", "--browser", help="Browser executable to open the URL with")
    url.add_argument("--pre", default="", help="Text printed before the URL (print action)")
    url.add_argument("--post", default="\n", help="Text printed after the URL (print action)")

    mkdir = sub.add_parser("mkdir", help="Create the parent directory of a file")
    mkdir.add_argument("file", help="File path; a leading ~ is expanded")

    return parser


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _error(message: str) -> None:
    print(f"[error] {message}", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    _setup_logging(args.debug if args.debug is not None else debug_enabled())
    try:
        settings = load_settings()
    except (configparser.Error, OSError) as e:
        _error(f"Unable to load settings: {e}")

    console = Console()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "arn":
            console.print(make_role_arn_from_str(args.account, args.role), highlight=False)

        elif args.command == "parse":
            rows = []
            failed = False
            for arn in args.arns:
                try:
                    account_id, role = parse_role_arn(arn)
                except SsoUtilError as e:
                    print(f"[error] {e}", file=sys.stderr)
                    failed = True
                    continue
                rows.append({"Arn": arn, "AccountId": account_id, "RoleName": role})
            print_role_table(rows, console)
            if failed:
                sys.exit(1)

        elif args.command == "expires":
            print_time_remaining(time_remain(parse_time_string(args.timestamp), args.long), console)

        elif args.command == "url":
            action = args.action or settings.url_action
            browser = args.browser if args.browser is not None else settings.browser
            handle_url(action, browser, args.url, args.pre, args.post)

        elif args.command == "mkdir":
            ensure_dir_exists(get_home_path(args.file))

    except SsoUtilError as e:
        _error(str(e))
    except OSError as e:
        _error(f"{e.strerror}: {e.filename}" if e.filename else str(e))


if __name__ == "__main__":
    main()
