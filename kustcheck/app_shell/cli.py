import argparse
import logging
import os
import sys

from kustcheck.components.validator import (
    ComponentProbeError,
    ErrorPolicy,
    ValidateComponentInput,
    run,
)
from kustcheck.components.validator.adapters import default_filesystem
from kustcheck.settings import Settings, resolve_settings

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def display_path(path: str) -> str:
    """Render a path for output, escaping bytes that did not decode from argv."""
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kustomize component checks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check
    check_parser = subparsers.add_parser(
        "check", help="Report whether directories are Kustomize components"
    )
    check_parser.add_argument("paths", nargs="+", help="Component directories to check")
    check_parser.add_argument("--config", help="Path to a settings YAML file")
    policy = check_parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--strict",
        dest="error_policy",
        action="store_const",
        const=ErrorPolicy.PROPAGATE,
        help="Fail when a marker cannot be probed",
    )
    policy.add_argument(
        "--lenient",
        dest="error_policy",
        action="store_const",
        const=ErrorPolicy.TREAT_AS_PRESENT,
        help="Count unprobeable markers as present",
    )

    return parser


def handle_check(settings: Settings, args: argparse.Namespace) -> int:
    policy = args.error_policy or settings.error_policy
    status = EXIT_OK

    for path in args.paths:
        try:
            result = run(
                ValidateComponentInput(component_path=path),
                fs=default_filesystem,
                policy=policy,
            )
        except ComponentProbeError as e:
            logger.error(f"Could not check {display_path(path)}: {display_path(str(e))}")
            status = EXIT_ERROR
            continue

        if result.is_valid:
            print(f"valid   {display_path(path)} ({result.marker})")
        else:
            print(f"invalid {display_path(path)}")
            status = max(status, EXIT_INVALID)

    return status


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Could not load settings: {e}")
        return EXIT_ERROR

    logging.basicConfig(level=settings.log_level)

    if args.command == "check":
        return handle_check(settings, args)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
