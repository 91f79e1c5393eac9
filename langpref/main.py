"""Command line entry point for langpref."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from langpref import __version__
from langpref.config import load_config
from langpref.di import initialize_di, shutdown_di
from langpref.errors import LangPrefError, LocalizationError
from langpref.localization import Language, LanguagePreference


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.WARNING

    # Clear any existing handlers to prevent duplication
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr so command output stays clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="langpref",
        description="Show or change the preferred UI language",
    )

    parser.add_argument(
        "--version", action="version", version=f"langpref {__version__}"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings-file", type=Path, help="Path to the settings JSON file")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("show", help="Print the active language")
    subparsers.add_parser("list", help="Print all supported languages")

    set_parser = subparsers.add_parser("set", help="Persist a preferred language")
    set_parser.add_argument("code", help="Language code, e.g. en, ar, fr")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "show"
    return args


def _describe(language: Language) -> str:
    direction = language.layout_direction.value
    return f"{language.code}\t{language.display_name}\t{direction}"


def parse_language(code: str) -> Language:
    """Strict lookup for user input; from_code would silently pick English."""
    for language in Language.all():
        if language.code == code:
            return language

    known = ", ".join(language.code for language in Language.all())
    raise LocalizationError(
        f"Unsupported language '{code}'. Choose one of: {known}", language_code=code
    )


def run_command(args: argparse.Namespace, preference: LanguagePreference) -> int:
    """Execute one CLI command against ``preference``. Returns the exit code."""
    if args.command == "list":
        active = preference.current()
        for language in Language.all():
            marker = "*" if language is active else " "
            print(f"{marker} {_describe(language)}")
        return 0

    if args.command == "set":
        preference.set_current(parse_language(args.code))
        print(_describe(preference.current()))
        return 0

    print(_describe(preference.current()))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)
    logger = structlog.get_logger()

    try:
        overrides = {"debug": True} if args.debug else {}
        config = load_config(settings_file=args.settings_file, **overrides)
        container = initialize_di(config)
        try:
            return run_command(args, container.get("language_preference"))
        finally:
            shutdown_di()
    except LocalizationError as e:
        logger.warning("Unsupported language requested", **e.to_dict())
        print(e.message, file=sys.stderr)
        return 2
    except LangPrefError as e:
        logger.error("langpref failed", **e.to_dict())
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
