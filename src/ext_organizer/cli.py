# cli.py - parse, scan, confirm, move, notify
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from loguru import logger

from ext_organizer import __version__
from ext_organizer.console import Console
from ext_organizer.errors import DestinationError, InvalidExtensionError, PathError
from ext_organizer.mover import move_matches
from ext_organizer.notifications import default_notifiers, send_notification, summarize
from ext_organizer.scanner import destination_name, scan

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

AFFIRMATIVE = {"y", "yes"}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ext-organizer",
        description="Move every file with the given extension into a subfolder named after it.",
        epilog="example: ext-organizer ~/Downloads .MOV",
    )
    p.add_argument("directory", help="Directory to scan (not recursive)")
    p.add_argument("extension", help="Suffix to match exactly, e.g. .pdf")
    p.add_argument("--ignore-case", action="store_true", help="Match the extension case-insensitively")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("--verbose", action="store_true", help="Enable DEBUG logs and diagnostics")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def extract_args(argv) -> tuple[argparse.Namespace, str]:
    p = build_parser()
    args = p.parse_args(argv)
    if not args.directory.strip():
        p.error("directory must not be empty")
    try:
        folder_name = destination_name(args.extension)
    except InvalidExtensionError as e:
        p.error(str(e))
    return args, folder_name


def configure_logger(verbose: bool, color: bool = True) -> None:
    logger.remove()

    fmt = ("<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
           "{name}:{function}:{line} | {message}") if verbose \
        else "<green>{time:HH:mm:ss}</green> | <level>{level}</level> | {message}"

    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        backtrace=verbose,
        diagnose=verbose,
        format=fmt,
        colorize=None if color else False,
    )
    logger.debug("logger ready")


def confirm(console: Console, stdin: TextIO | None = None) -> bool:
    console.prompt("Move these files?")
    line = (stdin or sys.stdin).readline()
    if not line:
        console.echo()
    return line.strip().lower() in AFFIRMATIVE


def run(
    directory: Path,
    extension: str,
    folder_name: str,
    console: Console,
    *,
    ignore_case: bool = False,
    stdin: TextIO | None = None,
    notifiers=None,
) -> int:
    matches = scan(directory, extension, ignore_case=ignore_case)
    if not matches:
        console.no_matches(extension, directory)
        return EXIT_OK

    console.found(len(matches), extension, directory, [m.name for m in matches])
    if not confirm(console, stdin):
        logger.debug("declined by user")
        console.cancelled()
        return EXIT_OK

    destination = directory / folder_name
    report = move_matches(
        matches,
        destination,
        on_moved=lambda m, final: console.moved(m.name),
        on_failed=lambda m, reason: console.failed(m.name, reason),
        on_created=console.created,
    )
    console.summary(len(report.moved), len(report.failed), folder_name)

    if notifiers is None:
        notifiers = default_notifiers(console)
    send_notification(summarize(report), notifiers)

    return EXIT_OK if report.ok else EXIT_FAILURE


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None, notifiers=None) -> int:
    args, folder_name = extract_args(argv)
    configure_logger(verbose=args.verbose, color=not args.no_color)
    console = Console(color=not args.no_color)

    directory = Path(args.directory)
    logger.debug(f"config: dir={directory}, ext={args.extension!r}, ignore_case={args.ignore_case}, color={console.color}")
    try:
        return run(
            directory,
            args.extension,
            folder_name,
            console,
            ignore_case=args.ignore_case,
            stdin=stdin,
            notifiers=notifiers,
        )
    except (PathError, DestinationError) as e:
        logger.debug(f"aborting: {e}")
        console.error(str(e))
        return EXIT_FAILURE


def main_entry() -> None:
    sys.exit(main())
