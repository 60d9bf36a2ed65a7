"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .errors import IsostrictError, StartupValidationError
from .log import log_event, setup_logging
from .presenters import render_accepted, render_error, render_fields, render_rejected
from .recognizer import recognize


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.log_file)
        values = args.values or _read_lines(stdin if stdin is not None else sys.stdin)
        return _check_values(values, show_fields=args.fields, quiet=args.quiet)
    except IsostrictError as exc:
        print(render_error(str(exc)))
        return 1


def _check_values(values: Iterable[str], *, show_fields: bool, quiet: bool) -> int:
    checked = 0
    rejected = 0
    log_event("validation_started")

    for value in values:
        checked += 1
        fields = recognize(value)
        if fields is None:
            rejected += 1
            log_event("value_rejected", level=logging.DEBUG, value=value)
            if not quiet:
                print(render_rejected(value))
        elif quiet:
            continue
        elif show_fields:
            print(render_fields(fields))
        else:
            print(render_accepted(value))

    log_event("validation_finished", checked=checked, rejected=rejected)
    if checked == 0:
        print(render_error("No values to check."))
        return 1
    return 1 if rejected else 0


def _read_lines(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


def _configure_logging(log_file_raw: str | None) -> None:
    if log_file_raw is None:
        setup_logging(None)
        return

    try:
        log_file = Path(log_file_raw).expanduser().resolve()
        setup_logging(log_file)
    except (OSError, RuntimeError) as exc:
        raise StartupValidationError(
            f"Cannot open log file {log_file_raw}: {exc}"
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isostrict",
        description=(
            "Check that values are strict ISO 8601 date-times "
            "(YYYY-MM-DDTHH:mm:ss[.sss](Z|+HH:mm))."
        ),
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Values to check. Reads one value per stdin line when omitted.",
    )
    parser.add_argument(
        "--fields",
        action="store_true",
        help="Print the captured fields as JSON for accepted values.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print nothing; report through the exit code only.",
    )
    parser.add_argument(
        "--log-file",
        required=False,
        help="Optional path for structured event logs.",
    )
    return parser
