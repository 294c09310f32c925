"""Command-line front end: yaml2json.

Usage:
    yaml2json file1.yaml file2.yaml
    cat file1.yaml | yaml2json
    yaml2json --error=json file1.yaml | jq

Each YAML document becomes one JSON value on stdout. A document that fails
to convert is reported according to --error and the remaining documents
are still converted. A failure reading the input stops the program with
exit status 1.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from yamlsplit import __version__
from yamlsplit.config import (
    ERROR_STYLE_NAMES,
    ErrorStyle,
    OutputStyle,
    StreamConfig,
    stream_config_context,
)
from yamlsplit.convert import YamlToJson
from yamlsplit.errors import StreamReadError
from yamlsplit.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

USAGE_EXAMPLES = """\
examples:
  yaml2json file1.yaml file2.yaml
  cat file1.yaml | yaml2json
  yaml2json --error=json file1.yaml | jq
"""


class ErrorReporter:
    """Report errors in the configured ErrorStyle.

    JSON-style errors go to stdout in place of the failed document so that
    downstream JSON consumers see one value per input document.

    """

    __slots__ = ("_style", "_pretty", "_stdout", "_stderr")

    def __init__(self, style: ErrorStyle, pretty: bool, stdout: TextIO, stderr: TextIO) -> None:
        self._style = style
        self._pretty = pretty
        self._stdout = stdout
        self._stderr = stderr

    def report(self, error: object) -> None:
        if self._style == ErrorStyle.SILENT:
            return
        if self._style == ErrorStyle.STDERR:
            self._stderr.write(f"{error}\n")
            return

        payload = {"yaml-error": str(error)}
        if self._pretty:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        else:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        self._stdout.write(f"{text}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaml2json",
        description="Convert YAML documents to JSON, one JSON value per document.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-p", "--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument(
        "-e",
        "--error",
        choices=ERROR_STYLE_NAMES,
        default=ErrorStyle.STDERR.value,
        help="How to report documents that fail to convert (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Paths of files to convert. Reads stdin when none are given ('-' also means stdin).",
    )
    return parser


def run(
    files: list[str],
    *,
    converter: YamlToJson,
    reporter: ErrorReporter,
    stdin: BinaryIO,
    stdout: TextIO,
) -> int:
    """Convert each input in order.

    Returns:
        Process exit status
    """
    for name in files or ["-"]:
        try:
            if name == "-":
                converter.convert_stream(stdin, stdout, on_error=reporter.report)
                continue

            path = Path(name)
            if not path.exists():
                reporter.report(f"file {name} does not exist")
            elif path.is_dir():
                reporter.report(f"{name} is a directory")
            else:
                try:
                    handle = path.open("rb")
                except OSError as e:
                    reporter.report(e)
                    continue
                with handle:
                    converter.convert_stream(
                        handle, stdout, source_file=name, on_error=reporter.report
                    )
        except StreamReadError as e:
            logger.debug("Aborting on read error", exc_info=True)
            reporter.report(e)
            return 1
    return 0


def main(
    argv: list[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Entry point for the yaml2json console script."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    stdout = stdout or sys.stdout
    config = StreamConfig(
        style=OutputStyle.PRETTY if args.pretty else OutputStyle.COMPACT,
        error_style=ErrorStyle(args.error),
    )
    reporter = ErrorReporter(config.error_style, args.pretty, stdout, stderr or sys.stderr)

    with stream_config_context(config):
        try:
            return run(
                args.files,
                converter=YamlToJson(),
                reporter=reporter,
                stdin=stdin or sys.stdin.buffer,
                stdout=stdout,
            )
        except BrokenPipeError:
            if stdout is sys.stdout:
                # The interpreter flushes stdout again at exit
                devnull = os.open(os.devnull, os.O_WRONLY)
                os.dup2(devnull, sys.stdout.fileno())
            return 1
