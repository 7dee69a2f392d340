"""Console entry point for emitting a record from the shell.

Run via ``limelog <severity> [message]`` or ``python -m limelog.cli``.
Without a message, every line of standard input is emitted as its own record.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from . import logger
from .config import LogConfig, default_log_path
from .log_sink import Severity


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="limelog", description="Emit a Moonlight-tagged log record.")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--file", dest="file", help="Append records to this file.")
    target.add_argument("--log-dir", dest="log_dir", help="Append records to a timestamped file in this folder.")
    parser.add_argument("--stderr", dest="use_stderr", action="store_true", help="Write records to standard error.")
    parser.add_argument("severity", choices=[s.value for s in Severity])
    parser.add_argument("message", nargs="?", help="Message text (read from stdin when omitted). Put -- before a message starting with -.")
    return parser


def _emitter(severity: Severity):
    if severity is Severity.INFO:
        return logger.info
    if severity is Severity.WARNING:
        return logger.warning
    return logger.severe


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    """Run the console entry point.

    :param argv: Optional argument list. If omitted, uses ``sys.argv[1:]``.
    :param stdin: Stream read when no message is given; defaults to ``sys.stdin``.
    :returns: Process exit code.
    """
    argv = list(argv) if argv is not None else sys.argv[1:]
    args = _build_parser().parse_args(argv)

    config = LogConfig.from_env()
    if args.file:
        config = replace(config, log_path=Path(args.file).expanduser())
    if args.log_dir:
        config = replace(config, log_path=default_log_path(Path(args.log_dir).expanduser()))
    if args.use_stderr:
        config = replace(config, use_stderr=True)

    reset = logger.install_sink(config.build_sink())
    emit = _emitter(Severity(args.severity))
    try:
        if args.message is not None:
            emit(args.message)
        else:
            for line in stdin if stdin is not None else sys.stdin:
                emit(line.rstrip("\r\n"))
    finally:
        reset()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
