#!/usr/bin/env python

"""
This module is the entry point executed when you run `cordova-entitlements` on the command line.

It is typically called from a Cordova `after_prepare` hook for the iOS platform:

    cordova-entitlements [--log-file FILE] generate --project-root PROJECT_ROOT
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cordova_entitlements.cli import configure_parser, execute


class StreamToLogger:
    def __init__(self, logger, log_level=logging.INFO):
        self.logger = logger
        self.log_level = log_level

    def write(self, buf):
        if buf.rstrip():
            self.logger.log(self.log_level, buf.rstrip())

    def flush(self):
        # Stream handlers need a flush method, but the log command flushes the buffer already
        pass


def _output_logger(name: str, stream, logfile_handler: logging.Handler) -> logging.Logger:
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(logfile_handler.formatter)
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(console_handler)
    logger.addHandler(logfile_handler)
    return logger


def setup_logger(logfile: Path):
    """Mirror stdout and stderr, and so every log record, into a plain log file."""
    logfile_handler = logging.FileHandler(logfile)
    logfile_handler.setFormatter(logging.Formatter("%(message)s"))
    sys.stdout = StreamToLogger(_output_logger("stdout_logger", sys.__stdout__, logfile_handler))
    sys.stderr = StreamToLogger(_output_logger("stderr_logger", sys.__stderr__, logfile_handler))


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv

    logger_parser = argparse.ArgumentParser(add_help=False)
    logger_parser.add_argument("--log-file", type=Path)
    logger_args, remaining = logger_parser.parse_known_args(argv)
    if logger_args.log_file:
        setup_logger(logger_args.log_file.resolve())
    # Library modules log through the root logger; send it to stderr
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    parser = argparse.ArgumentParser(
        prog="cordova-entitlements",
        description="Generates the associated-domains entitlements of a Cordova iOS project.",
    )
    configure_parser(parser)
    args = parser.parse_args(remaining)
    if args.cmd is None:
        parser.print_help()
        return 1
    return execute(args)


if __name__ == "__main__":
    sys.exit(main())
