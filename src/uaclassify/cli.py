"""CLI entry point for uaclassify.

Provides ``main()`` as the entry point for the ``uaclassify`` console script
and ``run(args, stdin, stdout)`` which classifies every input string and
writes one result per line.

Usage::

    uaclassify "Mozilla/5.0 (X11; Linux x86_64) ..."   # one string
    uaclassify < access-log-agents.txt                 # one UA per line
    uaclassify --fast --format text < agents.txt       # skip filter chain
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from uaclassify.config import ClassifierConfig
from uaclassify.logging_config import setup_logging
from uaclassify.models import RESULT_KEYS, ParseResult
from uaclassify.parser import Classifier

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the uaclassify CLI."""
    parser = argparse.ArgumentParser(
        prog="uaclassify",
        description="Classify HTTP User-Agent strings into browser, engine, OS and device",
    )
    parser.add_argument(
        "user_agents",
        nargs="*",
        metavar="USER_AGENT",
        help="User-Agent strings to classify (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Skip the accuracy filters (faster, less accurate)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format: JSON object or tab-separated fields per line (default: json)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write DEBUG logs to this file",
    )
    return parser


def _iter_inputs(user_agents: list[str], stdin: TextIO) -> Iterator[str]:
    """Command-line strings if given, otherwise non-blank stdin lines."""
    if user_agents:
        yield from user_agents
        return
    for line in stdin:
        line = line.strip()
        if line:
            yield line


def format_result(result: ParseResult, output_format: str) -> str:
    """Render one result as a JSON object or a tab-separated line."""
    if output_format == "text":
        fields = [result.raw_string] + [
            getattr(result, key) or "" for key in RESULT_KEYS
        ]
        return "\t".join(fields)
    return json.dumps({"raw_string": result.raw_string, **result.to_dict()})


def run(
    args: argparse.Namespace,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Classify all inputs and write results. Returns the number classified."""
    config = ClassifierConfig(
        strict=not args.fast,
        log_matches=args.log_level == "DEBUG" or args.log_file is not None,
    )
    classifier = Classifier(config=config)

    count = 0
    for raw in _iter_inputs(args.user_agents, stdin):
        result = classifier.classify(raw)
        stdout.write(format_result(result, args.format) + "\n")
        count += 1

    logger.info("Classified %d User-Agent string(s) (strict=%s)", count, config.strict)
    return count


def main(argv: Iterable[str] | None = None) -> None:
    """Entry point for the uaclassify console script."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(
        console_level=getattr(logging, args.log_level),
        log_file=args.log_file,
    )

    try:
        run(args, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        pass
    finally:
        logging.shutdown()


if __name__ == "__main__":
    main()
