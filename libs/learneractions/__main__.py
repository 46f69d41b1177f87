"""Entry point: python -m learneractions [FILE] [--check]

Reads one learner action backend dict per line and either re-encodes each as
canonical JSON or, with --check, reports only the lines that don't decode.
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from pydantic import ValidationError

from learneractions.errors import UnknownActionTypeError
from learneractions.helpers.codec import action_to_json, parse_action
from learneractions.helpers.validation import validate_backend_dict

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="learneractions",
        description="Decode newline-delimited learner action backend dicts.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report lines that fail to decode",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def _problems(line: str) -> list[str]:
    try:
        data = json.loads(line)
    except ValueError as e:
        return [f"invalid JSON: {e}"]
    return validate_backend_dict(data)


def run(lines: Iterable[str], out: TextIO, *, check: bool = False) -> int:
    """Process backend dict lines, writing results to `out`.

    Returns the process exit status: 0 if every line decoded, 1 otherwise.
    """
    failed = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        if check:
            problems = _problems(line)
            for problem in problems:
                out.write(f"line {lineno}: {problem}\n")
            failed += bool(problems)
            continue
        try:
            action = parse_action(line)
        except (ValueError, UnknownActionTypeError, ValidationError) as e:
            logger.error("line %d: %s", lineno, e)
            failed += 1
            continue
        out.write(action_to_json(action) + "\n")

    logger.info("Processed input, %d line(s) failed", failed)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    with args.file:
        return run(args.file, sys.stdout, check=args.check)


if __name__ == "__main__":
    sys.exit(main())
