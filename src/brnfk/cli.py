from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .engine import Brainfuck
from .errors import BrnfkLoadError, BrnfkRuntimeError
from .program import Program

logger = logging.getLogger(__name__)

HELP_TEXT = """brnfk - A brainfuck interpreter written in python.
USAGE: brnfk [INPUT_FILE]"""


def _configure_logging() -> None:
    level = os.environ.get('BRNFK_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(HELP_TEXT, file=sys.stderr)
        return 1

    _configure_logging()
    input_file = Path(args[0])

    try:
        data = input_file.read_bytes()
    except OSError as e:
        print(f"Failed to read input_file at {str(input_file)!r}: {e}", file=sys.stderr)
        return 1

    try:
        program = Program.load(data)
    except BrnfkLoadError as e:
        print(f"Failed to load program: {e}", file=sys.stderr)
        return 1

    logger.info("running %s (%d commands)", input_file, len(program))
    try:
        Brainfuck().run(program)
    except BrnfkRuntimeError as e:
        print(f"\nRuntime error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
