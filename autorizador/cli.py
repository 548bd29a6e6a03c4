"""Command-line entry point.

Reads operations as newline-delimited JSON from a file or stdin and prints
one decision per operation to stdout:

    autorizador < operations
    autorizador operations
"""

import argparse
import sys
from typing import Optional, Sequence

from autorizador.authorizer import Authorizer
from autorizador.logging import setup_logging
from autorizador.operations import read_operations, write_decision


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="autorizador",
        description="Authorize account operations read as newline-delimited JSON.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file with one operation per line (default: stdin)",
    )
    args = parser.parse_args(argv)

    setup_logging()

    authorizer = Authorizer()
    with args.input as f:
        for decision in authorizer.run(read_operations(f)):
            write_decision(sys.stdout, decision)

    return 0


if __name__ == "__main__":
    sys.exit(main())
