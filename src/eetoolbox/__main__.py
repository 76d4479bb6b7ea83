"""CLI entry point for the EE toolbox.

Usage:
    python -m eetoolbox                          # log to ./calc_log.txt
    python -m eetoolbox --log-file results.txt   # or EETOOLBOX_LOG_FILE env
    python -m eetoolbox --verbose                # diagnostics on stderr
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from eetoolbox.result_log import DEFAULT_LOG_FILENAME, ResultLog

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="eetoolbox",
        description="Interactive electrical-engineering calculator toolbox",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("EETOOLBOX_LOG_FILE", DEFAULT_LOG_FILENAME),
        help=(
            f"File that saved results are appended to "
            f"(default: {DEFAULT_LOG_FILENAME}, or EETOOLBOX_LOG_FILE env)"
        ),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Write diagnostic logging to stderr",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    from eetoolbox.toolbox import run

    log = ResultLog(args.log_file)
    logger.debug("Result log: %s", log.path)
    return run(log)


if __name__ == "__main__":
    sys.exit(main())
