"""Command line entry point."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from .core.types import BuildConfig
from .exceptions import QemuBuilderError
from .pipeline import STAGES, run_pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qemu-builder",
        description="Build and bundle QEMU binaries and firmware into tar files.",
    )
    parser.add_argument(
        "stages",
        nargs="*",
        metavar="stage",
        help=f"stages to run (default: all). Choices: {', '.join(STAGES)}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    unknown = [stage for stage in args.stages if stage not in STAGES]
    if unknown:
        parser.error(f"unknown stage: {', '.join(unknown)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(
            run_pipeline(BuildConfig.from_env(), stages=args.stages or None)
        )
    except QemuBuilderError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
