"""
OPCGDB Main Executor
"""
import argparse
import logging
import sys

from opcgdb.utils import init_logger

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def dispatcher(args: argparse.Namespace) -> int:
    """
    OPCGDB Dispatcher
    :return: Process exit status
    """
    from opcgdb.consts.editions import EDITIONS
    from opcgdb.edition_builder import build_editions

    editions = [EDITIONS[name] for name in dict.fromkeys(args.editions)]
    LOGGER.info(f"Building {len(editions)} Editions: {', '.join(e.name for e in editions)}")

    failed = build_editions(
        editions,
        cache_root=args.cache_path,
        parallel=not args.sequential,
        page_workers=args.page_workers,
        image_workers=args.image_workers,
    )
    if failed:
        LOGGER.error(f"Failed to build: {', '.join(failed)}")
        return 1

    LOGGER.info("Build finished")
    return 0


def main() -> None:
    """
    OPCGDB safe main call
    """
    from opcgdb import constants
    from opcgdb.arg_parser import parse_args
    from opcgdb.opcgdb_config import OpcgdbConfig

    args = parse_args()
    LOGGER.info(
        f"Starting OPCGDB {OpcgdbConfig().opcgdb_version} on {constants.OPCGDB_BUILD_DATE}"
    )
    sys.exit(dispatcher(args))


if __name__ == "__main__":
    main()
