"""
OPCGDB Arg Parser to determine what actions to take
"""
import argparse
import logging
import pathlib

from .consts.editions import EDITIONS

LOGGER = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to spawn up
    OPCGDB and complete the request.
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("opcgdb")

    parser.add_argument(
        "--editions",
        "-e",
        type=lambda s: s.lower(),
        nargs="*",
        metavar="EDITION",
        choices=sorted(EDITIONS),
        default=sorted(EDITIONS),
        help=f"Edition(s) to build. Defaults to all of: {', '.join(sorted(EDITIONS))}.",
    )
    parser.add_argument(
        "--cache-path",
        type=pathlib.Path,
        default=None,
        help="Directory holding the per-edition caches and card_db.jsonl outputs.",
    )
    parser.add_argument(
        "--page-workers",
        type=int,
        default=None,
        metavar="COUNT",
        help="Parallel workers for card list page downloads.",
    )
    parser.add_argument(
        "--image-workers",
        type=int,
        default=None,
        metavar="COUNT",
        help="Parallel workers for card image downloads.",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Build editions one after another instead of at the same time.",
    )

    return parser.parse_args()
