"""
OPCGDB simple utilities
"""
import logging
import os
import pathlib
import time
from typing import Union

from . import constants

LOGGER = logging.getLogger(__name__)


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("OPCGDB_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s (%(threadName)s): %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"opcgdb_{start_time}.log"))
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def write_file_atomically(file_path: pathlib.Path, contents: Union[str, bytes]) -> None:
    """
    Write contents so the target path either does not exist or is complete.
    Cache artifacts are trusted by existence alone, so a crash mid-write
    must never leave a truncated file at the final path.
    :param file_path: Final destination
    :param contents: Text (written as UTF-8) or raw bytes
    """
    partial_path = file_path.with_name(f".{file_path.name}.part")
    if isinstance(contents, str):
        contents = contents.encode("utf-8")
    partial_path.write_bytes(contents)
    partial_path.replace(file_path)
