"""
OPCGDB output generator to write out contents to file & accessory methods
"""
import logging
import pathlib
from typing import Iterable, List

from .classes.card_record import CardRecord
from .utils import write_file_atomically

LOGGER = logging.getLogger(__name__)


def serialize_card_records(records: Iterable[CardRecord]) -> str:
    """
    One compact JSON object per line, in the order given
    :param records: Records to serialize
    :return: JSON Lines document
    """
    return "".join(f"{record.to_json_line()}\n" for record in records)


def write_card_db(file_path: pathlib.Path, records: Iterable[CardRecord]) -> None:
    """
    Write an edition dataset, fully replacing any previous version
    :param file_path: Destination, normally <edition-root>/card_db.jsonl
    :param records: Records, already sorted
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    contents = serialize_card_records(records)
    write_file_atomically(file_path, contents)
    LOGGER.info(f"Wrote {contents.count(chr(10))} cards to {file_path}")


def load_card_db(file_path: pathlib.Path) -> List[CardRecord]:
    """
    Read an edition dataset back into records
    :param file_path: card_db.jsonl to read
    :return: Records in file order
    """
    with file_path.open(encoding="utf-8") as file:
        return [
            CardRecord.model_validate_json(line) for line in file if line.strip()
        ]
