"""
OPCGDB Edition Builder
"""
import logging
import pathlib
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence

from . import constants
from .classes.card_record import CardRecord
from .consts.editions import Edition
from .errors import DuplicateCardIdentifierError
from .fetch_scheduler import FetchScheduler, FetchTask
from .opcgdb_config import OpcgdbConfig
from .output_generator import write_card_db
from .providers.card_list_parser import parse_card_list_page
from .providers.card_list_provider import CardListProvider

LOGGER = logging.getLogger(__name__)


class EditionPaths:
    """
    Cache layout of one edition
    """

    root: pathlib.Path
    html: pathlib.Path
    images: pathlib.Path
    card_db: pathlib.Path

    def __init__(self, root: pathlib.Path) -> None:
        self.root = root
        self.html = root.joinpath(constants.HTML_DIR_NAME)
        self.images = root.joinpath(constants.IMAGES_DIR_NAME)
        self.card_db = root.joinpath(constants.CARD_DB_FILE_NAME)

    def page_path(self, page_id: int) -> pathlib.Path:
        """Cached HTML of a card list page"""
        return self.html.joinpath(f"{page_id}.html")

    def image_path(self, image_name: str) -> pathlib.Path:
        """Cached card image"""
        return self.images.joinpath(image_name)

    def create(self) -> None:
        """Make sure the cache directories exist"""
        self.html.mkdir(parents=True, exist_ok=True)
        self.images.mkdir(parents=True, exist_ok=True)


def build_page_tasks(
    edition: Edition, paths: EditionPaths, provider: CardListProvider
) -> List[FetchTask]:
    """
    Fetch tasks for every page of an edition not yet cached
    """
    return [
        FetchTask(str(page_id), provider.page_url(page_id), paths.page_path(page_id))
        for page_id, _ in edition.pages
        if not paths.page_path(page_id).exists()
    ]


def build_image_tasks(
    records: Iterable[CardRecord], paths: EditionPaths, provider: CardListProvider
) -> List[FetchTask]:
    """
    Fetch tasks for every referenced image not yet cached.
    Cards sharing an image produce a single task.
    """
    tasks: Dict[str, FetchTask] = {}
    for record in records:
        image_name = record.image_name
        if image_name in tasks or paths.image_path(image_name).exists():
            continue
        tasks[image_name] = FetchTask(
            image_name, provider.image_url(image_name), paths.image_path(image_name)
        )
    return list(tasks.values())


def parse_edition_pages(edition: Edition, paths: EditionPaths) -> List[CardRecord]:
    """
    Parse every cached page of an edition
    :param edition: Edition whose page table to walk
    :param paths: Cache layout of the edition
    :return: Records in page table order, then document order
    """
    records: List[CardRecord] = []
    for page_id, release in edition.pages:
        html = paths.page_path(page_id).read_bytes()
        page_records = parse_card_list_page(html, release, page_id)
        LOGGER.info(f"[{edition.name}] Parsed html/{page_id}.html ({len(page_records)} cards)")
        records.extend(page_records)
    return records


def sort_card_records(records: Iterable[CardRecord]) -> List[CardRecord]:
    """
    Order records by identifier
    :param records: Records of one edition
    :return: Records sorted by release kind, release number, card number
    :raises DuplicateCardIdentifierError: Two records share an identifier
    """
    records = list(records)
    seen = set()
    for record in records:
        if record.identifier in seen:
            raise DuplicateCardIdentifierError(record.identifier.format())
        seen.add(record.identifier)

    return sorted(records, key=lambda record: record.identifier.sort_key())


def build_edition(
    edition: Edition,
    cache_root: Optional[pathlib.Path] = None,
    provider: Optional[CardListProvider] = None,
    page_workers: Optional[int] = None,
    image_workers: Optional[int] = None,
) -> List[CardRecord]:
    """
    Construct an edition dataset: fetch pages, parse cards,
    fetch images, then write the sorted card_db.jsonl
    :param edition: Edition to build
    :param cache_root: Directory holding every edition's cache
    :param provider: Card list provider (one is made for the edition host if omitted)
    :param page_workers: Workers for page downloads
    :param image_workers: Workers for image downloads
    :return: Sorted records that were written
    """
    config = OpcgdbConfig()
    paths = EditionPaths((cache_root or config.cache_path).joinpath(edition.name))
    paths.create()
    provider = provider or CardListProvider(edition.host)

    LOGGER.info(f"[{edition.name}] Building edition from {edition.host}")

    page_scheduler = FetchScheduler(
        f"{edition.name}-pages", page_workers or config.page_workers, provider.fetch
    )
    page_scheduler.run(build_page_tasks(edition, paths, provider))

    records = parse_edition_pages(edition, paths)

    image_scheduler = FetchScheduler(
        f"{edition.name}-images", image_workers or config.image_workers, provider.fetch
    )
    image_scheduler.run(build_image_tasks(records, paths, provider))

    records = sort_card_records(records)
    write_card_db(paths.card_db, records)

    return records


def build_editions(
    editions: Sequence[Edition],
    cache_root: Optional[pathlib.Path] = None,
    parallel: bool = True,
    page_workers: Optional[int] = None,
    image_workers: Optional[int] = None,
) -> List[str]:
    """
    Build several editions. A failing edition is logged and skipped;
    its cache and every other edition are left intact.
    :param editions: Editions to build
    :param cache_root: Directory holding every edition's cache
    :param parallel: Build editions at the same time
    :param page_workers: Workers for page downloads
    :param image_workers: Workers for image downloads
    :return: Names of editions that failed
    """

    def _build(edition: Edition) -> bool:
        try:
            build_edition(
                edition,
                cache_root,
                page_workers=page_workers,
                image_workers=image_workers,
            )
        except Exception as error:
            LOGGER.error(f"[{edition.name}] Edition build failed: {error}", exc_info=True)
            return False
        return True

    if parallel and len(editions) > 1:
        with ThreadPoolExecutor(
            max_workers=len(editions), thread_name_prefix="edition"
        ) as executor:
            results = list(executor.map(_build, editions))
    else:
        results = [_build(edition) for edition in editions]

    return [edition.name for edition, ok in zip(editions, results) if not ok]
