"""
OPCGDB Constants that cannot be changed and are hardcoded intentionally
"""
import datetime
import os
import pathlib

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("opcgdb").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("opcgdb.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("OPCGDB_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("opcgdb_logs")

CACHE_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("cache")

OPCGDB_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

CARD_LIST_PAGE_URL: str = "https://{host}.onepiece-cardgame.com/cardlist/?series={page_id}"
CARD_IMAGE_URL: str = (
    "https://{host}.onepiece-cardgame.com/images/cardlist/card/{image_name}"
)

HTML_DIR_NAME: str = "html"
IMAGES_DIR_NAME: str = "images"
CARD_DB_FILE_NAME: str = "card_db.jsonl"

DEFAULT_PAGE_WORKERS: int = 16
DEFAULT_IMAGE_WORKERS: int = 32
DEFAULT_REQUEST_TIMEOUT: int = 30
DEFAULT_USER_AGENT: str = (
    "Mozilla/5.0 (X11; Linux x86_64; opcgdb) Gecko/20100101 Firefox/120.0"
)

# Placeholder the card list prints for values that do not apply to a card
NOT_APPLICABLE: str = "-"
