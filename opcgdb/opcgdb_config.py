"""
OPCGDB Configuration Service
"""
import configparser
import logging
import os
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants


@singleton
class OpcgdbConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    opcgdb_version: str
    cache_path: pathlib.Path
    page_workers: int
    image_workers: int
    request_timeout: int
    user_agent: str

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()

        config_path = config_path or constants.CONFIG_PATH
        if config_path.is_file():
            self.logger.debug(f"Loading configuration from {config_path}")
            self.config_parser.read(str(config_path), encoding="utf-8")
        else:
            self.logger.warning(
                f"{config_path.name} was not found ({config_path}), using defaults"
            )

        self.opcgdb_version = self.get(
            "OPCGDB", "version", f"1.X.X+{constants.OPCGDB_BUILD_DATE.replace('-', '')}"
        )

        self.page_workers = self.get_int(
            "Scraper", "page_workers", constants.DEFAULT_PAGE_WORKERS
        )
        self.image_workers = self.get_int(
            "Scraper", "image_workers", constants.DEFAULT_IMAGE_WORKERS
        )
        self.request_timeout = self.get_int(
            "Scraper", "request_timeout", constants.DEFAULT_REQUEST_TIMEOUT
        )
        self.user_agent = self.get("Scraper", "user_agent", constants.DEFAULT_USER_AGENT)

        cache_path = os.environ.get("OPCGDB_CACHE_PATH") or self.get(
            "Scraper", "cache_path"
        )
        self.cache_path = (
            pathlib.Path(cache_path).expanduser().resolve()
            if cache_path
            else constants.CACHE_PATH
        )

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
