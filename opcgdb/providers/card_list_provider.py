"""
One Piece card list 3rd party provider
"""
import logging
from typing import Dict

import requests

from .. import constants
from ..errors import FetchError
from ..opcgdb_config import OpcgdbConfig
from .abstract_provider import AbstractProvider

LOGGER = logging.getLogger(__name__)


class CardListProvider(AbstractProvider):
    """
    Card list container for a single edition host
    """

    host: str

    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__(self._build_http_header())

    def _build_http_header(self) -> Dict[str, str]:
        return {"Accept-Language": "en"}

    def page_url(self, page_id: int) -> str:
        """
        URL of one card list page
        :param page_id: Numeric series id of the page
        :return: Page URL
        """
        return constants.CARD_LIST_PAGE_URL.format(host=self.host, page_id=page_id)

    def image_url(self, image_name: str) -> str:
        """
        URL of one card image
        :param image_name: Image file name, like "OP01-001.png"
        :return: Image URL
        """
        return constants.CARD_IMAGE_URL.format(host=self.host, image_name=image_name)

    def download(self, url: str) -> requests.Response:
        """
        GET a URL, failing on transport errors and non-2xx responses
        :param url: URL to download
        :return: Successful response
        :raises FetchError: Request failed
        """
        try:
            response = self.session.get(url, timeout=OpcgdbConfig().request_timeout)
            response.raise_for_status()
        except requests.RequestException as error:
            raise FetchError(url, url, error) from error

        self.log_download(response)
        return response

    def fetch(self, url: str) -> bytes:
        """
        Download the raw body of a URL
        :param url: URL to download
        :return: Response body
        """
        return self.download(url).content
