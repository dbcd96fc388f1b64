"""
API for how providers need to interact with other classes
"""
import abc
import logging
import threading
from typing import Any, Dict

import requests

from ..opcgdb_config import OpcgdbConfig

LOGGER = logging.getLogger(__name__)


class AbstractProvider(abc.ABC):
    """
    Abstract class to indicate what other providers should provide
    """

    session_header: Dict[str, str]

    def __init__(self, headers: Dict[str, str]):
        super().__init__()
        self.session_header = headers
        self.__sessions = threading.local()

    @property
    def session(self) -> requests.Session:
        """
        Session owned by the calling thread.
        Fetch workers share a provider but never a requests.Session.
        """
        session = getattr(self.__sessions, "session", None)
        if session is None:
            session = self.__build_session()
            self.__sessions.session = session
        return session

    # Abstract Methods
    @abc.abstractmethod
    def _build_http_header(self) -> Dict[str, str]:
        """
        Construct the HTTP header sent with every request
        :return: HTTP header
        """

    @abc.abstractmethod
    def download(self, url: str) -> Any:
        """
        Download an object from a service
        :param url: URL to download content from
        """

    # Class Methods
    @classmethod
    def get_class_name(cls) -> str:
        """
        Get the name of the calling class
        :return: Calling class name
        """
        return cls.__name__

    @staticmethod
    def log_download(response: requests.Response) -> None:
        """
        Log how the URL was acquired
        :param response: Response from Server
        """
        LOGGER.debug(f"Downloaded {response.url} ({response.status_code})")

    # Private Methods
    def __build_session(self) -> requests.Session:
        """
        New session carrying the provider headers.
        Failed requests are not retried; the caller decides whether to rerun.
        """
        session = requests.Session()
        session.headers.update(
            {"User-Agent": OpcgdbConfig().user_agent, **self.session_header}
        )
        return session
