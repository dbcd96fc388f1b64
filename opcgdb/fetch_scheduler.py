"""
Fixed-size worker pool that downloads into the on-disk cache

Tasks are dealt round-robin to workers (task index mod worker count)
and each worker runs its share one at a time. A task whose cache file
already exists is skipped without touching the network, and every
download is written to its cache file before the worker moves on, so
rerunning after a failure only repeats the work that never finished.
"""
import logging
import pathlib
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, List, NamedTuple, Sequence, TypeVar

from .errors import FetchError, OpcgdbError
from .utils import write_file_atomically

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class FetchTask(NamedTuple):
    """
    One download and the cache file it owns
    """

    key: str
    url: str
    cache_path: pathlib.Path


def partition_tasks(tasks: Sequence[T], worker_count: int) -> List[List[T]]:
    """
    Deal tasks round-robin across workers
    :param tasks: Tasks in submission order
    :param worker_count: Number of workers
    :return: One list per worker; task i lands in list i % worker_count
    """
    if worker_count < 1:
        raise ValueError(f"Worker count must be positive, got {worker_count}")

    partitions: List[List[T]] = [[] for _ in range(worker_count)]
    for index, task in enumerate(tasks):
        partitions[index % worker_count].append(task)
    return partitions


class FetchScheduler:
    """
    Runs fetch tasks on a fixed number of workers
    """

    name: str
    worker_count: int
    fetch: Callable[[str], bytes]

    def __init__(
        self, name: str, worker_count: int, fetch: Callable[[str], bytes]
    ) -> None:
        """
        :param name: Label used for worker threads and logs
        :param worker_count: Number of parallel workers
        :param fetch: Downloads a URL and returns its body, raising on failure
        """
        if worker_count < 1:
            raise ValueError(f"Worker count must be positive, got {worker_count}")
        self.name = name
        self.worker_count = worker_count
        self.fetch = fetch

    def run(self, tasks: Sequence[FetchTask]) -> List[pathlib.Path]:
        """
        Fetch every task not already cached
        :param tasks: Tasks with unique keys
        :return: Cache paths written by this call
        :raises FetchError: First failure; remaining workers stop before their next task
        """
        partitions = [
            partition for partition in partition_tasks(tasks, self.worker_count) if partition
        ]
        if not partitions:
            LOGGER.info(f"[{self.name}] Nothing to fetch")
            return []

        LOGGER.info(
            f"[{self.name}] Fetching up to {len(tasks)} items on {len(partitions)} workers"
        )

        abort = threading.Event()
        with ThreadPoolExecutor(
            max_workers=len(partitions), thread_name_prefix=self.name
        ) as executor:
            futures = [
                executor.submit(self._run_partition, partition, abort)
                for partition in partitions
            ]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            if any(future.exception() for future in done):
                abort.set()

        written: List[pathlib.Path] = []
        for future in futures:
            # Raises the first failure in partition order
            written.extend(future.result())

        LOGGER.info(f"[{self.name}] Fetched {len(written)} items")
        return written

    def _run_partition(
        self, partition: Sequence[FetchTask], abort: threading.Event
    ) -> List[pathlib.Path]:
        written = []
        for task in partition:
            if abort.is_set():
                break
            if task.cache_path.exists():
                LOGGER.debug(f"[{self.name}] {task.key} already cached")
                continue

            try:
                contents = self.fetch(task.url)
            except FetchError as error:
                # Providers only know the URL; report the task key
                raise FetchError(task.key, task.url, error.cause) from error
            except OpcgdbError:
                raise
            except Exception as error:
                raise FetchError(task.key, task.url, error) from error

            write_file_atomically(task.cache_path, contents)
            LOGGER.info(f"[{self.name}] Fetched {task.url}")
            written.append(task.cache_path)
        return written
