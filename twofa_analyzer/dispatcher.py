"""
Concurrent scanning of several folders.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence

from .logging_config import get_logger
from .results import FolderResult
from .scanner import scan_folder

logger = get_logger(__name__)


def scan_all(folder_paths: Sequence[str]) -> List[FolderResult]:
    """Scan every folder in parallel, one worker thread per folder.

    Returns results in input order: ``result[i]`` belongs to
    ``folder_paths[i]``. Blocks until every folder has been scanned.
    """
    if not folder_paths:
        return []

    results: List[Optional[FolderResult]] = [None] * len(folder_paths)

    def run(index: int, path: str) -> None:
        results[index] = scan_folder(path)

    done = 0
    with ThreadPoolExecutor(
        max_workers=len(folder_paths), thread_name_prefix="folder-scan"
    ) as executor:
        futures = {
            executor.submit(run, index, path): path for index, path in enumerate(folder_paths)
        }
        for future in as_completed(futures):
            future.result()
            done += 1
            logger.debug("  %d/%d folders scanned (%s)", done, len(folder_paths), futures[future])

    return results
