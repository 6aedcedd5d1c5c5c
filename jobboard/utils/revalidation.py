"""
View invalidation signal.

Mutations announce which views went stale (e.g. "/dashboard", "/jobs/<id>").
Listeners such as a page cache or a websocket broadcaster subscribe here;
nothing is returned to the caller and listener failures never undo the
mutation that triggered them.
"""
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

_listeners: List[Callable[[str], None]] = []


def subscribe(listener: Callable[[str], None]) -> None:
    _listeners.append(listener)


def unsubscribe(listener: Callable[[str], None]) -> None:
    if listener in _listeners:
        _listeners.remove(listener)


def revalidate_path(*paths: str) -> None:
    for path in paths:
        logger.debug("Revalidating %s", path)
        for listener in list(_listeners):
            try:
                listener(path)
            except Exception:
                logger.exception("Revalidation listener failed for %s", path)
