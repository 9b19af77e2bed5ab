from __future__ import annotations

import logging
import queue
import threading
from typing import Iterable, Iterator, Optional

from ..helpers.cardset import CardSet

log = logging.getLogger(__name__)

_DONE = object()


class _ProducerError:
    __slots__ = ("exc",)

    def __init__(self, exc: BaseException):
        self.exc = exc


class CompletionStream:
    """
    Runs a completion generator on its own thread and hands boards to the
    consumer one at a time. Each handoff is a rendezvous: after a board goes
    into the one-slot queue the producer waits until the consumer has taken
    it before pulling the next board from the source, so it is never more
    than one board ahead of the consumer.

    close() (or leaving a `with` block) tells the producer to stop: it checks
    the cancel flag while waiting and exits instead of blocking on a queue
    nobody reads anymore.
    """

    def __init__(self, source: Iterable[CardSet], *, poll_interval: float = 0.05):
        self._source = source
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self._taken = threading.Event()
        self._cancel = threading.Event()
        self._poll = poll_interval
        self._finished = False
        self._thread = threading.Thread(target=self._produce, name="completion-producer", daemon=True)
        self._thread.start()

    # ---- producer side ----

    def _put(self, item: object) -> bool:
        while not self._cancel.is_set():
            try:
                self._queue.put(item, timeout=self._poll)
                return True
            except queue.Full:
                continue
        return False

    def _send(self, item: object) -> bool:
        """Put `item` and wait until the consumer has taken it."""
        self._taken.clear()
        if not self._put(item):
            return False
        while not self._cancel.is_set():
            if self._taken.wait(self._poll):
                return True
        return False

    def _produce(self) -> None:
        try:
            for completion in self._source:
                if not self._send(completion):
                    log.debug("producer cancelled")
                    return
        except Exception as exc:  # handed to the consumer, re-raised there
            self._put(_ProducerError(exc))
            return
        self._put(_DONE)

    # ---- consumer side ----

    def __iter__(self) -> Iterator[CardSet]:
        try:
            while not self._finished:
                item = self._queue.get()
                self._taken.set()
                if item is _DONE:
                    self._finished = True
                    break
                if isinstance(item, _ProducerError):
                    self._finished = True
                    raise item.exc
                yield item
        finally:
            self.close()

    def close(self, timeout: Optional[float] = None) -> None:
        self._cancel.set()
        # free a producer blocked on a full queue
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
        self._thread.join(timeout)

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def __enter__(self) -> "CompletionStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
