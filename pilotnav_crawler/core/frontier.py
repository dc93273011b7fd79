"""
Per-level work queues.

The crawl frontier is one FIFO queue per taxonomy level.  Airport codes are
additionally remembered in a seen set for the lifetime of the frontier, so an
airport listed on several result pages is only fetched once.  The frontier
never refills itself; that is the controller's job.
"""

from collections import deque
from enum import Enum
from typing import Iterable

from pilotnav_crawler.errors import EmptyQueue


class Level(Enum):
    CONTINENT = "continent"
    COUNTRY = "country"
    STATE = "state"
    PAGE = "page"
    AIRPORT = "airport"


class Frontier:
    def __init__(self) -> None:
        self._queues: dict[Level, deque[str]] = {level: deque() for level in Level}
        self._seen_airports: set[str] = set()

    def is_empty(self, level: Level) -> bool:
        return not self._queues[level]

    def size(self, level: Level) -> int:
        return len(self._queues[level])

    def has_seen(self, code: str) -> bool:
        return code in self._seen_airports

    def enqueue(self, level: Level, token: str) -> bool:
        """Append *token* to *level*'s queue.

        Returns ``False`` when *token* is an airport code that was already
        enqueued once.
        """
        if level is Level.AIRPORT:
            if token in self._seen_airports:
                return False
            self._seen_airports.add(token)
        self._queues[level].append(token)
        return True

    def extend(self, level: Level, tokens: Iterable[str]) -> int:
        """Enqueue every token; return how many were actually added."""
        return sum(1 for token in tokens if self.enqueue(level, token))

    def dequeue(self, level: Level) -> str:
        try:
            return self._queues[level].popleft()
        except IndexError:
            raise EmptyQueue(f"{level.value} queue is empty") from None
