"""
session.py - In-memory store for the passwords generated this session.

How this works:
1. The app creates one SessionStore at startup and hands it to the window
2. Every generated password is scored and appended as a PasswordEntry
3. Entries can be removed by id; the list and stats are derived on demand
4. Nothing is written to disk, so closing the app discards everything
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterator, Optional

from core.strength import StrengthResult, score


logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Unspecified site"

# Fixed display format (day/month/year) regardless of the system locale
DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class PasswordEntry:
    id: int
    label: str
    value: str
    strength: StrengthResult
    created_at: str


@dataclass(frozen=True)
class SessionStats:
    total: int
    strong_or_better: int
    average_length: int


class SessionStore:
    """
    Ordered collection of generated passwords.

    Usage flow:
        store = SessionStore()
        entry = store.append("GitHub", password)
        store.list(), store.stats()
        store.remove(entry.id)

    Args:
        clock: Returns the current datetime. Used for both the id and the
            display date, so tests can pin it.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._entries: list[PasswordEntry] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PasswordEntry]:
        return iter(self.list())

    def _next_id(self, now: datetime) -> int:
        # Millisecond timestamp, bumped so ids stay unique within one millisecond
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def append(self, label: Optional[str], password: str) -> PasswordEntry:
        """
        Score a password and add it to the end of the session.

        Args:
            label: Site or note shown with the entry; blank falls back to DEFAULT_LABEL
            password: The generated password

        Returns:
            The stored entry
        """
        now = self._clock()
        entry = PasswordEntry(
            id=self._next_id(now),
            label=(label or "").strip() or DEFAULT_LABEL,
            value=password,
            strength=score(password),
            created_at=now.strftime(DATE_FORMAT),
        )
        self._entries.append(entry)
        logger.debug("Stored entry %d (score %d)", entry.id, entry.strength.score)
        return entry

    def remove(self, entry_id: int) -> bool:
        """Remove an entry by id. Unknown ids are ignored; returns whether anything was removed."""
        remaining = [e for e in self._entries if e.id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        if removed:
            logger.debug("Removed entry %d", entry_id)
        return removed

    def get(self, entry_id: int) -> Optional[PasswordEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def list(self) -> tuple:
        """Snapshot of all entries in insertion order."""
        return tuple(self._entries)

    def stats(self) -> SessionStats:
        entries = self.list()
        total = len(entries)
        strong = sum(1 for e in entries if e.strength.is_strong)

        if total:
            mean = sum(len(e.value) for e in entries) / total
            # Round half up: 8.5 -> 9
            average = int(mean + 0.5)
        else:
            average = 0

        return SessionStats(total=total, strong_or_better=strong, average_length=average)
