"""Recently conjugated verbs, most recent first.

Conjugating a verb that is already in the history moves its entry to the
front with the new timestamp instead of adding a duplicate. The list is
capped at ``max_entries``; the oldest entries fall off the end.
"""

import uuid

from pydantic import TypeAdapter

from models import ConjugationError, ConjugationResult, HistoryEntry
from conjugator import settings
from conjugator.engine import conjugate

_ENTRIES_ADAPTER = TypeAdapter(list[HistoryEntry])


def _new_entry_id(timestamp: int) -> str:
    return f"{timestamp}-{uuid.uuid4().hex[:7]}"


class ConjugationHistory:
    """Bounded most-recently-used list of conjugated verbs."""

    def __init__(self, max_entries: int | None = None) -> None:
        self.max_entries = settings.HISTORY_LIMIT if max_entries is None else max_entries
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {self.max_entries}")
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[HistoryEntry]:
        """Entries, most recent first."""
        return list(self._entries)

    def get(self, entry_id: str) -> HistoryEntry | None:
        return next((e for e in self._entries if e.id == entry_id), None)

    def add(self, result: ConjugationResult) -> HistoryEntry:
        """Record a conjugation result.

        Returns:
            The new entry, or the existing entry for the same verb moved to
            the front with the result's timestamp
        """
        verb = result.verb.dictionary_form
        existing = next((e for e in self._entries if e.verb == verb), None)

        if existing is not None:
            self._entries.remove(existing)
            entry = existing.model_copy(update={"timestamp": result.timestamp})
        else:
            entry = HistoryEntry(
                id=_new_entry_id(result.timestamp),
                verb=verb,
                verb_type=result.verb.type,
                timestamp=result.timestamp,
            )

        self._entries.insert(0, entry)
        del self._entries[self.max_entries:]
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove an entry; returns False if no entry has that ID."""
        entry = self.get(entry_id)
        if entry is None:
            return False
        self._entries.remove(entry)
        return True

    def clear(self) -> None:
        self._entries.clear()

    def restore(self, entry_id: str) -> ConjugationResult | ConjugationError:
        """Conjugate the verb stored in an entry again.

        Raises:
            KeyError: No entry has that ID
        """
        entry = self.get(entry_id)
        if entry is None:
            raise KeyError(entry_id)
        return conjugate(entry.verb)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def dump_json(self) -> str:
        """Serialize the entries to a JSON array."""
        return _ENTRIES_ADAPTER.dump_json(self._entries).decode("utf-8")

    def load_json(self, data: str | bytes) -> None:
        """Replace the entries with a ``dump_json`` payload, keeping the cap.

        Raises:
            pydantic.ValidationError: The payload is not a list of entries
        """
        entries = _ENTRIES_ADAPTER.validate_json(data)
        self._entries = entries[:self.max_entries]
