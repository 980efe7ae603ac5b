"""
Local JSON storage for nutrient readings.

The file holds a JSON array of entry objects, newest first.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from reef_nutrients.analyzers.aggregator import sort_descending
from reef_nutrients.metrics.entry import Entry

logger = logging.getLogger(__name__)


class EntryStore:
    """Loads and saves the whole entry list on every change."""

    def __init__(self, filepath: Union[str, Path]):
        """Initialize store with file path.

        Args:
            filepath: Path to the JSON data file. Created on first save.
        """
        self.filepath = Path(filepath)

    def load(self) -> List[Entry]:
        """Load entries from disk.

        Returns:
            Entries newest first. A missing file gives an empty list, and so
            does an unreadable one (logged as a warning).
        """
        if not self.filepath.exists():
            return []

        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            entries = [Entry.from_dict(item) for item in raw]
        except (OSError, json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Could not read %s, starting empty: %s", self.filepath, e)
            return []

        logger.debug("Loaded %d entries from %s", len(entries), self.filepath)
        return sort_descending(entries)

    def save(self, entries: List[Entry]) -> List[Entry]:
        """Write entries to disk, newest first.

        Returns:
            The sorted list that was written.
        """
        ordered = sort_descending(entries)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(self.filepath, 'w', encoding='utf-8') as f:
            json.dump([e.to_dict() for e in ordered], f, ensure_ascii=False, indent=2)
        logger.info("Saved %d entries to %s", len(ordered), self.filepath)
        return ordered

    def upsert(self, entry: Entry) -> List[Entry]:
        """Replace the entry with the same id, or add it."""
        entries = self.load()
        for i, existing in enumerate(entries):
            if existing.id == entry.id:
                entries[i] = entry
                break
        else:
            entries.append(entry)
        return self.save(entries)

    def delete(self, entry_id: str) -> List[Entry]:
        """Remove the entry with this id (no-op if absent)."""
        return self.save([e for e in self.load() if e.id != entry_id])
