"""JSON file persistence for the entry collection."""

import json
import logging
from pathlib import Path

from sd_efficiency.models import Entry, EntryCollection
from sd_efficiency.utils import ensure_directory

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path.home() / ".sd_efficiency" / "entries.json"


class EntryStore:
    """Mirror of the entry collection in a JSON file.

    The file holds a list of flat records in collection order. Storage is
    best effort: a failed save is logged and reported, never raised, and a
    malformed file loads as an empty collection.
    """

    def __init__(self, file_path: Path = DEFAULT_DATA_FILE, tolerance: float = 0.01):
        """Initialize the entry store.

        Args:
            file_path: Path to the JSON data file
            tolerance: Max allowed |total - (good + bad)| for a stored record
        """
        self.file_path = file_path
        self.tolerance = tolerance

    def load(self) -> EntryCollection:
        """Load the persisted collection.

        Returns:
            The stored entries, or an empty collection if the file is
            missing, unreadable or not a list of records
        """
        if not self.file_path.exists():
            return EntryCollection()

        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Failed to parse saved data in {self.file_path}: {e}")
            return EntryCollection()

        if not isinstance(data, list):
            logger.warning(f"Saved data in {self.file_path} is not a list, ignoring it")
            return EntryCollection()

        entries = []
        for index, record in enumerate(data):
            try:
                entries.append(Entry.from_record(record, self.tolerance))
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping malformed record #{index} in {self.file_path}: {e}")

        logger.info(f"Loaded {len(entries)} entries from {self.file_path}")
        return EntryCollection(entries)

    def save(self, collection: EntryCollection) -> bool:
        """Write the full collection to disk.

        Args:
            collection: Entries to persist, in display order

        Returns:
            True if the file was written, False on failure
        """
        try:
            ensure_directory(self.file_path.parent)
            self.file_path.write_text(
                json.dumps(
                    collection.to_records(), indent=2, ensure_ascii=False, allow_nan=False
                ),
                encoding="utf-8",
            )
            return True
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to save entries to {self.file_path}: {e}")
            return False

    def clear(self) -> bool:
        """Delete the data file, if any.

        Returns:
            True if no data file remains, False if it could not be deleted
        """
        try:
            self.file_path.unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.warning(f"Failed to delete {self.file_path}: {e}")
            return False
