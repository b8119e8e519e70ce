"""Key-value persistence for recent searches and saved items.

This module stores both preference lists in a single JSON object file,
keyed like the mobile app's defaults store.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Set

from stylematch.domain.interfaces import PreferenceStoreInterface
from stylematch.utils import get_logger
from stylematch.utils.exceptions import PreferenceStoreError

logger = get_logger(__name__)

RECENT_SEARCHES_KEY = "recent_searches_v1"
SAVED_ITEMS_KEY = "saved_items_v1"


class InMemoryPreferenceStore(PreferenceStoreInterface):
    """Preference store that lives only for the process, used in tests."""

    def __init__(self, recent: List[str] | None = None, saved: Set[str] | None = None):
        self._recent = list(recent or [])
        self._saved = set(saved or set())

    def load_recent(self) -> List[str]:
        return list(self._recent)

    def save_recent(self, searches: List[str]) -> None:
        self._recent = list(searches)

    def load_saved(self) -> Set[str]:
        return set(self._saved)

    def save_saved(self, product_ids: Set[str]) -> None:
        self._saved = set(product_ids)


class JsonPreferenceStore(PreferenceStoreInterface):
    """Preference store backed by a JSON file.

    File layout::

        {"recent_searches_v1": ["hoodie", ...], "saved_items_v1": ["id-1", ...]}

    A missing file reads as empty preferences. A corrupt file is logged
    and also reads as empty; the next write replaces it.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: root is not an object")
            return {}
        return data

    def _write(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise PreferenceStoreError(
                f"Could not write {key}", path=str(self.path), context={"reason": str(e)}
            ) from e

    @staticmethod
    def _string_list(value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    def load_recent(self) -> List[str]:
        return self._string_list(self._read().get(RECENT_SEARCHES_KEY))

    def save_recent(self, searches: List[str]) -> None:
        self._write(RECENT_SEARCHES_KEY, list(searches))

    def load_saved(self) -> Set[str]:
        return set(self._string_list(self._read().get(SAVED_ITEMS_KEY)))

    def save_saved(self, product_ids: Set[str]) -> None:
        self._write(SAVED_ITEMS_KEY, sorted(product_ids))
