"""
Abstract interface for user preference persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Set


class PreferenceStoreInterface(ABC):
    """
    Abstract base class for preference stores.

    Holds two independent small lists: recent search strings (ordered,
    most recent first) and saved product ids (unordered). Stores are read
    once at startup and written on every mutation.
    """

    @abstractmethod
    def load_recent(self) -> List[str]:
        """Return persisted recent searches, most recent first."""
        pass

    @abstractmethod
    def save_recent(self, searches: List[str]) -> None:
        """
        Persist the recent search list.

        Args:
            searches: Recent search strings, most recent first.
        """
        pass

    @abstractmethod
    def load_saved(self) -> Set[str]:
        """Return persisted saved product ids."""
        pass

    @abstractmethod
    def save_saved(self, product_ids: Set[str]) -> None:
        """
        Persist the saved product ids.

        Args:
            product_ids: Ids of the products the user saved.
        """
        pass
