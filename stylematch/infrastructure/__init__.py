"""Infrastructure adapters: catalog file loading and preference storage."""

from .catalog_loader import load_catalog
from .preference_store import InMemoryPreferenceStore, JsonPreferenceStore

__all__ = ["load_catalog", "InMemoryPreferenceStore", "JsonPreferenceStore"]
