# Domain Interfaces Package
"""
Abstract interfaces for external collaborators.
"""

from .preference_store_interface import PreferenceStoreInterface

__all__ = ["PreferenceStoreInterface"]
