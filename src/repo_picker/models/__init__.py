"""
Data models for the repo picker.
"""

from .repository import RepositoryRef, MaterializationResult

__all__ = [
    "RepositoryRef",
    "MaterializationResult"
]
