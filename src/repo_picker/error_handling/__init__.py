"""
Error types for the repo picker.
"""

from .exceptions import (
    RepoPickerError, ConfigurationError, MissingPrerequisiteError,
    EmptyInputError, EnumerationError, NoRepositoriesError,
    InvalidRepositoryIdentifierError, InvalidSelectionError,
    SelectionOutOfRangeError, MaterializationError
)

__all__ = [
    "RepoPickerError",
    "ConfigurationError",
    "MissingPrerequisiteError",
    "EmptyInputError",
    "EnumerationError",
    "NoRepositoriesError",
    "InvalidRepositoryIdentifierError",
    "InvalidSelectionError",
    "SelectionOutOfRangeError",
    "MaterializationError"
]
