"""
Custom exceptions for the repo picker.

Every error in this program is fatal: the CLI catches ``RepoPickerError``,
prints its message to stderr and exits with status 1.
"""

from typing import Optional, Dict, Any


class RepoPickerError(Exception):
    """
    Base exception for all repo picker errors.

    This is the root exception class that all other custom exceptions
    inherit from, providing common functionality and attributes.
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize repo picker error.

        Args:
            message: Error message shown to the user
            error_code: Optional error code for categorization
            context: Additional context information
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None
        }

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: {context_str}")

        if self.cause:
            parts.append(f"Caused by: {self.cause}")

        return " | ".join(parts)


class ConfigurationError(RepoPickerError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        context = kwargs.pop('context', {})
        if key:
            context['key'] = key
        super().__init__(message, error_code="CONFIG_INVALID", context=context, **kwargs)
        self.key = key


class MissingPrerequisiteError(RepoPickerError):
    """
    Raised when a required external tool is not on PATH.

    The optional GitHub CLI never raises this; its absence only routes
    enumeration to the public API.
    """

    def __init__(self, tool: str, **kwargs):
        super().__init__(
            f"'{tool}' is required but not found.",
            error_code="MISSING_TOOL",
            context={'tool': tool},
            **kwargs
        )
        self.tool = tool


class EmptyInputError(RepoPickerError):
    """Raised when a required prompt is answered with nothing."""

    def __init__(self, message: str = "No user name provided.", **kwargs):
        super().__init__(message, error_code="EMPTY_INPUT", **kwargs)


class EnumerationError(RepoPickerError):
    """
    Exception for failures while listing an account's repositories.

    Network failures and rate limiting are deliberately not told apart.
    """

    def __init__(
        self,
        message: str,
        account: Optional[str] = None,
        source: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize enumeration error.

        Args:
            message: Error message
            account: Account whose repositories were being listed
            source: Listing strategy that failed (gh, api)
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop('context', {})
        if account:
            context['account'] = account
        if source:
            context['source'] = source

        kwargs.setdefault('error_code', "ENUMERATION_FAILED")
        super().__init__(message, context=context, **kwargs)

        self.account = account
        self.source = source


class NoRepositoriesError(EnumerationError):
    """Raised when an account has no visible repositories."""

    def __init__(self, account: str, **kwargs):
        super().__init__(
            f"No repositories found for '{account}'.",
            account=account,
            error_code="NO_REPOSITORIES",
            **kwargs
        )


class InvalidRepositoryIdentifierError(RepoPickerError):
    """Raised when a listing returns something that is not ``owner/name``."""

    def __init__(self, identifier: str, **kwargs):
        super().__init__(
            f"Invalid repository identifier: {identifier!r}",
            error_code="INVALID_IDENTIFIER",
            context={'identifier': identifier},
            **kwargs
        )
        self.identifier = identifier


class InvalidSelectionError(RepoPickerError):
    """Raised when the menu reply is not made of decimal digits."""

    def __init__(self, selection: str, **kwargs):
        super().__init__(
            "Selection must be a number.",
            error_code="SELECTION_NOT_NUMBER",
            context={'selection': selection},
            **kwargs
        )
        self.selection = selection


class SelectionOutOfRangeError(RepoPickerError):
    """Raised when the menu reply is outside ``[1, count]``."""

    def __init__(self, selection: int, count: int, **kwargs):
        super().__init__(
            "Number out of range.",
            error_code="SELECTION_OUT_OF_RANGE",
            context={'selection': selection, 'count': count},
            **kwargs
        )
        self.selection = selection
        self.count = count


class MaterializationError(RepoPickerError):
    """
    Exception for failed clone or update operations.

    The message carries git's own error output untranslated.
    """

    def __init__(
        self,
        message: str,
        repository: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize materialization error.

        Args:
            message: Error message
            repository: ``owner/name`` of the repository
            operation: Operation that failed (clone, pull)
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop('context', {})
        if repository:
            context['repository'] = repository
        if operation:
            context['operation'] = operation

        kwargs.setdefault('error_code', "MATERIALIZATION_FAILED")
        super().__init__(message, context=context, **kwargs)

        self.repository = repository
        self.operation = operation
