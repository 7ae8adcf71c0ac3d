"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class StoreUnavailableError(DomainError):
    """Raised when an operation is attempted without a store handle."""

    pass


class ValidationError(DomainError):
    """Raised when a request is well-formed but cannot be applied."""

    pass


class IdentityMismatchError(ValidationError):
    """Raised when the identity in a request body disagrees with the identity in the path."""

    pass


class CategoryCycleError(ValidationError):
    """Raised when a parent reassignment would make a category its own ancestor."""

    pass


class WriteConflictError(DomainError):
    """Raised when a concurrent writer invalidated an update and the row still exists.

    The conflict is reported, not resolved: there is no retry and no merge.
    """

    pass
