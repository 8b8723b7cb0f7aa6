"""
Exceptions raised by the workspace object model and its repository.
"""


class WorkspaceError(Exception):
    """Base class for workspace errors."""
    pass


class InvalidNameError(WorkspaceError, ValueError):
    """Raised for an empty name or a name containing a path separator."""
    pass


class DuplicateItemError(WorkspaceError):
    """Raised when a container already holds an item or view with that name."""
    pass


class ItemNotFoundError(WorkspaceError):
    """Raised when a full name or view name does not exist."""
    pass


class InvalidParentError(WorkspaceError):
    """Raised when an item is created under something that is not a folder."""
    pass


class UnsupportedOperationError(WorkspaceError):
    """Raised when an operation does not apply to the kind of item, e.g. disabling a folder."""
    pass
