"""Exception types raised by PasswordTreeLib.

A lookup that finds nothing is not an error and returns None. Everything
below is raised before the tree is touched, so a failed call never leaves
a storage half-modified.
"""


class PasswordStorageError(Exception):
    """Base class for all storage errors."""
    pass


class DuplicateEntryError(PasswordStorageError, ValueError):
    """Raised when inserting a record equal to one already stored."""
    pass


class NotFoundError(PasswordStorageError, LookupError):
    """Raised when removing a record that is not stored."""
    pass


class EmptyCollectionError(PasswordStorageError, LookupError):
    """Raised when asking an empty storage for its best or worst record."""
    pass


class ConfigurationError(PasswordStorageError):
    """Raised when a StorageConfig cannot be used."""
    pass


class CapacityExceededError(PasswordStorageError):
    """Raised when inserting into a storage that is already at max_size."""
    pass


class InvalidTreeError(PasswordStorageError):
    """Raised by verified storages when a mutation breaks BST ordering."""
    pass
