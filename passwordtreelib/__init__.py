"""PasswordTreeLib - Ordered In-Memory Password Storage.

PasswordTreeLib keeps password records in a binary search tree ordered by
one attribute chosen when the storage is created (occurrence count,
strength rating, or hash).

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from passwordtreelib import PasswordStorage, Password, Attribute

    storage = PasswordStorage(Attribute.OCCURRENCE)
    storage.add_password(Password("123456", occurrence=42))
    storage.get_best_password()
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from ._common.config import Attribute, TraversalOrder, StorageConfig
from .core import (
    Password,
    PasswordNode,
    PasswordStorage,
    PasswordTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .errors import (
    PasswordStorageError,
    DuplicateEntryError,
    NotFoundError,
    EmptyCollectionError,
    ConfigurationError,
    CapacityExceededError,
    InvalidTreeError,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .api import (
    build_storage,
    traverse_storage,
    find_passwords,
    get_storage_stats,
)

__all__ = [
    "__version__",
    # Config
    "Attribute",
    "TraversalOrder",
    "StorageConfig",
    # Core
    "Password",
    "PasswordNode",
    "PasswordStorage",
    "PasswordTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Errors
    "PasswordStorageError",
    "DuplicateEntryError",
    "NotFoundError",
    "EmptyCollectionError",
    "ConfigurationError",
    "CapacityExceededError",
    "InvalidTreeError",
    # Policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    # API
    "build_storage",
    "traverse_storage",
    "find_passwords",
    "get_storage_stats",
]
