"""Common components shared across PasswordTreeLib.

This internal package contains configuration types used by the core
storage, the traversers and the high-level API. It should NOT be
imported directly by users.

Important: This package must NEVER import from core to avoid
circular dependencies.
"""

from .config import (
    Attribute,
    TraversalOrder,
    StorageConfig,
)

__all__ = [
    'Attribute',
    'TraversalOrder',
    'StorageConfig',
]
