"""Core abstractions for PasswordTreeLib.

This module contains the record type, the node cell, the storage tree
and the traversal strategies that walk it.
"""

from .password import Password, hash_password
from .node import PasswordNode
from .storage import PasswordStorage
from .traverser import (
    PasswordTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "Password",
    "hash_password",
    "PasswordNode",
    "PasswordStorage",
    "PasswordTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
