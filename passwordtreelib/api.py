"""High-level API for PasswordTreeLib.

This module provides simple, user-friendly functions for common
operations on password storages.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ._common.config import Attribute, StorageConfig, TraversalOrder
from .core.password import Password
from .core.storage import PasswordStorage
from .core.traverser import create_traverser
from .error_policies import ErrorPolicy


def build_storage(
    passwords: Iterable[Password],
    criterion: Optional[Attribute] = None,
    policy: Optional[ErrorPolicy] = None,
    config: Optional[StorageConfig] = None,
) -> PasswordStorage:
    """Create a storage and load passwords into it.

    Args:
        passwords: Records to insert, in insertion order
        criterion: Attribute that orders the storage
        policy: ErrorPolicy for records that cannot be inserted
            (FailFastPolicy when omitted)
        config: Full storage configuration

    Returns:
        The populated PasswordStorage

    Example:
        >>> storage = build_storage(
        ...     [Password("abc", occurrence=3), Password("xyz", occurrence=7)],
        ...     criterion=Attribute.OCCURRENCE,
        ... )
        >>> storage.size()
        2
    """
    storage = PasswordStorage(criterion, config=config)
    storage.add_passwords(passwords, policy=policy)
    return storage


def traverse_storage(
    storage: PasswordStorage,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[Tuple[Password, int]]:
    """Walk a storage yielding (password, depth) tuples.

    Args:
        storage: Storage to walk
        order: TraversalOrder or its string value

    Yields:
        Tuples of (password, depth) where the root has depth 0
    """
    yield from create_traverser(order).traverse(storage)


def find_passwords(
    storage: PasswordStorage,
    predicate: Callable[[Password], bool],
) -> List[Password]:
    """Find all stored passwords matching a predicate, in ascending order.

    Args:
        storage: Storage to search
        predicate: Function returning True for records to keep

    Returns:
        List of matching passwords

    Example:
        >>> weak = find_passwords(storage, lambda p: p.strength_rating < 2)
    """
    return [password for password in storage if predicate(password)]


def get_storage_stats(storage: PasswordStorage) -> Dict[str, Any]:
    """Get statistics about a storage's tree shape.

    Args:
        storage: Storage to inspect

    Returns:
        Dictionary with tree statistics
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
    }

    for node, depth in create_traverser(TraversalOrder.LEVEL_ORDER).walk(storage._get_root()):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['is_valid'] = storage.is_valid_bst()
    return stats
