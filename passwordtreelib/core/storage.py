"""PasswordStorage - a binary search tree of Password records.

The storage owns the root node, keeps the record count, and holds the
comparison criterion for its whole lifetime. Callers only ever see
Password records; nodes stay inside the storage.

This is a plain unbalanced BST. Height depends on insertion order, and
loading an already sorted dump gives a tree as tall as it is large, so
every walk below uses a loop or an explicit stack instead of recursing
once per level.
"""

import sys
import warnings
from typing import Iterable, Iterator, Optional, TYPE_CHECKING

from .._common.config import Attribute, StorageConfig
from ..errors import (
    CapacityExceededError,
    ConfigurationError,
    DuplicateEntryError,
    EmptyCollectionError,
    InvalidTreeError,
    NotFoundError,
    PasswordStorageError,
)
from .node import PasswordNode
from .password import Password
from .traverser import InOrderTraverser, LevelOrderTraverser, create_traverser

if TYPE_CHECKING:
    from ..error_policies import ErrorPolicy


class PasswordStorage:
    """Binary search tree of Password records ordered by one Attribute.

    Left subtrees hold strictly smaller records, right subtrees strictly
    larger ones, and no two stored records compare equal under the
    storage's criterion.

    Not thread-safe: callers sharing a storage must serialize access.

    Example:
        >>> storage = PasswordStorage(Attribute.OCCURRENCE)
        >>> storage.add_password(Password("hunter2", occurrence=5))
        >>> storage.get_best_password().password
        'hunter2'
    """

    def __init__(self, criterion: Optional[Attribute] = None,
                 config: Optional[StorageConfig] = None):
        """Create an empty storage.

        Args:
            criterion: Attribute that orders the storage
            config: Full configuration; its criterion is used when
                ``criterion`` is omitted

        Raises:
            ConfigurationError: If the config is invalid or disagrees
                with ``criterion``
        """
        if config is None:
            config = StorageConfig(criterion=criterion or Attribute.OCCURRENCE)
        elif criterion is not None and criterion != config.criterion:
            raise ConfigurationError(
                f"criterion {criterion!r} conflicts with config criterion {config.criterion!r}"
            )

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(config_errors)}")

        self._config = config
        self._criterion = config.criterion
        self._root: Optional[PasswordNode] = None
        self._size = 0

    # Queries

    def get_comparison_criteria(self) -> Attribute:
        """Return the Attribute this storage is ordered by."""
        return self._criterion

    @property
    def config(self) -> StorageConfig:
        return self._config

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        height = 0
        for _, depth in LevelOrderTraverser().walk(self._root):
            height = max(height, depth + 1)
        return height

    def lookup(self, key: Password) -> Optional[Password]:
        """Find the stored record matching ``key`` under the criterion.

        For example, with an OCCURRENCE storage, a key with occurrence 10
        finds the stored password seen 10 times, whatever its text.

        Args:
            key: Record carrying the value to search for

        Returns:
            The stored Password, or None if nothing matches

        Raises:
            TypeError: If ``key`` is not a Password
        """
        self._check_key(key)
        return self._lookup_helper(key, self._root)

    def _lookup_helper(self, key: Password,
                       current_node: Optional[PasswordNode]) -> Optional[Password]:
        while current_node is not None:
            comparison = key.compare_to(current_node.get_password(), self._criterion)
            if comparison == 0:
                return current_node.get_password()
            if comparison < 0:
                current_node = current_node.get_left()
            else:
                current_node = current_node.get_right()
        return None

    def get_best_password(self) -> Password:
        """Return the largest record under the criterion.

        Raises:
            EmptyCollectionError: If the storage is empty
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot get best password from an empty storage")

        current = self._root
        while current.has_right_child():
            current = current.get_right()
        return current.get_password()

    def get_worst_password(self) -> Password:
        """Return the smallest record under the criterion.

        Raises:
            EmptyCollectionError: If the storage is empty
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot get worst password from an empty storage")

        current = self._root
        while current.has_left_child():
            current = current.get_left()
        return current.get_password()

    def is_valid_bst(self) -> bool:
        """Check that every record sits strictly inside its ancestors' bounds.

        A node is valid when its record lies strictly between the bounds
        inherited from its ancestors and both of its subtrees are valid
        under the bounds it narrows for them.

        Returns:
            True if the whole tree is correctly ordered
        """
        return self._is_valid_bst_helper(self._root,
                                         Password.min_password(),
                                         Password.max_password())

    def _is_valid_bst_helper(self, current_node: Optional[PasswordNode],
                             lower_bound: Password, upper_bound: Password) -> bool:
        # Stack stores (node, lower, upper); empty subtrees break no rules
        stack = [(current_node, lower_bound, upper_bound)]
        while stack:
            node, lower, upper = stack.pop()
            if node is None:
                continue

            current = node.get_password()
            if (current.compare_to(lower, self._criterion) <= 0
                    or current.compare_to(upper, self._criterion) >= 0):
                return False

            stack.append((node.get_right(), current, upper))
            stack.append((node.get_left(), lower, current))
        return True

    def to_ordered_string(self) -> str:
        """Return every record in ascending order, one per line.

        Each line, including the last, ends with a newline; an empty
        storage gives an empty string.
        """
        return "".join(f"{password}\n" for password in self)

    def traverse(self, order="in_order") -> Iterator[Password]:
        """Yield records in the given TraversalOrder (or its string value)."""
        for password, _ in create_traverser(order).traverse(self):
            yield password

    # Mutations

    def add_password(self, to_add: Password) -> None:
        """Insert a record.

        Args:
            to_add: The password to store

        Raises:
            DuplicateEntryError: If an equal record is already stored
            CapacityExceededError: If the storage is at its max_size
            TypeError: If ``to_add`` is not a Password
            ValueError: If ``to_add`` is a min/max sentinel
        """
        self._check_insertable(to_add)

        if self.is_empty():
            self._root = PasswordNode(to_add)
            self._size += 1
        else:
            self._add_password_helper(to_add, self._root)

        self._verify("insert", to_add)

    def _add_password_helper(self, to_add: Password, current_node: PasswordNode) -> bool:
        while True:
            result = to_add.compare_to(current_node.get_password(), self._criterion)

            if result < 0 and not current_node.has_left_child():
                current_node.set_left(PasswordNode(to_add))
                self._size += 1
                return True
            if result > 0 and not current_node.has_right_child():
                current_node.set_right(PasswordNode(to_add))
                self._size += 1
                return True

            if result < 0:
                current_node = current_node.get_left()
            elif result > 0:
                current_node = current_node.get_right()
            else:
                # Equal records are rejected by _check_insertable
                return False

    def add_passwords(self, passwords: Iterable[Password],
                      policy: Optional['ErrorPolicy'] = None) -> int:
        """Insert many records, handing failures to an error policy.

        With the default FailFastPolicy the whole batch (duplicates within
        the batch included) is checked first, so a failing load inserts
        nothing.

        Args:
            passwords: Records to insert, in insertion order
            policy: ErrorPolicy deciding what a failed record does

        Returns:
            Number of records inserted
        """
        from ..error_policies import FailFastPolicy

        policy = policy or FailFastPolicy()
        records = list(passwords)

        if policy.stop_on_first_error:
            self._check_batch(records, policy)

        inserted = 0
        for record in records:
            try:
                self.add_password(record)
            except (PasswordStorageError, TypeError, ValueError) as error:
                if isinstance(error, InvalidTreeError):
                    raise
                policy.handle(error, record)
                continue
            inserted += 1
        return inserted

    def _check_batch(self, records, policy: 'ErrorPolicy') -> None:
        pending = set()
        for record in records:
            try:
                self._check_insertable(record, pending=len(pending))
                key = record.get_attribute(self._criterion)
                if key in pending:
                    raise DuplicateEntryError(
                        f"Password with {self._criterion.value} {key!r} appears twice in batch"
                    )
            except (PasswordStorageError, TypeError, ValueError) as error:
                policy.handle(error, record)
                raise
            pending.add(key)

    def remove_password(self, to_remove: Password) -> Password:
        """Remove the record matching ``to_remove`` under the criterion.

        Args:
            to_remove: Record carrying the value to remove

        Returns:
            The stored record that was removed

        Raises:
            NotFoundError: If no stored record matches
            TypeError: If ``to_remove`` is not a Password
        """
        stored = self.lookup(to_remove)
        if stored is None:
            self._warn(f"Cannot remove missing password {to_remove}")
            raise NotFoundError(f"No password with {self._criterion.value} "
                                f"{to_remove.get_attribute(self._criterion)!r} in storage")

        self._root = self._remove_password_helper(to_remove, self._root)
        self._size -= 1

        self._verify("remove", to_remove)
        return stored

    def _remove_password_helper(self, to_remove: Password,
                                current_node: Optional[PasswordNode]) -> Optional[PasswordNode]:
        """Remove ``to_remove`` from a subtree.

        Returns:
            The new root of this subtree. This may still be current_node,
            or it may have changed.
        """
        parent = None
        went_left = False
        matched = current_node
        while matched is not None:
            result = to_remove.compare_to(matched.get_password(), self._criterion)
            if result == 0:
                break
            parent = matched
            went_left = result < 0
            matched = matched.get_left() if went_left else matched.get_right()

        if matched is None:
            return current_node

        replacement = self._replace_matched(matched)
        if parent is None:
            return replacement
        if went_left:
            parent.set_left(replacement)
        else:
            parent.set_right(replacement)
        return current_node

    def _replace_matched(self, matched: PasswordNode) -> Optional[PasswordNode]:
        """Return what takes the matched node's slot once it is removed."""
        children = matched.number_of_children()
        if children == 0:
            return None
        if children == 1:
            if matched.has_left_child():
                return matched.get_left()
            return matched.get_right()

        # Two children: adopt the predecessor's record, then drop its
        # old node from the left subtree. That node has no right child,
        # so the nested removal stops at the 0/1-child cases.
        predecessor = self.find_predecessor(matched)
        replacement = PasswordNode(predecessor,
                                   matched.get_left(),
                                   matched.get_right())
        matched.set_left(None)
        matched.set_right(None)
        replacement.set_left(self._remove_password_helper(predecessor, replacement.get_left()))
        return replacement

    def find_predecessor(self, current_node: PasswordNode) -> Password:
        """Return the in-order predecessor record of a node.

        That is the rightmost record of the node's left subtree.

        Args:
            current_node: Node with a left child

        Raises:
            ValueError: If the node has no left child
        """
        if not current_node.has_left_child():
            raise ValueError("Node has no left subtree, so no predecessor below it")

        current = current_node.get_left()
        while current.has_right_child():
            current = current.get_right()
        return current.get_password()

    def clear(self) -> None:
        """Discard every record."""
        self._root = None
        self._size = 0

    # Deprecated camelCase names

    def addPassword(self, to_add: Password) -> None:
        warnings.warn(
            "addPassword() is deprecated and will be removed in v1.0.0. "
            "Use add_password() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        self.add_password(to_add)

    def removePassword(self, to_remove: Password) -> Password:
        warnings.warn(
            "removePassword() is deprecated and will be removed in v1.0.0. "
            "Use remove_password() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.remove_password(to_remove)

    def getBestPassword(self) -> Password:
        warnings.warn(
            "getBestPassword() is deprecated and will be removed in v1.0.0. "
            "Use get_best_password() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.get_best_password()

    def getWorstPassword(self) -> Password:
        warnings.warn(
            "getWorstPassword() is deprecated and will be removed in v1.0.0. "
            "Use get_worst_password() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.get_worst_password()

    def isValidBST(self) -> bool:
        warnings.warn(
            "isValidBST() is deprecated and will be removed in v1.0.0. "
            "Use is_valid_bst() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.is_valid_bst()

    # Helpers

    def _get_root(self) -> Optional[PasswordNode]:
        """Return the root node for traversers and test helpers.

        Nodes returned here must only be read, never relinked.
        """
        return self._root

    def _check_key(self, key: Password) -> None:
        if not isinstance(key, Password):
            raise TypeError(f"Expected Password, got {type(key).__name__}")

    def _check_insertable(self, record: Password, pending: int = 0) -> None:
        self._check_key(record)
        if record.is_sentinel():
            raise ValueError("Sentinel passwords cannot be stored")
        if self.lookup(record) is not None:
            self._warn(f"Rejected duplicate password {record}")
            raise DuplicateEntryError(
                f"Password with {self._criterion.value} "
                f"{record.get_attribute(self._criterion)!r} is already in storage"
            )
        if not self._config.check_size_limit(self._size + pending):
            self._warn(f"Storage is full ({self._config.max_size} passwords)")
            raise CapacityExceededError(
                f"Storage already holds its maximum of {self._config.max_size} passwords"
            )

    def _verify(self, operation: str, record: Password) -> None:
        if self._config.verify_after_mutation and not self.is_valid_bst():
            raise InvalidTreeError(f"Tree is not a valid BST after {operation} of {record}")

    def _warn(self, message: str) -> None:
        if self._config.verbose:
            print(f"\nWARNING: {message}", file=sys.stderr)

    # Python protocol

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Password]:
        """Iterate records in ascending order."""
        for password, _ in InOrderTraverser().traverse(self):
            yield password

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, Password):
            return False
        return self.lookup(key) is not None

    def __str__(self) -> str:
        return self.to_ordered_string()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(criterion={self._criterion.name}, "
                f"size={self._size})")
