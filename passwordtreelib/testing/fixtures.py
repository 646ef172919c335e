"""Test fixtures for PasswordTreeLib consumers.

These fixtures provide controlled access to internal tree structure for
testing purposes without exposing nodes as part of the public API.
"""

from typing import Any, Dict, List, Optional

from .._common.config import Attribute
from ..core.node import PasswordNode
from ..core.password import Password
from ..core.storage import PasswordStorage


class StorageTestHelper:
    """Public test fixture for structural verification.

    This class provides a stable testing interface for checking the shape
    of a PasswordStorage: how many nodes are really reachable, whether any
    node hangs off two parents, and where a record sits.

    Example:
        storage = PasswordStorage(Attribute.OCCURRENCE)
        helper = StorageTestHelper(storage)

        storage.remove_password(some_password)
        assert not helper.has_aliasing()
        assert helper.count_reachable_nodes() == storage.size()
    """

    def __init__(self, storage: PasswordStorage):
        """Initialize with the storage to inspect.

        Args:
            storage: The storage under test
        """
        self._storage = storage

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level structural state for testing.

        Returns:
            Dictionary containing:
            - size: What the storage reports
            - reachable_nodes: Distinct nodes reachable from the root
            - aliased_nodes: Nodes reachable through more than one parent
            - height: Longest root-to-leaf path in nodes
            - is_valid: Result of is_valid_bst()
        """
        return {
            'size': self._storage.size(),
            'reachable_nodes': self.count_reachable_nodes(),
            'aliased_nodes': len(self.find_aliased_nodes()),
            'height': self._storage.height(),
            'is_valid': self._storage.is_valid_bst(),
        }

    def count_reachable_nodes(self) -> int:
        """Count distinct node objects reachable from the root."""
        seen = set()
        for node in self._walk_links():
            seen.add(id(node))
        return len(seen)

    def find_aliased_nodes(self) -> List[PasswordNode]:
        """Return nodes referenced by more than one parent slot.

        The walk does not descend into a node twice, so a cycle is
        reported instead of looping forever.
        """
        seen = set()
        aliased = []
        for node in self._walk_links():
            if id(node) in seen:
                aliased.append(node)
            else:
                seen.add(id(node))
        return aliased

    def has_aliasing(self) -> bool:
        """Check if any node is reachable from two places."""
        return len(self.find_aliased_nodes()) > 0

    def get_root_password(self) -> Optional[Password]:
        """Return the record at the root, or None when empty."""
        root = self._storage._get_root()
        return root.get_password() if root is not None else None

    def get_depth(self, key: Password) -> Optional[int]:
        """Return the depth of the node matching ``key`` (root = 0).

        Args:
            key: Record carrying the value to find

        Returns:
            Depth of the matching node, or None if not stored
        """
        criterion = self._storage.get_comparison_criteria()
        current = self._storage._get_root()
        depth = 0
        while current is not None:
            result = key.compare_to(current.get_password(), criterion)
            if result == 0:
                return depth
            current = current.get_left() if result < 0 else current.get_right()
            depth += 1
        return None

    def get_shape(self) -> Any:
        """Return the tree as nested tuples of criterion values.

        Each node becomes ``(value, left_shape, right_shape)`` and an empty
        slot becomes None, which makes exact structure easy to assert.
        """
        criterion = self._storage.get_comparison_criteria()

        def _shape(node: Optional[PasswordNode]) -> Any:
            if node is None:
                return None
            return (node.get_password().get_attribute(criterion),
                    _shape(node.get_left()),
                    _shape(node.get_right()))

        return _shape(self._storage._get_root())

    def install_root(self, root: Optional[PasswordNode], size: int) -> None:
        """Replace the storage's tree with a hand-built one.

        Only meant for testing checks such as is_valid_bst() against trees
        that the public API can never produce.

        Args:
            root: Root of the hand-built tree
            size: Record count the storage should report
        """
        self._storage._root = root
        self._storage._size = size

    def _walk_links(self):
        """Yield the node behind every filled slot, root first."""
        root = self._storage._get_root()
        if root is None:
            return

        expanded = set()
        stack = [root]
        while stack:
            node = stack.pop()
            yield node
            if id(node) in expanded:
                continue
            expanded.add(id(node))
            if node.has_right_child():
                stack.append(node.get_right())
            if node.has_left_child():
                stack.append(node.get_left())


def make_passwords(values, criterion: Attribute = Attribute.OCCURRENCE) -> List[Password]:
    """Build one Password per value, ordered by ``criterion``.

    Handy for scenarios written as plain lists of numbers.

    Args:
        values: Occurrence counts or strength ratings
        criterion: Which attribute the values belong to

    Returns:
        List of Password records named ``pw<value>``
    """
    if criterion is Attribute.OCCURRENCE:
        return [Password(f"pw{value}", occurrence=value) for value in values]
    if criterion is Attribute.STRENGTH_RATING:
        return [Password(f"pw{value}", strength_rating=value) for value in values]
    raise ValueError(f"make_passwords does not support {criterion!r}")
