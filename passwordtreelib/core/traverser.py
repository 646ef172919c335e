"""Tree traversal strategies for PasswordTreeLib.

Traversers implement different orders for walking a PasswordStorage.
They only read nodes; nothing here links or unlinks children.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

from .._common.config import TraversalOrder
from .node import PasswordNode
from .password import Password

if TYPE_CHECKING:
    from .storage import PasswordStorage


class PasswordTraverser(ABC):
    """Abstract base class for traversal strategies.

    Subclasses implement ``walk`` over raw nodes; ``traverse`` is the
    public entry point and only ever hands out records.
    """

    @abstractmethod
    def walk(self, root: Optional[PasswordNode],
             depth: int = 0) -> Iterator[Tuple[PasswordNode, int]]:
        """Walk the subtree rooted at ``root``.

        Args:
            root: Subtree root (None for an empty tree)
            depth: Depth assigned to ``root``

        Yields:
            Tuples of (node, depth)
        """
        pass

    def traverse(self, storage: 'PasswordStorage') -> Iterator[Tuple[Password, int]]:
        """Traverse a storage.

        Args:
            storage: Storage to walk

        Yields:
            Tuples of (password, depth) where the root has depth 0
        """
        for node, depth in self.walk(storage._get_root()):
            yield (node.get_password(), depth)


class InOrderTraverser(PasswordTraverser):
    """Left subtree, node, right subtree.

    Yields records in ascending order under the storage's criterion.
    """

    def walk(self, root: Optional[PasswordNode],
             depth: int = 0) -> Iterator[Tuple[PasswordNode, int]]:
        # Stack stores (node, depth) for nodes whose left side is pending
        stack: List[Tuple[PasswordNode, int]] = []
        current, current_depth = root, depth
        while stack or current is not None:
            while current is not None:
                stack.append((current, current_depth))
                current, current_depth = current.get_left(), current_depth + 1
            node, node_depth = stack.pop()
            yield (node, node_depth)
            current, current_depth = node.get_right(), node_depth + 1


class PreOrderTraverser(PasswordTraverser):
    """Parent before children.

    Re-inserting records in this order into an empty storage with the
    same criterion rebuilds an identically shaped tree.
    """

    def walk(self, root: Optional[PasswordNode],
             depth: int = 0) -> Iterator[Tuple[PasswordNode, int]]:
        if root is None:
            return

        stack: List[Tuple[PasswordNode, int]] = [(root, depth)]
        while stack:
            node, node_depth = stack.pop()
            yield (node, node_depth)
            # Right first so the left subtree is popped first
            if node.has_right_child():
                stack.append((node.get_right(), node_depth + 1))
            if node.has_left_child():
                stack.append((node.get_left(), node_depth + 1))


class PostOrderTraverser(PasswordTraverser):
    """Children before parent."""

    def walk(self, root: Optional[PasswordNode],
             depth: int = 0) -> Iterator[Tuple[PasswordNode, int]]:
        if root is None:
            return

        # Node, right, left collected then reversed gives left, right, node
        visited: List[Tuple[PasswordNode, int]] = []
        stack: List[Tuple[PasswordNode, int]] = [(root, depth)]
        while stack:
            node, node_depth = stack.pop()
            visited.append((node, node_depth))
            if node.has_left_child():
                stack.append((node.get_left(), node_depth + 1))
            if node.has_right_child():
                stack.append((node.get_right(), node_depth + 1))
        yield from reversed(visited)


class LevelOrderTraverser(PasswordTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    def walk(self, root: Optional[PasswordNode],
             depth: int = 0) -> Iterator[Tuple[PasswordNode, int]]:
        if root is None:
            return

        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[PasswordNode, int]] = deque([(root, depth)])
        while queue:
            node, node_depth = queue.popleft()
            yield (node, node_depth)
            if node.has_left_child():
                queue.append((node.get_left(), node_depth + 1))
            if node.has_right_child():
                queue.append((node.get_right(), node_depth + 1))


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> PasswordTraverser:
    """Factory function to create a traverser.

    Args:
        order: TraversalOrder member or its string value ("in_order", ...)

    Returns:
        Appropriate PasswordTraverser instance

    Raises:
        ValueError: If order is not recognized
    """
    if isinstance(order, str):
        try:
            order = TraversalOrder(order.lower())
        except ValueError:
            valid = ', '.join(o.value for o in TraversalOrder)
            raise ValueError(f"Unknown traversal order: {order!r}. Valid options: {valid}")

    traverser_class = _TRAVERSERS.get(order)
    if traverser_class is None:
        raise ValueError(f"Unknown traversal order: {order!r}")
    return traverser_class()
