"""PasswordNode abstraction for PasswordTreeLib.

The PasswordNode is intentionally kept simple - it's a structural cell
holding one record and two child slots. Ordering rules live in
PasswordStorage, which is the only thing that links nodes together.
"""

from typing import Optional

from .password import Password


class PasswordNode:
    """A binary tree node that stores exactly one Password.

    Each node exclusively owns its children: a node is referenced by at
    most one parent slot. Setters simply replace a slot; whatever was
    there before is the caller's to drop.
    """

    def __init__(self, password: Password,
                 left: Optional['PasswordNode'] = None,
                 right: Optional['PasswordNode'] = None):
        """Create a node.

        Args:
            password: The record this node stores
            left: Optional left child
            right: Optional right child
        """
        self._password = password
        self._left = left
        self._right = right

    def get_password(self) -> Password:
        """Return the record this node stores."""
        return self._password

    def get_left(self) -> Optional['PasswordNode']:
        return self._left

    def set_left(self, left: Optional['PasswordNode']) -> None:
        self._left = left

    def get_right(self) -> Optional['PasswordNode']:
        return self._right

    def set_right(self, right: Optional['PasswordNode']) -> None:
        self._right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def has_left_child(self) -> bool:
        return self._left is not None

    def has_right_child(self) -> bool:
        return self._right is not None

    def number_of_children(self) -> int:
        """Return how many child slots are filled (0, 1 or 2)."""
        return int(self._left is not None) + int(self._right is not None)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (f"{self.__class__.__name__}(password={self._password!r}, "
                f"children={self.number_of_children()})")
