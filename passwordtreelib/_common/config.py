"""Configuration system for PasswordTreeLib.

This module defines how users specify the ordering criterion of a
storage and the optional safety checks that run around each mutation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List


class Attribute(Enum):
    """Which password attribute orders a storage.

    A storage holds exactly one criterion for its whole lifetime. Every
    comparison and every equality test inside that storage uses it.
    """
    OCCURRENCE = "occurrence"            # How often the password was seen
    STRENGTH_RATING = "strength_rating"  # Externally supplied strength
    HASHED_PASSWORD = "hashed_password"  # SHA-1 hex digest (lexicographic)


class TraversalOrder(Enum):
    """How to walk a storage.

    In-order is the only order that yields records sorted by criterion.
    """
    IN_ORDER = "in_order"        # Ascending by criterion
    PRE_ORDER = "pre_order"      # Parent before children
    POST_ORDER = "post_order"    # Children before parent
    LEVEL_ORDER = "level_order"  # Breadth-first, level by level


@dataclass
class StorageConfig:
    """Complete configuration for a PasswordStorage.

    The criterion is fixed at construction. The remaining options are
    guards that surround insertion and removal; none of them change the
    shape the tree takes.
    """

    # Ordering
    criterion: Attribute = Attribute.OCCURRENCE

    # Safety
    verify_after_mutation: bool = False  # Run is_valid_bst() after each change
    max_size: Optional[int] = None       # Refuse inserts beyond this many records

    # Diagnostics
    verbose: bool = False  # Print warnings to stderr

    @classmethod
    def strict(cls, criterion: Attribute = Attribute.OCCURRENCE) -> 'StorageConfig':
        """Create config that verifies the tree after every mutation.

        Args:
            criterion: Attribute used to order the storage

        Returns:
            StorageConfig with verification enabled
        """
        return cls(criterion=criterion, verify_after_mutation=True)

    @classmethod
    def bounded(cls, max_size: int,
                criterion: Attribute = Attribute.OCCURRENCE) -> 'StorageConfig':
        """Create config with a record limit.

        Args:
            max_size: Maximum number of records the storage may hold
            criterion: Attribute used to order the storage

        Returns:
            StorageConfig with a capacity limit
        """
        return cls(criterion=criterion, max_size=max_size)

    def check_size_limit(self, size: int) -> bool:
        """Check if one more record fits.

        Args:
            size: Number of records currently stored

        Returns:
            True if within limits or no limit set
        """
        if self.max_size is None:
            return True
        return size < self.max_size

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.criterion, Attribute):
            errors.append(f"criterion must be an Attribute, got {self.criterion!r}")

        if self.max_size is not None:
            if isinstance(self.max_size, bool) or not isinstance(self.max_size, int):
                errors.append("max_size must be an integer")
            elif self.max_size <= 0:
                errors.append("max_size must be positive")

        return errors
