"""Password record for PasswordTreeLib.

A Password is a plain immutable value. It knows how to compare itself to
another Password on a single Attribute, which is all the storage ever
asks of it. Strength rating is carried as given; nothing here scores it.
"""

import hashlib
import math
from typing import Any, Union

from .._common.config import Attribute


def hash_password(password: str) -> str:
    """Return the SHA-1 hex digest used for the HASHED_PASSWORD attribute."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest()


class Password:
    """A password together with the attributes a storage can order by.

    Two Passwords are only ever compared under one Attribute at a time;
    records that differ in every other field are still "equal" to a
    storage ordered by an attribute they share.

    The min_password() and max_password() sentinels sit below and above
    every real Password under every Attribute. The validity check uses
    them to seed its bounds.
    """

    # Sentinel markers: -1 below everything, +1 above everything
    _REGULAR = 0
    _MIN = -1
    _MAX = 1

    def __init__(self, password: str, occurrence: int = 0,
                 strength_rating: Union[int, float] = 0.0):
        """Create a password record.

        Args:
            password: The password text (non-empty)
            occurrence: How many times this password was seen
            strength_rating: Externally supplied strength value

        Raises:
            ValueError: If any field is out of range
        """
        if not isinstance(password, str) or not password:
            raise ValueError("password must be a non-empty string")
        if isinstance(occurrence, bool) or not isinstance(occurrence, int):
            raise ValueError("occurrence must be an integer")
        if occurrence < 0:
            raise ValueError("occurrence cannot be negative")
        if isinstance(strength_rating, bool) or not isinstance(strength_rating, (int, float)):
            raise ValueError("strength_rating must be a number")
        if not math.isfinite(strength_rating):
            raise ValueError("strength_rating must be finite")
        if strength_rating < 0:
            raise ValueError("strength_rating cannot be negative")

        self._password = password
        self._occurrence = occurrence
        self._strength_rating = float(strength_rating)
        self._hashed_password = hash_password(password)
        self._bound = Password._REGULAR

    @classmethod
    def _raw(cls, password: str, occurrence: int, strength_rating: float,
             hashed_password: str, bound: int) -> 'Password':
        """Build a record without validation (probes and sentinels)."""
        record = cls.__new__(cls)
        record._password = password
        record._occurrence = occurrence
        record._strength_rating = strength_rating
        record._hashed_password = hashed_password
        record._bound = bound
        return record

    @classmethod
    def probe(cls, criterion: Attribute, value: Any) -> 'Password':
        """Build a search key that only carries the criterion's value.

        Useful for lookup() and remove_password() when the caller knows
        e.g. an occurrence count but not the password behind it.

        Args:
            criterion: Attribute the value belongs to
            value: Value for that attribute

        Returns:
            Password usable as a key under ``criterion``

        Raises:
            ValueError: If the value cannot belong to that attribute
        """
        if criterion is Attribute.OCCURRENCE:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("occurrence probe must be an integer")
            return cls._raw("", value, 0.0, "", cls._REGULAR)
        if criterion is Attribute.STRENGTH_RATING:
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not math.isfinite(value)):
                raise ValueError("strength_rating probe must be a finite number")
            return cls._raw("", 0, float(value), "", cls._REGULAR)
        if criterion is Attribute.HASHED_PASSWORD:
            if not isinstance(value, str):
                raise ValueError("hashed_password probe must be a string")
            return cls._raw("", 0, 0.0, value, cls._REGULAR)
        raise ValueError(f"Unknown criterion: {criterion!r}")

    @classmethod
    def min_password(cls) -> 'Password':
        """Sentinel that compares less than any real password."""
        return cls._raw("", 0, 0.0, "", cls._MIN)

    @classmethod
    def max_password(cls) -> 'Password':
        """Sentinel that compares greater than any real password."""
        return cls._raw("", 0, 0.0, "", cls._MAX)

    @property
    def password(self) -> str:
        return self._password

    @property
    def occurrence(self) -> int:
        return self._occurrence

    @property
    def strength_rating(self) -> float:
        return self._strength_rating

    @property
    def hashed_password(self) -> str:
        return self._hashed_password

    def is_sentinel(self) -> bool:
        """Check if this record is min_password() or max_password()."""
        return self._bound != Password._REGULAR

    def get_attribute(self, criterion: Attribute) -> Any:
        """Return the value this record is ordered by under ``criterion``."""
        if criterion is Attribute.OCCURRENCE:
            return self._occurrence
        if criterion is Attribute.STRENGTH_RATING:
            return self._strength_rating
        if criterion is Attribute.HASHED_PASSWORD:
            return self._hashed_password
        raise ValueError(f"Unknown criterion: {criterion!r}")

    def compare_to(self, other: 'Password', criterion: Attribute) -> int:
        """Three-way comparison on a single attribute.

        Args:
            other: Password to compare against
            criterion: Attribute to compare on

        Returns:
            Negative if self < other, zero if equal, positive if self > other
        """
        # Sentinels win regardless of attribute values
        if self._bound != Password._REGULAR or other._bound != Password._REGULAR:
            return (self._bound > other._bound) - (self._bound < other._bound)

        mine = self.get_attribute(criterion)
        theirs = other.get_attribute(criterion)
        return (mine > theirs) - (mine < theirs)

    def equals(self, other: 'Password', criterion: Attribute) -> bool:
        """Check equality under a single attribute."""
        return self.compare_to(other, criterion) == 0

    def __str__(self) -> str:
        if self._bound == Password._MIN:
            return "<min password>"
        if self._bound == Password._MAX:
            return "<max password>"
        return (f"{self._password}({self._hashed_password}): "
                f"{self._occurrence} [{self._strength_rating}]")

    def __repr__(self) -> str:
        if self.is_sentinel():
            return f"Password({str(self)})"
        return (f"Password(password={self._password!r}, "
                f"occurrence={self._occurrence}, "
                f"strength_rating={self._strength_rating})")

    def __eq__(self, other: object) -> bool:
        """Records are equal if every field matches."""
        if not isinstance(other, Password):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self):
        return (self._bound, self._password, self._occurrence,
                self._strength_rating, self._hashed_password)
