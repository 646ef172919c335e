"""Testing utilities for PasswordTreeLib consumers."""

from .fixtures import StorageTestHelper, make_passwords

__all__ = ['StorageTestHelper', 'make_passwords']
