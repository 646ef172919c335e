"""Shared fixtures for PasswordTreeLib tests."""

import os
import sys

import pytest

# Add the parent directory to the system path to ensure correct module import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from passwordtreelib import Attribute, PasswordStorage
from passwordtreelib.testing import StorageTestHelper, make_passwords


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running randomized tests")


@pytest.fixture
def storage():
    """Empty storage ordered by occurrence."""
    return PasswordStorage(Attribute.OCCURRENCE)


@pytest.fixture
def scenario_passwords():
    """Occurrence values 5, 2, 8, 1, 9 in insertion order."""
    return make_passwords([5, 2, 8, 1, 9])


@pytest.fixture
def scenario_storage(storage, scenario_passwords):
    """Storage holding the 5, 2, 8, 1, 9 scenario.

    Shape:
            5
           / \\
          2   8
         /     \\
        1       9
    """
    for password in scenario_passwords:
        storage.add_password(password)
    return storage


@pytest.fixture
def helper(storage):
    return StorageTestHelper(storage)
