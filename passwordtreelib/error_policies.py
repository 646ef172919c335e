"""
Error handling policies for PasswordTreeLib.

This module provides a flexible error handling system through the Policy
pattern, allowing users to decide what happens when a record in a bulk
load cannot be inserted (duplicate, over capacity, malformed).

Single-record operations never consult a policy; they always raise.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .core.password import Password


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling a record that
    a bulk load could not insert.
    """

    # When True, the whole batch is checked before anything is inserted
    # and the first problem is handed to handle(), which must raise.
    stop_on_first_error = False

    @abstractmethod
    def handle(self, error: Exception, record: Any) -> None:
        """
        Handle an error for one record of a bulk load.

        Args:
            error: The exception that insertion raised (or would raise)
            record: The record being inserted

        Returns:
            None to skip the record and keep loading, or re-raises
            the exception to stop.
        """
        pass

    def _record_error(self, errors: List[Dict[str, Any]], error: Exception,
                      record: Any) -> Dict[str, Any]:
        error_record = {
            'record': record,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        errors.append(error_record)
        return error_record


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the load.

    This is the default behavior. Because the batch is checked up front,
    a failing load leaves the storage exactly as it was.
    """

    stop_on_first_error = True

    def handle(self, error: Exception, record: Any) -> None:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and continues loading.

    Errors are collected for later inspection and the offending record
    is skipped.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors = []
        self.skipped_records = []
        self.verbose = verbose

    def handle(self, error: Exception, record: Any) -> None:
        """Record the error, optionally warn, and skip the record."""
        self._record_error(self.errors, error, record)
        self.skipped_records.append(record)

        if self.verbose:
            label = record.password if isinstance(record, Password) else repr(record)
            print(f"\nWARNING: Skipping password '{label}': {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'duplicate_errors': sum(1 for e in self.errors if e['error_type'] == 'DuplicateEntryError'),
            'capacity_errors': sum(1 for e in self.errors if e['error_type'] == 'CapacityExceededError'),
            'skipped_records': len(self.skipped_records),
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        """Initialize the policy."""
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few duplicates are expected but too many indicate the
    input is not what the caller thinks it is. Records inserted before
    the threshold is crossed stay inserted.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            max_errors: Number of errors to tolerate before raising
            verbose: If True, print warnings to stderr for tolerated errors
        """
        if max_errors < 0:
            raise ValueError("max_errors cannot be negative")
        self.max_errors = max_errors
        self.verbose = verbose
        self.errors = []

    def handle(self, error: Exception, record: Any) -> None:
        """Skip the record until the threshold is exceeded, then re-raise."""
        self._record_error(self.errors, error, record)

        if len(self.errors) > self.max_errors:
            raise error

        if self.verbose:
            print(f"\nWARNING: Error {len(self.errors)}/{self.max_errors}: {error}",
                  file=sys.stderr)

    def get_statistics(self) -> dict:
        """Get statistics about errors encountered."""
        return {
            'total_errors': len(self.errors),
            'max_errors': self.max_errors,
            'threshold_exceeded': len(self.errors) > self.max_errors,
            'errors': self.errors
        }
