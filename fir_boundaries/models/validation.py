"""
Error accumulation for parse passes.

This module provides the collector used while reading a boundary file:
fatal errors propagate immediately, recoverable errors are kept so that the
whole file can be checked in one pass.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TypeVar

from ..errors import CollectedErrors, FIRParsingError

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class ErrorCollector:
    """Ordered list of recoverable errors found during a pass."""

    errors: List[FIRParsingError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if no error was collected."""
        return len(self.errors) == 0

    def add_error(self, error: FIRParsingError) -> None:
        """
        Record an error.

        Args:
            error: Error to record

        Raises:
            FIRParsingError: the error itself when it is fatal
        """
        if error.fatal:
            raise error
        logger.debug(f"Recoverable error: {error}")
        self.errors.append(error)

    def attempt(self, func: Callable[..., T], *args, **kwargs) -> Optional[T]:
        """
        Call a fallible function, recording a recoverable failure.

        Returns:
            The function result, or None when a recoverable error was recorded
        """
        try:
            return func(*args, **kwargs)
        except FIRParsingError as e:
            self.add_error(e)
            return None

    def extend(self, other: 'ErrorCollector') -> None:
        """Append every error of another collector."""
        self.errors.extend(other.errors)

    def result(self, value: T) -> T:
        """
        Return the value of a successful pass.

        Raises:
            CollectedErrors: if any error was collected
        """
        if self.errors:
            raise CollectedErrors(self.errors)
        return value

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        return "\n".join(self.get_error_messages())
