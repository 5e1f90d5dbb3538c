"""
Cleanup outcome policies for fslistlib.

FileSet.cleanup deletes files one by one. What happens when a delete fails,
and what the caller finally sees, is decided by one of the policies in this
module:

- NaturalOutcome: fail with the first delete error
- ResolveOutcome: report success no matter what
- ExplicitErrorOutcome: always fail with a caller supplied error, used when
  cleaning up after some other failure so that failure stays the one raised

Each policy also carries ``stop_on_error``. With it set, the first failure
ends the loop at once; without it every element is attempted and only the
first error is remembered.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..exceptions import ConfigurationError


class CleanupPolicy(ABC):
    """
    Base class for cleanup outcome policies.

    ``handle`` is called for every failed delete, ``finish`` once after the
    loop ran to the end.
    """

    def __init__(self, stop_on_error: bool = True, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            stop_on_error: End the cleanup at the first failed delete
            verbose: If True, print warnings to stderr for failed deletes
        """
        self.stop_on_error = stop_on_error
        self.verbose = verbose
        self.errors: List[dict] = []

    @property
    def first_error(self) -> Optional[BaseException]:
        """The first delete error seen, if any."""
        return self.errors[0]['error'] if self.errors else None

    def handle(self, error: BaseException, path: str) -> bool:
        """
        Record a failed delete.

        Returns:
            True when the cleanup loop must stop now (and report success),
            False to carry on with the next element. Policies that want the
            cleanup to fail raise from here instead.
        """
        self.errors.append({
            'path': path,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })

        if self.stop_on_error:
            self.on_stop(error)
            return True

        if self.verbose:
            print(f"\nWARNING: Could not delete '{path}': {error}", file=sys.stderr)
        return False

    @abstractmethod
    def on_stop(self, error: BaseException) -> None:
        """React to the failure that stopped the loop: raise or return."""
        pass

    @abstractmethod
    def finish(self) -> None:
        """Decide the final outcome after every element was attempted."""
        pass


class NaturalOutcome(CleanupPolicy):
    """Fail with the first delete error, succeed if there was none."""

    def on_stop(self, error: BaseException) -> None:
        raise error

    def finish(self) -> None:
        if self.first_error is not None:
            raise self.first_error


class ResolveOutcome(CleanupPolicy):
    """Always succeed; failures are only recorded."""

    def on_stop(self, error: BaseException) -> None:
        return None

    def finish(self) -> None:
        return None


class ExplicitErrorOutcome(CleanupPolicy):
    """Always fail with the supplied error, whatever the deletes did."""

    def __init__(self, error: BaseException, stop_on_error: bool = True, verbose: bool = False):
        super().__init__(stop_on_error=stop_on_error, verbose=verbose)
        self.error = error

    def on_stop(self, error: BaseException) -> None:
        raise self.error

    def finish(self) -> None:
        raise self.error


def create_cleanup_policy(
    outcome: Union[str, BaseException] = "natural",
    stop_on_error: bool = True,
    verbose: bool = False,
) -> CleanupPolicy:
    """
    Build the policy for a cleanup ``outcome`` option.

    Args:
        outcome: "natural", "resolve" or an exception instance
        stop_on_error: End the cleanup at the first failed delete
        verbose: Print warnings for failures that do not stop the cleanup

    Returns:
        The matching CleanupPolicy

    Raises:
        ConfigurationError: For any other outcome value
    """
    if isinstance(outcome, BaseException):
        return ExplicitErrorOutcome(outcome, stop_on_error=stop_on_error, verbose=verbose)
    if outcome == "natural":
        return NaturalOutcome(stop_on_error=stop_on_error, verbose=verbose)
    if outcome == "resolve":
        return ResolveOutcome(stop_on_error=stop_on_error, verbose=verbose)
    raise ConfigurationError(
        f'outcome contains invalid value {outcome!r}, should be "natural", "resolve" or an exception'
    )
