"""Matcher and recurse-policy variants.

The ``match`` and ``recurse`` options accept several shapes (string,
regular expression, callable, bool). They are resolved once into one of the
small classes below so the traversal never has to inspect option types per
entry. Predicates may be plain functions or coroutines.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Pattern

from ..exceptions import PredicateError


async def call_predicate(func: Callable[[Any], Any], entry: Any, role: str) -> bool:
    """Call a user predicate and await its result if needed.

    Args:
        func: Predicate taking the entry
        entry: Entry handed to the predicate
        role: 'match' or 'recurse', used in the error message

    Returns:
        Truthiness of the (awaited) result

    Raises:
        PredicateError: If the predicate raises or its awaitable fails
    """
    try:
        result = func(entry)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        raise PredicateError(
            f"{role} predicate failed for {getattr(entry, 'full_path', entry)!r}: {e}",
            entry=entry,
            original=e,
        ) from e
    return bool(result)


class Matcher(ABC):
    """Decides whether an entry passes the name filter."""

    @abstractmethod
    async def matches(self, entry: Any) -> bool:
        """Return True to keep the entry."""
        pass


class ExactMatcher(Matcher):
    """Exact string equality against one name field."""

    def __init__(self, value: str, attribute: str, case_insensitive: bool = True):
        self.case_insensitive = case_insensitive
        self.value = value.lower() if case_insensitive else value
        self.attribute = attribute

    async def matches(self, entry: Any) -> bool:
        target = getattr(entry, self.attribute)
        if self.case_insensitive:
            target = target.lower()
        return target == self.value

    def __repr__(self) -> str:
        return f"ExactMatcher({self.value!r}, {self.attribute!r}, case_insensitive={self.case_insensitive})"


class PatternMatcher(Matcher):
    """Regular expression search against one name field."""

    def __init__(self, pattern: Pattern, attribute: str):
        self.pattern = pattern
        self.attribute = attribute

    async def matches(self, entry: Any) -> bool:
        return self.pattern.search(getattr(entry, self.attribute)) is not None

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern.pattern!r}, {self.attribute!r})"


class PredicateMatcher(Matcher):
    """User callable receiving the whole entry."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    async def matches(self, entry: Any) -> bool:
        return await call_predicate(self.func, entry, 'match')

    def __repr__(self) -> str:
        return f"PredicateMatcher({self.func!r})"


class RecursePolicy(ABC):
    """Decides whether to descend into a subdirectory."""

    @abstractmethod
    async def should_descend(self, entry: Any) -> bool:
        """Return True to list the subdirectory's contents too."""
        pass


class NoRecurse(RecursePolicy):
    async def should_descend(self, entry: Any) -> bool:
        return False


class AlwaysRecurse(RecursePolicy):
    async def should_descend(self, entry: Any) -> bool:
        return True


class PredicateRecurse(RecursePolicy):
    """Descend only where the user callable says so."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    async def should_descend(self, entry: Any) -> bool:
        return await call_predicate(self.func, entry, 'recurse')
