"""Common components shared by the listing engine and the file set.

This internal package contains non-I/O code: option enums, the resolved
ListingConfig and the matcher / recurse-policy variants. It should NOT be
imported directly by users.

Important: This package must NEVER import from aio to avoid circular
dependencies.
"""

from .config import (
    ListingConfig,
    MatchField,
    TypeFilter,
    ResultShape,
    resolve_matcher,
    resolve_recurse,
)
from .matchers import (
    Matcher,
    ExactMatcher,
    PatternMatcher,
    PredicateMatcher,
    RecursePolicy,
    NoRecurse,
    AlwaysRecurse,
    PredicateRecurse,
    call_predicate,
)

__all__ = [
    'ListingConfig',
    'MatchField',
    'TypeFilter',
    'ResultShape',
    'resolve_matcher',
    'resolve_recurse',
    'Matcher',
    'ExactMatcher',
    'PatternMatcher',
    'PredicateMatcher',
    'RecursePolicy',
    'NoRecurse',
    'AlwaysRecurse',
    'PredicateRecurse',
    'call_predicate',
]
