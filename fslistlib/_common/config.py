"""Configuration system for fslistlib.

This module defines how users specify a listing: which name field is
matched, how it is matched, which entry kinds are kept, what shape the
results take and whether to descend into subdirectories.

All validation happens here, before any filesystem access, so a bad option
can never leave partial side effects behind.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..exceptions import ConfigurationError
from .matchers import (
    AlwaysRecurse,
    ExactMatcher,
    Matcher,
    NoRecurse,
    PatternMatcher,
    PredicateMatcher,
    PredicateRecurse,
    RecursePolicy,
)


class MatchField(Enum):
    """Which part of an entry's name participates in matching."""
    EXTENSION = "ext"     # "jpeg" in "results.jpeg"
    BASE_NAME = "base"    # "results" in "results.jpeg"
    NAME = "file"         # "results.jpeg"

    @property
    def attribute(self) -> str:
        """Entry attribute holding the value for this field."""
        return {
            MatchField.EXTENSION: 'extension',
            MatchField.BASE_NAME: 'base_name',
            MatchField.NAME: 'name',
        }[self]


class TypeFilter(Enum):
    """Which entry kinds are returned."""
    FILES = "files"
    DIRECTORIES = "dirs"
    BOTH = "both"


class ResultShape(Enum):
    """What is appended to the results for each selected entry."""
    ENTRY = "object"        # Entry objects
    FULL_PATH = "fullPath"  # absolute path strings


_ALIASES = {
    'extension': 'ext',
    'base_name': 'base',
    'name': 'file',
    'directories': 'dirs',
}


def _coerce(enum_cls, value, option: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(_ALIASES.get(value, value) if isinstance(value, str) else value)
    except ValueError:
        valid = ', '.join(repr(member.value) for member in enum_cls)
        raise ConfigurationError(
            f"{option} contains invalid value {value!r}, should be one of {valid}"
        ) from None


def resolve_matcher(match: Any, match_field: MatchField,
                    case_insensitive: Optional[bool]) -> Optional[Matcher]:
    """Turn the user supplied ``match`` option into a Matcher variant.

    Args:
        match: None, a string, a compiled regular expression or a callable
        match_field: Field the string/regex variants compare against
        case_insensitive: Only legal with a string; None means True there

    Returns:
        A Matcher, or None when nothing should be filtered by name

    Raises:
        ConfigurationError: For any other shape or a misplaced case flag
    """
    if isinstance(match, str):
        if case_insensitive is None:
            case_insensitive = True
        if not match:
            # empty string matches nothing in particular, same as no matcher
            return None
        return ExactMatcher(match, match_field.attribute, bool(case_insensitive))

    if case_insensitive is not None:
        raise ConfigurationError(
            "case_insensitive can only be specified when match is a string"
        )
    if match is None:
        return None
    if isinstance(match, re.Pattern):
        if isinstance(match.pattern, bytes):
            raise ConfigurationError("match pattern must be a str pattern, not bytes")
        return PatternMatcher(match, match_field.attribute)
    if callable(match):
        return PredicateMatcher(match)
    raise ConfigurationError(
        f"match must be a string, a compiled regular expression or a callable, "
        f"got {type(match).__name__}"
    )


def resolve_recurse(recurse: Any) -> RecursePolicy:
    """Turn the ``recurse`` option into a RecursePolicy variant."""
    if recurse is None or recurse is False:
        return NoRecurse()
    if recurse is True:
        return AlwaysRecurse()
    if callable(recurse):
        return PredicateRecurse(recurse)
    raise ConfigurationError(
        f"recurse must be True, False or a callable, got {type(recurse).__name__}"
    )


@dataclass(frozen=True)
class ListingConfig:
    """Resolved, immutable options for one listing.

    Build it with ``from_options`` rather than directly; that is where the
    raw option values are validated and the matcher is resolved.
    """

    match_field: MatchField = MatchField.EXTENSION
    matcher: Optional[Matcher] = None
    types: TypeFilter = TypeFilter.BOTH
    result_type: ResultShape = ResultShape.ENTRY
    skip_top_level_files: bool = False
    recurse: RecursePolicy = field(default_factory=NoRecurse)

    @classmethod
    def from_options(
        cls,
        match_field: Any = MatchField.EXTENSION,
        match: Any = None,
        case_insensitive: Optional[bool] = None,
        types: Any = TypeFilter.BOTH,
        result_type: Any = ResultShape.ENTRY,
        skip_top_level_files: bool = False,
        recurse: Any = False,
    ) -> "ListingConfig":
        """Validate raw listing options.

        Args:
            match_field: MatchField or its string value
            match: None, str, compiled regex or callable(entry) -> bool/awaitable
            case_insensitive: Lowercase both sides of a string comparison
            types: TypeFilter or its string value
            result_type: ResultShape or its string value
            skip_top_level_files: Leave out files directly under the root
            recurse: False, True or callable(entry) -> bool/awaitable

        Returns:
            A frozen ListingConfig

        Raises:
            ConfigurationError: If any option is invalid
        """
        selected = _coerce(MatchField, match_field, 'match_field')
        return cls(
            match_field=selected,
            matcher=resolve_matcher(match, selected, case_insensitive),
            types=_coerce(TypeFilter, types, 'types'),
            result_type=_coerce(ResultShape, result_type, 'result_type'),
            skip_top_level_files=bool(skip_top_level_files),
            recurse=resolve_recurse(recurse),
        )

    @property
    def recursive(self) -> bool:
        """True unless recursion is switched off entirely."""
        return not isinstance(self.recurse, NoRecurse)
