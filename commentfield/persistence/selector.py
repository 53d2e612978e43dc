"""Selector strings for comment queries.

A selector is a comma separated list of ``key<op>value`` terms, for example
``"page=12, status>=1, sort=-created, limit=10"``. Terms on ``sort``,
``start`` and ``limit`` shape the result; every other term filters it.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from commentfield.domain.error import ValidationError
from commentfield.domain.model.comment import Comment
from commentfield.domain.value import CommentStatus

# Selector keys and the comment attribute each one reads
FILTER_KEYS: dict[str, str] = {
    "id": "id",
    "parent_id": "parent_id",
    "page": "page_id",
    "pages_id": "page_id",
    "status": "status",
    "cite": "cite",
    "email": "email",
    "text": "text",
    "upvotes": "upvotes",
    "downvotes": "downvotes",
    "stars": "stars",
    "created": "created",
}

_TERM = re.compile(r"^\s*([a-z_]+)\s*(!=|>=|<=|%=|=|>|<)\s*(.*?)\s*$")

_COMPARE: dict[str, Callable[[Any, Any], bool]] = {
    "=": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
    "%=": lambda a, b: str(b).lower() in str(a).lower(),
}


@dataclass
class Term:
    """One filter term of a selector."""

    key: str
    operator: str
    value: str

    def matches(self, comment: Comment) -> bool:
        actual = getattr(comment, FILTER_KEYS[self.key])
        if self.operator == "%=":
            return _COMPARE["%="](actual, self.value)
        return _COMPARE[self.operator](actual, _coerce(actual, self.value))


@dataclass
class Selector:
    """A parsed selector string."""

    terms: list[Term] = field(default_factory=list)
    sort: list[str] = field(default_factory=list)
    start: int = 0
    limit: int | None = None

    @classmethod
    def parse(cls, selector: str) -> "Selector":
        """Parse a selector string.

        Raises:
            ValidationError: If a term is malformed or uses an unknown key
        """
        parsed = cls()
        for raw in selector.split(","):
            if not raw.strip():
                continue
            match = _TERM.match(raw)
            if not match:
                raise ValidationError(f"Invalid selector term: {raw.strip()!r}")
            key, operator, value = match.groups()

            if key == "sort":
                parsed.sort.append(value)
            elif key in ("start", "limit"):
                if operator != "=" or not value.isdigit():
                    raise ValidationError(f"{key} must be a non-negative integer")
                setattr(parsed, key, int(value))
            elif key in FILTER_KEYS:
                parsed.terms.append(Term(key=key, operator=operator, value=value))
            else:
                raise ValidationError(f"Unknown selector key: {key}")
        return parsed

    def matches(self, comment: Comment) -> bool:
        return all(term.matches(comment) for term in self.terms)

    def apply(self, comments: list[Comment]) -> list[Comment]:
        """Filter, sort and paginate comments."""
        result = [c for c in comments if self.matches(c)]

        # Apply sort keys last-to-first so the first key has priority
        for sort_key in reversed(self.sort):
            descending = sort_key.startswith("-")
            name = sort_key.lstrip("-")
            if name not in FILTER_KEYS:
                raise ValidationError(f"Unknown sort key: {name}")
            result.sort(
                key=lambda c: getattr(c, FILTER_KEYS[name]), reverse=descending
            )

        if self.limit is None:
            return result[self.start :]
        return result[self.start : self.start + self.limit]


def _coerce(actual: Any, value: str) -> Any:
    """Convert a selector value to the type of the attribute it is compared with."""
    try:
        if isinstance(actual, CommentStatus) and not value.lstrip("-").isdigit():
            return CommentStatus[value.upper()]
        if isinstance(actual, datetime):
            parsed = datetime.fromisoformat(value)
            if parsed.tzinfo is not None:
                # Comment times are naive local time
                parsed = parsed.astimezone().replace(tzinfo=None)
            return parsed
        if isinstance(actual, int):
            return int(value)
    except (KeyError, ValueError):
        raise ValidationError(f"Invalid selector value: {value!r}") from None
    if actual is None:
        return int(value) if value.isdigit() else value
    return value
