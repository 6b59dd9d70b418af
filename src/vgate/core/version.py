"""Version string parsing and comparison.

Versions are dotted groups of one or two digits with an optional
``-N`` sub-version suffix, e.g. ``1``, ``2.10.4`` or ``3.0-2``.
Comparison is numeric and component-wise; missing trailing components
count as zero, so ``2.1`` equals ``2.1.0``.

The sub-version takes part in ordering as one more trailing component,
looked at only when the dotted parts tie. An absent suffix counts as 0:

    1.0 < 1.0-1 < 1.0-2 < 1.1
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import InvalidVersionError

VERSION_PATTERN = re.compile(r"^(?:[0-9]{1,2}\.)*[0-9]{1,2}(?:-([0-9]{1,2}))?$")


class Ordering(Enum):
    """Result of comparing two versions."""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1


def is_valid(raw: object) -> bool:
    """Check whether a value matches the version grammar."""
    return isinstance(raw, str) and VERSION_PATTERN.fullmatch(raw) is not None


@dataclass(frozen=True, eq=False)
class VersionString:
    """A parsed, immutable version.

    Attributes:
        raw: The original string, used for display and persistence.
        components: Dotted numeric components.
        sub_version: Number after the hyphen, or None.
    """

    raw: str
    components: tuple[int, ...] = field(repr=False)
    sub_version: int | None = field(default=None, repr=False)

    @classmethod
    def parse(cls, raw: str | VersionString) -> VersionString:
        """Parse a version string.

        Args:
            raw: String to parse. An existing VersionString is returned as is.

        Returns:
            Parsed VersionString.

        Raises:
            InvalidVersionError: If the string does not match the grammar.
        """
        if isinstance(raw, VersionString):
            return raw
        if not isinstance(raw, str):
            raise InvalidVersionError(raw)

        match = VERSION_PATTERN.fullmatch(raw)
        if match is None:
            raise InvalidVersionError(raw)

        dotted, _, _ = raw.partition("-")
        sub = match.group(1)
        return cls(
            raw=raw,
            components=tuple(int(part) for part in dotted.split(".")),
            sub_version=int(sub) if sub is not None else None,
        )

    def strip_sub_version(self) -> VersionString:
        """Return this version without its ``-N`` suffix."""
        if self.sub_version is None:
            return self
        return VersionString(
            raw=self.raw.partition("-")[0],
            components=self.components,
        )

    def compare(self, other: str | VersionString) -> Ordering:
        """Compare numerically against another version.

        Args:
            other: Version to compare with; strings are parsed first.

        Returns:
            Ordering of self relative to other.
        """
        other = VersionString.parse(other)
        width = max(len(self.components), len(other.components))
        left = self.components + (0,) * (width - len(self.components))
        right = other.components + (0,) * (width - len(other.components))
        left += (self.sub_version or 0,)
        right += (other.sub_version or 0,)

        if left < right:
            return Ordering.LESS_THAN
        if left > right:
            return Ordering.GREATER_THAN
        return Ordering.EQUAL

    def _sort_key(self) -> tuple[int, ...]:
        parts = list(self.components)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return (*parts, self.sub_version or 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (str, VersionString)):
            return NotImplemented
        if isinstance(other, str) and not is_valid(other):
            return False
        return self.compare(other) is Ordering.EQUAL

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __lt__(self, other: str | VersionString) -> bool:
        return self.compare(other) is Ordering.LESS_THAN

    def __le__(self, other: str | VersionString) -> bool:
        return self.compare(other) is not Ordering.GREATER_THAN

    def __gt__(self, other: str | VersionString) -> bool:
        return self.compare(other) is Ordering.GREATER_THAN

    def __ge__(self, other: str | VersionString) -> bool:
        return self.compare(other) is not Ordering.LESS_THAN

    def __str__(self) -> str:
        return self.raw
