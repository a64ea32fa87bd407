"""Data models for parsed versions and version conditions.

Every model is immutable once built. Conditions evaluate themselves against
a Version through ``compare``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

# Ordering key used by range comparisons: (major, minor, patch).
VersionKey = Tuple[int, int, int]


@dataclass(frozen=True)
class Version:
    """A parsed semantic version.

    ``pre_release`` and ``metadata`` keep the dot-separated identifiers in
    source order. Equality is structural over all five fields.
    """
    major: int
    minor: int = 0
    patch: int = 0
    pre_release: Tuple[str, ...] = ()
    metadata: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "pre_release", tuple(str(p) for p in self.pre_release))
        object.__setattr__(self, "metadata", tuple(str(m) for m in self.metadata))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += "-" + ".".join(self.pre_release)
        if self.metadata:
            text += "+" + ".".join(self.metadata)
        return text

    @property
    def key(self) -> VersionKey:
        """Ordering key; pre-release and metadata never take part."""
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.pre_release)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse version text such as ``v1.2.3-rc.1+build.5``.

        Raises:
            ParseError: if ``text`` is not a valid version.
        """
        from .parser import parse_version  # pylint: disable=import-outside-toplevel
        return parse_version(text)


def _coerce_version(version: Union[Version, str]) -> Version:
    if isinstance(version, Version):
        return version
    return Version.parse(version)


class RangeOperator(Enum):
    """Inequality operators usable as range bounds."""
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="

    @property
    def is_lower_bound(self) -> bool:
        return self in (RangeOperator.GREATER, RangeOperator.GREATER_EQUAL)


@dataclass(frozen=True)
class ConditionRange:
    """One inequality bound of a range condition."""
    operator: RangeOperator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def admits(self, version: Version) -> bool:
        """Return True if ``version`` lies on the allowed side of this bound."""
        bound, candidate = self.version.key, version.key
        if self.operator is RangeOperator.GREATER:
            return bound < candidate
        if self.operator is RangeOperator.GREATER_EQUAL:
            return bound <= candidate
        if self.operator is RangeOperator.LESS:
            return bound > candidate
        return bound >= candidate


class Condition:
    """Base class for parsed version conditions."""

    @classmethod
    def parse(cls, text: str) -> "Condition":
        """Parse condition text such as ``>=1.2.3 <2.0.0 || ^3``.

        Raises:
            ParseError: if ``text`` is not a valid condition.
        """
        from .parser import parse_condition  # pylint: disable=import-outside-toplevel
        return parse_condition(text)

    def compare(self, version: Union[Version, str]) -> bool:
        """Return True if ``version`` satisfies this condition.

        Never fails for a Version. Text is parsed first.

        Raises:
            ParseError: if ``version`` is text that is not a valid version.
        """
        return self._matches(_coerce_version(version))

    def _matches(self, version: Version) -> bool:
        raise NotImplementedError

    def __contains__(self, version: Union[Version, str]) -> bool:
        return self.compare(version)


@dataclass(frozen=True)
class AnyCondition(Condition):
    """``*``: every version matches."""

    def __str__(self) -> str:
        return "*"

    def _matches(self, version: Version) -> bool:
        return True


@dataclass(frozen=True)
class SimpleCondition(Condition):
    """Bare version: exact match on all fields."""
    version: Version

    def __str__(self) -> str:
        return str(self.version)

    def _matches(self, version: Version) -> bool:
        return self.version == version


@dataclass(frozen=True)
class CompatibleCondition(Condition):
    """``~``: same major and minor, patch at least as large."""
    version: Version

    def __str__(self) -> str:
        return f"~{self.version}"

    def _matches(self, version: Version) -> bool:
        return (
            self.version.major == version.major
            and self.version.minor == version.minor
            and self.version.patch <= version.patch
        )


@dataclass(frozen=True)
class CompatibleWithMostRecentCondition(Condition):
    """``^``: same major, not earlier in (minor, patch) order."""
    version: Version

    def __str__(self) -> str:
        return f"^{self.version}"

    def _matches(self, version: Version) -> bool:
        if self.version.major != version.major:
            return False
        return (version.minor, version.patch) >= (self.version.minor, self.version.patch)


@dataclass(frozen=True)
class RangeCondition(Condition):
    """Lower bound (``>``/``>=``) with an optional upper bound (``<``/``<=``)."""
    lower: ConditionRange
    upper: Optional[ConditionRange] = None

    def __post_init__(self):
        if not self.lower.operator.is_lower_bound:
            raise ValueError(f"range lower bound must use > or >=, got {self.lower.operator.value}")
        if self.upper is not None and self.upper.operator.is_lower_bound:
            raise ValueError(f"range upper bound must use < or <=, got {self.upper.operator.value}")

    def __str__(self) -> str:
        if self.upper is None:
            return str(self.lower)
        return f"{self.lower} {self.upper}"

    def _matches(self, version: Version) -> bool:
        if not self.lower.admits(version):
            return False
        if self.upper is None:
            return True
        return self.upper.admits(version)


@dataclass(frozen=True)
class CompositeCondition(Condition):
    """Logical OR over alternatives, kept in source order."""
    conditions: Tuple[Condition, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def __str__(self) -> str:
        return " || ".join(str(c) for c in self.conditions)

    def _matches(self, version: Version) -> bool:
        return any(c.compare(version) for c in self.conditions)
