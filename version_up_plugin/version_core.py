"""Version parsing and cascade-reset increment helpers.

These helpers are intentionally free of QGIS dependencies so they can be
covered by standard unit tests and reused by the command line scripts.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum


MAX_SEGMENT = 2**31 - 1
MAX_PRECISION = 4

_SEGMENT_PATTERN = re.compile(r"[0-9]+")


class VersionUpError(Exception):
    """Base class for every failure reported by a version bump."""


class ParseError(VersionUpError, ValueError):
    """Version text is empty or not 1-4 dot separated numbers."""


class VersionOverflowError(VersionUpError, OverflowError):
    """A version segment does not fit the supported range."""


class BumpTarget(Enum):
    MAJOR = 1
    MINOR = 2
    BUILD = 3
    REVISION = 4

    @property
    def label(self):
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name):
        """Return the target for a case-insensitive name like ``"minor"``."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown version part: {name!r} (expected one of {choices})") from None


@dataclass(frozen=True)
class Version:
    segments: tuple = (0, 0, 0, 0)
    precision: int = MAX_PRECISION

    @property
    def major(self):
        return self.segments[0]

    @property
    def minor(self):
        return self.segments[1]

    @property
    def build(self):
        return self.segments[2]

    @property
    def revision(self):
        return self.segments[3]

    def __str__(self):
        return format_version(self)


@dataclass(frozen=True)
class BumpResult:
    previous: str
    new: str
    precision: int

    @property
    def summary(self):
        return f"{self.previous} -> {self.new}"


def _check_segment(value, text):
    if value > MAX_SEGMENT:
        raise VersionOverflowError(f"Version segment {value} in {text!r} exceeds {MAX_SEGMENT}")
    return value


def parse_version(text):
    """Parse ``text`` into a Version, remembering how many segments it had.

    Missing segments count as 0. Raises ParseError for empty text, tokens
    that are not plain digits and more than four segments.
    """
    if text is None:
        raise ParseError("Version text is empty")
    stripped = str(text).strip()
    if not stripped:
        raise ParseError("Version text is empty")

    tokens = stripped.split(".")
    if len(tokens) > MAX_PRECISION:
        raise ParseError(
            f"Unsupported version format: {text!r} (at most {MAX_PRECISION} segments)"
        )
    if not all(_SEGMENT_PATTERN.fullmatch(token) for token in tokens):
        raise ParseError(f"Unsupported version format: {text!r}")

    values = [_check_segment(int(token), stripped) for token in tokens]
    values.extend([0] * (MAX_PRECISION - len(values)))
    return Version(tuple(values), len(tokens))


def bump_version(version, target):
    """Increment ``target`` and reset every lower-order segment to 0.

    The precision grows to at least the target's position so the bumped
    segment is always visible.
    """
    index = target.value - 1
    bumped = _check_segment(version.segments[index] + 1, format_version(version))
    segments = version.segments[:index] + (bumped,) + (0,) * (MAX_PRECISION - index - 1)
    return replace(version, segments=segments, precision=max(version.precision, target.value))


def format_version(version):
    return ".".join(str(segment) for segment in version.segments[: version.precision])


def increment_version(text, target):
    """Parse, bump and format ``text`` in one call."""
    current = parse_version(text)
    bumped = bump_version(current, target)
    return BumpResult(
        previous=str(text).strip(),
        new=format_version(bumped),
        precision=bumped.precision,
    )
