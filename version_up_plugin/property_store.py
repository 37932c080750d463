"""Reading and writing version properties through candidate property names.

Project types expose the version under different names. Readers probe the
candidates in order; writers mirror the new value into every candidate the
project already carries and tolerate names a project refuses.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

from .version_core import VersionUpError


DEFAULT_READ_NAMES = ("AssemblyVersion", "Version")
DEFAULT_WRITE_NAMES = ("AssemblyVersion", "AssemblyFileVersion", "FileVersion", "Version")

METADATA_SECTION = "general"
METADATA_VERSION_NAMES = ("version",)


class PropertyUnavailable(VersionUpError, LookupError):
    """No recognized version property could be read or written."""


class NoSelection(VersionUpError):
    """No project is selected."""


class ProjectHandle(NamedTuple):
    name: str
    store: object


def _split_names(value) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(name.strip() for name in value if name and name.strip())


@dataclass(frozen=True)
class VersionProperties:
    read_names: Tuple[str, ...] = DEFAULT_READ_NAMES
    write_names: Tuple[str, ...] = DEFAULT_WRITE_NAMES

    @classmethod
    def from_strings(cls, read=None, write=None) -> "VersionProperties":
        """Build from comma separated settings values; blanks keep the defaults."""
        return cls(
            read_names=_split_names(read) or DEFAULT_READ_NAMES,
            write_names=_split_names(write) or DEFAULT_WRITE_NAMES,
        )


def _present(value) -> bool:
    return value is not None and bool(str(value).strip())


def read_version(source, names) -> Tuple[str, str]:
    """Return ``(name, text)`` of the first candidate holding a value."""
    for name in names:
        value = source.read(name)
        if _present(value):
            return name, str(value).strip()
    raise PropertyUnavailable(f"No version property found (tried: {', '.join(names)})")


def write_version(sink, value: str, names) -> List[str]:
    """Write ``value`` and return the names that accepted it.

    Present candidates are all updated. When none is present the candidates
    are tried in order until one accepts the value.
    """
    written = []
    for name in names:
        if not _present(sink.read(name)):
            continue
        if sink.write(name, value):
            written.append(name)

    if not written:
        for name in names:
            if sink.write(name, value):
                written.append(name)
                break

    if not written:
        raise PropertyUnavailable(f"No version property accepted {value!r} (tried: {', '.join(names)})")
    return written


class MetadataPropertyStore:
    """Version properties of a QGIS plugin ``metadata.txt``."""

    def __init__(self, metadata_path, section: str = METADATA_SECTION):
        self.path = Path(metadata_path)
        self.section = section
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.optionxform = str
        self.config.read(self.path, encoding="utf-8")

    def read(self, name: str) -> Optional[str]:
        if not self.config.has_option(self.section, name):
            return None
        return self.config.get(self.section, name)

    def write(self, name: str, value: str) -> bool:
        # metadata.txt has a fixed schema; only existing keys are updated.
        if not self.config.has_option(self.section, name):
            return False
        self.config.set(self.section, name, value)
        return True

    def save(self):
        with self.path.open("w", encoding="utf-8", newline="\r\n") as handle:
            self.config.write(handle)
