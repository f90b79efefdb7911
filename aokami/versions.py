"""Numeric game versions and discovery of downloaded server jars."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_COMPONENT = re.compile(r"\+?[0-9]+")
_MAX_COMPONENT = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` version compared numerically."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def _component(text: str, part: str) -> int:
    if not _COMPONENT.fullmatch(part):
        raise ValueError(f"invalid version {text!r}: {part!r} is not a number")
    value = int(part)
    if value > _MAX_COMPONENT:
        raise ValueError(f"invalid version {text!r}: {part!r} is too large")
    return value


def parse_version(text: str) -> Version:
    """Parse the first three dot-separated numbers of ``text``."""
    parts = text.split(".")
    if len(parts) < 3:
        raise ValueError(f"invalid version {text!r}: expected three components")
    major, minor, patch = (_component(text, part) for part in parts[:3])
    return Version(major, minor, patch)


def find_latest_version(versions_dir: str | PathLike[str]) -> str:
    """Return the highest version among the files in ``versions_dir``."""
    directory = Path(versions_dir)
    versions = [parse_version(entry.stem) for entry in directory.iterdir()]
    if not versions:
        raise ValueError(f"no versions found in {directory}")
    return str(max(versions))