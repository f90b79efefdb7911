"""Data model of the game's version manifest and version metadata documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ReleaseType(str, Enum):
    """Kind of game release to pick when asking for the latest version."""

    RELEASE = "release"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True)
class GameVersionLatest:
    release: str
    snapshot: str


@dataclass(frozen=True)
class GameVersionEntry:
    id: str
    version_type: str
    url: str


@dataclass(frozen=True)
class GameVersionsResponse:
    latest: GameVersionLatest
    versions: tuple[GameVersionEntry, ...]

    def find(self, version: str, release_type: ReleaseType) -> GameVersionEntry | None:
        """Return the first entry matching ``version``, resolving ``"latest"`` by release type."""
        if version == "latest":
            if ReleaseType(release_type) is ReleaseType.RELEASE:
                wanted = self.latest.release
            else:
                wanted = self.latest.snapshot
        else:
            wanted = version
        return next((entry for entry in self.versions if entry.id == wanted), None)


@dataclass(frozen=True)
class GameVersionDownloadEntry:
    sha1: str
    size: int
    url: str


@dataclass(frozen=True)
class GameVersionDownloads:
    server: GameVersionDownloadEntry


@dataclass(frozen=True)
class GameVersionMetadata:
    downloads: GameVersionDownloads
    id: str


def _field(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field `{key}` has the wrong type: {type(value).__name__}")
    return value


def _parse_entry(data: Any) -> GameVersionEntry:
    return GameVersionEntry(
        id=_field(data, "id", str),
        version_type=_field(data, "type", str),
        url=_field(data, "url", str),
    )


def _parse_download_entry(data: Any) -> GameVersionDownloadEntry:
    size = _field(data, "size", int)
    if size < 0:
        raise ValueError(f"field `size` must not be negative: {size}")
    return GameVersionDownloadEntry(
        sha1=_field(data, "sha1", str),
        size=size,
        url=_field(data, "url", str),
    )


def parse_versions_response(data: Any) -> GameVersionsResponse:
    """Build a :class:`GameVersionsResponse` from the decoded manifest JSON."""
    latest = _field(data, "latest", dict)
    versions = _field(data, "versions", list)
    return GameVersionsResponse(
        latest=GameVersionLatest(
            release=_field(latest, "release", str),
            snapshot=_field(latest, "snapshot", str),
        ),
        versions=tuple(_parse_entry(item) for item in versions),
    )


def parse_version_metadata(data: Any) -> GameVersionMetadata:
    """Build a :class:`GameVersionMetadata` from a decoded version document."""
    downloads = _field(data, "downloads", dict)
    return GameVersionMetadata(
        downloads=GameVersionDownloads(
            server=_parse_download_entry(_field(downloads, "server", dict)),
        ),
        id=_field(data, "id", str),
    )