"""Fetching the version manifest and server jars."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

import requests

from aokami.types import GameVersionsResponse, parse_version_metadata, parse_versions_response

VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
USER_AGENT = "Aokami"
_CHUNK_SIZE = 64 * 1024


def make_session() -> requests.Session:
    """HTTP session identifying itself with the tool's user agent."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def get_versions(session: requests.Session) -> GameVersionsResponse:
    """Fetch and parse the game's version manifest."""
    response = session.get(VERSION_MANIFEST_URL)
    response.raise_for_status()
    return parse_versions_response(response.json())


def download_server(
    session: requests.Session, versions_dir: str | PathLike[str], url: str
) -> Path:
    """Download the server jar described by the metadata at ``url`` into ``versions_dir``."""
    response = session.get(url)
    response.raise_for_status()
    metadata = parse_version_metadata(response.json())

    file_path = Path(versions_dir) / f"{metadata.id}.jar"
    if file_path.exists():
        print("Server file already exists.", file=sys.stderr)
        return file_path

    with session.get(metadata.downloads.server.url, stream=True) as download:
        download.raise_for_status()
        with file_path.open("wb") as server_file:
            for chunk in download.iter_content(chunk_size=_CHUNK_SIZE):
                server_file.write(chunk)
    return file_path