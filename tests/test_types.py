import pytest

from aokami.types import (
    GameVersionEntry,
    ReleaseType,
    parse_version_metadata,
    parse_versions_response,
)

MANIFEST = {
    "latest": {"release": "1.21.4", "snapshot": "25w02a"},
    "versions": [
        {
            "id": "25w02a",
            "type": "snapshot",
            "url": "https://meta.example.com/25w02a.json",
            "time": "2025-01-08T00:00:00+00:00",
        },
        {"id": "1.21.4", "type": "release", "url": "https://meta.example.com/1.21.4.json"},
        {"id": "1.21.3", "type": "release", "url": "https://meta.example.com/1.21.3.json"},
    ],
}

METADATA = {
    "id": "1.21.4",
    "downloads": {
        "client": {"sha1": "a" * 40, "size": 10, "url": "https://files.example.com/client.jar"},
        "server": {"sha1": "b" * 40, "size": 42, "url": "https://files.example.com/server.jar"},
    },
}


def test_parse_versions_response_reads_latest_and_entries():
    response = parse_versions_response(MANIFEST)
    assert response.latest.release == "1.21.4"
    assert response.latest.snapshot == "25w02a"
    assert [entry.id for entry in response.versions] == ["25w02a", "1.21.4", "1.21.3"]
    assert response.versions[0].version_type == "snapshot"


def test_find_latest_release():
    response = parse_versions_response(MANIFEST)
    entry = response.find("latest", ReleaseType.RELEASE)
    assert entry == GameVersionEntry("1.21.4", "release", "https://meta.example.com/1.21.4.json")


def test_find_latest_snapshot():
    response = parse_versions_response(MANIFEST)
    assert response.find("latest", ReleaseType.SNAPSHOT).id == "25w02a"


def test_find_explicit_version_ignores_release_type():
    response = parse_versions_response(MANIFEST)
    assert response.find("1.21.3", ReleaseType.SNAPSHOT).id == "1.21.3"


def test_find_unknown_version_returns_none():
    response = parse_versions_response(MANIFEST)
    assert response.find("0.0.0", ReleaseType.RELEASE) is None


def test_release_type_values():
    assert ReleaseType("release") is ReleaseType.RELEASE
    assert ReleaseType("snapshot") is ReleaseType.SNAPSHOT


def test_parse_versions_response_missing_field():
    with pytest.raises(ValueError, match="latest"):
        parse_versions_response({"versions": []})


def test_parse_versions_response_wrong_type():
    data = {"latest": {"release": 1, "snapshot": "x"}, "versions": []}
    with pytest.raises(ValueError, match="release"):
        parse_versions_response(data)


def test_parse_version_metadata_reads_server():
    metadata = parse_version_metadata(METADATA)
    assert metadata.id == "1.21.4"
    assert metadata.downloads.server.url == "https://files.example.com/server.jar"
    assert metadata.downloads.server.size == 42
    assert metadata.downloads.server.sha1 == "b" * 40


def test_parse_version_metadata_without_server():
    with pytest.raises(ValueError, match="server"):
        parse_version_metadata({"id": "1.0.0", "downloads": {}})


def test_parse_version_metadata_negative_size():
    data = {
        "id": "1.0.0",
        "downloads": {"server": {"sha1": "c", "size": -1, "url": "https://files.example.com/a.jar"}},
    }
    with pytest.raises(ValueError, match="size"):
        parse_version_metadata(data)


def test_parse_rejects_non_object():
    with pytest.raises(ValueError):
        parse_versions_response([])