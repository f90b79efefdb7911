import pytest

from aokami.versions import Version, find_latest_version, parse_version


def test_parse_version():
    assert parse_version("1.20.1") == Version(1, 20, 1)


def test_str_round_trip():
    assert str(parse_version("1.21.4")) == "1.21.4"


def test_extra_components_are_ignored():
    assert parse_version("1.2.3.4") == Version(1, 2, 3)


def test_ordering_is_numeric():
    assert parse_version("1.9.4") < parse_version("1.20.1")
    assert max([Version(1, 9, 4), Version(1, 20, 1), Version(1, 19, 4)]) == Version(1, 20, 1)


@pytest.mark.parametrize("text", ["1.20", "1", "", "1.x.0", "-1.0.0", "1. 2.3", "1.2.99999999999"])
def test_parse_version_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_version(text)


def test_find_latest_version(tmp_path):
    for name in ("1.9.4.jar", "1.20.1.jar", "1.19.4.jar"):
        (tmp_path / name).write_bytes(b"")
    assert find_latest_version(tmp_path) == "1.20.1"


def test_find_latest_version_empty_directory(tmp_path):
    with pytest.raises(ValueError, match="no versions"):
        find_latest_version(tmp_path)


def test_find_latest_version_rejects_snapshot_names(tmp_path):
    (tmp_path / "1.20.1.jar").write_bytes(b"")
    (tmp_path / "25w02a.jar").write_bytes(b"")
    with pytest.raises(ValueError):
        find_latest_version(tmp_path)


def test_find_latest_version_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_latest_version(tmp_path / "absent")