import pytest

from cookbook.file_reading import (
    DEFAULT_SIZE,
    MARKER,
    create_file,
    find_marker_chunks,
    find_marker_mapped,
    main,
)


def test_create_file_layout(tmp_path):
    path = tmp_path / "data"
    create_file(path, 4096)
    content = path.read_bytes()
    assert len(content) == 4096
    assert content[-1:] == MARKER
    assert content.count(MARKER) == 1


def test_both_searches_agree(tmp_path):
    path = tmp_path / "data"
    create_file(path, 4096)
    assert find_marker_mapped(path) == 4096 - 1
    assert find_marker_chunks(path, 1024) == find_marker_mapped(path)
    assert find_marker_chunks(path, 1000) == find_marker_mapped(path)


def test_default_size(tmp_path):
    path = tmp_path / "data"
    create_file(path)
    assert find_marker_mapped(path) == DEFAULT_SIZE - 1


def test_missing_marker(tmp_path):
    path = tmp_path / "plain"
    path.write_bytes(b"\x03" * 10)
    assert find_marker_mapped(path) is None
    assert find_marker_chunks(path) is None
    empty = tmp_path / "empty"
    empty.write_bytes(b"")
    assert find_marker_mapped(empty) is None


def test_bad_arguments(tmp_path):
    with pytest.raises(ValueError):
        create_file(tmp_path / "x", 0)
    path = tmp_path / "y"
    create_file(path, 8)
    with pytest.raises(ValueError):
        find_marker_chunks(path, 0)


def test_main_modes(tmp_path):
    path = str(tmp_path / "test_file.txt")
    assert main(["c", "--file", path, "--size", "8192"]) == 0
    for mode in ("m", "r", "a"):
        assert main([mode, "--file", path, "--size", "8192"]) == 0
    assert main(["x", "--file", path]) == 42
    assert main(["m", "--file", path, "--size", "100"]) == 1