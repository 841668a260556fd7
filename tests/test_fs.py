import sys
from pathlib import Path

from wolvlib import fs


def test_exists(tmp_path):
    target = tmp_path / "file.txt"
    assert fs.exists(target) is False
    target.write_bytes(b"data")
    assert fs.exists(target) is True


def test_create_directories_reports_creation(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert fs.create_directories(target) is True
    assert target.is_dir()
    assert fs.create_directories(target) is False


def test_create_directories_over_file_fails(tmp_path):
    target = tmp_path / "file"
    target.write_bytes(b"")
    assert fs.create_directories(target / "sub") is False


def test_is_regular_file_and_is_directory(tmp_path):
    target = tmp_path / "file.txt"
    target.write_bytes(b"x")
    assert fs.is_regular_file(target) is True
    assert fs.is_directory(target) is False
    assert fs.is_regular_file(tmp_path) is False
    assert fs.is_directory(tmp_path) is True


def test_copy_file_round_trip(tmp_path):
    source = tmp_path / "source.bin"
    destination = tmp_path / "destination.bin"
    payload = b"Hello World"
    source.write_bytes(payload)
    assert fs.copy_file(source, destination) is True
    assert destination.read_bytes() == payload


def test_copy_file_refuses_existing_destination(tmp_path):
    source = tmp_path / "source.bin"
    destination = tmp_path / "destination.bin"
    source.write_bytes(b"new")
    destination.write_bytes(b"old")
    assert fs.copy_file(source, destination) is False
    assert destination.read_bytes() == b"old"


def test_copy_missing_file_fails(tmp_path):
    assert fs.copy_file(tmp_path / "missing", tmp_path / "out") is False
    assert not (tmp_path / "out").exists()


def test_remove_file_and_empty_directory(tmp_path):
    target = tmp_path / "file.txt"
    target.write_bytes(b"x")
    directory = tmp_path / "empty"
    directory.mkdir()
    assert fs.remove(target) is True
    assert fs.remove(directory) is True
    assert not target.exists()
    assert not directory.exists()
    assert fs.remove(target) is False


def test_remove_non_empty_directory_fails(tmp_path):
    directory = tmp_path / "full"
    directory.mkdir()
    (directory / "inner").write_bytes(b"x")
    assert fs.remove(directory) is False
    assert directory.exists()


def test_remove_all(tmp_path):
    directory = tmp_path / "tree"
    (directory / "a" / "b").mkdir(parents=True)
    (directory / "a" / "b" / "leaf").write_bytes(b"x")
    assert fs.remove_all(directory) is True
    assert not directory.exists()
    assert fs.remove_all(directory) is False


def test_get_file_size(tmp_path):
    target = tmp_path / "file.txt"
    payload = b"Hello World"
    target.write_bytes(payload)
    assert fs.get_file_size(target) == len(payload)


def test_get_file_size_errors_give_zero(tmp_path):
    assert fs.get_file_size(tmp_path / "missing") == 0
    assert fs.get_file_size(tmp_path) == 0


def test_is_sub_path(tmp_path):
    child = tmp_path / "child" / "grandchild"
    child.mkdir(parents=True)
    assert fs.is_sub_path(tmp_path, child) is True
    assert fs.is_sub_path(tmp_path, tmp_path) is True
    assert fs.is_sub_path(child, tmp_path) is False


def test_is_sub_path_sibling_is_not_inside(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    assert fs.is_sub_path(first, second) is False


def test_to_short_path_keeps_path(tmp_path):
    target = tmp_path / "file.txt"
    assert fs.to_short_path(target) == target
    assert fs.to_short_path(str(target)) == target


def test_get_executable_path_points_at_interpreter():
    result = fs.get_executable_path()
    assert result == Path(sys.executable.strip())
    assert fs.is_regular_file(result) is True