"""Tests for ObjectRepository."""

import os
import stat
from pathlib import Path

import pytest

import localcas.repositories.object_repository as repo_module
from localcas.core.errors import ObjectNotFoundError, StorageIOError
from localcas.repositories import ObjectRepository

HASH_A = "95d09f2b10159347eece71399a7e2e907ea3df4f"
HASH_B = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"


def test_save_uses_two_level_fanout(object_repo: ObjectRepository) -> None:
    path = object_repo.save_object(HASH_A, b"data")
    assert path == object_repo.repo_path / "objects" / "95" / "d09f2b10159347eece71399a7e2e907ea3df4f"
    assert path.read_bytes() == b"data"


def test_save_then_load(object_repo: ObjectRepository) -> None:
    object_repo.save_object(HASH_A, b"compressed bytes")
    assert object_repo.load_object(HASH_A) == b"compressed bytes"


def test_save_is_idempotent(object_repo: ObjectRepository) -> None:
    object_repo.save_object(HASH_A, b"same")
    object_repo.save_object(HASH_A, b"same")
    fanout = object_repo.repo_path / "objects" / "95"
    assert [p.name for p in fanout.iterdir()] == [HASH_A[2:]]


def test_save_leaves_no_temp_files(object_repo: ObjectRepository) -> None:
    object_repo.save_object(HASH_A, b"x")
    fanout = object_repo.repo_path / "objects" / "95"
    assert not [p for p in fanout.iterdir() if p.name.startswith(repo_module.TEMP_PREFIX)]


@pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
def test_saved_record_mode(object_repo: ObjectRepository) -> None:
    path = object_repo.save_object(HASH_A, b"x")
    assert stat.S_IMODE(path.stat().st_mode) == repo_module.OBJECT_FILE_MODE


def test_save_without_objects_dir_fails(tmp_path: Path) -> None:
    repo = ObjectRepository(tmp_path / "not-initialized")
    with pytest.raises(StorageIOError) as excinfo:
        repo.save_object(HASH_A, b"x")
    assert "95" in excinfo.value.path


def test_failed_rename_cleans_up_temp_file(
    object_repo: ObjectRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail_replace(src: str, dst: str) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(repo_module.os, "replace", fail_replace)
    with pytest.raises(StorageIOError, match="No space left"):
        object_repo.save_object(HASH_A, b"x")

    fanout = object_repo.repo_path / "objects" / "95"
    assert list(fanout.iterdir()) == []
    assert not (fanout / HASH_A[2:]).exists()


def test_load_missing_raises_not_found(object_repo: ObjectRepository) -> None:
    with pytest.raises(ObjectNotFoundError) as excinfo:
        object_repo.load_object(HASH_A)
    assert excinfo.value.hash_val == HASH_A


def test_load_unreadable_path_raises_io_error(object_repo: ObjectRepository) -> None:
    # A directory where the record should be
    (object_repo.repo_path / "objects" / "95" / HASH_A[2:]).mkdir(parents=True)
    with pytest.raises(StorageIOError):
        object_repo.load_object(HASH_A)


def test_object_size(object_repo: ObjectRepository) -> None:
    object_repo.save_object(HASH_A, b"12345")
    assert object_repo.object_size(HASH_A) == 5


def test_object_size_missing(object_repo: ObjectRepository) -> None:
    with pytest.raises(ObjectNotFoundError):
        object_repo.object_size(HASH_A)


def test_iter_hashes_sorted_and_skips_strays(object_repo: ObjectRepository) -> None:
    object_repo.save_object(HASH_B, b"b")
    object_repo.save_object(HASH_A, b"a")
    objects_dir = object_repo.repo_path / "objects"
    (objects_dir / "95" / ".tmp-leftover").write_bytes(b"")
    (objects_dir / "95" / "short").write_bytes(b"")
    (objects_dir / "pack").mkdir()
    (objects_dir / "README").write_text("stray")

    assert list(object_repo.iter_hashes()) == [HASH_A, HASH_B]


def test_iter_hashes_without_objects_dir(tmp_path: Path) -> None:
    assert list(ObjectRepository(tmp_path / "nothing").iter_hashes()) == []


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_save_into_read_only_objects_dir(object_repo: ObjectRepository) -> None:
    objects_dir = object_repo.repo_path / "objects"
    objects_dir.chmod(0o500)
    try:
        with pytest.raises(StorageIOError):
            object_repo.save_object(HASH_A, b"x")
    finally:
        objects_dir.chmod(0o755)
