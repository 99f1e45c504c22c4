"""Advisory directory lock used while replacing generated bindings."""
import pytest

from clouddatastore.protobuild import _lock


def test_scoped_directory_lock(tmp_path):
    assert not _lock.is_locked(tmp_path)
    with _lock.scoped_directory_lock(tmp_path) as lock:
        assert lock.is_active()
        assert _lock.is_locked(tmp_path)
        with pytest.raises(_lock.LockException):
            with _lock.scoped_directory_lock(tmp_path):
                ...
    assert not lock.is_active()
    assert not _lock.is_locked(tmp_path)


def test_lock_released_on_error(tmp_path):
    with pytest.raises(RuntimeError):
        with _lock.scoped_directory_lock(tmp_path):
            raise RuntimeError("boom")
    assert not _lock.is_locked(tmp_path)


def test_early_release_warns(tmp_path):
    with pytest.warns(UserWarning):
        with _lock.scoped_directory_lock(tmp_path) as lock:
            lock.release()
    with pytest.raises(ValueError):
        lock.release()
