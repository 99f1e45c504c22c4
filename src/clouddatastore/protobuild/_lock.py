"""Directory locking for binding regeneration.

Two simultaneous regenerations into the same output directory would race on the
final rename. A lock directory next to the output serializes them: the second
process fails instead of interleaving writes.
"""

__all__ = ["LockException", "is_locked", "scoped_directory_lock"]

import contextlib
import logging
import os
import pathlib
import typing
import warnings

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_lock_directory_name = ".clouddatastore_lock"
"""Name to use for lock directories (module constant)"""


class LockException(Exception):
    """The requested lock could not be obtained."""


def is_locked(path: pathlib.Path):
    """Look for evidence of a lock without attempting a lock."""
    return path.joinpath(_lock_directory_name).exists()


def _lock_directory(path: pathlib.Path) -> pathlib.Path:
    """Create the lock token in *path*.

    ``mkdir`` either creates the token or fails, atomically, so this is safe
    between processes on the same filesystem.

    Raises:
        LockException if the lock could not be obtained.

    """
    token_path = pathlib.Path(path).resolve().joinpath(_lock_directory_name)
    try:
        token_path.mkdir()
    except FileExistsError as e:
        raise LockException("{} already exists".format(token_path)) from e
    logger.debug(f"Acquired {token_path}")
    return token_path


class _Lock:
    """Own a lock token in the filesystem.

    The caller is responsible for calling `.release()` exactly once.
    If the lock is destroyed while still active, a warning is issued and the
    token is removed.
    """

    @property
    def name(self):
        """The filesystem token held by this lock."""
        return self._token

    def __init__(self, token: pathlib.Path):
        if not os.path.isdir(token):
            raise ValueError("Provided object is not a usable filesystem token.")
        self._token = token

    def is_active(self):
        return self._token is not None

    def release(self):
        if self._token is None:
            raise ValueError("Attempting to release an inactive lock.")
        os.rmdir(self._token)
        logger.debug(f"Released {self._token}")
        self._token = None

    def __del__(self):
        if self._token is not None:
            warnings.warn(f"Lock object was not explicitly released! Token: {self._token}")
            token = self._token
            self._token = None
            if os.path.isdir(token):
                os.rmdir(token)


@contextlib.contextmanager
def scoped_directory_lock(path: typing.Union[str, os.PathLike]):
    """Hold a lock on an existing directory for the duration of the context.

    Raises:
         LockException if another process (or another context) holds the lock.

    Caveats:
        * The lock is advisory. Only code that uses this function respects it.
        * A hard crash can leave the lock directory behind. Remove it by hand.
    """
    token_path = _lock_directory(pathlib.Path(path))
    try:
        lock = _Lock(token_path)
    except ValueError as e:
        raise LockException("Could not create lock object.") from e
    try:
        yield lock
    finally:
        if not lock.is_active():
            warnings.warn(f"Lock object {lock.name} was released early.")
        else:
            lock.release()
