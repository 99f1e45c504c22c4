"""Synchronize the vendored schema submodule with its upstream repository.

This is the equivalent of ``git submodule update --remote <path>``, arranged
so that a failure leaves the vendored tree exactly as it was: nothing in the
submodule working tree changes until the upstream commit has been fetched, and
a failed checkout is rolled back to the previous commit.
"""

from __future__ import annotations

__all__ = ("revision", "submodule_name", "sync_submodule", "SyncResult")

import dataclasses
import logging
import pathlib
import subprocess
import typing

from .exceptions import SubmoduleSyncError

if typing.TYPE_CHECKING:
    from .configuration import ProtobuildConfiguration

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_git_timeout = 600
"""Seconds to wait for a git command. Fetching googleapis can be slow."""


@dataclasses.dataclass(frozen=True)
class SyncResult:
    path: pathlib.Path
    name: str
    previous: str
    current: str

    @property
    def changed(self) -> bool:
        return self.previous != self.current


def _run_git(*args: str, cwd: pathlib.Path) -> subprocess.CompletedProcess:
    command = ["git", *args]
    logger.debug(f"Running {' '.join(command)} in {cwd}")
    try:
        return subprocess.run(command, cwd=cwd, capture_output=True, text=True, timeout=_git_timeout)
    except FileNotFoundError as e:
        raise SubmoduleSyncError("The git executable could not be found.") from e
    except subprocess.TimeoutExpired as e:
        raise SubmoduleSyncError(f"Timed out after {_git_timeout}s: {' '.join(command)}") from e


def _git(*args: str, cwd: pathlib.Path) -> str:
    """Run a git command and return its stripped standard output.

    Raises:
        SubmoduleSyncError: if the command fails.
    """
    completed = _run_git(*args, cwd=cwd)
    if completed.returncode != 0:
        raise SubmoduleSyncError(f"git {' '.join(args)} failed in {cwd}: {completed.stderr.strip()}")
    return completed.stdout.strip()


def _git_config(toplevel: pathlib.Path, *args: str) -> typing.Optional[str]:
    """Read from the superproject's .gitmodules. Missing keys give None."""
    completed = _run_git("config", "--file", ".gitmodules", *args, cwd=toplevel)
    if completed.returncode == 1:
        return None
    if completed.returncode != 0:
        raise SubmoduleSyncError(f"Could not read .gitmodules in {toplevel}: {completed.stderr.strip()}")
    return completed.stdout.strip()


def submodule_name(toplevel: pathlib.Path, path: str) -> str:
    """Find the name of the submodule registered at *path* (relative to *toplevel*).

    Raises:
        SubmoduleSyncError: if no submodule is registered at *path*.
    """
    entries = _git_config(toplevel, "--get-regexp", r"^submodule\..*\.path$") or ""
    for line in entries.splitlines():
        key, _, value = line.partition(" ")
        if value.strip() == path:
            return key[len("submodule.") : -len(".path")]
    raise SubmoduleSyncError(f"{path} is not a registered submodule of {toplevel}.")


def revision(path: typing.Union[str, pathlib.Path]) -> typing.Optional[str]:
    """Get the checked-out commit of the git working tree rooted exactly at *path*.

    Returns None if *path* is not the top of a git working tree (for instance, a
    plain directory of protos inside some other repository).
    """
    path = pathlib.Path(path).resolve()
    try:
        toplevel = _git("rev-parse", "--show-toplevel", cwd=path)
        if pathlib.Path(toplevel).resolve() != path:
            return None
        return _git("rev-parse", "HEAD", cwd=path)
    except SubmoduleSyncError as e:
        logger.debug(f"No revision for {path}: {e}")
        return None


def sync_submodule(configuration: "ProtobuildConfiguration") -> SyncResult:
    """Check out the current upstream head for the schema submodule.

    The tracked branch is ``submodule.<name>.branch`` from ``.gitmodules``, or the
    remote ``HEAD`` when none is configured.

    Raises:
        SubmoduleSyncError: if the submodule is not registered, has local modifications,
            or the upstream commit cannot be fetched or checked out. The vendored tree
            is left unchanged.
    """
    toplevel = pathlib.Path(_git("rev-parse", "--show-toplevel", cwd=configuration.project_dir)).resolve()
    path = configuration.schema_path
    try:
        relative = path.relative_to(toplevel).as_posix()
    except ValueError:
        raise SubmoduleSyncError(f"{path} is outside of repository {toplevel}.")
    name = submodule_name(toplevel, relative)

    if not path.joinpath(".git").exists():
        logger.info(f"Initializing submodule {name} at {relative}.")
        _git("submodule", "update", "--init", "--", relative, cwd=toplevel)

    if _git("status", "--porcelain", cwd=path):
        raise SubmoduleSyncError(f"Submodule {relative} has local modifications. Commit or discard them first.")

    previous = _git("rev-parse", "HEAD", cwd=path)
    branch = _git_config(toplevel, "--get", f"submodule.{name}.branch") or "HEAD"
    if branch == ".":
        # Track the branch of the same name as the superproject's current branch.
        branch = _git("rev-parse", "--abbrev-ref", "HEAD", cwd=toplevel)

    logger.info(f"Fetching {branch} for submodule {name}.")
    _git("fetch", "--quiet", "origin", branch, cwd=path)
    current = _git("rev-parse", "--verify", "FETCH_HEAD^{commit}", cwd=path)

    result = SyncResult(path=path, name=name, previous=previous, current=current)
    if not result.changed:
        logger.info(f"Submodule {name} is already at {current}.")
        return result

    try:
        _git("checkout", "--quiet", "--detach", current, cwd=path)
    except SubmoduleSyncError:
        logger.error(f"Checkout of {current} failed. Restoring {previous}.")
        # The working tree was clean before the checkout, so forcing discards nothing of the user's.
        _git("checkout", "--quiet", "--force", "--detach", previous, cwd=path)
        raise
    logger.info(f"Submodule {name} updated from {previous} to {current}.")
    return result
