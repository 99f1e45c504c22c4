"""Synchronization of the schema submodule, against throwaway local repositories."""
import json
import pathlib
import shutil
import subprocess

import pytest

from clouddatastore.protobuild import configuration
from clouddatastore.protobuild import main
from clouddatastore.protobuild import submodule
from clouddatastore.protobuild import sync_submodule
from clouddatastore.protobuild.exceptions import SubmoduleSyncError
from clouddatastore.protobuild.generator import MANIFEST_FILENAME
from clouddatastore.protobuild.submodule import revision
from clouddatastore.protobuild.submodule import submodule_name

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="requires git")

test_schema = pathlib.Path(__file__).parent / "data" / "googleapis"


def git(*args, cwd) -> str:
    completed = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return completed.stdout.strip()


def commit_file(repo: pathlib.Path, name: str, text: str) -> str:
    path = repo.joinpath(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    git("add", name, cwd=repo)
    git("commit", "--quiet", "-m", f"Update {name}", cwd=repo)
    return git("rev-parse", "HEAD", cwd=repo)


@pytest.fixture
def git_environment(monkeypatch):
    """Isolate git from user configuration and allow local file transport for submodules."""
    settings = {
        "protocol.file.allow": "always",
        "user.name": "Test User",
        "user.email": "test@example.com",
        "commit.gpgsign": "false",
    }
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_COUNT", str(len(settings)))
    for i, (key, value) in enumerate(settings.items()):
        monkeypatch.setenv(f"GIT_CONFIG_KEY_{i}", key)
        monkeypatch.setenv(f"GIT_CONFIG_VALUE_{i}", value)


@pytest.fixture
def repositories(tmp_path, git_environment):
    """Provide an upstream schema repository and a project that vendors it at proto/googleapis."""
    upstream = tmp_path / "upstream"
    shutil.copytree(test_schema, upstream)
    git("init", "--quiet", "-b", "main", cwd=upstream)
    git("add", ".", cwd=upstream)
    git("commit", "--quiet", "-m", "Initial schema", cwd=upstream)

    project = tmp_path / "project"
    project.mkdir()
    git("init", "--quiet", "-b", "main", cwd=project)
    git("submodule", "--quiet", "add", str(upstream), "proto/googleapis", cwd=project)
    git("commit", "--quiet", "-m", "Vendor schema", cwd=project)
    return upstream, project


def test_submodule_name(repositories):
    upstream, project = repositories
    assert submodule_name(project, "proto/googleapis") == "proto/googleapis"
    with pytest.raises(SubmoduleSyncError):
        submodule_name(project, "proto/other")


def test_revision(repositories, tmp_path):
    upstream, project = repositories
    assert revision(project / "proto" / "googleapis") == git("rev-parse", "HEAD", cwd=upstream)
    # A subdirectory is not the top of a working tree.
    assert revision(project / "proto" / "googleapis" / "google") is None
    assert revision(tmp_path) is None


def test_sync(repositories):
    upstream, project = repositories
    vendored = project / "proto" / "googleapis"
    previous = git("rev-parse", "HEAD", cwd=vendored)
    latest = commit_file(upstream, "google/datastore/v1/README.md", "New upstream file.\n")

    result = sync_submodule(configuration(project_dir=project))
    assert result.changed
    assert result.name == "proto/googleapis"
    assert result.previous == previous
    assert result.current == latest
    assert git("rev-parse", "HEAD", cwd=vendored) == latest
    assert vendored.joinpath("google/datastore/v1/README.md").exists()

    again = sync_submodule(configuration(project_dir=project))
    assert not again.changed
    assert again.current == latest


def test_sync_follows_configured_branch(repositories):
    upstream, project = repositories
    git("checkout", "--quiet", "-b", "stable", cwd=upstream)
    stable = commit_file(upstream, "STABLE", "stable\n")
    git("checkout", "--quiet", "main", cwd=upstream)
    commit_file(upstream, "MAIN", "main\n")
    git("config", "--file", ".gitmodules", "submodule.proto/googleapis.branch", "stable", cwd=project)

    result = sync_submodule(configuration(project_dir=project))
    assert result.current == stable


def test_sync_initializes_submodule(repositories, tmp_path):
    upstream, project = repositories
    clone = tmp_path / "clone"
    git("clone", "--quiet", str(project), str(clone), cwd=tmp_path)
    assert not clone.joinpath("proto/googleapis/.git").exists()
    latest = commit_file(upstream, "NEW", "new\n")

    result = sync_submodule(configuration(project_dir=clone))
    assert result.current == latest
    assert clone.joinpath("proto/googleapis/google/datastore/v1/entity.proto").exists()


def test_sync_refuses_local_modifications(repositories):
    upstream, project = repositories
    vendored = project / "proto" / "googleapis"
    before = git("rev-parse", "HEAD", cwd=vendored)
    commit_file(upstream, "NEW", "new\n")
    entity = vendored / "google" / "datastore" / "v1" / "entity.proto"
    entity.write_text(entity.read_text() + "\n// local edit\n")

    with pytest.raises(SubmoduleSyncError, match="local modifications"):
        sync_submodule(configuration(project_dir=project))
    assert git("rev-parse", "HEAD", cwd=vendored) == before
    assert entity.read_text().endswith("// local edit\n")


def test_sync_fetch_failure_leaves_tree(repositories, tmp_path):
    upstream, project = repositories
    vendored = project / "proto" / "googleapis"
    before = git("rev-parse", "HEAD", cwd=vendored)
    git("remote", "set-url", "origin", str(tmp_path / "missing"), cwd=vendored)

    with pytest.raises(SubmoduleSyncError):
        sync_submodule(configuration(project_dir=project))
    assert git("rev-parse", "HEAD", cwd=vendored) == before
    assert git("status", "--porcelain", cwd=vendored) == ""


def test_sync_checkout_failure_restores_tree(repositories, monkeypatch):
    upstream, project = repositories
    vendored = project / "proto" / "googleapis"
    before = git("rev-parse", "HEAD", cwd=vendored)
    commit_file(upstream, "google/datastore/v1/entity.proto", "// replaced upstream\n")
    original = test_schema.joinpath("google/datastore/v1/entity.proto").read_text()
    run_git = submodule._git

    def interrupted_checkout(*args, cwd):
        if args[0] == "checkout" and "--force" not in args:
            # The working tree has moved when the failure is reported.
            run_git(*args, cwd=cwd)
            raise SubmoduleSyncError("checkout interrupted")
        return run_git(*args, cwd=cwd)

    monkeypatch.setattr(submodule, "_git", interrupted_checkout)
    with pytest.raises(SubmoduleSyncError, match="checkout interrupted"):
        sync_submodule(configuration(project_dir=project))
    assert git("rev-parse", "HEAD", cwd=vendored) == before
    assert git("status", "--porcelain", cwd=vendored) == ""
    assert vendored.joinpath("google/datastore/v1/entity.proto").read_text() == original


@pytest.mark.protobuild
def test_cli_generate_with_sync(repositories, capsys):
    upstream, project = repositories
    latest = commit_file(upstream, "google/datastore/v1/README.md", "New upstream file.\n")
    options = ["--project-dir", str(project), "--output", "gen", "--package", "generated_pkg"]

    assert main(["generate", "--sync", *options]) == 0
    out = capsys.readouterr().out
    assert f"-> {latest[:12]}" in out
    assert "Generated" in out
    assert git("rev-parse", "HEAD", cwd=project / "proto" / "googleapis") == latest
    manifest = json.loads(project.joinpath("gen", MANIFEST_FILENAME).read_text())
    assert manifest["schema_revision"] == latest

    assert main(["check", *options]) == 0


def test_sync_unregistered_schema_root(repositories):
    upstream, project = repositories
    project.joinpath("schemas").mkdir()
    with pytest.raises(SubmoduleSyncError, match="not a registered submodule"):
        sync_submodule(configuration(project_dir=project, schema_root="schemas"))


@pytest.mark.network
def test_sync_googleapis(tmp_path, git_environment):
    """Vendor the real googleapis repository and synchronize it."""
    project = tmp_path / "project"
    project.mkdir()
    git("init", "--quiet", "-b", "main", cwd=project)
    git(
        "submodule",
        "--quiet",
        "add",
        "--depth",
        "1",
        "https://github.com/googleapis/googleapis.git",
        "proto/googleapis",
        cwd=project,
    )
    result = sync_submodule(configuration(project_dir=project))
    assert result.current
    assert project.joinpath("proto/googleapis/google/datastore/v1/datastore.proto").exists()
