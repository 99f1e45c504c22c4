"""Configuration for pytest tests.

Several custom command line options are added to the pytest configuration,
but they must be provided *after* all standard pytest options.

The client and entity tests need Datastore bindings. When grpcio-tools is
available, bindings are generated for the test session from the trimmed schema
in ``tests/data/googleapis`` into a temporary directory that is searched ahead
of ``src/clouddatastore``. Bindings in the source tree are neither used nor
modified.
"""
import importlib.util
import logging
import pathlib
import shutil
import tempfile
import warnings

import pytest

import clouddatastore
import clouddatastore.protobuild

logger = logging.getLogger("pytest_config")
logger.setLevel(logging.DEBUG)

test_schema = pathlib.Path(__file__).parent / "data" / "googleapis"

_session_bindings = None


def pytest_addoption(parser):
    """Add command-line user options for the pytest invocation."""
    parser.addoption(
        "--rm-tmp",
        type=str,
        default="always",
        help='Remove temporary generated bindings "always" or "never".',
    )
    parser.addoption(
        "--network",
        action="store_true",
        default=False,
        help="run tests that fetch from public repositories or call live services",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "network: mark test as requiring network access")
    config.addinivalue_line("markers", "protobuild: mark test as requiring grpcio-tools")
    _generate_session_bindings(config)


def pytest_unconfigure(config):
    global _session_bindings
    if _session_bindings is not None:
        path = str(_session_bindings)
        if path in clouddatastore.__path__:
            clouddatastore.__path__.remove(path)
        if config.getoption("--rm-tmp") == "never":
            warnings.warn("Temporary directory not removed: {}".format(path))
        else:
            shutil.rmtree(path, ignore_errors=True)
        _session_bindings = None


def _generate_session_bindings(config):
    global _session_bindings
    if importlib.util.find_spec("grpc_tools") is None:
        logger.warning("grpcio-tools is not installed. Tests that need generated bindings will be skipped.")
        return
    directory = pathlib.Path(tempfile.mkdtemp(prefix="pytest_bindings_"))
    configuration = clouddatastore.protobuild.configuration(
        project_dir=directory,
        schema_root=test_schema,
        output="_generated",
    )
    result = clouddatastore.protobuild.generate(configuration)
    logger.debug(f"Generated {len(result.files)} files for the test session in {result.output}")
    clouddatastore.__path__.insert(0, str(directory))
    _session_bindings = directory


def pytest_collection_modifyitems(config, items):
    # Ref https://docs.pytest.org/en/latest/example/simple.html#control-skipping-of-tests-according-to-command-line-option  # noqa: E501
    skip_network = pytest.mark.skip(reason="only runs for --network")
    skip_protobuild = pytest.mark.skip(reason="requires grpcio-tools")
    has_protoc = importlib.util.find_spec("grpc_tools") is not None
    for item in items:
        if "network" in item.keywords and not config.getoption("--network"):
            item.add_marker(skip_network)
        if "protobuild" in item.keywords and not has_protoc:
            item.add_marker(skip_protobuild)


@pytest.fixture
def schema_copy(tmp_path) -> pathlib.Path:
    """Provide a project directory holding a writable copy of the test schema at ``proto/googleapis``."""
    project = tmp_path / "project"
    shutil.copytree(test_schema, project / "proto" / "googleapis")
    return project
