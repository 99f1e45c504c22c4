from __future__ import annotations

from clouddatastore.exceptions import CloudDatastoreError
from clouddatastore.exceptions import ConfigurationError as _ConfigurationError


class ProtobuildError(CloudDatastoreError):
    """Base exception for `clouddatastore.protobuild` tooling."""


class ProtobuildUnavailable(ProtobuildError):
    """The binding generator needs the optional ``protobuild`` dependencies.

    Install them with ``pip install clouddatastore[protobuild]``.
    """


class SchemaError(ProtobuildError):
    """The vendored schema tree is missing, incomplete, or malformed."""


class GenerationError(ProtobuildError):
    """Bindings could not be generated. Previously generated bindings are untouched."""


class SubmoduleSyncError(ProtobuildError):
    """The schema submodule could not be updated. The vendored tree is untouched."""


class ConfigurationError(ProtobuildError, _ConfigurationError):
    """Unusable protobuild configuration."""
