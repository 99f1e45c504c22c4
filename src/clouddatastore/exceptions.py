"""Exceptions thrown by clouddatastore are catchable as clouddatastore.CloudDatastoreError.

Additional common exceptions are defined in this module.
clouddatastore submodules may define additional exceptions, but all will be derived
from exceptions specified in clouddatastore.exceptions.
"""

import logging as _logging
import typing

if typing.TYPE_CHECKING:
    import grpc

logger = _logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


class CloudDatastoreError(Exception):
    """Base exception for clouddatastore package errors.

    Users should be able to use this base class to catch errors
    emitted by clouddatastore.
    """


class CloudDatastoreWarning(Warning):
    """Base Warning for clouddatastore package warnings.

    Users and testers should be able to use this base class to filter
    warnings emitted by clouddatastore.
    """


class RpcError(CloudDatastoreError):
    """The Datastore service answered a call with a non-OK gRPC status.

    The original :py:class:`grpc.aio.AioRpcError` is available as ``__cause__``.
    """

    def __init__(self, code: "grpc.StatusCode", details: typing.Optional[str] = None):
        self.code = code
        self.details = details or ""
        super().__init__(f"gRPC error: {getattr(code, 'name', code)}: {self.details}")


class TransportError(CloudDatastoreError):
    """A channel to the Datastore service could not be established."""


class InvalidEndpoint(CloudDatastoreError):
    """The configured service endpoint cannot be used as a gRPC target."""


class EntityConversionError(CloudDatastoreError):
    """Failed to convert an entity to or from a Python object."""


class EntityValueError(EntityConversionError):
    """An entity property (or the entity key) is missing or has the wrong type."""


class KeyPathError(EntityConversionError):
    """A key does not have the path element required by the caller."""


class AuthenticationError(CloudDatastoreError):
    """An access token for the Datastore service could not be obtained."""


class ConfigurationError(CloudDatastoreError):
    """Unusable configuration."""
