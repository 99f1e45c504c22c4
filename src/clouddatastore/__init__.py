"""clouddatastore - Google Cloud Datastore client built on generated gRPC bindings.

This package provides an asyncio client for the Cloud Datastore v1 API and the
build-time tooling that regenerates its protobuf bindings.

Usage:
    The client lives in :py:mod:`clouddatastore.client`. Entities are assembled
    and decoded with the helpers in :py:mod:`clouddatastore.entity`::

        from clouddatastore.client import Datastore
        from clouddatastore.entity import EntityBuilder

        async with await Datastore.connect("my-project") as datastore:
            entity = EntityBuilder().with_key_name("Book", "book_one").add_string("title", "One").build()
            await datastore.upsert_entity(entity)

Bindings:
    The message and stub modules under ``clouddatastore._generated`` are generated
    from the ``proto/googleapis`` submodule. They are not edited by hand. To
    refresh them, install the ``protobuild`` extra and run::

        python -m clouddatastore.protobuild generate --sync

    Refer to :py:mod:`clouddatastore.protobuild`.

The generated bindings are committed with their manifest. The client modules
import them; this module does not, so the build tooling can replace them.
"""

# Note: the __all__ module attribute documents the intended public interface of
# this module. Client and entity APIs are documented in their own modules.
__all__ = (
    "__version__",
    "CloudDatastoreError",
    "CloudDatastoreWarning",
    "logger",
)

from ._version import __version__
from .exceptions import CloudDatastoreError
from .exceptions import CloudDatastoreWarning
from .logger import logger

logger.debug("Imported {}".format(__name__))
