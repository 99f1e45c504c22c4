"""Asynchronous client for the Cloud Datastore v1 service.

Example::

    import asyncio

    from clouddatastore.client import Datastore
    from clouddatastore.entity import EntityBuilder


    async def main():
        async with await Datastore.connect("my-project") as datastore:
            book = EntityBuilder().with_key_name("Book", "book_one").add_string("title", "Book One").build()
            await datastore.upsert_entity(book)

    asyncio.run(main())

Calls that fail on the server raise :py:class:`~clouddatastore.exceptions.RpcError`
with the gRPC status code. Entities loaded into model types are converted with
the model's ``from_entity()``, and its
:py:class:`~clouddatastore.exceptions.EntityConversionError` propagates.
"""

from __future__ import annotations

__all__ = (
    "ClientConfiguration",
    "configuration",
    "Datastore",
    "DEFAULT_ENDPOINT",
    "parse_endpoint",
)

import asyncio
import dataclasses
import logging
import os
import typing
import urllib.parse

import grpc

from . import v1
from .auth import AuthInterceptor
from .auth import GoogleAuthTokenProvider
from .auth import TokenProvider
from .entity import as_entity
from .entity import as_key
from .entity import EntityModel
from .exceptions import ConfigurationError
from .exceptions import InvalidEndpoint
from .exceptions import RpcError
from .exceptions import TransportError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

DEFAULT_ENDPOINT = "datastore.googleapis.com:443"

_Model = typing.TypeVar("_Model", bound=EntityModel)


def parse_endpoint(endpoint: str) -> str:
    """Get the ``host:port`` gRPC target for *endpoint*.

    *endpoint* may be ``host``, ``host:port``, or an ``https://`` URL with no path.
    The port defaults to 443.

    Raises:
        InvalidEndpoint: if *endpoint* cannot be interpreted.
    """
    if not endpoint or endpoint != endpoint.strip():
        raise InvalidEndpoint(f"Invalid endpoint: {endpoint!r}")
    if "://" in endpoint:
        parts = urllib.parse.urlsplit(endpoint)
        if parts.scheme != "https":
            raise InvalidEndpoint(f"Invalid endpoint: {endpoint!r}. Only https is supported.")
    else:
        parts = urllib.parse.urlsplit("//" + endpoint)
    if parts.path not in ("", "/") or parts.query or parts.fragment or parts.username or parts.password:
        raise InvalidEndpoint(f"Invalid endpoint: {endpoint!r}. Expected a host and optional port.")
    try:
        host = parts.hostname
        port = parts.port or 443
    except ValueError as e:
        raise InvalidEndpoint(f"Invalid endpoint: {endpoint!r}. {e}") from e
    if not host:
        raise InvalidEndpoint(f"Invalid endpoint: {endpoint!r}. Missing host.")
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}"


@dataclasses.dataclass(frozen=True)
class ClientConfiguration:
    """Connection settings for :py:meth:`Datastore.connect`.

    See also:
        * :py:func:`clouddatastore.client.configuration()`
    """

    project_id: str
    database_id: str = ""
    """Empty for the default database."""

    endpoint: str = DEFAULT_ENDPOINT
    connect_timeout: float = 30.0
    """Seconds to wait for the channel to become ready."""

    timeout: typing.Optional[float] = None
    """Deadline in seconds for each call, or None for no deadline."""

    def __post_init__(self):
        if not self.project_id:
            raise ConfigurationError("A project id is required.")
        parse_endpoint(self.endpoint)


def configuration(*args, **kwargs) -> ClientConfiguration:
    """Get a client configuration.

    With no arguments, read the environment:

    * ``DATASTORE_PROJECT_ID`` (required)
    * ``DATASTORE_DATABASE_ID``
    * ``DATASTORE_ENDPOINT``

    If arguments are provided, try to construct a `ClientConfiguration` directly.

    Raises:
        ConfigurationError: if no project id is available.
    """
    if len(args) > 0 or len(kwargs) > 0:
        config = ClientConfiguration(*args, **kwargs)
    else:
        project_id = os.environ.get("DATASTORE_PROJECT_ID", "")
        if not project_id:
            raise ConfigurationError("Set DATASTORE_PROJECT_ID to the Google Cloud project to use.")
        config = ClientConfiguration(
            project_id=project_id,
            database_id=os.environ.get("DATASTORE_DATABASE_ID", ""),
            endpoint=os.environ.get("DATASTORE_ENDPOINT", DEFAULT_ENDPOINT),
        )
    logger.debug(f"Configuration: {config}")
    return config


class Datastore:
    """Client for one Datastore database.

    Use :py:meth:`connect` to open an authenticated channel. The constructor
    accepts any object with the ``DatastoreStub`` coroutine methods, which is
    how tests substitute the service.

    Every request is sent with this client's project id and database id.
    """

    def __init__(
        self,
        project_id: str,
        database_id: typing.Optional[str] = None,
        *,
        stub,
        channel: typing.Optional[grpc.aio.Channel] = None,
        timeout: typing.Optional[float] = None,
    ):
        self.project_id = project_id
        self.database_id = database_id or ""
        self.timeout = timeout
        self._stub = stub
        self._channel = channel

    def __repr__(self):
        return f"<{self.__class__.__qualname__} project={self.project_id!r} database={self.database_id!r}>"

    @classmethod
    async def connect(
        cls,
        project_id: typing.Union[str, ClientConfiguration],
        database_id: typing.Optional[str] = None,
        token_provider: typing.Optional[TokenProvider] = None,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        connect_timeout: float = 30.0,
        timeout: typing.Optional[float] = None,
    ) -> "Datastore":
        """Open a TLS channel to the service and wait until it is ready.

        *project_id* may be a :py:class:`ClientConfiguration`, in which case the
        connection settings are taken from it.

        If *token_provider* is None, Application Default Credentials are used.

        Raises:
            InvalidEndpoint: if *endpoint* is not usable.
            TransportError: if the channel is not ready within *connect_timeout* seconds.
        """
        if isinstance(project_id, ClientConfiguration):
            config = project_id
            project_id = config.project_id
            database_id = config.database_id
            endpoint = config.endpoint
            connect_timeout = config.connect_timeout
            timeout = config.timeout
        target = parse_endpoint(endpoint)
        if token_provider is None:
            token_provider = GoogleAuthTokenProvider()
        interceptor = AuthInterceptor(project_id, database_id, token_provider)

        logger.info(f"Connecting to {target} for project {project_id}.")
        channel = grpc.aio.secure_channel(target, grpc.ssl_channel_credentials(), interceptors=[interceptor])
        try:
            await asyncio.wait_for(channel.channel_ready(), timeout=connect_timeout)
        except asyncio.TimeoutError as e:
            await channel.close()
            raise TransportError(f"Timed out connecting to {target} after {connect_timeout}s.") from e
        except BaseException:
            await channel.close()
            raise
        logger.debug(f"Channel to {target} is ready.")
        return cls(project_id, database_id, stub=v1.DatastoreStub(channel), channel=channel, timeout=timeout)

    async def close(self):
        if self._channel is not None:
            channel = self._channel
            self._channel = None
            await channel.close()
            logger.debug(f"Closed {self!r}.")

    async def __aenter__(self) -> "Datastore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        # Don't suppress exceptions.
        return False

    async def _call(self, method: str, request):
        rpc = getattr(self._stub, method)
        logger.debug(f"Calling {method} for {self!r}.")
        try:
            return await rpc(request, timeout=self.timeout)
        except grpc.aio.AioRpcError as e:
            logger.debug(f"{method} failed: {e.code()}")
            raise RpcError(e.code(), e.details()) from e

    def _commit_request(self, mutations: typing.Iterable[v1.Mutation], transactional: bool) -> v1.CommitRequest:
        request = v1.CommitRequest(
            project_id=self.project_id,
            database_id=self.database_id,
            mutations=list(mutations),
        )
        if transactional:
            request.mode = v1.CommitRequest.TRANSACTIONAL
            request.single_use_transaction.read_write.SetInParent()
        else:
            request.mode = v1.CommitRequest.NON_TRANSACTIONAL
        return request

    async def commit(self, request: v1.CommitRequest) -> v1.CommitResponse:
        """Send a prepared commit, addressed to this client's database."""
        request = _addressed(request, self.project_id, self.database_id)
        return await self._call("Commit", request)

    async def upsert_entity(self, entity) -> v1.CommitResponse:
        """Insert or replace one entity, outside of a transaction.

        *entity* is an Entity, or an object that provides ``to_entity()``.
        """
        mutation = v1.Mutation(upsert=as_entity(entity))
        return await self._call("Commit", self._commit_request([mutation], transactional=False))

    async def upsert_entities(self, entities: typing.Iterable) -> v1.CommitResponse:
        """Insert or replace several entities in a single-use read-write transaction.

        Either all of the entities are written or none are.
        """
        mutations = [v1.Mutation(upsert=as_entity(entity)) for entity in entities]
        return await self._call("Commit", self._commit_request(mutations, transactional=True))

    async def delete_entity(self, key) -> v1.CommitResponse:
        """Delete the entity with *key*, outside of a transaction. Deleting a missing entity succeeds.

        *key* is a Key, or an object that provides ``to_key()``.
        """
        mutation = v1.Mutation(delete=as_key(key))
        return await self._call("Commit", self._commit_request([mutation], transactional=False))

    async def delete_entities(self, keys: typing.Iterable) -> v1.CommitResponse:
        """Delete the entities with *keys* in a single-use read-write transaction."""
        mutations = [v1.Mutation(delete=as_key(key)) for key in keys]
        return await self._call("Commit", self._commit_request(mutations, transactional=True))

    async def lookup(self, keys: typing.Iterable) -> v1.LookupResponse:
        request = v1.LookupRequest(
            project_id=self.project_id,
            database_id=self.database_id,
            keys=[as_key(key) for key in keys],
        )
        return await self._call("Lookup", request)

    async def lookup_entity(self, key, model: typing.Type[_Model]) -> typing.Optional[_Model]:
        """Get the entity with *key* as an instance of *model*, or None if it does not exist.

        Raises:
            EntityConversionError: if *model* cannot be built from the stored entity.
        """
        response = await self.lookup([key])
        if len(response.found) == 0:
            return None
        result = response.found[0]
        if not result.HasField("entity"):
            return None
        return model.from_entity(result.entity)

    async def run_query(self, request: v1.RunQueryRequest) -> v1.RunQueryResponse:
        """Run a query, addressed to this client's database.

        The project id and database id of *request* are replaced. *request* itself is not modified.
        """
        request = _addressed(request, self.project_id, self.database_id)
        return await self._call("RunQuery", request)

    async def run_gql_query(self, query_string: str, *, allow_literals: bool = True) -> v1.RunQueryResponse:
        gql = v1.GqlQuery(query_string=query_string, allow_literals=allow_literals)
        return await self.run_query(v1.RunQueryRequest(gql_query=gql))

    async def load_entities(self, model: typing.Type[_Model]) -> typing.List[_Model]:
        """Load every entity of kind ``model.kind``.

        Result batches are followed until the query is exhausted.

        Raises:
            EntityConversionError: if any entity cannot be converted to *model*.
        """
        results = []
        cursor = b""
        while True:
            query = v1.Query(kind=[v1.KindExpression(name=model.kind)], start_cursor=cursor)
            response = await self.run_query(v1.RunQueryRequest(query=query))
            if not response.HasField("batch"):
                break
            batch = response.batch
            results.extend(
                model.from_entity(result.entity) for result in batch.entity_results if result.HasField("entity")
            )
            if batch.more_results != v1.QueryResultBatch.NOT_FINISHED or not batch.end_cursor:
                break
            cursor = batch.end_cursor
        logger.debug(f"Loaded {len(results)} {model.kind} entities.")
        return results


def _addressed(request, project_id: str, database_id: str):
    copy = type(request)()
    copy.CopyFrom(request)
    copy.project_id = project_id
    copy.database_id = database_id
    return copy
