"""Attach credentials and routing headers to Datastore calls.

Every call to the Datastore service carries two metadata entries:

* ``authorization: Bearer <token>``, with a token for the
  ``https://www.googleapis.com/auth/cloud-platform`` scope.
* ``x-goog-request-params``, which routes the call to the project (and database).

:py:class:`AuthInterceptor` adds both to each unary call on a
:py:mod:`grpc.aio` channel. Tokens come from a :py:class:`TokenProvider`.
The default, :py:class:`GoogleAuthTokenProvider`, uses Application Default
Credentials through :py:mod:`google.auth`.
"""

__all__ = (
    "AuthInterceptor",
    "AUTH_SCOPES",
    "GoogleAuthTokenProvider",
    "request_params",
    "StaticTokenProvider",
    "TokenProvider",
)

import abc
import asyncio
import logging
import typing

import google.auth
import google.auth.credentials
import google.auth.exceptions
import google.auth.transport.requests
import grpc

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

AUTH_SCOPES = ("https://www.googleapis.com/auth/cloud-platform",)

HEADER_AUTHORIZATION = "authorization"
HEADER_REQUEST_PARAMS = "x-goog-request-params"


class TokenProvider(typing.Protocol):
    """Source of OAuth2 access tokens."""

    @abc.abstractmethod
    async def token(self, scopes: typing.Sequence[str]) -> str:
        """Get a currently valid access token for *scopes*.

        Raises:
            AuthenticationError: if no token can be obtained.
        """
        raise NotImplementedError


class StaticTokenProvider:
    """Always provide the same token, such as one obtained out of band."""

    def __init__(self, token: str):
        self._token = token

    def __repr__(self):
        return f"<{self.__class__.__qualname__}>"

    async def token(self, scopes: typing.Sequence[str]) -> str:
        return self._token


class GoogleAuthTokenProvider:
    """Provide tokens from :py:mod:`google.auth` credentials.

    If *credentials* is None, Application Default Credentials are discovered on
    first use. Expired tokens are refreshed before they are returned.
    Discovery and refresh are blocking network operations, so they run in a
    worker thread.
    """

    def __init__(self, credentials: typing.Optional[google.auth.credentials.Credentials] = None):
        self._credentials = credentials
        self._lock = asyncio.Lock()

    async def token(self, scopes: typing.Sequence[str]) -> str:
        async with self._lock:
            try:
                if self._credentials is None:
                    self._credentials, project = await asyncio.to_thread(google.auth.default, scopes=list(scopes))
                    logger.debug(f"Using application default credentials (project {project}).")
                else:
                    self._credentials = google.auth.credentials.with_scopes_if_required(
                        self._credentials, list(scopes)
                    )
                if not self._credentials.valid:
                    logger.debug("Refreshing access token.")
                    await asyncio.to_thread(self._credentials.refresh, google.auth.transport.requests.Request())
            except google.auth.exceptions.GoogleAuthError as e:
                raise AuthenticationError(f"Could not get an access token: {e}") from e
            return self._credentials.token


def request_params(project_id: str, database_id: typing.Optional[str] = None) -> str:
    """Value of the ``x-goog-request-params`` routing header."""
    if database_id:
        return f"project_id={project_id}&database_id={database_id}"
    return f"project_id={project_id}"


class AuthInterceptor(grpc.aio.UnaryUnaryClientInterceptor):
    """Add the bearer token and routing header to each unary call."""

    def __init__(
        self,
        project_id: str,
        database_id: typing.Optional[str],
        token_provider: TokenProvider,
        scopes: typing.Sequence[str] = AUTH_SCOPES,
    ):
        self.request_params = request_params(project_id, database_id)
        self._token_provider = token_provider
        self._scopes = tuple(scopes)

    async def intercept_unary_unary(self, continuation, client_call_details: grpc.aio.ClientCallDetails, request):
        token = await self._token_provider.token(self._scopes)
        pairs = [
            (key, value)
            for key, value in (client_call_details.metadata or ())
            if key not in (HEADER_AUTHORIZATION, HEADER_REQUEST_PARAMS)
        ]
        pairs.append((HEADER_AUTHORIZATION, f"Bearer {token}"))
        pairs.append((HEADER_REQUEST_PARAMS, self.request_params))
        details = grpc.aio.ClientCallDetails(
            method=client_call_details.method,
            timeout=client_call_details.timeout,
            metadata=grpc.aio.Metadata(*pairs),
            credentials=client_call_details.credentials,
            wait_for_ready=client_call_details.wait_for_ready,
        )
        return await continuation(details, request)
