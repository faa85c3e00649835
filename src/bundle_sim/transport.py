from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from typing import Optional

import httpx
import requests

from bundle_sim.exceptions import TransportError
from bundle_sim.logging import logger, sanitize_url
from bundle_sim.utils.rpc import create_headers


class HTTPTransport:
    """
    Sends one JSON body per call over a blocking ``requests`` session.

    Args:
        session (Optional[requests.Session]): A session to reuse. The caller
          keeps ownership of it. When not given, every call opens and
          closes its own session.
        headers (Optional[dict]): Extra headers for every request.
    """

    def __init__(self, session: Optional[requests.Session] = None, headers: Optional[dict] = None):
        self._session = session
        self.headers = headers or {}

    def send(self, uri: str, body: str) -> str:
        """
        POST ``body`` to ``uri`` and return the full response text.
        The status code does not decide success; a non-2xx status is only logged.

        Raises:
            :class:`~bundle_sim.exceptions.TransportError`: When the request
              cannot be sent or the body cannot be read.
        """
        headers = create_headers(self.headers)
        try:
            with self._open_session() as session:
                response = session.post(uri, data=body.encode("utf-8"), headers=headers)
                text = response.text

        except requests.RequestException as err:
            raise TransportError(
                f"Request to '{sanitize_url(uri)}' failed: {err}", uri=uri
            ) from err

        _log_status(uri, response.status_code)
        return text

    @contextmanager
    def _open_session(self) -> Iterator[requests.Session]:
        if self._session is not None:
            yield self._session
            return

        with requests.Session() as session:
            yield session


class AsyncHTTPTransport:
    """
    Sends one JSON body per call over an ``httpx.AsyncClient``.

    The call suspends twice: once sending the request and waiting for the
    response headers, once reading the body.

    Args:
        client (Optional[httpx.AsyncClient]): A client to reuse. The caller
          keeps ownership of it. When not given, every call opens and
          closes its own client.
        headers (Optional[dict]): Extra headers for every request.
    """

    def __init__(
        self, client: Optional[httpx.AsyncClient] = None, headers: Optional[dict] = None
    ):
        self._client = client
        self.headers = headers or {}

    async def send(self, uri: str, body: str) -> str:
        """
        POST ``body`` to ``uri`` and return the full response text.
        The status code does not decide success; a non-2xx status is only logged.

        Raises:
            :class:`~bundle_sim.exceptions.TransportError`: When the request
              cannot be sent or the body cannot be read.
        """
        headers = dict(create_headers(self.headers))
        try:
            async with self._open_client() as client:
                request = client.build_request(
                    "POST", uri, content=body.encode("utf-8"), headers=headers
                )
                response = await client.send(request, stream=True)
                try:
                    await response.aread()
                finally:
                    await response.aclose()

                text = response.text

        except (httpx.HTTPError, httpx.InvalidURL) as err:
            raise TransportError(
                f"Request to '{sanitize_url(uri)}' failed: {err}", uri=uri
            ) from err

        _log_status(uri, response.status_code)
        return text

    @asynccontextmanager
    async def _open_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        async with httpx.AsyncClient() as client:
            yield client


def _log_status(uri: str, status_code: int):
    if 200 <= status_code < 300:
        logger.debug(f"'{sanitize_url(uri)}' responded with status {status_code}.")
    else:
        logger.warning(
            f"'{sanitize_url(uri)}' responded with status {status_code}. "
            "Decoding the body anyway."
        )
