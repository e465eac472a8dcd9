"""Gaggiuino local API client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from http import HTTPMethod, HTTPStatus
from types import TracebackType
from typing import Self, TypeVar

from aiohttp import ClientSession, ClientTimeout
from aiohttp.client_exceptions import ClientError, InvalidURL
from yarl import URL

from pygaggiuino.const import (
    API_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_RECENT_SHOTS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RESOURCE_TIMEOUT,
)
from pygaggiuino.exceptions import (
    ConnectionFailed,
    InvalidConfiguration,
    InvalidResponse,
    NotFound,
    RequestTimeout,
)
from pygaggiuino.models import LatestShot, MachineStatus, Profile, Shot
from pygaggiuino.util import decode_list, decode_object, is_success

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class GaggiuinoClient:
    """Client for the HTTP API a Gaggiuino machine exposes on the local network.

    The client only holds its configuration and a reusable HTTP session, so
    one instance can be shared by any number of concurrent callers.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        resource_timeout: float = DEFAULT_RESOURCE_TIMEOUT,
        client: ClientSession | None = None,
    ) -> None:
        """Set the client up.

        Args:
            base_url: Address of the machine, e.g. ``http://gaggiuino.local``.
            request_timeout: Seconds to wait for a connection or a chunk of data.
            resource_timeout: Seconds a whole request may take.
            client: Session to reuse. When omitted one is created on first use
                and closed by ``close``.
        """
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout
        self.resource_timeout = resource_timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None

    @property
    def _session(self) -> ClientSession:
        if self._client is None:
            self._client = ClientSession()
        return self._client

    @property
    def _timeout(self) -> ClientTimeout:
        return ClientTimeout(
            total=self.resource_timeout,
            sock_connect=self.request_timeout,
            sock_read=self.request_timeout,
        )

    def _url(self, path: str) -> URL:
        """Build the full URL of an endpoint."""
        try:
            url = URL(f"{self.base_url}{API_PATH}{path}")
        except (ValueError, TypeError) as ex:
            raise InvalidConfiguration(
                f"Base URL {self.base_url!r} is not a valid URL: {ex}"
            ) from ex
        if not url.is_absolute() or url.scheme not in ("http", "https"):
            raise InvalidConfiguration(
                f"Base URL {self.base_url!r} must be an absolute http(s) URL"
            )
        return url

    async def _rest_api_call(self, path: str, method: HTTPMethod) -> bytes:
        """Wrapper for the API call."""
        url = self._url(path)
        _LOGGER.debug("%s request to %s", method, url)

        try:
            async with self._session.request(
                method=method,
                url=url,
                timeout=self._timeout,
            ) as response:
                body = await response.read()
        except InvalidURL as ex:
            raise InvalidConfiguration(f"Invalid URL {url}: {ex}") from ex
        except TimeoutError as ex:
            raise RequestTimeout(f"Request to {url} timed out") from ex
        except ClientError as ex:
            raise ConnectionFailed(
                f"Request to endpoint {url} failed with error: {ex}"
            ) from ex

        # ensure status code indicates success
        if is_success(response):
            _LOGGER.debug("Request to %s successful", url)
            return body

        if response.status == HTTPStatus.NOT_FOUND:
            raise NotFound(f"Resource {url} not found (404)")

        raise ConnectionFailed(f"HTTP {response.status}")

    async def _get_first(self, path: str, model: type[T]) -> T:
        """Get an endpoint answering with a single element list."""
        body = await self._rest_api_call(path, HTTPMethod.GET)
        results = decode_list(model, body)
        if not results:
            raise InvalidResponse(f"Expected one element from {path}, got none")
        return results[0]

    # region system
    async def get_machine_status(self) -> MachineStatus:
        """Get the live status of the machine."""
        return await self._get_first("/system/status", MachineStatus)

    async def is_healthy(self) -> bool:
        """Return True if the machine answers the status endpoint."""
        try:
            await self.get_machine_status()
        except Exception as ex:  # pylint: disable=broad-except
            _LOGGER.debug("Health check failed: %s", ex)
            return False
        return True

    # endregion
    # region shots
    async def get_latest_shot_id(self) -> int:
        """Get the id of the most recently pulled shot."""
        latest = await self._get_first("/shots/latest", LatestShot)
        return latest.last_shot_id

    async def get_shot(self, shot_id: int) -> Shot:
        """Get a shot by its id."""
        body = await self._rest_api_call(f"/shots/{shot_id}", HTTPMethod.GET)
        return decode_object(Shot, body)

    async def get_latest_shot(self) -> Shot:
        """Get the most recently pulled shot."""
        return await self.get_shot(await self.get_latest_shot_id())

    async def get_shots(self, shot_ids: Iterable[int]) -> list[Shot]:
        """Get several shots concurrently, sorted by id.

        Fails as a whole as soon as one of the shots can't be fetched; the
        requests still running are cancelled and awaited before raising.
        """
        shot_ids = list(shot_ids)
        _LOGGER.debug("Fetching shots %s", shot_ids)
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self.get_shot(shot_id)) for shot_id in shot_ids
                ]
        except ExceptionGroup as ex:
            # surface the first failure with its own type
            raise ex.exceptions[0]
        return sorted((task.result() for task in tasks), key=lambda shot: shot.id)

    async def get_recent_shots(self, limit: int = DEFAULT_RECENT_SHOTS) -> list[Shot]:
        """Get up to ``limit`` of the most recent shots, oldest first."""
        latest_id = await self.get_latest_shot_id()
        start_id = max(1, latest_id - limit + 1)
        return await self.get_shots(range(start_id, latest_id + 1))

    # endregion
    # region profiles
    async def get_profiles(self) -> list[Profile]:
        """Get all profiles stored on the machine."""
        body = await self._rest_api_call("/profiles/all", HTTPMethod.GET)
        return decode_list(Profile, body)

    async def select_profile(self, profile_id: int) -> bool:
        """Make a profile the active one."""
        await self._rest_api_call(f"/profile-select/{profile_id}", HTTPMethod.POST)
        return True

    async def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile."""
        await self._rest_api_call(f"/profile-select/{profile_id}", HTTPMethod.DELETE)
        return True

    # endregion
