"""HTTP client for the Untappd v4 API."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping

import httpx

from .config import Settings, get_settings
from .endpoints import ENDPOINTS, validate

logger = logging.getLogger("untappd_client")

Callback = Callable[[Exception | None, Any], Any]


def sanitize_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of params without None-valued entries."""
    return {key: value for key, value in (params or {}).items() if value is not None}


async def _notify(callback: Callback, error: Exception | None, data: Any) -> None:
    result = callback(error, data)
    if inspect.isawaitable(result):
        await result


class UntappdClient:
    """Thin wrapper around httpx for Untappd API calls.

    Every endpoint method takes an optional input mapping and an optional
    error-first ``callback(error, data)``. Required fields are checked when
    the method is called, so a missing field raises before anything is
    awaited. The returned awaitable resolves to the decoded JSON body.
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.access_token = access_token if access_token is not None else settings.access_token
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )

    def set_access_token(self, token: str) -> None:
        """Use a different token for every request issued from now on."""
        self.access_token = token

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        callback: Callback | None = None,
    ) -> Any:
        """Send one request and return the decoded response body.

        None-valued params are dropped and ``access_token`` always comes from
        the client; it is left out entirely when the client has no token.
        ``data`` goes out as the JSON body, separate from params.
        Transport errors are raised, or handed to ``callback`` when one is
        given, in which case the call resolves to None.
        """
        query = sanitize_params(params)
        if self.access_token is None:
            query.pop("access_token", None)
        else:
            query["access_token"] = self.access_token
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, params=query, json=data)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            if callback is None:
                raise
            await _notify(callback, exc, None)
            return None
        if callback is not None:
            await _notify(callback, None, payload)
        return payload

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Any:
        """Perform a GET request."""
        return await self.request("GET", path, params, None, callback)

    async def post(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        callback: Callback | None = None,
    ) -> Any:
        """Perform a POST request."""
        return await self.request("POST", path, params, data, callback)

    def _call(
        self,
        name: str,
        data: Mapping[str, Any] | None,
        callback: Callback | None,
    ) -> Awaitable[Any]:
        endpoint = ENDPOINTS[name]
        data = data or {}
        validate(data, endpoint.required, endpoint.template)
        path = endpoint.build_path(data)
        if endpoint.sends_body:
            return self.post(path, {}, dict(data), callback)
        return self.get(path, data, callback)

    # Feeds

    def activity_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Recent checkins from the token owner's friends."""
        return self._call("activity_feed", data, callback)

    def user_activity_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("user_activity_feed", data, callback)

    def pub_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Public checkins around a lat/lng."""
        return self._call("pub_feed", data, callback)

    def venue_activity_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("venue_activity_feed", data, callback)

    def beer_activity_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("beer_activity_feed", data, callback)

    def brewery_activity_feed(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("brewery_activity_feed", data, callback)

    def notifications(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("notifications", data, callback)

    # Info / search

    def user_info(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Profile of USERNAME, or of the token owner when it is omitted."""
        return self._call("user_info", data, callback)

    def user_wish_list(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("user_wish_list", data, callback)

    def user_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("user_friends", data, callback)

    def user_badges(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("user_badges", data, callback)

    def user_distinct_beers(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("user_distinct_beers", data, callback)

    def brewery_info(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("brewery_info", data, callback)

    def beer_info(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("beer_info", data, callback)

    def venue_info(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("venue_info", data, callback)

    def beer_search(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("beer_search", data, callback)

    def brewery_search(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("brewery_search", data, callback)

    # Actions

    def checkin(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Check in a beer. The whole input is sent as the request body."""
        return self._call("checkin", data, callback)

    def toast(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Toast a checkin, or remove the toast if already toasted."""
        return self._call("toast", data, callback)

    def pending_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("pending_friends", data, callback)

    def request_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("request_friends", data, callback)

    def remove_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("remove_friends", data, callback)

    def accept_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("accept_friends", data, callback)

    def reject_friends(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("reject_friends", data, callback)

    def add_comment(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("add_comment", data, callback)

    def remove_comment(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("remove_comment", data, callback)

    def add_to_wish_list(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("add_to_wish_list", data, callback)

    def remove_from_wish_list(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        return self._call("remove_from_wish_list", data, callback)

    def foursquare_venue_lookup(
        self, data: Mapping[str, Any] | None = None, callback: Callback | None = None
    ) -> Awaitable[Any]:
        """Resolve a Foursquare venue id to an Untappd venue."""
        return self._call("foursquare_venue_lookup", data, callback)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> UntappdClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
