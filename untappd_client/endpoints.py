"""Catalog of Untappd v4 endpoints.

Each record maps a client method name onto the HTTP verb, the path and the
input fields the remote API needs. Docs for every entry live under
https://untappd.com/api/docs.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .errors import MissingFieldError


@dataclass(frozen=True)
class Endpoint:
    """Single remote operation exposed by the client."""

    method: str
    path: str
    required: tuple[str, ...] = ()
    path_field: str | None = None
    sends_body: bool = False

    @property
    def template(self) -> str:
        """Human readable path, used in validation messages."""
        if self.path_field is None:
            return self.path
        return f"{self.path}/{{{self.path_field}}}"

    def build_path(self, data: Mapping[str, Any]) -> str:
        """Return the request path with the identifier segment filled in."""
        if self.path_field is None:
            return self.path
        value = data.get(self.path_field)
        segment = "" if value is None else str(value)
        return "/".join((self.path, segment))


def validate(data: Mapping[str, Any], fields: Iterable[str], path: str) -> None:
    """Raise MissingFieldError for the first field that is absent or None."""
    for field in fields:
        if data.get(field) is None:
            raise MissingFieldError(field, path)


def _get(path: str, *required: str, path_field: str | None = None) -> Endpoint:
    return Endpoint("GET", path, required, path_field)


def _post(path: str, *required: str, path_field: str | None = None) -> Endpoint:
    return Endpoint("POST", path, required, path_field, sends_body=True)


ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType({
    # Feeds
    "activity_feed": _get("/v4/checkin/recent"),
    "user_activity_feed": _get("/v4/user/checkins", "USERNAME", path_field="USERNAME"),
    "pub_feed": _get("/v4/thepub/local"),
    "venue_activity_feed": _get("/v4/venue/checkins", "VENUE_ID", path_field="VENUE_ID"),
    "beer_activity_feed": _get("/v4/beer/checkins", "BID", path_field="BID"),
    "brewery_activity_feed": _get(
        "/v4/brewery/checkins", "BREWERY_ID", path_field="BREWERY_ID"
    ),
    "notifications": _get("/v4/notifications"),
    # Info / search. USERNAME is optional and defaults to the token's owner.
    "user_info": _get("/v4/user/info", path_field="USERNAME"),
    "user_wish_list": _get("/v4/user/wishlist", path_field="USERNAME"),
    "user_friends": _get("/v4/user/friends", path_field="USERNAME"),
    "user_badges": _get("/v4/user/badges", path_field="USERNAME"),
    "user_distinct_beers": _get("/v4/user/beers", path_field="USERNAME"),
    "brewery_info": _get("/v4/brewery/info", "BREWERY_ID", path_field="BREWERY_ID"),
    "beer_info": _get("/v4/beer/info", "BID", path_field="BID"),
    "venue_info": _get("/v4/venue/info", "VENUE_ID", path_field="VENUE_ID"),
    "beer_search": _get("/v4/search/beer", "q"),
    "brewery_search": _get("/v4/search/brewery", "q"),
    # Actions
    "checkin": _post("/v4/checkin/add", "gmt_offset", "timezone", "bid"),
    # Toggles: toasting an already toasted checkin removes the toast.
    "toast": _get("/v4/checkin/toast", "CHECKIN_ID", path_field="CHECKIN_ID"),
    "pending_friends": _get("/v4/user/pending"),
    "request_friends": _get("/v4/friend/request", "TARGET_ID", path_field="TARGET_ID"),
    "remove_friends": _get("/v4/friend/remove", "TARGET_ID", path_field="TARGET_ID"),
    "accept_friends": _post("/v4/friend/accept", "TARGET_ID", path_field="TARGET_ID"),
    "reject_friends": _post("/v4/friend/reject", "TARGET_ID", path_field="TARGET_ID"),
    "add_comment": _post(
        "/v4/checkin/addcomment", "CHECKIN_ID", "shout", path_field="CHECKIN_ID"
    ),
    "remove_comment": _post(
        "/v4/checkin/deletecomment", "COMMENT_ID", path_field="COMMENT_ID"
    ),
    "add_to_wish_list": _get("/v4/user/wishlist/add", "bid"),
    "remove_from_wish_list": _get("/v4/user/wishlist/remove", "bid"),
    "foursquare_venue_lookup": _get(
        "/v4/venue/foursquare_lookup", "VENUE_ID", path_field="VENUE_ID"
    ),
})
