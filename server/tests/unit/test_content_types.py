"""Unit tests for the content-type registry and API tokens."""

import jwt
import pytest

from traverse_content.content_types import CONTENT_TYPES, MEDIA, UnknownContentTypeError, get_content_type
from traverse_content.core.security import create_api_token, decode_api_token


def test_registry_names():
    """Test the registered singular and plural names."""
    assert {name: ct.plural_name for name, ct in CONTENT_TYPES.items()} == {
        "tour": "tours",
        "tour-highlight": "tour-highlights",
        "tour-inclusion": "tour-inclusions",
        "tour-itinerary": "tour-itineraries",
        "room-type": "room-types",
        "tour-date": "tour-dates",
    }


def test_action_strings():
    """Test permission action naming."""
    room_type = get_content_type("room-type")

    assert room_type.uid == "api::room-type.room-type"
    assert room_type.action("findOne") == "api::room-type.room-type.findOne"
    assert get_content_type("api::room-type.room-type") is room_type


def test_relations():
    """Test relation lookup by API name."""
    tour = get_content_type("tour")

    assert tour.relation("heroImage").target == MEDIA
    assert tour.relation("galleryImages").many
    assert tour.relation("tour") is None
    assert get_content_type("tour-date").relation("tour").foreign_key == "tour_id"


def test_unknown_content_type():
    with pytest.raises(UnknownContentTypeError):
        get_content_type("api::booking.booking")


def test_api_token_round_trip():
    """Test that issued tokens decode to their subject."""
    claims = decode_api_token(create_api_token("frontend"))

    assert claims["sub"] == "frontend"


def test_expired_api_token():
    """Test that expired tokens are rejected."""
    from datetime import timedelta

    token = create_api_token("frontend", expires_in=timedelta(seconds=-60))

    with pytest.raises(jwt.ExpiredSignatureError):
        decode_api_token(token)
