"""Tests for rendering domain models as API payloads.

Run with: pytest tests/test_serializers.py -v
"""

from concerts.domain import NewOrder, NewUser
from concerts.handlers.serializers import (
    ArtistSerializer,
    CategorySerializer,
    ConcertDetailsSerializer,
    ConcertListingSerializer,
    ConcertSerializer,
    OrderSerializer,
    UserSerializer,
)


class TestSerializers:
    """Payload shapes consumed by the web client."""

    def test_concert_keys_are_camel_case(self, seeded_store):
        """Concert fields render with camelCase keys and ISO dates."""
        data = ConcertSerializer(seeded_store.get_concert(1)).data
        assert data == {
            "id": 1,
            "title": "Pop Explosion",
            "date": "2026-02-28T00:00:00Z",
            "description": seeded_store.get_concert(1).description,
            "venueId": 1,
            "artistId": 1,
            "status": "upcoming",
            "isFeatured": True,
            "imageUrl": "https://i.imgur.com/0kIb4Kh.jpg",
        }

    def test_user_password_is_never_rendered(self, memory_store):
        """Users render without their password."""
        user = memory_store.create_user(
            NewUser(username="ana", password="secret", name="Ana", email="a@x")
        )
        data = UserSerializer(user).data
        assert "password" not in data
        assert data["isAdmin"] is False
        assert data["phone"] is None

    def test_details_are_flattened(self, seeded_store):
        """Details put concert fields at the top with venue, artist and tiers."""
        data = ConcertDetailsSerializer(seeded_store.get_concert_with_details(2)).data
        assert data["title"] == "Rock Legends"
        assert data["venue"]["name"] == "Mall of Asia Arena"
        assert data["artist"]["name"] == "Bamboo"
        assert [t["name"] for t in data["ticketTypes"]] == [
            "VIP",
            "Gold",
            "Silver",
            "General Admission",
        ]
        assert data["ticketTypes"][0]["concertId"] == 2

    def test_details_with_missing_venue_render_null(self, seeded_store):
        """A dangling venue renders as null."""
        seeded_store.delete_venue(2)
        data = ConcertDetailsSerializer(seeded_store.get_concert_with_details(2)).data
        assert data["venue"] is None
        assert data["artist"]["id"] == 2

    def test_listing_includes_price_range(self, seeded_store):
        """Listings carry minPrice and maxPrice."""
        listings = seeded_store.get_featured_concerts()
        data = ConcertListingSerializer(listings, many=True).data
        assert [(d["title"], d["minPrice"], d["maxPrice"]) for d in data] == [
            ("Pop Explosion", 1000, 5000),
            ("Rock Legends", 1000, 5000),
        ]
        assert "ticketTypes" not in data[0]

    def test_artist_and_category(self, seeded_store):
        """Artists and categories use imageUrl and iconClass."""
        artist = ArtistSerializer(seeded_store.get_artist(4)).data
        category = CategorySerializer(seeded_store.get_categories()[0]).data
        assert artist["imageUrl"] == "https://i.imgur.com/jzuVkIM.jpg"
        assert category == {"id": 1, "name": "Pop", "iconClass": "fas fa-music"}

    def test_order(self, memory_store):
        """Orders render their user id, date and status."""
        order = memory_store.create_order(NewOrder(user_id=5))
        data = OrderSerializer(order).data
        assert data == {
            "id": 1,
            "userId": 5,
            "orderDate": "2026-01-31T15:30:00Z",
            "status": "completed",
        }
