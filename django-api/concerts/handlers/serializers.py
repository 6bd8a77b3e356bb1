"""Serializers for transforming domain models to API responses.

Keys are camelCase, matching what the web client reads. Concert details
and listings are flattened: the concert's own fields sit at the top
level next to the joined venue and artist.
"""

from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model. Never renders the password."""

    id = serializers.IntegerField()
    username = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField(allow_null=True)
    address = serializers.CharField(allow_null=True)
    isAdmin = serializers.BooleanField(source="is_admin")


class ArtistSerializer(serializers.Serializer):
    """Serializer for Artist domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    genre = serializers.CharField()
    bio = serializers.CharField(allow_null=True)
    imageUrl = serializers.CharField(source="image_url", allow_null=True)


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    address = serializers.CharField()
    location = serializers.CharField()
    capacity = serializers.IntegerField()
    imageUrl = serializers.CharField(source="image_url", allow_null=True)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.IntegerField()
    concertId = serializers.IntegerField(source="concert_id")
    name = serializers.CharField()
    price = serializers.IntegerField()
    quantity = serializers.IntegerField()
    description = serializers.CharField()


class ConcertSerializer(serializers.Serializer):
    """Serializer for Concert domain model."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    date = serializers.DateTimeField()
    description = serializers.CharField()
    venueId = serializers.IntegerField(source="venue_id")
    artistId = serializers.IntegerField(source="artist_id")
    status = serializers.CharField()
    isFeatured = serializers.BooleanField(source="is_featured")
    imageUrl = serializers.CharField(source="image_url", allow_null=True)


class _JoinedConcertSerializer(serializers.Serializer):
    venue = VenueSerializer(allow_null=True)
    artist = ArtistSerializer(allow_null=True)

    def to_representation(self, instance):
        data = dict(ConcertSerializer(instance.concert).data)
        data.update(super().to_representation(instance))
        return data


class ConcertDetailsSerializer(_JoinedConcertSerializer):
    """Serializer for ConcertDetails: concert, venue, artist, ticket types."""

    ticketTypes = TicketTypeSerializer(many=True, source="ticket_types")


class ConcertListingSerializer(_JoinedConcertSerializer):
    """Serializer for featured and upcoming concert listings."""

    minPrice = serializers.IntegerField(source="min_price")
    maxPrice = serializers.IntegerField(source="max_price")


class OrderSerializer(serializers.Serializer):
    """Serializer for Order domain model."""

    id = serializers.IntegerField()
    userId = serializers.IntegerField(source="user_id")
    orderDate = serializers.DateTimeField(source="order_date")
    status = serializers.CharField()


class OrderItemSerializer(serializers.Serializer):
    """Serializer for OrderItem domain model."""

    id = serializers.IntegerField()
    orderId = serializers.IntegerField(source="order_id")
    ticketTypeId = serializers.IntegerField(source="ticket_type_id")
    quantity = serializers.IntegerField()


class CategorySerializer(serializers.Serializer):
    """Serializer for Category domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    iconClass = serializers.CharField(source="icon_class")
