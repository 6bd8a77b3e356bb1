"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.

References between records are plain integer columns rather than
foreign keys: deleting an artist, venue or concert must not cascade to
or be blocked by its dependents.
"""

from django.db import models


class User(models.Model):
    """Persistence model for application users."""

    username = models.CharField(max_length=150, db_index=True)
    password = models.CharField(max_length=255)
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255)
    phone = models.CharField(max_length=50, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    is_admin = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.username


class Artist(models.Model):
    """Persistence model for artists."""

    name = models.CharField(max_length=255)
    genre = models.CharField(max_length=100)
    bio = models.TextField(blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Venue(models.Model):
    """Persistence model for venues."""

    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField()
    image_url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Concert(models.Model):
    """Persistence model for concerts."""

    title = models.CharField(max_length=255)
    date = models.DateTimeField()
    description = models.TextField()
    venue_id = models.PositiveIntegerField(db_index=True)
    artist_id = models.PositiveIntegerField(db_index=True)
    status = models.CharField(max_length=50, default="upcoming")
    is_featured = models.BooleanField(default=False)
    image_url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status", "date"], name="concerts_status_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types."""

    concert_id = models.PositiveIntegerField(db_index=True)
    name = models.CharField(max_length=100)
    price = models.PositiveIntegerField()
    quantity = models.PositiveIntegerField()
    description = models.TextField()

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Order(models.Model):
    """Persistence model for orders."""

    user_id = models.PositiveIntegerField(db_index=True)
    order_date = models.DateTimeField()
    status = models.CharField(max_length=50, default="completed")

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Order {self.pk} - {self.status}"


class OrderItem(models.Model):
    """Persistence model for order items."""

    order_id = models.PositiveIntegerField(db_index=True)
    ticket_type_id = models.PositiveIntegerField()
    quantity = models.PositiveIntegerField()

    class Meta:
        ordering = ["id"]


class Category(models.Model):
    """Persistence model for categories."""

    name = models.CharField(max_length=100)
    icon_class = models.CharField(max_length=100)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
