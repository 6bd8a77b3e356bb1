"""Sample catalog loaded into a fresh store.

Works through the ConcertStore interface so any backend can be seeded.
Concert dates are relative to ``now``: one, two and three months ahead,
at midnight.
"""

import calendar
import logging
from datetime import datetime

from concerts.domain import (
    UPCOMING,
    NewArtist,
    NewCategory,
    NewConcert,
    NewTicketType,
    NewVenue,
)
from concerts.stores.interfaces import ConcertStore

logger = logging.getLogger(__name__)

CATEGORIES = [
    NewCategory(name="Pop", icon_class="fas fa-music"),
    NewCategory(name="Rock", icon_class="fas fa-guitar"),
    NewCategory(name="Folk", icon_class="fas fa-drum"),
    NewCategory(name="Hip-Hop", icon_class="fas fa-microphone-alt"),
    NewCategory(name="Electronic", icon_class="fas fa-compact-disc"),
    NewCategory(name="Festivals", icon_class="fas fa-theater-masks"),
]

ARTISTS = [
    NewArtist(
        name="Sarah Geronimo",
        genre="Pop",
        bio=(
            "Sarah Geronimo is a Filipino singer, actress and television "
            "personality. She began her career with the release of her debut "
            "album in 2003."
        ),
        image_url="https://i.imgur.com/X0xNoXu.jpg",
    ),
    NewArtist(
        name="Bamboo",
        genre="Rock",
        bio=(
            "Bamboo is one of the most influential rock musicians in the "
            "Philippines, known as the vocalist of bands such as Bamboo and "
            "Rivermaya."
        ),
        image_url="https://i.imgur.com/aVnJnuC.jpg",
    ),
    NewArtist(
        name="Ben&Ben",
        genre="Folk",
        bio=(
            "Ben&Ben is a nine-piece Filipino folk-pop band known for their "
            "heartfelt lyrics and unique sound that combines traditional "
            "Filipino folk with contemporary elements."
        ),
        image_url="https://i.imgur.com/9VX12CQ.jpg",
    ),
    NewArtist(
        name="Gloc-9",
        genre="Hip-Hop",
        bio=(
            "Gloc-9 is a Filipino rapper, songwriter, and record producer. He "
            "is considered one of the most successful and respected Filipino "
            "rappers."
        ),
        image_url="https://i.imgur.com/jzuVkIM.jpg",
    ),
]

VENUES = [
    NewVenue(
        name="Araneta Coliseum",
        address="Araneta City, Cubao, Quezon City",
        location="Quezon City",
        capacity=15000,
        image_url="https://i.imgur.com/Y4jhrWn.jpg",
    ),
    NewVenue(
        name="Mall of Asia Arena",
        address="Mall of Asia Complex, Pasay City",
        location="Pasay City",
        capacity=20000,
        image_url="https://i.imgur.com/Y4jhrWn.jpg",
    ),
    NewVenue(
        name="Music Museum",
        address="Greenhills Shopping Center, San Juan City",
        location="San Juan",
        capacity=800,
        image_url="https://i.imgur.com/Y4jhrWn.jpg",
    ),
]

# (title, description, months ahead, featured); concert N plays at venue N
# with artist N.
CONCERTS = [
    (
        "Pop Explosion",
        "Sarah Geronimo's biggest concert of the year featuring her latest "
        "hits and classic favorites.",
        1,
        True,
    ),
    (
        "Rock Legends",
        "Bamboo returns with a powerful rock concert showcasing timeless hits "
        "and new material.",
        2,
        True,
    ),
    (
        "Folk Tales",
        "Ben&Ben presents an intimate acoustic evening of folk music and "
        "storytelling.",
        3,
        False,
    ),
]

CONCERT_IMAGE_URL = "https://i.imgur.com/0kIb4Kh.jpg"

# (name, price, quantity, description)
TICKET_TIERS = [
    ("VIP", 5000, 100, "Best seats with meet & greet"),
    ("Gold", 3500, 500, "Premium seating close to stage"),
    ("Silver", 2000, 1000, "Good view of the stage"),
    ("General Admission", 1000, 2000, "Standing area"),
]


def add_months(moment: datetime, months: int) -> datetime:
    """Return midnight of the same day ``months`` later.

    The day is clamped to the last day of the target month.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(
        year=year, month=month, day=day, hour=0, minute=0, second=0, microsecond=0
    )


def seed_store(store: ConcertStore, now: datetime) -> None:
    """Load the sample categories, artists, venues, concerts and tickets."""
    for category in CATEGORIES:
        store.create_category(category)

    artists = [store.create_artist(artist) for artist in ARTISTS]
    venues = [store.create_venue(venue) for venue in VENUES]

    for (title, description, months, featured), venue, artist in zip(
        CONCERTS, venues, artists
    ):
        concert = store.create_concert(
            NewConcert(
                title=title,
                date=add_months(now, months),
                description=description,
                venue_id=venue.id,
                artist_id=artist.id,
                status=UPCOMING,
                is_featured=featured,
                image_url=CONCERT_IMAGE_URL,
            )
        )
        for name, price, quantity, tier_description in TICKET_TIERS:
            store.create_ticket_type(
                NewTicketType(
                    concert_id=concert.id,
                    name=name,
                    price=price,
                    quantity=quantity,
                    description=tier_description,
                )
            )

    logger.info(
        "Seeded %s categories, %s artists, %s venues and %s concerts",
        len(CATEGORIES),
        len(ARTISTS),
        len(VENUES),
        len(CONCERTS),
    )
