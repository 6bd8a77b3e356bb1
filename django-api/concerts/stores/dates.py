"""Concert date normalisation shared by the store backends.

Stored concert dates are always timezone-aware. A naive datetime is
read in the current Django time zone, which is what the ORM does with
one when USE_TZ is on.
"""

from dataclasses import replace
from datetime import datetime

from django.utils import timezone

from concerts.domain import UNSET, ConcertPatch


def ensure_aware(moment: datetime) -> datetime:
    if timezone.is_naive(moment):
        return timezone.make_aware(moment)
    return moment


def aware_concert_patch(patch: ConcertPatch) -> ConcertPatch:
    """Return the patch with a naive date made aware; other patches pass through."""
    if patch.date is UNSET or patch.date is None:
        return patch
    return replace(patch, date=ensure_aware(patch.date))
