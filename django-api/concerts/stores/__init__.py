"""Concert stores and the factory that builds one from settings.

There is no shared store instance: whoever needs a store builds it once
(usually at process start) and passes it to the services that use it.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone

from concerts.stores.interfaces import ConcertStore
from concerts.stores.memory_store import MemoryConcertStore
from concerts.stores.seed import seed_store

logger = logging.getLogger(__name__)

MEMORY = "memory"
DJANGO = "django"


def build_store(backend: str | None = None, seed: bool | None = None) -> ConcertStore:
    """Construct the store named by ``backend`` or ``settings.CONCERTS["STORE"]``.

    ``seed`` (or ``settings.CONCERTS["SEED"]``) loads the sample catalog
    into the new store.

    Raises:
        ImproperlyConfigured: If the backend name is unknown.
    """
    config = getattr(settings, "CONCERTS", {})
    backend = backend or config.get("STORE", MEMORY)
    if seed is None:
        seed = config.get("SEED", True)

    if backend == MEMORY:
        store = MemoryConcertStore(seed=seed)
    elif backend == DJANGO:
        # Imported here: the ORM models need the app registry to be ready.
        from concerts.stores.django_store import DjangoConcertStore

        store = DjangoConcertStore()
        if seed:
            seed_store(store, now=timezone.now())
    else:
        raise ImproperlyConfigured(f"Unknown concert store backend: {backend!r}")

    logger.info("Built %s concert store (seeded=%s)", backend, bool(seed))
    return store


__all__ = [
    "ConcertStore",
    "MemoryConcertStore",
    "build_store",
    "MEMORY",
    "DJANGO",
]
