from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for container storage and lazy resolution.

    The container guards its storage mapping with the selected lock, and
    ``LazyDependency`` uses the same mode to keep its first resolution
    single-shot. Use ``NONE`` when all registration and resolution is confined
    to one thread.
    """

    THREAD = "thread"
    """Guard storage and lazy resolution with ``threading.RLock``."""

    NONE = "none"
    """Disable locking around storage reads/writes."""
