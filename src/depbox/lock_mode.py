from __future__ import annotations

from depbox._internal.lock_mode import LockMode

__all__ = ["LockMode"]
