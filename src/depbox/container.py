from __future__ import annotations

from depbox._internal.container import Container, default_container

__all__ = ["Container", "default_container"]
