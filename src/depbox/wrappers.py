from __future__ import annotations

from depbox._internal.wrappers import (
    Dependency,
    DependencyAccessor,
    EagerDependency,
    LazyDependency,
)

__all__ = ["Dependency", "DependencyAccessor", "EagerDependency", "LazyDependency"]
