from __future__ import annotations

from depbox._internal.keys import DependencyKey, DependencyProperty, dependency_property

__all__ = ["DependencyKey", "DependencyProperty", "dependency_property"]
