from __future__ import annotations

from depbox._internal.dependency_object import Binding, BindingProjection, DependencyObject

__all__ = ["Binding", "BindingProjection", "DependencyObject"]
