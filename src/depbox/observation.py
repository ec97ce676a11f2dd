from __future__ import annotations

from depbox._internal.observation import ChangeCallback, ObservableObject, SupportsObservation

__all__ = ["ChangeCallback", "ObservableObject", "SupportsObservation"]
