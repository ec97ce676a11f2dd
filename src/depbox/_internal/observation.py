from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

ChangeCallback = Callable[[Any, str, Any], None]
"""Observer signature: ``(observed_object, field_name, new_value)``."""


@runtime_checkable
class SupportsObservation(Protocol):
    """Capability marker for objects whose field changes can be observed.

    ``DependencyObject`` only accepts resolved values implementing this
    protocol. Notification itself is the object's own business: writes made
    through a ``Binding`` land on the object, and its ``subscribe`` observers
    fire the way they would for any other write.
    """

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register ``callback`` for field changes and return an unsubscribe function."""
        ...


class ObservableObject:
    """Notify subscribers after every public attribute write.

    Attributes whose names start with an underscore are treated as private
    state and do not notify.

    Examples:
        .. code-block:: python

            class Profile(ObservableObject):
                def __init__(self, name: str) -> None:
                    self.name = name


            profile = Profile("Ada")
            unsubscribe = profile.subscribe(lambda obj, field, value: print(field, value))
            profile.name = "Grace"  # prints: name Grace
            unsubscribe()

    """

    def __setattr__(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        if not name.startswith("_"):
            self._notify(name, value)

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        subscribers = self._subscribers()
        subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in subscribers:
                subscribers.remove(callback)

        return unsubscribe

    def _subscribers(self) -> list[ChangeCallback]:
        try:
            return self.__dict__["_observers"]
        except KeyError:
            observers: list[ChangeCallback] = []
            self.__dict__["_observers"] = observers
            return observers

    def _notify(self, name: str, value: Any) -> None:
        for callback in tuple(self._subscribers()):
            callback(self, name, value)


__all__ = ["ChangeCallback", "ObservableObject", "SupportsObservation"]
