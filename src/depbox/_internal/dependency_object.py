from __future__ import annotations

from typing import Any, Generic, TypeVar, cast

from depbox._internal.container import Container
from depbox._internal.keys import DependencyKey
from depbox._internal.observation import SupportsObservation
from depbox._internal.wrappers import EagerDependency
from depbox.exceptions import DepboxInvalidDependencyObjectError

T = TypeVar("T")
V = TypeVar("V")


class Binding(Generic[V]):
    """Two-way access to one field of an observed object.

    Reads return the field's current value. Writes assign the field on the
    object itself, so the object's own change notification fires.
    """

    __slots__ = ("_field_name", "_object")

    def __init__(self, observed_object: Any, field_name: str) -> None:
        if not hasattr(observed_object, field_name):
            msg = f"'{type(observed_object).__qualname__}' object has no field '{field_name}'"
            raise AttributeError(msg)
        self._object = observed_object
        self._field_name = field_name

    @property
    def field_name(self) -> str:
        return self._field_name

    def get(self) -> V:
        return cast("V", getattr(self._object, self._field_name))

    def set(self, value: V) -> None:
        setattr(self._object, self._field_name, value)

    @property
    def value(self) -> V:
        return self.get()

    @value.setter
    def value(self, value: V) -> None:
        self.set(value)

    def __repr__(self) -> str:
        return f"Binding({type(self._object).__qualname__}.{self._field_name})"


class BindingProjection(Generic[T]):
    """Produce a ``Binding`` for any field by attribute access.

    ``projection.title`` is shorthand for ``Binding(observed_object, "title")``.
    """

    __slots__ = ("_object",)

    def __init__(self, observed_object: T) -> None:
        self._object = observed_object

    def __getattr__(self, name: str) -> Binding[Any]:
        if name.startswith("__"):
            raise AttributeError(name)
        return Binding(self._object, name)

    def __repr__(self) -> str:
        return f"BindingProjection({type(self._object).__qualname__})"


class DependencyObject(EagerDependency[T]):
    """Resolve an observable dependency eagerly and hand out field bindings.

    Resolution matches ``EagerDependency``. The resolved value must implement
    ``SupportsObservation``; ``value`` always returns that exact instance so UI
    or other observers can subscribe to it. ``projected`` (or ``binding``)
    gives two-way bindings into its fields.

    Raises:
        DepboxDependencyNotRegisteredError: At construction, when resolving by
            type and nothing is registered.
        DepboxInvalidDependencyObjectError: At construction, when the resolved
            value does not implement ``SupportsObservation``.

    Examples:
        .. code-block:: python

            profile = DependencyObject(Profile)
            name = profile.projected.name
            name.value = "Grace"
            assert profile.value.name == "Grace"

    """

    def __init__(
        self,
        target: DependencyKey[T] | type[T],
        *,
        container: Container | None = None,
    ) -> None:
        super().__init__(target, container=container)
        if not isinstance(self._value, SupportsObservation):
            msg = (
                f"DependencyObject requires an observable value, got "
                f"'{type(self._value).__qualname__}' which does not implement subscribe()."
            )
            raise DepboxInvalidDependencyObjectError(msg)
        self._projected = BindingProjection(self._value)

    @property
    def projected(self) -> BindingProjection[T]:
        """Binding factory for fields of the resolved object."""
        return self._projected

    def binding(self, field_name: str) -> Binding[Any]:
        """Return a two-way binding to ``field_name`` of the resolved object.

        Raises:
            AttributeError: If the resolved object has no such field.

        """
        return Binding(self._value, field_name)


__all__ = ["Binding", "BindingProjection", "DependencyObject"]
