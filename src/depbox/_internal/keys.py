from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

if TYPE_CHECKING:
    from typing_extensions import Self

    from depbox._internal.container import Container

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class DependencyKey(Generic[T]):
    """Declare a named dependency slot with a statically known default value.

    A key is pure metadata: it stores nothing by itself. Values written with
    ``container.set(key, value)`` live in the container under the key's
    identity, and ``container.get(key)`` falls back to ``default`` when no value
    was written.

    Identity is the key object itself. Two keys declared with the same name,
    type, and default are still two independent slots.

    Values written with ``set`` are stored unchecked unless ``value_type`` is
    passed explicitly; then each write must be an instance of it.

    Examples:
        .. code-block:: python

            GREETING = DependencyKey("greeting", "hello")

            container.get(GREETING)  # "hello"
            container.set(GREETING, "hi")
            container.get(GREETING)  # "hi"

    """

    name: str
    default: T
    value_type: Any = field(default=None, kw_only=True)

    def __repr__(self) -> str:
        if self.value_type is None:
            return f"DependencyKey({self.name!r}, default={self.default!r})"
        type_name = getattr(self.value_type, "__qualname__", repr(self.value_type))
        return f"DependencyKey({self.name!r}, default={self.default!r}, value_type={type_name})"


class DependencyProperty(Generic[T]):
    """Expose a declared key as a named read/write attribute of a container class."""

    def __init__(self, key: DependencyKey[T]) -> None:
        self.key = key
        self.attribute_name = key.name

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self.attribute_name = name

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> Self: ...

    @overload
    def __get__(self, instance: Container, owner: type[Any]) -> T: ...

    def __get__(self, instance: Container | None, owner: type[Any]) -> Self | T:
        if instance is None:
            return self
        return instance.get(self.key)

    def __set__(self, instance: Container, value: T) -> None:
        instance.set(self.key, value)

    def __repr__(self) -> str:
        return f"dependency_property({self.attribute_name}={self.key!r})"


def dependency_property(key: DependencyKey[T]) -> DependencyProperty[T]:
    """Create a named accessor for ``key`` on a ``Container`` subclass.

    Reading the attribute calls ``container.get(key)``; assigning it calls
    ``container.set(key, value)``. The accessor adds no storage of its own.

    Args:
        key: Declared key the attribute reads and writes.

    Examples:
        .. code-block:: python

            class AppDependencies(Container):
                greeting = dependency_property(GREETING)


            deps = AppDependencies()
            deps.greeting = "hi"
            assert deps.get(GREETING) == "hi"

    Use ``Container.declare(key)`` to add the accessor to ``Container`` itself,
    which makes it available on ``default_container``.

    """
    return DependencyProperty(key)


__all__ = ["DependencyKey", "DependencyProperty", "dependency_property"]
