from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast, overload

from depbox._internal.container import Container, default_container
from depbox._internal.keys import DependencyKey
from depbox._internal.validators import DependencyRegistrationValidator

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")

_UNRESOLVED = object()
_VALIDATOR = DependencyRegistrationValidator()


class DependencyAccessor(ABC, Generic[T]):
    """Bind a dependency target to a container and fix the resolution strategy.

    The target is either a ``DependencyKey`` (resolved with ``container.get``,
    never fails) or a class (resolved with ``container.require``, raises
    ``DepboxDependencyNotRegisteredError`` when nothing is registered).
    Subclasses decide when resolution runs and whether its result is cached.

    Every accessor exposes the current value as ``.value``. Stored as a class
    attribute, an accessor also reads through ``.value`` on instance access.
    """

    def __init__(
        self,
        target: DependencyKey[T] | type[T],
        *,
        container: Container | None = None,
    ) -> None:
        _VALIDATOR.validate_target(target)
        self._target = target
        self._container = container if container is not None else default_container

    @property
    def target(self) -> DependencyKey[T] | type[T]:
        """Declared key or type this accessor resolves."""
        return self._target

    @property
    def container(self) -> Container:
        """Container this accessor reads from."""
        return self._container

    @property
    @abstractmethod
    def value(self) -> T:
        """Current dependency value according to the accessor's strategy."""

    def _resolve(self) -> T:
        if isinstance(self._target, DependencyKey):
            return self._container.get(cast("DependencyKey[T]", self._target))
        return self._container.require(self._target)

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> Self: ...

    @overload
    def __get__(self, instance: object, owner: type[Any]) -> T: ...

    def __get__(self, instance: object | None, owner: type[Any]) -> Self | T:
        if instance is None:
            return self
        return self.value

    def __repr__(self) -> str:
        target = self._target
        target_repr = repr(target) if isinstance(target, DependencyKey) else target.__qualname__
        return f"{type(self).__name__}({target_repr})"


class EagerDependency(DependencyAccessor[T]):
    """Resolve a dependency once, at construction, and keep that snapshot.

    Later ``set``/``register`` calls on the container are not observed.

    Raises:
        DepboxDependencyNotRegisteredError: At construction, when resolving by
            type and nothing is registered.

    """

    def __init__(
        self,
        target: DependencyKey[T] | type[T],
        *,
        container: Container | None = None,
    ) -> None:
        super().__init__(target, container=container)
        self._value = self._resolve()

    @property
    def value(self) -> T:
        """Value captured at construction."""
        return self._value


class Dependency(DependencyAccessor[T]):
    """Resolve a dependency on every read and never cache it.

    Use it when the container's value may be replaced after the consumer was
    created and the consumer must always see the newest one.

    Examples:
        .. code-block:: python

            greeting = Dependency(GREETING)
            greeting.value  # "hello"
            default_container.set(GREETING, "hi")
            greeting.value  # "hi"

    """

    @property
    def value(self) -> T:
        """Current value in the container.

        Raises:
            DepboxDependencyNotRegisteredError: When resolving by type and
                nothing is registered at read time.

        """
        return self._resolve()


class LazyDependency(DependencyAccessor[T]):
    """Resolve a dependency on first read, then keep returning that value.

    The first resolution runs at most once per wrapper, even when several
    threads read concurrently; it is serialized with the container's lock.
    """

    def __init__(
        self,
        target: DependencyKey[T] | type[T],
        *,
        container: Container | None = None,
    ) -> None:
        super().__init__(target, container=container)
        self._value: Any = _UNRESOLVED

    @property
    def is_resolved(self) -> bool:
        """Whether the first read already happened."""
        return self._value is not _UNRESOLVED

    @property
    def value(self) -> T:
        """Value resolved on first read.

        Raises:
            DepboxDependencyNotRegisteredError: On first read, when resolving by
                type and nothing is registered. The wrapper stays unresolved and
                a later read tries again.

        """
        value = self._value
        if value is _UNRESOLVED:
            with self._container.lock():
                value = self._value
                if value is _UNRESOLVED:
                    value = self._resolve()
                    self._value = value
        return cast("T", value)


__all__ = ["Dependency", "DependencyAccessor", "EagerDependency", "LazyDependency"]
