from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Literal, TypeVar, cast

from depbox._internal.keys import DependencyKey, DependencyProperty
from depbox._internal.lock_mode import LockMode
from depbox._internal.validators import DependencyRegistrationValidator
from depbox.exceptions import DepboxDependencyNotRegisteredError, DepboxInvalidRegistrationError

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING = object()


class Container:
    """Store shared dependency instances under declared keys or runtime types.

    Two identity spaces share one storage mapping:

    * declared keys (``DependencyKey``) carry a default value, so ``get`` never
      fails;
    * runtime types are implicit keys written by ``register``; ``resolve``
      returns ``None`` for types that were never registered.

    Lookups by type require an exact type match. A value registered as
    ``ConsoleLogger`` is not found under its base class ``Logger`` unless it
    was registered with ``provides=Logger``.

    The process-wide ``default_container`` is created once at import time and is
    never torn down. Construct separate ``Container`` instances and pass them to
    wrappers explicitly to isolate tests from the global state.
    """

    def __init__(self, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: Locking strategy for storage access. ``LockMode.THREAD``
                serializes reads and writes with a reentrant lock;
                ``LockMode.NONE`` skips locking for single-threaded use.

        """
        self._storage: dict[object, Any] = {}
        self._lock_mode = lock_mode
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if lock_mode is LockMode.THREAD else nullcontext()
        )
        self._validator = DependencyRegistrationValidator()

    @classmethod
    def default(cls) -> Container:
        """Return the process-wide default container."""
        return default_container

    @property
    def lock_mode(self) -> LockMode:
        """Locking strategy selected at construction."""
        return self._lock_mode

    def lock(self) -> AbstractContextManager[Any]:
        """Return the context manager guarding this container's storage.

        Access wrappers reuse it so that lazy first resolution is serialized with
        container writes. With ``LockMode.NONE`` this is a no-op context.
        """
        return self._lock

    # region Declared Keys
    @classmethod
    def declare(cls, key: DependencyKey[Any], name: str | None = None) -> DependencyProperty[Any]:
        """Attach a named accessor for ``key`` to this container class.

        Declaring on ``Container`` itself makes the attribute available on every
        container, ``default_container`` included. Declaring on a subclass keeps
        it local to that subclass.

        Args:
            key: Declared key the attribute reads and writes.
            name: Attribute name. Defaults to ``key.name``.

        Returns:
            The installed descriptor.

        Raises:
            DepboxInvalidRegistrationError: If ``name`` is not an identifier or the
                class already has an attribute with that name.

        Examples:
            .. code-block:: python

                Container.declare(GREETING)

                default_container.greeting = "hi"
                assert default_container.get(GREETING) == "hi"

        """
        attribute_name = name if name is not None else key.name
        if not attribute_name.isidentifier():
            msg = f"Accessor name must be a valid identifier, got {attribute_name!r}."
            raise DepboxInvalidRegistrationError(msg)
        if hasattr(cls, attribute_name):
            msg = f"'{cls.__qualname__}' already defines attribute '{attribute_name}'."
            raise DepboxInvalidRegistrationError(msg)

        descriptor = DependencyProperty(key)
        setattr(cls, attribute_name, descriptor)
        descriptor.__set_name__(cls, attribute_name)
        return descriptor

    def get(self, key: DependencyKey[T]) -> T:
        """Return the value stored under ``key``, or the key's default.

        Args:
            key: Declared key to read.

        Returns:
            The most recently stored value, or ``key.default`` when nothing was
            stored for this key.

        """
        with self._lock:
            value = self._storage.get(key, _MISSING)
        if value is _MISSING:
            return key.default
        return cast("T", value)

    def set(self, key: DependencyKey[T], value: T) -> None:
        """Store ``value`` under ``key``, overwriting any previous value.

        No notification is emitted. Wrappers that already captured a value keep
        it; computed wrappers observe the new value on their next read.

        Args:
            key: Declared key to write.
            value: Value to store.

        Raises:
            DepboxInvalidRegistrationError: If ``key`` is not a ``DependencyKey``
                or ``value`` does not match a ``value_type`` the key declared
                explicitly.

        """
        self._validator.validate_key_value(key, value)
        with self._lock:
            self._storage[key] = value
        logger.debug("Stored value for dependency key '%s'", key.name)

    def __getitem__(self, key: DependencyKey[T]) -> T:
        return self.get(key)

    def __setitem__(self, key: DependencyKey[T], value: T) -> None:
        self.set(key, value)

    # endregion Declared Keys

    # region Runtime Types
    def register(
        self,
        instance: T,
        *,
        provides: type[Any] | Literal["infer"] = "infer",
    ) -> None:
        """Register ``instance`` under its own runtime type.

        Re-registering the same type replaces the previous instance.

        Args:
            instance: Instance to share.
            provides: Type to register under. ``"infer"`` uses
                ``type(instance)``; an explicit class lets a concrete instance
                stand in for a base class or interface.

        Raises:
            DepboxInvalidRegistrationError: If ``provides`` is ``None``, not a
                class, or ``instance`` is not an instance of it.

        Examples:
            .. code-block:: python

                container.register(ConsoleLogger())
                container.register(ConsoleLogger(), provides=Logger)

        """
        provides_value = cast("Any", provides)
        if provides_value == "infer":
            registration_type: type[Any] = type(instance)
        else:
            self._validator.validate_provides(provides_value, instance)
            registration_type = provides_value

        with self._lock:
            replaced = registration_type in self._storage
            self._storage[registration_type] = instance
        logger.debug(
            "%s instance for dependency type '%s'",
            "Replaced" if replaced else "Registered",
            registration_type.__qualname__,
        )

    def resolve(self, dependency_type: type[T]) -> T | None:
        """Return the instance registered for ``dependency_type``, or ``None``.

        This is a pure lookup: there is no default value and no subtype
        matching.

        Args:
            dependency_type: Exact type the instance was registered under.

        """
        self._validator.validate_dependency_type(dependency_type)
        with self._lock:
            return cast("T | None", self._storage.get(dependency_type))

    def require(self, dependency_type: type[T]) -> T:
        """Return the instance registered for ``dependency_type``.

        Args:
            dependency_type: Exact type the instance was registered under.

        Raises:
            DepboxDependencyNotRegisteredError: If nothing was registered for
                ``dependency_type``. Treat this as a programming error: register
                dependencies before reading them.

        """
        self._validator.validate_dependency_type(dependency_type)
        with self._lock:
            value = self._storage.get(dependency_type, _MISSING)
        if value is _MISSING:
            raise DepboxDependencyNotRegisteredError(dependency_type)
        return cast("T", value)

    def is_registered(self, dependency_type: type[Any]) -> bool:
        """Return whether an instance is registered for ``dependency_type``."""
        return dependency_type in self

    # endregion Runtime Types

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._storage

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self)}, lock_mode={self._lock_mode.name})"


default_container = Container()
"""Process-wide container used by access wrappers when none is passed."""


__all__ = ["Container", "default_container"]
