from __future__ import annotations

from typing import Any

from depbox._internal.keys import DependencyKey
from depbox._internal.type_checks import is_runtime_class
from depbox.exceptions import DepboxInvalidRegistrationError


class DependencyRegistrationValidator:
    """Validates container writes and wrapper targets before they touch storage."""

    def validate_key_value(self, key: object, value: object) -> None:
        """Validate that ``value`` may be stored under the declared ``key``."""
        if not isinstance(key, DependencyKey):
            msg = f"Declared key must be a DependencyKey, got {key!r}."
            raise DepboxInvalidRegistrationError(msg)

        value_type = key.value_type
        if is_runtime_class(value_type) and not isinstance(value, value_type):
            msg = (
                f"Value for key '{key.name}' must be an instance of "
                f"'{value_type.__qualname__}', got '{type(value).__qualname__}'."
            )
            raise DepboxInvalidRegistrationError(msg)

    def validate_provides(self, provides: object, instance: object) -> None:
        """Validate an explicit ``provides`` type for ``register``."""
        if provides is None:
            msg = "register() parameter 'provides' must not be None; use 'infer'."
            raise DepboxInvalidRegistrationError(msg)

        if not is_runtime_class(provides):
            msg = f"register() parameter 'provides' must be a class, got {provides!r}."
            raise DepboxInvalidRegistrationError(msg)

        if not isinstance(instance, provides):
            msg = (
                f"Instance of '{type(instance).__qualname__}' cannot be registered as "
                f"'{provides.__qualname__}'."
            )
            raise DepboxInvalidRegistrationError(msg)

    def validate_dependency_type(self, dependency_type: Any) -> None:
        """Validate a runtime-type lookup target."""
        if not is_runtime_class(dependency_type):
            msg = f"Dependency type must be a class, got {dependency_type!r}."
            raise DepboxInvalidRegistrationError(msg)

    def validate_target(self, target: object) -> None:
        """Validate an access wrapper target: a declared key or a class."""
        if isinstance(target, DependencyKey):
            return
        if not is_runtime_class(target):
            msg = (
                "Dependency wrappers accept a DependencyKey or a class, "
                f"got {target!r}."
            )
            raise DepboxInvalidRegistrationError(msg)
