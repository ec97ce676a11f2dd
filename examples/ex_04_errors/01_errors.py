"""Errors: unregistered types fail fast, declared keys never do.

This module demonstrates:

1. ``DepboxDependencyNotRegisteredError`` when a wrapper resolves a type that
   was never registered.
2. Declared keys always fall back to their default.
3. ``DepboxInvalidRegistrationError`` when a value does not match the
   ``value_type`` its key declared.
"""

from __future__ import annotations

from depbox import (
    Container,
    DepboxDependencyNotRegisteredError,
    DepboxInvalidRegistrationError,
    Dependency,
    DependencyKey,
    EagerDependency,
)


class Logger:
    pass


TIMEOUT = DependencyKey("timeout", 30, value_type=int)


def main() -> None:
    container = Container()

    try:
        EagerDependency(Logger, container=container)
    except DepboxDependencyNotRegisteredError as error:
        print(f"error={error}")  # => error=Failed to resolve: Logger

    print(f"timeout={Dependency(TIMEOUT, container=container).value}")  # => timeout=30

    try:
        container.set(TIMEOUT, "soon")
    except DepboxInvalidRegistrationError as error:
        invalid_error = type(error).__name__
    print(f"invalid_error={invalid_error}")  # => invalid_error=DepboxInvalidRegistrationError


if __name__ == "__main__":
    main()
