"""Quickstart: declared keys with defaults and registration by runtime type.

This module demonstrates:

1. Reading a declared key that was never set returns its default.
2. ``set`` overrides the default for that key only.
3. ``register`` stores an instance under its own type; ``resolve`` finds it.
4. Registering another instance of the same type replaces the first.
"""

from __future__ import annotations

from dataclasses import dataclass

from depbox import Container, DependencyKey


@dataclass(slots=True)
class Logger:
    id: int


GREETING = DependencyKey("greeting", "hello")


def main() -> None:
    container = Container()

    print(f"greeting={container.get(GREETING)}")  # => greeting=hello
    container.set(GREETING, "hi")
    print(f"greeting={container.get(GREETING)}")  # => greeting=hi

    print(f"before_register={container.resolve(Logger)}")  # => before_register=None
    container.register(Logger(id=1))
    container.register(Logger(id=2))
    print(f"resolved={container.resolve(Logger)}")  # => resolved=Logger(id=2)


if __name__ == "__main__":
    main()
