"""Access wrappers: when resolution happens and whether it is cached.

This module demonstrates:

1. ``EagerDependency`` resolves at construction and keeps that snapshot.
2. ``Dependency`` resolves on every read and sees later changes.
3. ``LazyDependency`` resolves on first read, then keeps that value.
4. Wrappers declared as class attributes read through to the value.
"""

from __future__ import annotations

from depbox import Container, Dependency, DependencyKey, EagerDependency, LazyDependency

THEME = DependencyKey("theme", "light")


def main() -> None:
    container = Container()

    eager = EagerDependency(THEME, container=container)
    computed = Dependency(THEME, container=container)
    lazy = LazyDependency(THEME, container=container)

    container.set(THEME, "dark")
    print(f"eager={eager.value}")  # => eager=light
    print(f"computed={computed.value}")  # => computed=dark
    print(f"lazy={lazy.value}")  # => lazy=dark

    container.set(THEME, "solarized")
    print(f"computed_after={computed.value}")  # => computed_after=solarized
    print(f"lazy_after={lazy.value}")  # => lazy_after=dark

    class Screen:
        theme = Dependency(THEME, container=container)

    print(f"screen_theme={Screen().theme}")  # => screen_theme=solarized


if __name__ == "__main__":
    main()
