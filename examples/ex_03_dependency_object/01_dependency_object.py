"""DependencyObject: shared observable instances and two-way field bindings.

This module demonstrates:

1. Resolving an ``ObservableObject`` registered in a container.
2. Writing a field through ``projected.<field>`` notifies subscribers.
3. A second wrapper sees the change because both hold the same instance.
"""

from __future__ import annotations

from depbox import Container, DependencyObject, ObservableObject


class Profile(ObservableObject):
    def __init__(self, name: str) -> None:
        self.name = name


def main() -> None:
    container = Container()
    container.register(Profile("Ada"))

    editor = DependencyObject(Profile, container=container)
    viewer = DependencyObject(Profile, container=container)

    changes: list[str] = []
    editor.value.subscribe(lambda _, field, value: changes.append(f"{field}={value}"))

    name = editor.projected.name
    print(f"before={name.value}")  # => before=Ada
    name.value = "Grace"
    print(f"changes={changes}")  # => changes=['name=Grace']
    print(f"viewer_sees={viewer.value.name}")  # => viewer_sees=Grace
    print(f"same_instance={viewer.value is editor.value}")  # => same_instance=True


if __name__ == "__main__":
    main()
