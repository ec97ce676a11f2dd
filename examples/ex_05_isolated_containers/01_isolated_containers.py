"""Isolated containers and named accessors.

This module demonstrates:

1. ``default_container`` is the process-wide container wrappers use by default.
2. A separate ``Container`` passed with ``container=`` keeps values isolated.
3. ``dependency_property`` adds named attributes to a ``Container`` subclass.
"""

from __future__ import annotations

from depbox import Container, Dependency, DependencyKey, default_container, dependency_property

API_URL = DependencyKey("api_url", "https://api.example.com")


class AppDependencies(Container):
    api_url = dependency_property(API_URL)


def main() -> None:
    test_dependencies = AppDependencies()
    test_dependencies.api_url = "http://localhost:8000"

    production = Dependency(API_URL)
    under_test = Dependency(API_URL, container=test_dependencies)

    print(f"production={production.value}")  # => production=https://api.example.com
    print(f"under_test={under_test.value}")  # => under_test=http://localhost:8000
    print(f"default_untouched={default_container.get(API_URL)}")  # => default_untouched=https://api.example.com


if __name__ == "__main__":
    main()
