"""Tests for eager, computed, and lazy dependency accessors."""

from typing import Any

import pytest

from depbox.container import Container, default_container
from depbox.exceptions import DepboxDependencyNotRegisteredError, DepboxInvalidRegistrationError
from depbox.keys import DependencyKey
from depbox.wrappers import Dependency, EagerDependency, LazyDependency


class Logger:
    def __init__(self, id: int) -> None:
        self.id = id


class CountingContainer(Container):
    """Container that counts how often values are looked up."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups = 0

    def get(self, key: DependencyKey[Any]) -> Any:
        self.lookups += 1
        return super().get(key)

    def require(self, dependency_type: type[Any]) -> Any:
        self.lookups += 1
        return super().require(dependency_type)


ALL_WRAPPERS = [EagerDependency, Dependency, LazyDependency]


@pytest.mark.parametrize("wrapper_type", ALL_WRAPPERS)
def test_declared_key_reads_default(
    wrapper_type: type[Any],
    container: Container,
    greeting_key: DependencyKey[str],
) -> None:
    wrapper = wrapper_type(greeting_key, container=container)

    assert wrapper.value == "hello"


@pytest.mark.parametrize("wrapper_type", ALL_WRAPPERS)
def test_type_target_reads_registered_instance(
    wrapper_type: type[Any],
    container: Container,
) -> None:
    logger = Logger(id=1)
    container.register(logger)

    wrapper = wrapper_type(Logger, container=container)

    assert wrapper.value is logger


@pytest.mark.parametrize("wrapper_type", ALL_WRAPPERS)
def test_rejects_invalid_target(wrapper_type: type[Any], container: Container) -> None:
    with pytest.raises(DepboxInvalidRegistrationError, match="DependencyKey or a class"):
        wrapper_type("greeting", container=container)


@pytest.mark.parametrize("wrapper_type", ALL_WRAPPERS)
def test_defaults_to_process_wide_container(
    wrapper_type: type[Any],
    container: Container,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Wrappers without ``container=`` read the module-level default container."""

    class OnlyInDefault:
        pass

    monkeypatch.setattr("depbox._internal.wrappers.default_container", container)
    instance = OnlyInDefault()
    container.register(instance)

    wrapper = wrapper_type(OnlyInDefault)

    assert wrapper.container is container
    assert wrapper.value is instance
    assert not default_container.is_registered(OnlyInDefault)


def test_process_wide_default_is_used_without_patching(greeting_key: DependencyKey[str]) -> None:
    wrapper = Dependency(greeting_key)

    assert wrapper.container is default_container
    assert wrapper.value == "hello"


class TestEagerDependency:
    def test_missing_type_fails_at_construction(self, container: Container) -> None:
        with pytest.raises(DepboxDependencyNotRegisteredError, match="Failed to resolve: Logger"):
            EagerDependency(Logger, container=container)

    def test_keeps_snapshot_after_set(
        self,
        container: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        wrapper = EagerDependency(greeting_key, container=container)

        container.set(greeting_key, "hi")

        assert wrapper.value == "hello"

    def test_keeps_snapshot_after_register(self, container: Container) -> None:
        first = Logger(id=1)
        container.register(first)
        wrapper = EagerDependency(Logger, container=container)

        container.register(Logger(id=2))

        assert wrapper.value is first

    def test_resolves_once(self) -> None:
        container = CountingContainer()
        container.register(Logger(id=1))
        wrapper = EagerDependency(Logger, container=container)

        for _ in range(3):
            assert wrapper.value.id == 1

        assert container.lookups == 1


class TestComputedDependency:
    def test_reflects_set_after_construction(
        self,
        container: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        wrapper = Dependency(greeting_key, container=container)
        assert wrapper.value == "hello"

        container.set(greeting_key, "hi")

        assert wrapper.value == "hi"

    def test_reflects_register_after_construction(self, container: Container) -> None:
        container.register(Logger(id=1))
        wrapper = Dependency(Logger, container=container)

        container.register(Logger(id=2))

        assert wrapper.value.id == 2

    def test_construction_does_not_resolve(self, container: Container) -> None:
        wrapper = Dependency(Logger, container=container)

        with pytest.raises(DepboxDependencyNotRegisteredError):
            _ = wrapper.value

        logger = Logger(id=5)
        container.register(logger)

        assert wrapper.value is logger

    def test_resolves_on_every_read(self) -> None:
        container = CountingContainer()
        container.register(Logger(id=1))
        wrapper = Dependency(Logger, container=container)

        for _ in range(4):
            _ = wrapper.value

        assert container.lookups == 4


class TestLazyDependency:
    def test_resolves_exactly_once_across_reads(self) -> None:
        container = CountingContainer()
        container.register(Logger(id=1))
        wrapper = LazyDependency(Logger, container=container)

        assert container.lookups == 0
        assert not wrapper.is_resolved

        for _ in range(5):
            assert wrapper.value.id == 1

        assert container.lookups == 1
        assert wrapper.is_resolved

    def test_resolves_with_value_present_at_first_read(
        self,
        container: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        wrapper = LazyDependency(greeting_key, container=container)

        container.set(greeting_key, "first")
        assert wrapper.value == "first"

        container.set(greeting_key, "second")
        assert wrapper.value == "first"

    def test_missing_type_fails_on_first_read(self, container: Container) -> None:
        wrapper = LazyDependency(Logger, container=container)

        with pytest.raises(DepboxDependencyNotRegisteredError, match="Failed to resolve: Logger"):
            _ = wrapper.value

        assert not wrapper.is_resolved

    def test_works_without_locking(
        self,
        container_unlocked: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        wrapper = LazyDependency(greeting_key, container=container_unlocked)

        assert wrapper.value == "hello"
        assert wrapper.is_resolved


class TestDescriptorAccess:
    def test_class_attribute_reads_through_value(
        self,
        container: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        class Greeter:
            greeting = Dependency(greeting_key, container=container)

        greeter = Greeter()
        assert greeter.greeting == "hello"

        container.set(greeting_key, "hi")

        assert greeter.greeting == "hi"

    def test_class_access_returns_wrapper(
        self,
        container: Container,
        greeting_key: DependencyKey[str],
    ) -> None:
        class Greeter:
            greeting = LazyDependency(greeting_key, container=container)

        assert isinstance(Greeter.greeting, LazyDependency)
        assert not Greeter.greeting.is_resolved


def test_repr_names_target(container: Container, greeting_key: DependencyKey[str]) -> None:
    container.register(Logger(id=1))

    assert repr(EagerDependency(Logger, container=container)) == "EagerDependency(Logger)"
    assert repr(Dependency(greeting_key, container=container)).startswith(
        "Dependency(DependencyKey('greeting'",
    )
