from __future__ import annotations

import depbox
from depbox import container, dependency_object, keys, observation, wrappers


def test_all_names_are_importable() -> None:
    for name in depbox.__all__:
        assert hasattr(depbox, name), name


def test_public_modules_reexport_internal_objects() -> None:
    assert depbox.Container is container.Container
    assert depbox.default_container is container.default_container
    assert depbox.DependencyKey is keys.DependencyKey
    assert depbox.Dependency is wrappers.Dependency
    assert depbox.EagerDependency is wrappers.EagerDependency
    assert depbox.LazyDependency is wrappers.LazyDependency
    assert depbox.DependencyObject is dependency_object.DependencyObject
    assert depbox.ObservableObject is observation.ObservableObject


def test_wrappers_share_accessor_base() -> None:
    for wrapper_type in (
        depbox.EagerDependency,
        depbox.Dependency,
        depbox.LazyDependency,
        depbox.DependencyObject,
    ):
        assert issubclass(wrapper_type, wrappers.DependencyAccessor)


def test_default_container_is_a_container() -> None:
    assert isinstance(depbox.default_container, depbox.Container)
    assert depbox.Container.default() is depbox.default_container
