from depbox.container import Container, default_container
from depbox.dependency_object import Binding, BindingProjection, DependencyObject
from depbox.exceptions import (
    DepboxDependencyNotRegisteredError,
    DepboxError,
    DepboxInvalidDependencyObjectError,
    DepboxInvalidRegistrationError,
)
from depbox.keys import DependencyKey, dependency_property
from depbox.lock_mode import LockMode
from depbox.observation import ObservableObject, SupportsObservation
from depbox.wrappers import Dependency, EagerDependency, LazyDependency

__all__ = [
    "Binding",
    "BindingProjection",
    "Container",
    "DepboxDependencyNotRegisteredError",
    "DepboxError",
    "DepboxInvalidDependencyObjectError",
    "DepboxInvalidRegistrationError",
    "Dependency",
    "DependencyKey",
    "DependencyObject",
    "EagerDependency",
    "LazyDependency",
    "LockMode",
    "ObservableObject",
    "SupportsObservation",
    "default_container",
    "dependency_property",
]
