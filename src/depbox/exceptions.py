class DepboxError(Exception):
    """Represent a base class for all depbox-specific failures.

    Catch this type when you want to handle any depbox error path without
    matching each concrete exception class individually.
    """


class DepboxInvalidRegistrationError(DepboxError):
    """Signal invalid registration or wrapper configuration.

    Raised by ``Container.set`` when a value does not match the declared key's
    value type, by ``Container.register`` when ``provides`` is invalid, and by
    the access wrappers when their target is neither a ``DependencyKey`` nor a
    class.

    Typical fixes include storing values of the declared type, passing a class
    as ``provides``, and declaring keys with ``DependencyKey(...)``.
    """


class DepboxInvalidDependencyObjectError(DepboxInvalidRegistrationError):
    """Signal that ``DependencyObject`` resolved a non-observable value.

    ``DependencyObject`` hands out two-way field bindings whose writes must be
    visible to observers, so the resolved value has to implement
    ``SupportsObservation``.

    Typical fix is deriving the registered class from ``ObservableObject`` or
    implementing ``subscribe(callback)`` on it.
    """


class DepboxDependencyNotRegisteredError(DepboxError):
    """Signal that a dependency type has no registered instance.

    Raised by ``Container.require`` and by every access wrapper that resolves
    by type (no ``DependencyKey``) when nothing was registered for that exact
    type. This is a programming error: the dependency must be registered
    before anything reads it.

    Typical fix is calling ``container.register(instance)`` during application
    startup, before components that depend on it are created or read.
    """

    def __init__(self, dependency_type: type) -> None:
        self.dependency_type = dependency_type
        name = getattr(dependency_type, "__qualname__", repr(dependency_type))
        super().__init__(f"Failed to resolve: {name}")
