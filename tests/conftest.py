"""Shared pytest fixtures for depbox tests."""

import pytest

from depbox.container import Container
from depbox.keys import DependencyKey
from depbox.lock_mode import LockMode


@pytest.fixture()
def container() -> Container:
    """Fresh container isolated from the process-wide default."""
    return Container()


@pytest.fixture()
def container_unlocked() -> Container:
    """Fresh container with storage locking disabled."""
    return Container(lock_mode=LockMode.NONE)


@pytest.fixture()
def greeting_key() -> DependencyKey[str]:
    """Declared key with a string default."""
    return DependencyKey("greeting", "hello")
