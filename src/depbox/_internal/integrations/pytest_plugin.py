from __future__ import annotations

import pytest

from depbox._internal.container import Container
from depbox._internal.lock_mode import LockMode


@pytest.fixture()
def depbox_container() -> Container:
    """Create a per-test container isolated from ``default_container``.

    Pass it to wrappers with ``container=depbox_container``. The fixture is
    function-scoped, so registrations never leak between tests unless the
    fixture is overridden with a wider scope.

    Returns:
        A new, empty ``Container`` instance.

    """
    return Container()


@pytest.fixture()
def depbox_unlocked_container() -> Container:
    """Create a per-test container that skips storage locking.

    Returns:
        A new, empty ``Container`` using ``LockMode.NONE``.

    """
    return Container(lock_mode=LockMode.NONE)
