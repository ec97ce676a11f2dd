"""Pytest plugin providing isolated ``depbox`` containers.

Enable it with ``pytest_plugins = ["depbox.integrations.pytest_plugin"]``.
"""

from __future__ import annotations

from depbox._internal.integrations.pytest_plugin import (
    depbox_container,
    depbox_unlocked_container,
)

__all__ = ["depbox_container", "depbox_unlocked_container"]
