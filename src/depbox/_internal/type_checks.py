from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a plain class usable as a storage key or isinstance target.

    Args:
        candidate: Value being checked, usually a ``provides`` type or a key's ``value_type``.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


__all__ = ["is_runtime_class"]
