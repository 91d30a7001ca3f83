from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


def bind(value: T, receiver: Any) -> T | Any:
    """Bind ``value`` to ``receiver`` through the descriptor protocol.

    Functions become methods of ``receiver``, override wrappers dispatch with
    ``receiver`` as the actual caller, staticmethods unwrap; anything without
    ``__get__`` is returned as-is.
    """
    getter = getattr(type(value), "__get__", None)
    if getter is None:
        return value
    return getter(value, receiver, type(receiver))


def is_method(value: Any) -> bool:
    return callable(value) or isinstance(value, (staticmethod, classmethod))
