from __future__ import annotations

from dataclasses import dataclass
from types import MethodType
from typing import Any, Callable

from loguru import logger

from extendable.errors import InvalidArgument, NotAMethod
from extendable.node import Node, has_own, lookup, set_own
from extendable.utilles import bind, is_method

_MISSING: Any = object()


@dataclass(frozen=True, eq=False)
class OverrideWrapper:
    """An overridden method stored as an own key of a node.

    ``original`` is the value the name resolved to when the override was
    declared; it is never looked up again. On every call the receiver is the
    node the call went through, so the super callable handed to
    ``replacement`` sees that node's state rather than the declaring node's.
    """

    original: Callable[..., Any]
    replacement: Callable[..., Any]
    name: str

    def __get__(self, receiver: Any, owner: Any = None):
        if receiver is None:
            return self
        return MethodType(self, receiver)

    def __call__(self, receiver: Any, *args: Any, **kwargs: Any) -> Any:
        super_method = bind(self.original, receiver)
        return bind(self.replacement, receiver)(super_method, *args, **kwargs)

    @property
    def __wrapped__(self) -> Callable[..., Any]:
        return self.original

    def __repr__(self) -> str:
        return f"<OverrideWrapper {self.name!r} of {self.original!r}>"


def override(target: Node, method_name: str, replacement: Callable[..., Any]) -> Node:
    if not isinstance(method_name, str) or not method_name:
        raise InvalidArgument(f"method name should be a non-empty string, but is {method_name!r}")
    if not callable(replacement):
        raise InvalidArgument(f"replacement for {method_name!r} should be callable, but is {replacement!r}")

    original = lookup(target, method_name, _MISSING)
    if original is _MISSING:
        raise NotAMethod(f"method {method_name!r} should be a function, but it does not exist on {target!r}")
    if not is_method(original):
        raise NotAMethod(f"method {method_name!r} should be a function, but is {type(original).__name__}")

    if has_own(target, method_name):
        logger.debug(f"{target!r}: replacing own method {method_name!r}")
    else:
        logger.debug(f"{target!r}: shadowing inherited method {method_name!r}")
    set_own(target, method_name, OverrideWrapper(original, replacement, method_name))
    return target
