from __future__ import annotations

from collections import ChainMap
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from extendable.errors import InvalidTarget
from extendable.utilles import bind

_MISSING: Any = object()
_NO_DEFAULT: Any = object()


def check_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidTarget(f"property name should be a non-empty string, but is {key!r}")
    # own keys shadowed by slots or class attributes could never be read back
    if key.startswith("_Node__") or hasattr(Node, key):
        raise InvalidTarget(f"property name {key!r} is reserved by {Node.__name__}")
    return key


class Node:
    """A record of own keys with an optional link to a parent ``Node``.

    Reading an attribute (or item) resolves it on the node first, then on each
    parent in turn, and binds callables to the node the read went through.
    Writes and deletes only ever touch the node's own keys.
    """

    __slots__ = ("__parent", "__own")

    def __init__(self, parent: Optional[Node] = None, props: Optional[Mapping[str, Any]] = None) -> None:
        if parent is not None and not isinstance(parent, Node):
            raise InvalidTarget(f"parent should be a node or None, but is {type(parent).__name__}")
        own = dict(props or {})
        for key in own:
            check_key(key)
        object.__setattr__(self, "_Node__parent", parent)
        object.__setattr__(self, "_Node__own", own)

    def __getattr__(self, key: str):
        if key.startswith("_Node__"):
            raise AttributeError(key)
        value = lookup(self, key, _MISSING)
        if value is _MISSING:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{key}'")
        return bind(value, self)

    def __setattr__(self, key: str, value: Any) -> None:
        self.__own[check_key(key)] = value

    def __delattr__(self, key: str) -> None:
        if key not in self.__own:
            raise AttributeError(f"'{self.__class__.__name__}' object has no own attribute '{key}'")
        del self.__own[key]

    def __getitem__(self, key: str):
        value = lookup(self, key)
        return bind(value, self)

    def __setitem__(self, key: str, value: Any) -> None:
        self.__own[check_key(key)] = value

    def __delitem__(self, key: str) -> None:
        del self.__own[key]

    def __contains__(self, key: object) -> bool:
        return lookup(self, key, _MISSING) is not _MISSING  # type: ignore

    def __dir__(self) -> List[str]:
        return sorted(namespace(self))

    def __repr__(self) -> str:
        return f"<Node own={sorted(self.__own)} depth={len(list(chain(self))) - 1}>"


def is_node(obj: Any) -> bool:
    return isinstance(obj, Node)


def parent_of(node: Node) -> Optional[Node]:
    return object.__getattribute__(node, "_Node__parent")


def _own(node: Node) -> Dict[str, Any]:
    return object.__getattribute__(node, "_Node__own")


def own_keys(node: Node) -> List[str]:
    return list(_own(node))


def has_own(node: Node, key: str) -> bool:
    return key in _own(node)


def set_own(node: Node, key: str, value: Any) -> None:
    _own(node)[key] = value


def chain(node: Node) -> Iterator[Node]:
    current: Optional[Node] = node
    while current is not None:
        yield current
        current = parent_of(current)


def lookup(node: Node, key: str, default: Any = _NO_DEFAULT) -> Any:
    """Return the raw value stored for ``key`` on the nearest node of the chain.

    The value is not bound to any receiver. Raises ``KeyError`` when nothing in
    the chain holds ``key`` and no default is given.
    """
    for current in chain(node):
        own = _own(current)
        if key in own:
            return own[key]
    if default is _NO_DEFAULT:
        raise KeyError(key)
    return default


def namespace(node: Node) -> ChainMap:
    return ChainMap(*(MappingProxyType(_own(current)) for current in chain(node)))
