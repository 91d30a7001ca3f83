from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger

from extendable.errors import InvalidTarget
from extendable.node import Node, check_key, is_node, lookup, own_keys


def _collect(props: Union[Mapping[str, Any], Node, None], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    if props is None:
        result = {}
    elif is_node(props):
        result = {key: lookup(props, key) for key in own_keys(props)}
    elif isinstance(props, Mapping):
        result = dict(props)
    else:
        raise InvalidTarget(f"properties should be a mapping or a node, but is {type(props).__name__}")
    result.update(kwargs)
    for key in result:
        check_key(key)
    return result


def extend(base: Node, props: Optional[Union[Mapping[str, Any], Node]] = None, /, **kwargs: Any) -> Node:
    """Create a node that falls back to ``base`` and owns the given properties.

    ``props`` may be a mapping or another node (its own keys are copied, not
    what it inherits); keyword arguments are merged over it. ``None`` counts as
    empty.
    """
    if not is_node(base):
        raise InvalidTarget(f"cannot extend {type(base).__name__}, only nodes are extendable")
    merged = _collect(props, kwargs)
    node = Node(base, merged)
    logger.trace(f"extended {base!r} with {sorted(merged)}")
    return node


def create_empty(base: Node) -> Node:
    return extend(base)


create = create_empty
