from loguru import logger

from extendable.composer import create, create_empty, extend
from extendable.errors import ExtendableError, InvalidArgument, InvalidTarget, NotAMethod
from extendable.node import Node, chain, has_own, is_node, lookup, namespace, own_keys, parent_of
from extendable.overrider import OverrideWrapper, override
from extendable.utilles import bind

logger.disable("extendable")

Extendable = Node(None, {"extend": extend, "override": override, "create": create})

__all__ = [
    "Extendable",
    "Node",
    "extend",
    "create",
    "create_empty",
    "override",
    "OverrideWrapper",
    "lookup",
    "namespace",
    "chain",
    "parent_of",
    "own_keys",
    "has_own",
    "is_node",
    "bind",
    "ExtendableError",
    "InvalidArgument",
    "InvalidTarget",
    "NotAMethod",
]
