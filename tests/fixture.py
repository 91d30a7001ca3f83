from __future__ import annotations

from extendable import Extendable, Node


def base_node(**extra) -> Node:
    def m(self):
        return "base"

    def describe(self):
        return f"x={self.x}"

    return Extendable.extend({"x": 1, "m": m, "describe": describe}, **extra)


def counter_node(start: int = 0) -> Node:
    def increment(self, step=1):
        self.count = self.count + step
        return self.count

    return Extendable.extend({"count": start, "increment": increment})
