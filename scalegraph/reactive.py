from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Iterable, Literal

from scalegraph.errors import GraphConfigError


LOGGER = logging.getLogger(__name__)

NodeKind = Literal["leaf", "derived", "cell"]

_MISSING = object()


@dataclass
class _Node:
    name: str
    kind: NodeKind
    deps: tuple[str, ...] = ()
    fn: Callable[..., Any] | None = None
    value: Any = _MISSING
    dirty: bool = True
    compute_count: int = 0
    dependents: set[str] = field(default_factory=set)


class ValueGraph:
    """Lazy, memoized dataflow graph with explicit dependency declarations."""

    def __init__(self) -> None:
        self._nodes: dict[str, _Node] = {}
        self._computing: list[str] = []

    def leaf(self, name: str, value: Any = None) -> None:
        node = self._declare(name, "leaf", ())
        node.value = value
        node.dirty = False

    def derived(self, name: str, deps: Iterable[str], fn: Callable[..., Any]) -> None:
        node = self._declare(name, "derived", tuple(deps))
        node.fn = fn

    def cell(self, name: str, deps: Iterable[str], fn: Callable[..., Any], initial: Any = None) -> None:
        node = self._declare(name, "cell", tuple(deps))
        node.fn = fn
        node.value = initial

    def _declare(self, name: str, kind: NodeKind, deps: tuple[str, ...]) -> _Node:
        if not name or not isinstance(name, str):
            raise GraphConfigError("node name must be a non-empty string")
        if name in self._nodes:
            raise GraphConfigError(f"node `{name}` is already declared")
        if name in deps:
            raise GraphConfigError(f"node `{name}` cannot depend on itself")
        node = _Node(name=name, kind=kind, deps=deps)
        self._nodes[name] = node
        # Dependencies may be declared later; link whatever is known now.
        for dep in deps:
            if dep in self._nodes:
                self._nodes[dep].dependents.add(name)
        for other in self._nodes.values():
            if name in other.deps:
                node.dependents.add(other.name)
        return node

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def names(self) -> list[str]:
        return list(self._nodes)

    def get(self, name: str) -> Any:
        node = self._node(name)
        if node.kind == "leaf" or not node.dirty:
            return node.value
        if name in self._computing:
            cycle = " -> ".join(self._computing[self._computing.index(name):] + [name])
            raise GraphConfigError(f"dependency cycle: {cycle}")
        self._computing.append(name)
        try:
            args = [self.get(dep) for dep in node.deps]
            assert node.fn is not None
            if node.kind == "cell":
                value = node.fn(node.value, *args)
            else:
                value = node.fn(*args)
        finally:
            self._computing.pop()
        node.value = value
        node.dirty = False
        node.compute_count += 1
        return value

    def set(self, name: str, value: Any) -> None:
        node = self._node(name)
        if node.kind == "derived":
            raise GraphConfigError(f"derived value `{name}` cannot be written")
        if self._computing:
            raise GraphConfigError(f"cannot write `{name}` while `{self._computing[-1]}` is computing")
        node.value = value
        if node.kind == "cell":
            # Re-run the update with the written value as its previous state.
            node.dirty = True
        self._invalidate_dependents(node)

    def touch(self, name: str) -> None:
        """Invalidate everything downstream of ``name`` without changing it."""
        node = self._node(name)
        if node.kind != "leaf":
            node.dirty = True
        self._invalidate_dependents(node)

    def compute_count(self, name: str) -> int:
        return self._node(name).compute_count

    def is_dirty(self, name: str) -> bool:
        return self._node(name).dirty

    def check(self) -> None:
        """Raise GraphConfigError for unknown dependencies or cycles."""
        for node in self._nodes.values():
            for dep in node.deps:
                if dep not in self._nodes:
                    raise GraphConfigError(f"node `{node.name}` depends on unknown node `{dep}`")
        state: dict[str, int] = {}

        def visit(name: str, path: list[str]) -> None:
            mark = state.get(name, 0)
            if mark == 2:
                return
            if mark == 1:
                cycle = path[path.index(name):] + [name]
                raise GraphConfigError(f"dependency cycle: {' -> '.join(cycle)}")
            state[name] = 1
            path.append(name)
            for dep in self._nodes[name].deps:
                visit(dep, path)
            path.pop()
            state[name] = 2

        for name in self._nodes:
            visit(name, [])

    def _node(self, name: str) -> _Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise GraphConfigError(f"unknown node `{name}`") from None

    def _invalidate_dependents(self, node: _Node) -> None:
        stack = list(node.dependents)
        seen: set[str] = set()
        while stack:
            name = stack.pop()
            if name in seen:
                continue
            seen.add(name)
            dependent = self._nodes[name]
            dependent.dirty = True
            stack.extend(dependent.dependents)
        if seen:
            LOGGER.debug("invalidated %d value(s) downstream of %s", len(seen), node.name)
