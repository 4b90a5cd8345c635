"""Proof nets: graph representations of proofs for logical types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

from typelogic.logical_type import (
    Atomic,
    Box,
    Diamond,
    DownArrow,
    LeftImplication,
    LogicalType,
    Product,
    RightImplication,
    UpArrow,
    atomic,
    boxed,
    diamond,
    product,
    right_impl,
    up_arrow,
)
from typelogic.modality import Modality
from typelogic.proof import ProofNode


def _mod(modality: Optional[Modality]) -> str:
    return "" if modality is None else str(modality)


@dataclass(frozen=True)
class Atom:
    """An atomic formula with its polarity (True is positive)."""

    name: str
    features: tuple = ()
    polarity: bool = True

    @property
    def children(self) -> tuple[int, ...]:
        return ()


@dataclass(frozen=True)
class Tensor:
    """A tensor (⊗) node over two sub-nodes."""

    left: int
    right: int
    modality: Optional[Modality] = None

    @property
    def children(self) -> tuple[int, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class Par:
    """A par (⅋) node over two sub-nodes."""

    left: int
    right: int
    modality: Optional[Modality] = None

    @property
    def children(self) -> tuple[int, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class OfCourse:
    """An of-course (!) exponential node."""

    child: int
    modality: Optional[Modality] = None

    @property
    def children(self) -> tuple[int, ...]:
        return (self.child,)


@dataclass(frozen=True)
class WhyNot:
    """A why-not (?) exponential node."""

    child: int
    modality: Optional[Modality] = None

    @property
    def children(self) -> tuple[int, ...]:
        return (self.child,)


@dataclass(frozen=True)
class Displacement:
    """A displacement-calculus node with its wrapping index."""

    left: int
    right: int
    index: int

    @property
    def children(self) -> tuple[int, ...]:
        return (self.left, self.right)


ProofNetNode = Union[Atom, Tensor, Par, OfCourse, WhyNot, Displacement]


def _shifted(node: ProofNetNode, offset: int) -> ProofNetNode:
    """The node with its child indices moved by ``offset``."""
    if isinstance(node, (OfCourse, WhyNot)):
        return replace(node, child=node.child + offset)
    if isinstance(node, (Tensor, Par, Displacement)):
        return replace(node, left=node.left + offset, right=node.right + offset)
    # Atoms refer to no other node.
    return node


@dataclass(frozen=True)
class ProofNetLink:
    """A directed link between two nodes of a proof net."""

    source: int
    target: int
    is_axiom: bool = False


def _build(
    logical_type: LogicalType, polarity: bool, nodes: list[ProofNetNode]
) -> int:
    def push(node: ProofNetNode) -> int:
        nodes.append(node)
        return len(nodes) - 1

    if isinstance(logical_type, Atomic):
        return push(Atom(logical_type.name, logical_type.features, polarity))
    if isinstance(logical_type, RightImplication):
        a = _build(logical_type.left, not polarity if polarity else polarity, nodes)
        b = _build(logical_type.right, polarity if polarity else not polarity, nodes)
        kind = Par if polarity else Tensor
        return push(kind(a, b, logical_type.modality))
    if isinstance(logical_type, LeftImplication):
        a = _build(logical_type.left, polarity if polarity else not polarity, nodes)
        b = _build(logical_type.right, not polarity if polarity else polarity, nodes)
        kind = Par if polarity else Tensor
        return push(kind(a, b, logical_type.modality))
    if isinstance(logical_type, Product):
        a = _build(logical_type.left, polarity, nodes)
        b = _build(logical_type.right, polarity, nodes)
        kind = Tensor if polarity else Par
        return push(kind(a, b, logical_type.modality))
    if isinstance(logical_type, Diamond):
        a = _build(logical_type.inner, polarity, nodes)
        kind = WhyNot if polarity else OfCourse
        return push(kind(a, logical_type.modality))
    if isinstance(logical_type, Box):
        a = _build(logical_type.inner, polarity, nodes)
        kind = OfCourse if polarity else WhyNot
        return push(kind(a, logical_type.modality))
    if isinstance(logical_type, UpArrow):
        a = _build(logical_type.left, polarity, nodes)
        b = _build(logical_type.right, not polarity, nodes)
        return push(Displacement(a, b, logical_type.index))
    if isinstance(logical_type, DownArrow):
        a = _build(logical_type.left, polarity, nodes)
        b = _build(logical_type.right, polarity, nodes)
        return push(Displacement(a, b, logical_type.index))
    raise ValueError(f"cannot encode {logical_type} in a proof net")


@dataclass
class ProofNet:
    """Formula nodes, links between them, and the conclusion node."""

    nodes: list[ProofNetNode] = field(default_factory=list)
    links: list[ProofNetLink] = field(default_factory=list)
    output: int = 0

    @classmethod
    def from_type(cls, logical_type: LogicalType, polarity: bool) -> ProofNet:
        """Unfold a logical type into a proof net; quantifiers raise ValueError."""
        nodes: list[ProofNetNode] = []
        output = _build(logical_type, polarity, nodes)
        return cls(nodes, [], output)

    def is_correct(self) -> bool:
        """Whether the net is connected and free of cycles."""
        return self._is_connected() and not self._has_cycles()

    def _is_connected(self) -> bool:
        if not self.nodes:
            return True
        visited = {self.output}
        queue = [self.output]
        while queue:
            node = queue.pop(0)
            neighbours: list[int] = []
            for link in self.links:
                if link.source == node:
                    neighbours.append(link.target)
                elif link.target == node:
                    neighbours.append(link.source)
            neighbours.extend(self.nodes[node].children)
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return len(visited) == len(self.nodes)

    def _successors(self, node: int) -> Iterable[int]:
        for link in self.links:
            if link.source == node:
                yield link.target
        yield from self.nodes[node].children

    def _has_cycles(self) -> bool:
        visited: set[int] = set()
        on_stack: set[int] = set()

        def visit(node: int) -> bool:
            visited.add(node)
            on_stack.add(node)
            for nxt in self._successors(node):
                if nxt in on_stack:
                    return True
                if nxt not in visited and visit(nxt):
                    return True
            on_stack.discard(node)
            return False

        return any(
            visit(i) for i in range(len(self.nodes)) if i not in visited
        )

    def to_proof_tree(self) -> Optional[ProofNode]:
        """A proof tree read off a correct net, or None if the net is incorrect."""
        if not self.is_correct():
            return None
        return self._tree(self.output)

    def _tree(self, index: int) -> ProofNode:
        node = self.nodes[index]
        if isinstance(node, Atom):
            return ProofNode.axiom(f"{node.name}_{index}", atomic(node.name, node.features))
        if isinstance(node, (OfCourse, WhyNot)):
            child = self._tree(node.child)
            if isinstance(node, OfCourse):
                return ProofNode.infer(
                    boxed(child.logical_type), [child], f"□I{_mod(node.modality)}"
                )
            return ProofNode.infer(
                diamond(child.logical_type), [child], f"◇I{_mod(node.modality)}"
            )
        left = self._tree(node.left)
        right = self._tree(node.right)
        if isinstance(node, Tensor):
            result = product(left.logical_type, right.logical_type)
            rule = f"⊗I{_mod(node.modality)}"
        elif isinstance(node, Par):
            result = right_impl(left.logical_type, right.logical_type)
            rule = f"→I{_mod(node.modality)}"
        else:
            result = up_arrow(left.logical_type, right.logical_type, node.index)
            rule = f"↑{node.index}I"
        return ProofNode.infer(result, [left, right], rule)

    def link_with(
        self, other: ProofNet, axiom_links: Iterable[tuple[int, int]]
    ) -> bool:
        """Append another net, connect it by axiom links and report correctness."""
        offset = len(self.nodes)
        self.nodes.extend(_shifted(node, offset) for node in other.nodes)
        self.links.extend(
            ProofNetLink(link.source + offset, link.target + offset, link.is_axiom)
            for link in other.links
        )
        self.links.extend(
            ProofNetLink(mine, theirs + offset, True) for mine, theirs in axiom_links
        )
        return self.is_correct()