"""Labelled natural-deduction proof trees and proof search states."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from typelogic.logical_type import LogicalType


def _char(label: str, position: int, default: str) -> str:
    return label[position] if len(label) > position else default


def _generate_label(children: tuple[ProofNode, ...], rule: str) -> str:
    labels = [child.label for child in children]
    count = len(labels)
    if rule in ("→E", "←E"):
        return f"{labels[0]}({labels[1]})" if count == 2 else "invalid"
    if rule == "→I":
        return f"λ{_char(labels[0], 0, 'x')}.{labels[0]}" if count else "invalid"
    if rule == "⊗E":
        if count < 2:
            return "invalid"
        first = labels[0]
        return (
            f"let ({_char(first, 0, 'x')},{_char(first, 1, 'y')}) "
            f"= {labels[1]} in {first}"
        )
    if rule == "⊗I":
        return f"({labels[0]},{labels[1]})" if count == 2 else "invalid"
    if rule == "◇E":
        if count != 2:
            return "invalid"
        return f"let◇{_char(labels[0], 0, 'x')} = {labels[1]} in {labels[0]}"
    if rule == "◇I":
        return f"◇{labels[0]}" if count else "invalid"
    if rule == "□E":
        return f"unbox({labels[0]})" if count else "invalid"
    if rule == "□I":
        return f"box({labels[0]})" if count else "invalid"
    return "_".join(labels) or rule


@dataclass(frozen=True)
class ProofNode:
    """A node of a proof tree: a type with its λ-term label."""

    logical_type: LogicalType
    label: str
    children: tuple[ProofNode, ...] = ()
    rule: Optional[str] = None

    @classmethod
    def axiom(cls, label: str, logical_type: LogicalType) -> ProofNode:
        """A leaf of the proof tree."""
        return cls(logical_type, label)

    @classmethod
    def infer(
        cls, logical_type: LogicalType, children: Iterable[ProofNode], rule: str
    ) -> ProofNode:
        """An inference node whose label is built from its children and rule."""
        kids = tuple(children)
        return cls(logical_type, _generate_label(kids, rule), kids, rule)

    def depth(self) -> int:
        return 1 + max(child.depth() for child in self.children) if self.children else 0

    def node_count(self) -> int:
        return 1 + sum(child.node_count() for child in self.children)

    def uses_rule(self, rule_name: str) -> bool:
        return self.rule == rule_name or any(
            child.uses_rule(rule_name) for child in self.children
        )

    def _lines(self, indent: int) -> Iterable[str]:
        suffix = f" [{self.rule}]" if self.rule is not None else ""
        yield f"{' ' * indent}{self.label} : {self.logical_type}{suffix}\n"
        for child in self.children:
            yield from child._lines(indent + 2)

    def __str__(self) -> str:
        return "".join(self._lines(0))


@dataclass(frozen=True)
class ProofSearchState:
    """A sequent of proof nodes reached during proof search."""

    items: tuple[ProofNode, ...]
    rule_history: tuple[str, ...] = field(default=())
    depth: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "rule_history", tuple(self.rule_history))

    def apply_rule(
        self, rule_name: str, result: ProofNode, used_indices: Iterable[int]
    ) -> ProofSearchState:
        """Replace the used items by the result, giving a new state."""
        used = set(used_indices)
        kept = [item for i, item in enumerate(self.items) if i not in used]
        return ProofSearchState(
            (*kept, result), (*self.rule_history, rule_name), self.depth + 1
        )

    def is_complete(self, target: LogicalType) -> bool:
        return len(self.items) == 1 and self.items[0].logical_type == target

    def proof(self) -> Optional[ProofNode]:
        """The single remaining proof node, or None if several remain."""
        return self.items[0] if len(self.items) == 1 else None