"""Modalities and structural properties for multi-modal type-logical grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class StructuralProperty(Enum):
    """Structural rules that a modality may license."""

    ASSOCIATIVITY = "associativity"
    COMMUTATIVITY = "commutativity"
    WEAKENING = "weakening"
    CONTRACTION = "contraction"
    PERMUTATION = "permutation"


@dataclass
class Modality:
    """An indexed mode of composition with a set of structural properties."""

    index: int
    properties: set[StructuralProperty] = field(default_factory=set)

    def __init__(self, index: int, properties: Iterable[StructuralProperty] = ()) -> None:
        self.index = index
        self.properties = set(properties)

    def __hash__(self) -> int:
        return hash((self.index, frozenset(self.properties)))

    def __str__(self) -> str:
        return str(self.index)

    def has_property(self, prop: StructuralProperty) -> bool:
        return prop in self.properties

    def add_property(self, prop: StructuralProperty) -> None:
        self.properties.add(prop)

    def remove_property(self, prop: StructuralProperty) -> None:
        self.properties.discard(prop)

    def is_associative(self) -> bool:
        return self.has_property(StructuralProperty.ASSOCIATIVITY)

    def is_commutative(self) -> bool:
        return self.has_property(StructuralProperty.COMMUTATIVITY)

    def allows_weakening(self) -> bool:
        return self.has_property(StructuralProperty.WEAKENING)

    def allows_contraction(self) -> bool:
        return self.has_property(StructuralProperty.CONTRACTION)

    def allows_permutation(self) -> bool:
        return self.has_property(StructuralProperty.PERMUTATION)