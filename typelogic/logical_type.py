"""Logical types (formulas) of type-logical grammar."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional, Union

from typelogic.modality import Modality

FeatureInput = Union[Mapping[str, str], tuple, None]


def _normalise_features(features: FeatureInput) -> tuple[tuple[str, str], ...]:
    if not features:
        return ()
    pairs = features.items() if isinstance(features, Mapping) else features
    return tuple(sorted((str(k), str(v)) for k, v in pairs))


def _unify_features(
    first: tuple[tuple[str, str], ...], second: tuple[tuple[str, str], ...]
) -> Optional[dict[str, str]]:
    merged = dict(first)
    for name, value in second:
        if merged.setdefault(name, value) != value:
            return None
    return merged


def _mod(modality: Optional[Modality]) -> str:
    return "" if modality is None else str(modality)


class LogicalType:
    """Base class of all logical types."""

    __slots__ = ()

    def unify(self, other: LogicalType) -> Optional[LogicalType]:
        """Return the unification of two types, or None if they are incompatible."""
        return None

    def is_atomic(self) -> bool:
        return False

    def _needs_parens(self) -> bool:
        return True


def _wrap(t: LogicalType) -> str:
    return f"({t})" if t._needs_parens() else str(t)


@dataclass(frozen=True)
class Atomic(LogicalType):
    """An atomic type such as s, np or n, optionally carrying features."""

    name: str
    features: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", _normalise_features(self.features))

    @property
    def feature_map(self) -> dict[str, str]:
        return dict(self.features)

    def __str__(self) -> str:
        if not self.features:
            return self.name
        inner = ",".join(f"{k}={v}" for k, v in self.features)
        return f"{self.name}[{inner}]"

    def _needs_parens(self) -> bool:
        return False

    def is_atomic(self) -> bool:
        return True

    def unify(self, other: LogicalType) -> Optional[LogicalType]:
        if not isinstance(other, Atomic) or self.name != other.name:
            return None
        merged = _unify_features(self.features, other.features)
        if merged is None:
            return None
        return Atomic(self.name, merged)


class _Binary(LogicalType):
    __slots__ = ()

    def unify(self, other: LogicalType) -> Optional[LogicalType]:
        if type(other) is not type(self) or self.modality != other.modality:
            return None
        left = self.left.unify(other.left)
        right = self.right.unify(other.right)
        if left is None or right is None:
            return None
        return replace(self, left=left, right=right)


class _Unary(LogicalType):
    __slots__ = ()

    def unify(self, other: LogicalType) -> Optional[LogicalType]:
        if type(other) is not type(self) or self.modality != other.modality:
            return None
        inner = self.inner.unify(other.inner)
        if inner is None:
            return None
        return replace(self, inner=inner)

    def _needs_parens(self) -> bool:
        return False


class _Displaced(LogicalType):
    __slots__ = ()

    def unify(self, other: LogicalType) -> Optional[LogicalType]:
        if type(other) is not type(self) or self.index != other.index:
            return None
        left = self.left.unify(other.left)
        right = self.right.unify(other.right)
        if left is None or right is None:
            return None
        return replace(self, left=left, right=right)


@dataclass(frozen=True)
class RightImplication(_Binary):
    """Right implication A → B."""

    left: LogicalType
    right: LogicalType
    modality: Optional[Modality] = None

    def __str__(self) -> str:
        return f"{_wrap(self.left)}{_mod(self.modality)} → {self.right}"


@dataclass(frozen=True)
class LeftImplication(_Binary):
    """Left implication A ← B."""

    left: LogicalType
    right: LogicalType
    modality: Optional[Modality] = None

    def __str__(self) -> str:
        return f"{_wrap(self.left)} ←{_mod(self.modality)} {_wrap(self.right)}"


@dataclass(frozen=True)
class Product(_Binary):
    """Product A ⊗ B."""

    left: LogicalType
    right: LogicalType
    modality: Optional[Modality] = None

    def __str__(self) -> str:
        return f"{self.left} ⊗{_mod(self.modality)} {self.right}"


@dataclass(frozen=True)
class Diamond(_Unary):
    """Diamond modal type ◇A."""

    inner: LogicalType
    modality: Optional[Modality] = None

    def __str__(self) -> str:
        return f"◇{_mod(self.modality)}{self.inner}"


@dataclass(frozen=True)
class Box(_Unary):
    """Box modal type □A."""

    inner: LogicalType
    modality: Optional[Modality] = None

    def __str__(self) -> str:
        return f"□{_mod(self.modality)}{self.inner}"


@dataclass(frozen=True)
class Universal(LogicalType):
    """First-order universal quantifier ∀x.A."""

    variable: str
    body: LogicalType

    def __str__(self) -> str:
        return f"∀{self.variable}.{self.body}"


@dataclass(frozen=True)
class Existential(LogicalType):
    """First-order existential quantifier ∃x.A."""

    variable: str
    body: LogicalType

    def __str__(self) -> str:
        return f"∃{self.variable}.{self.body}"


@dataclass(frozen=True)
class UpArrow(_Displaced):
    """Displacement calculus extraction A ↑i B."""

    left: LogicalType
    right: LogicalType
    index: int

    def __str__(self) -> str:
        return f"{self.left} ↑{self.index} {self.right}"


@dataclass(frozen=True)
class DownArrow(_Displaced):
    """Displacement calculus infixation A ↓i B."""

    left: LogicalType
    right: LogicalType
    index: int

    def __str__(self) -> str:
        return f"{self.left} ↓{self.index} {self.right}"


def atomic(name: str, features: FeatureInput = None) -> Atomic:
    return Atomic(name, features or ())


def s() -> Atomic:
    return atomic("s")


def np() -> Atomic:
    return atomic("np")


def n() -> Atomic:
    return atomic("n")


def right_impl(left: LogicalType, right: LogicalType, modality: Optional[Modality] = None) -> RightImplication:
    return RightImplication(left, right, modality)


def left_impl(left: LogicalType, right: LogicalType, modality: Optional[Modality] = None) -> LeftImplication:
    return LeftImplication(left, right, modality)


def product(left: LogicalType, right: LogicalType, modality: Optional[Modality] = None) -> Product:
    return Product(left, right, modality)


def diamond(inner: LogicalType, modality: Optional[Modality] = None) -> Diamond:
    return Diamond(inner, modality)


def boxed(inner: LogicalType, modality: Optional[Modality] = None) -> Box:
    return Box(inner, modality)


def up_arrow(left: LogicalType, right: LogicalType, index: int) -> UpArrow:
    return UpArrow(left, right, index)


def down_arrow(left: LogicalType, right: LogicalType, index: int) -> DownArrow:
    return DownArrow(left, right, index)