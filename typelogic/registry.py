"""Registries of atomic type names and linguistic features."""

from __future__ import annotations

from typing import Iterable, Iterator


class AtomicTypeRegistry:
    """A set of registered atomic type names."""

    def __init__(self, type_names: Iterable[str] = ()) -> None:
        self._types: set[str] = set(type_names)

    @classmethod
    def with_defaults(cls) -> AtomicTypeRegistry:
        """Registry holding the standard types s, np and n."""
        return cls(["s", "np", "n"])

    def register(self, type_name: str) -> None:
        self._types.add(type_name)

    def register_multiple(self, type_names: Iterable[str]) -> None:
        self._types.update(type_names)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._types

    def all_types(self) -> list[str]:
        return list(self._types)

    def remove(self, type_name: str) -> None:
        self._types.discard(type_name)

    def clear(self) -> None:
        self._types.clear()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)


class FeatureRegistry:
    """Registered feature names with their admissible atomic values."""

    def __init__(self) -> None:
        self._features: dict[str, set[str]] = {}

    def register_feature(self, name: str, values: Iterable[str]) -> None:
        self._features.setdefault(name, set()).update(values)

    def is_feature_registered(self, name: str) -> bool:
        return name in self._features

    def is_value_valid(self, name: str, value: str) -> bool:
        return value in self._features.get(name, ())

    def __len__(self) -> int:
        return len(self._features)