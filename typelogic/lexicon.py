"""Lexicon mapping word forms to their possible logical types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from typelogic.logical_type import LogicalType


@dataclass(frozen=True)
class LexicalItem:
    """A word paired with one of its logical types."""

    word: str
    logical_type: LogicalType
    phonological_form: Optional[str] = None

    def __str__(self) -> str:
        if self.phonological_form is not None:
            return f"{self.word} ⊢ {self.logical_type} : {self.phonological_form}"
        return f"{self.word} ⊢ {self.logical_type}"


class Lexicon:
    """Words with all the lexical items assigned to them."""

    def __init__(self) -> None:
        self._entries: dict[str, list[LexicalItem]] = {}

    def add(
        self,
        word: str,
        logical_type: LogicalType,
        phonological_form: Optional[str] = None,
    ) -> None:
        """Assign another logical type to a word."""
        item = LexicalItem(word, logical_type, phonological_form)
        self._entries.setdefault(word, []).append(item)

    def items(self, word: str) -> list[LexicalItem]:
        """All lexical items for a word, in the order they were added."""
        return list(self._entries.get(word, ()))

    def types(self, word: str) -> list[LogicalType]:
        """All logical types for a word, in the order they were added."""
        return [item.logical_type for item in self._entries.get(word, ())]

    def words(self) -> list[str]:
        return list(self._entries)

    def remove(self, word: str) -> None:
        """Drop a word and all its items; unknown words are ignored."""
        self._entries.pop(word, None)

    def merge(self, other: Lexicon) -> None:
        """Add the types of every word of another lexicon to this one."""
        for word, items in other._entries.items():
            for item in items:
                self.add(word, item.logical_type)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)