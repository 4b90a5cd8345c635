"""Type-logical grammar parser built on natural deduction and proof nets."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from typelogic.lexicon import Lexicon
from typelogic.logical_type import (
    Atomic,
    Box,
    Diamond,
    DownArrow,
    Existential,
    LeftImplication,
    LogicalType,
    Product,
    RightImplication,
    Universal,
    UpArrow,
    atomic,
    diamond,
    down_arrow,
    left_impl,
    n,
    np,
    right_impl,
    s,
    up_arrow,
)
from typelogic.modality import Modality, StructuralProperty
from typelogic.proof import ProofNode
from typelogic.proof_net import ProofNet
from typelogic.registry import AtomicTypeRegistry, FeatureRegistry
from typelogic.search import ParserConfig, prove

logger = logging.getLogger(__name__)


class InvalidTypeError(ValueError):
    """Raised when a logical type or category is not licensed by the parser."""


class TLGParser:
    """Parser assigning sentences proofs of the sentence type s."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.lexicon = Lexicon()
        self.atomic_types = AtomicTypeRegistry.with_defaults()
        self.config = ParserConfig()
        self.feature_registry = FeatureRegistry()
        self._populate_basic_lexicon()
        if config is not None:
            self.config = config

    def register_atomic_type(self, type_name: str) -> None:
        self.atomic_types.register(type_name)

    def register_feature(self, name: str, values: Iterable[str]) -> None:
        self.feature_registry.register_feature(name, values)

    def register_modality(
        self, index: int, properties: Iterable[StructuralProperty] = ()
    ) -> None:
        self.config.modalities.append(Modality(index, properties))

    def _populate_basic_lexicon(self) -> None:
        add = self.lexicon.add
        det_type = left_impl(np(), n())
        add("the", det_type)
        add("a", det_type)
        for noun in ("cat", "dog", "man", "woman"):
            add(noun, n())

        if self.config.use_features:
            sg = {"num": "sg"}
            pl = {"num": "pl"}
            n_sg = atomic("n", sg)
            n_pl = atomic("n", pl)
            add("cat", n_sg)
            add("dog", n_sg)
            add("cats", n_pl)
            add("dogs", n_pl)
            add("a", left_impl(atomic("np", sg), n_sg))
            add("some", left_impl(atomic("np", pl), n_pl))

            iv_3sg = left_impl(s(), atomic("np", {**sg, "per": "3"}))
            iv_3pl = left_impl(s(), atomic("np", {**pl, "per": "3"}))
            add("sleeps", iv_3sg)
            add("runs", iv_3sg)
            add("sleep", iv_3pl)
            add("run", iv_3pl)

            tv_3sg = left_impl(iv_3sg, np())
            tv_3pl = left_impl(iv_3pl, np())
            add("chases", tv_3sg)
            add("sees", tv_3sg)
            add("chase", tv_3pl)
            add("see", tv_3pl)

        iv_type = left_impl(s(), np())
        add("sleeps", iv_type)
        add("runs", iv_type)
        tv_type = left_impl(iv_type, np())
        add("sees", tv_type)
        add("chases", tv_type)
        adj_type = left_impl(n(), n())
        add("big", adj_type)
        add("small", adj_type)
        prep_type = left_impl(adj_type, np())
        add("with", prep_type)
        add("in", prep_type)

        if self.config.use_modalities and self.config.modalities:
            modality = self.config.modalities[0]
            add("walks", left_impl(s(), np(), modality))
            intensional = left_impl(iv_type, diamond(np()))
            add("seeks", intensional)
            add("needs", intensional)

        if self.config.use_displacement:
            wh_type = up_arrow(s(), np(), 1)
            add("who", wh_type)
            add("what", wh_type)
            add("thinks", down_arrow(left_impl(s(), np()), np(), 1))

        if self.config.use_quantifiers:
            bound = right_impl(atomic("x"), np())
            add("every", right_impl(s(), left_impl(s(), Universal("x", bound))))
            add("some", right_impl(s(), left_impl(s(), Existential("x", bound))))

    def add_to_lexicon(
        self,
        word: str,
        logical_type: LogicalType,
        phonological_form: Optional[str] = None,
    ) -> None:
        """Validate a type and assign it to a word; raises InvalidTypeError."""
        try:
            self.validate(logical_type)
        except InvalidTypeError as exc:
            raise InvalidTypeError(f"invalid logical type for '{word}': {exc}") from exc
        self.lexicon.add(word, logical_type, phonological_form)

    def _check_modality(self, modality: Optional[Modality]) -> None:
        if modality is None:
            return
        if not any(m.index == modality.index for m in self.config.modalities):
            raise InvalidTypeError(f"unregistered modality index: {modality.index}")

    def validate(self, logical_type: LogicalType) -> None:
        """Raise InvalidTypeError unless the type is licensed by this parser."""
        config = self.config
        if isinstance(logical_type, Atomic):
            if not self.atomic_types.is_registered(logical_type.name):
                raise InvalidTypeError(f"unregistered atomic type: {logical_type.name}")
            if config.use_features:
                for name, value in logical_type.features:
                    if not self.feature_registry.is_feature_registered(name):
                        raise InvalidTypeError(f"unregistered feature: {name}")
                    if not self.feature_registry.is_value_valid(name, value):
                        raise InvalidTypeError(
                            f"invalid value '{value}' for feature '{name}'"
                        )
        elif isinstance(logical_type, (RightImplication, LeftImplication, Product)):
            if logical_type.modality is not None and not config.use_modalities:
                raise InvalidTypeError(
                    "modalities are not enabled in the current configuration"
                )
            self._check_modality(logical_type.modality)
            self.validate(logical_type.left)
            self.validate(logical_type.right)
        elif isinstance(logical_type, (Diamond, Box)):
            if not config.use_modalities:
                raise InvalidTypeError(
                    "modal operators are not enabled in the current configuration"
                )
            self._check_modality(logical_type.modality)
            self.validate(logical_type.inner)
        elif isinstance(logical_type, (Universal, Existential)):
            if not config.use_quantifiers:
                raise InvalidTypeError(
                    "quantifiers are not enabled in the current configuration"
                )
            self.validate(logical_type.body)
        elif isinstance(logical_type, (UpArrow, DownArrow)):
            if not config.use_displacement:
                raise InvalidTypeError(
                    "displacement calculus is not enabled in the current configuration"
                )
            self.validate(logical_type.left)
            self.validate(logical_type.right)
        else:
            raise InvalidTypeError(f"unknown logical type: {logical_type!r}")

    def parse(self, sentence: str) -> Optional[ProofNode]:
        """Parse with proof nets or natural deduction, as configured."""
        if self.config.use_proof_nets:
            return self.parse_with_proof_nets(sentence)
        return self.parse_with_natural_deduction(sentence)

    def parse_with_natural_deduction(self, sentence: str) -> Optional[ProofNode]:
        """Search for a proof of s from every lexical type of every word."""
        axioms: list[ProofNode] = []
        for word in sentence.split():
            items = self.lexicon.items(word)
            if not items:
                logger.warning("Unknown word: %s", word)
                return None
            axioms.extend(ProofNode.axiom(word, item.logical_type) for item in items)
        return prove(axioms, s(), self.config)

    def parse_with_proof_nets(self, sentence: str) -> Optional[ProofNode]:
        """Read a proof tree off the first word's nets, else fall back to deduction."""
        words = sentence.split()
        word_nets: list[list[ProofNet]] = []
        for word in words:
            items = self.lexicon.items(word)
            if not items:
                logger.warning("Unknown word: %s", word)
                return None
            word_nets.append(
                [ProofNet.from_type(item.logical_type, True) for item in items]
            )
        for net in word_nets[0] if word_nets else ():
            tree = net.to_proof_tree()
            if tree is not None:
                return tree
        return self.parse_with_natural_deduction(sentence)

    def create_category_with_features(
        self,
        name: str,
        features: Union[Mapping[str, str], Iterable[tuple[str, str]]] = (),
    ) -> Atomic:
        """Build a registered atomic type carrying validated features."""
        pairs = features.items() if isinstance(features, Mapping) else features
        checked: dict[str, str] = {}
        for feature, value in pairs:
            if not self.feature_registry.is_feature_registered(feature):
                raise InvalidTypeError(f"Invalid feature: {feature}")
            if not self.feature_registry.is_value_valid(feature, value):
                raise InvalidTypeError(
                    f"Invalid value '{value}' for feature '{feature}'"
                )
            checked[feature] = value
        if not self.atomic_types.is_registered(name):
            raise InvalidTypeError(f"Invalid category: {name}")
        return atomic(name, checked)