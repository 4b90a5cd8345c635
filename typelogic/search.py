"""Breadth-first natural-deduction proof search over lexical axioms."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from typelogic.logical_type import (
    Box,
    Diamond,
    DownArrow,
    LeftImplication,
    LogicalType,
    Product,
    RightImplication,
    UpArrow,
    s,
)
from typelogic.modality import Modality
from typelogic.proof import ProofNode, ProofSearchState

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Options controlling which logic the parser and proof search use."""

    max_depth: int = 20
    use_product: bool = True
    use_modalities: bool = False
    use_quantifiers: bool = False
    strict_linear: bool = True
    logic_variant: str = "NL"
    use_proof_nets: bool = False
    use_displacement: bool = False
    use_features: bool = True
    modalities: list[Modality] = field(default_factory=list)


def types_match(type1: LogicalType, type2: LogicalType, use_features: bool = True) -> bool:
    """Whether two types match: by unification with features, else by equality."""
    if use_features:
        return type1.unify(type2) is not None
    return type1 == type2


def _binary(
    state: ProofSearchState, i: int, j: int, result: LogicalType, rule: str
) -> ProofSearchState:
    node = ProofNode.infer(result, [state.items[i], state.items[j]], rule)
    return state.apply_rule(rule, node, [i, j])


def _expand(
    state: ProofSearchState, i: int, j: int, config: ParserConfig
) -> Iterator[ProofSearchState]:
    """New states from combining item i (as functor) with item j."""
    functor = state.items[i]
    argument = state.items[j]
    ftype = functor.logical_type
    atype = argument.logical_type

    if isinstance(ftype, RightImplication):
        if types_match(ftype.left, atype, config.use_features):
            yield _binary(state, i, j, ftype.right, "→E")
    elif isinstance(ftype, LeftImplication):
        if types_match(ftype.right, atype, config.use_features):
            yield _binary(state, i, j, ftype.left, "←E")

    if config.use_product and isinstance(ftype, Product):
        hypothesis = ProofNode.axiom("x", ftype.left)
        node = ProofNode.infer(s(), [hypothesis, functor], "⊗E")
        yield state.apply_rule("⊗E", node, [i])

    if config.use_modalities:
        if isinstance(ftype, Diamond):
            hypothesis = ProofNode.axiom("x", ftype.inner)
            node = ProofNode.infer(s(), [hypothesis, functor], "◇E")
            yield state.apply_rule("◇E", node, [i])
        if isinstance(ftype, Box):
            node = ProofNode.infer(ftype.inner, [functor], "□E")
            yield state.apply_rule("□E", node, [i])

    if config.use_displacement:
        if isinstance(ftype, UpArrow) and types_match(ftype.right, atype, config.use_features):
            yield _binary(state, i, j, ftype.left, f"↑{ftype.index}E")
        if isinstance(ftype, DownArrow) and types_match(ftype.right, atype, config.use_features):
            yield _binary(state, i, j, ftype.left, f"↓{ftype.index}E")


def _successors(state: ProofSearchState, config: ParserConfig) -> Iterator[ProofSearchState]:
    count = len(state.items)
    for i in range(count):
        for j in range(count):
            if i == j and config.strict_linear:
                continue
            yield from _expand(state, i, j, config)


def prove(
    axioms: Iterable[ProofNode],
    goal: LogicalType,
    config: Optional[ParserConfig] = None,
) -> Optional[ProofNode]:
    """Search breadth-first for a proof of the goal from the axioms.

    At most ``config.max_depth`` states are examined; None is returned when
    no complete proof was found within that bound.
    """
    config = config if config is not None else ParserConfig()
    queue: deque[ProofSearchState] = deque([ProofSearchState(tuple(axioms))])
    for _ in range(config.max_depth):
        if not queue:
            break
        state = queue.popleft()
        if state.is_complete(goal):
            return state.proof()
        queue.extend(_successors(state, config))
    logger.debug("No valid proof found for sentence with goal type: %s", goal)
    return None