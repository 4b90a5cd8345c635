# typelogic

A small Type-Logical Grammar toolkit in pure Python, with no dependencies
outside the standard library.

## What is in the package

- `typelogic.modality`: `StructuralProperty` (associativity, commutativity,
  weakening, contraction, permutation) and `Modality`, an indexed mode with
  a set of such properties (`has_property`, `add_property`,
  `remove_property`, `is_associative`, `is_commutative`,
  `allows_weakening`, `allows_contraction`, `allows_permutation`).
- `typelogic.logical_type`: the logical types `Atomic` (with optional
  features), `RightImplication`, `LeftImplication`, `Product`, `Diamond`,
  `Box`, `Universal`, `Existential`, `UpArrow` and `DownArrow`, all
  subclasses of `LogicalType`. Types are immutable, compare by value, print
  in the usual notation and support `unify`. Helper constructors: `atomic`,
  `s`, `np`, `n`, `right_impl`, `left_impl`, `product`, `diamond`, `boxed`,
  `up_arrow`, `down_arrow`.
- `typelogic.registry`: `AtomicTypeRegistry` (with `with_defaults()`
  holding `s`, `np` and `n`) and `FeatureRegistry` (feature names with
  their admissible values).
- `typelogic.lexicon`: `LexicalItem` and `Lexicon`, which maps each word to
  one or more logical types, with an optional phonological form.
- `typelogic.proof`: `ProofNode`, a labelled natural-deduction node
  (`axiom`, `infer`, `depth`, `node_count`, `uses_rule`), and
  `ProofSearchState`.
- `typelogic.proof_net`: `ProofNet`, built from a logical type with
  `ProofNet.from_type(logical_type, polarity)`, with the node kinds `Atom`,
  `Tensor`, `Par`, `OfCourse`, `WhyNot`, `Displacement` and the
  `ProofNetLink`. `is_correct` checks connectedness and acyclicity,
  `to_proof_tree` reads a proof tree off a correct net, and `link_with`
  appends another net joined by axiom links.
- `typelogic.search`: `ParserConfig` and `prove`, a breadth-first proof
  search from lexical axioms to a goal type; `types_match` compares types
  by unification when features are on, by equality otherwise.
- `typelogic.parser`: `TLGParser`, which ties these together, and
  `InvalidTypeError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from typelogic.logical_type import np, n, s, left_impl
from typelogic.parser import TLGParser

parser = TLGParser()
parser.add_to_lexicon("the", left_impl(np(), n()))
parser.add_to_lexicon("cat", n())
parser.add_to_lexicon("sleeps", left_impl(s(), np()))

proof = parser.parse("the cat sleeps")
if proof is not None:
    print(proof)
```

Types are printed as, for example, `s ← np`, `(s ← np) ← np`, `◇np` and
`n[num=sg]`. Features can be given as a mapping:
`atomic("n", {"num": "sg"})`.

## The parser

A new `TLGParser` starts with a small English lexicon (determiners, nouns,
intransitive and transitive verbs, adjectives and prepositions, with number
and person features) and a registry holding `s`, `np` and `n`. It can be
given a `ParserConfig` on construction or have `parser.config` replaced
later.

- `add_to_lexicon(word, logical_type, phonological_form=None)` validates the
  type first and raises `InvalidTypeError` (a `ValueError`) if it uses an
  unregistered atomic type, an unregistered feature or feature value (when
  `use_features` is on), an unregistered modality index, or an operator that
  the configuration does not enable (modalities, quantifiers,
  displacement). `validate(logical_type)` performs the same check alone.
- `register_atomic_type`, `register_feature(name, values)` and
  `register_modality(index, properties)` extend what is licensed.
- `create_category_with_features(name, features)` builds a registered
  atomic type with validated features, raising `InvalidTypeError`
  otherwise.
- `parse(sentence)` splits the sentence on whitespace and returns the root
  `ProofNode` of a derivation of `s`, or `None`. An unknown word gives
  `None` and a warning on the `typelogic.parser` logger.

`ParserConfig` fields: `max_depth` (20), `use_product` (True),
`use_modalities` (False), `use_quantifiers` (False), `strict_linear`
(True), `logic_variant` ("NL"), `use_proof_nets` (False),
`use_displacement` (False), `use_features` (True) and `modalities` (empty).

## Limits

- The proof search examines at most `max_depth` states breadth-first and
  applies elimination rules only; sentences needing a longer search give
  `None`.
- With `use_proof_nets` on, `parse_with_proof_nets` does not link the nets
  of different words: it returns the tree read off the first correct net of
  the first word, and otherwise falls back to natural deduction.
- `ProofNet.from_type` raises `ValueError` for quantified types.
- There is no command-line program; the package is used as a library.