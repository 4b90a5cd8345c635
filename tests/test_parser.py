import pytest

from typelogic.lexicon import Lexicon
from typelogic.logical_type import (
    atomic,
    boxed,
    diamond,
    left_impl,
    n,
    np,
    s,
    up_arrow,
)
from typelogic.modality import Modality, StructuralProperty
from typelogic.parser import InvalidTypeError, TLGParser
from typelogic.search import ParserConfig


def fresh_parser(config=None):
    parser = TLGParser(config)
    parser.lexicon = Lexicon()
    return parser


def simple_parser(config=None):
    parser = fresh_parser(config)
    parser.add_to_lexicon("the", left_impl(np(), n()))
    parser.add_to_lexicon("cat", n())
    parser.add_to_lexicon("sleeps", left_impl(s(), np()))
    return parser


def test_basic_parsing():
    parser = simple_parser()
    result = parser.parse("the cat sleeps")
    assert result is not None
    assert result.logical_type == s()
    assert result.label == "sleeps(the(cat))"
    assert result.uses_rule("←E")
    assert result.depth() == 2


def test_incomplete_sentence_has_no_proof():
    parser = simple_parser()
    assert parser.parse("the sleeps") is None


def test_unknown_word_gives_none():
    parser = simple_parser()
    assert parser.parse("the cat jumps") is None


def test_max_depth_limits_search():
    parser = simple_parser(ParserConfig(max_depth=1))
    assert parser.parse("the cat sleeps") is None


def test_with_features():
    parser = fresh_parser()
    parser.register_feature("num", ["sg", "pl"])
    sg = {"num": "sg"}
    pl = {"num": "pl"}
    n_sg, n_pl = atomic("n", sg), atomic("n", pl)
    np_sg, np_pl = atomic("np", sg), atomic("np", pl)
    parser.add_to_lexicon("cat", n_sg)
    parser.add_to_lexicon("cats", n_pl)
    parser.add_to_lexicon("a", left_impl(np_sg, n_sg))
    parser.add_to_lexicon("some", left_impl(np_pl, n_pl))
    parser.add_to_lexicon("sleeps", left_impl(s(), np_sg))
    parser.add_to_lexicon("sleep", left_impl(s(), np_pl))

    assert parser.parse("a cat sleeps").label == "sleeps(a(cat))"
    assert parser.parse("some cats sleep").label == "sleep(some(cats))"
    assert parser.parse("a cats sleeps") is None
    assert parser.parse("some cat sleep") is None


def test_features_disabled_require_equality():
    def build(use_features):
        parser = fresh_parser(ParserConfig(use_features=use_features))
        parser.register_feature("num", ["sg"])
        parser.add_to_lexicon("the", left_impl(np(), n()))
        parser.add_to_lexicon("cat", atomic("n", {"num": "sg"}))
        parser.add_to_lexicon("sleeps", left_impl(s(), np()))
        return parser

    assert build(True).parse("the cat sleeps").logical_type == s()
    assert build(False).parse("the cat sleeps") is None


def test_unregistered_feature_rejected():
    parser = fresh_parser()
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("cat", atomic("n", {"num": "sg"}))
    assert "cat" not in parser.lexicon


def test_invalid_feature_value_rejected():
    parser = fresh_parser()
    parser.register_feature("num", ["sg", "pl"])
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("cat", atomic("n", {"num": "dual"}))


def test_unregistered_atomic_type_rejected():
    parser = fresh_parser()
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("on", left_impl(atomic("pp"), np()))
    parser.register_atomic_type("pp")
    parser.add_to_lexicon("on", left_impl(atomic("pp"), np()))
    assert parser.lexicon.types("on") == [left_impl(atomic("pp"), np())]


def test_parser_config():
    default_parser = TLGParser()
    assert default_parser.config.logic_variant == "NL"
    assert default_parser.config.use_product
    assert not default_parser.config.use_modalities
    assert default_parser.config.max_depth == 20

    custom = ParserConfig(use_modalities=True, use_displacement=True, logic_variant="NL(◇↑)")
    custom_parser = TLGParser(custom)
    assert custom_parser.config.logic_variant == "NL(◇↑)"
    assert custom_parser.config.use_modalities
    assert custom_parser.config.use_displacement


def test_basic_lexicon_contents():
    parser = TLGParser()
    assert parser.lexicon.types("cat") == [n(), atomic("n", {"num": "sg"})]
    assert parser.lexicon.types("the") == [left_impl(np(), n())]
    assert parser.lexicon.types("some") == [
        left_impl(atomic("np", {"num": "pl"}), atomic("n", {"num": "pl"}))
    ]
    assert "who" not in parser.lexicon


def test_lexicon_populated_with_default_config():
    parser = TLGParser(ParserConfig(use_displacement=True, use_quantifiers=True))
    assert "who" not in parser.lexicon
    assert "every" not in parser.lexicon


def test_modal_parsing():
    parser = TLGParser(ParserConfig(use_modalities=True))
    parser.register_modality(1, [StructuralProperty.ASSOCIATIVITY])
    assert parser.config.modalities[0].is_associative()

    parser.add_to_lexicon("walks", left_impl(s(), np(), Modality(1)))
    parser.add_to_lexicon("John", np())

    result = parser.parse("John walks")
    assert result is not None
    assert result.label == "walks(John)"
    assert result.logical_type == s()


def test_modality_requires_enabling():
    parser = fresh_parser()
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("walks", left_impl(s(), np(), Modality(1)))
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("seeks", left_impl(s(), diamond(np())))


def test_unregistered_modality_index_rejected():
    parser = fresh_parser(ParserConfig(use_modalities=True))
    parser.register_modality(1)
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("walks", left_impl(s(), np(), Modality(2)))


def test_displacement_parsing():
    parser = fresh_parser(ParserConfig(use_displacement=True))
    parser.add_to_lexicon("what", up_arrow(s(), np(), 1))
    parser.add_to_lexicon("John", np())
    result = parser.parse("what John")
    assert result is not None
    assert result.rule == "↑1E"
    assert result.label == "what_John"


def test_displacement_requires_enabling():
    parser = fresh_parser()
    with pytest.raises(InvalidTypeError):
        parser.add_to_lexicon("what", up_arrow(s(), np(), 1))


def test_phonological_form_stored():
    parser = fresh_parser()
    parser.add_to_lexicon("sleeps", left_impl(s(), np()), "'sleeps'")
    assert str(parser.lexicon.items("sleeps")[0]) == "sleeps ⊢ s ← np : 'sleeps'"


def test_parse_with_proof_nets():
    parser = simple_parser(ParserConfig(use_proof_nets=True))
    result = parser.parse("the cat sleeps")
    assert str(result.logical_type) == "np → n"
    assert result.rule == "→I"
    assert result.label == "λn.np_0"
    assert [child.label for child in result.children] == ["np_0", "n_1"]


def test_parse_with_proof_nets_unknown_word():
    parser = simple_parser(ParserConfig(use_proof_nets=True))
    assert parser.parse("the dog sleeps") is None


def test_create_category_with_features():
    parser = fresh_parser()
    parser.register_feature("num", ["sg", "pl"])
    category = parser.create_category_with_features("np", [("num", "sg")])
    assert category == atomic("np", {"num": "sg"})
    assert str(category) == "np[num=sg]"


def test_create_category_errors():
    parser = fresh_parser()
    parser.register_feature("num", ["sg"])
    with pytest.raises(InvalidTypeError):
        parser.create_category_with_features("np", [("case", "nom")])
    with pytest.raises(InvalidTypeError):
        parser.create_category_with_features("np", [("num", "pl")])
    with pytest.raises(InvalidTypeError):
        parser.create_category_with_features("pp", {"num": "sg"})


def test_english_benchmark_setup():
    parser = TLGParser()
    for name in ("s", "np", "n"):
        parser.register_atomic_type(name)
    parser.register_feature("num", ["sg", "pl"])
    parser.register_feature("per", ["1", "2", "3"])
    parser.config = ParserConfig(use_features=True)

    det_type = left_impl(np(), n())
    parser.add_to_lexicon("the", det_type)
    parser.add_to_lexicon("a", det_type)
    iv_type = left_impl(s(), np())
    parser.add_to_lexicon("sleeps", iv_type)
    parser.add_to_lexicon("sees", left_impl(iv_type, np()))

    assert parser.lexicon.types("the") == [det_type, det_type]
    assert parser.lexicon.types("sleeps")[-1] == iv_type
    assert len(parser.lexicon.types("sees")) == 3


def test_modal_benchmark_setup():
    parser = TLGParser()
    parser.register_atomic_type("s")
    parser.config = ParserConfig(use_modalities=True, logic_variant="NL(◇)")
    parser.register_modality(1, [StructuralProperty.ASSOCIATIVITY])

    parser.add_to_lexicon("p", s())
    parser.add_to_lexicon("q", s())
    nec_type = left_impl(s(), boxed(s()))
    poss_type = left_impl(s(), diamond(s()))
    parser.add_to_lexicon("necessarily", nec_type)
    parser.add_to_lexicon("possibly", poss_type)

    assert parser.lexicon.types("necessarily") == [nec_type]
    assert str(poss_type) == "s ← ◇s"
    assert parser.parse("necessarily p") is None