"""Type-Logical Grammar: logical types, lexicons, proofs, proof nets and parsing."""

__version__ = "0.1.0"

__all__ = [
    "modality",
    "logical_type",
    "registry",
    "lexicon",
    "proof",
    "proof_net",
    "search",
    "parser",
]